"""
Pydantic schema definitions for API payloads.

Field names follow Python conventions; aliases give the camelCase
names the front end expects (``isFull``, ``maxStudents``,
``verificationToken``).  FastAPI serialises response models by alias.
"""
