"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one resource (groups, students,
registration, public config).  The routers are aggregated in
``router.py`` and included in the application under ``/api``.
"""
