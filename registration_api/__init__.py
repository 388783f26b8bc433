"""
Group registration service backed by a Google Sheet.

Students sign up for one of a fixed set of capacity‑limited groups;
each accepted registration is appended as a row of the sheet.  The
HTTP application and its services live in :mod:`registration_api.app`.
"""

__all__ = []
