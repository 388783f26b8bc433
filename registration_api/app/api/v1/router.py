"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import config, groups, registration, students

router = APIRouter()

router.include_router(groups.router, prefix="/groups", tags=["groups"])
router.include_router(students.router, prefix="/students", tags=["students"])
router.include_router(registration.router, prefix="/register", tags=["registration"])
router.include_router(config.router, prefix="/config", tags=["config"])
