"""
FastAPI dependencies.

Services are built once by the application factory and stored on
``app.state``; handlers receive them through ``Depends`` so tests can
swap them by building the app with fakes.
"""

from fastapi import Request

from registration_api.app.core.config import Settings
from registration_api.app.services.registration_service import RegistrationService
from registration_api.app.services.roster_service import RosterService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_roster_service(request: Request) -> RosterService:
    return request.app.state.roster_service


def get_registration_service(request: Request) -> RegistrationService:
    return request.app.state.registration_service
