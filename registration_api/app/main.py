"""
Main entrypoint for the Group Registration API.

This module assembles the FastAPI application, sets up logging,
registers the JSON error handlers and includes the versioned router
under ``/api``.  ``create_app`` builds and configures the app, which
is then instantiated at module import time as ``app``::

    uvicorn registration_api.app.main:app --reload

The spreadsheet is initialised once, in the lifespan handler.  Until that
succeeds every ``/api`` request is answered with 503.  Outside
production a failed initialisation aborts startup so the process
exits; in production the failure is logged and the service keeps
answering 503.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings
from .core.exceptions import (
    ConfigurationError,
    RegistrationError,
    ServiceFailure,
    StoreError,
    VerificationError,
)
from .core.logging_config import setup_logging
from .core.sheets import StudentSheet
from .services.registration_service import RegistrationService
from .services.roster_service import RosterService
from .services.verification_service import RecaptchaVerifier, Verifier


logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "Service temporarily unavailable - storage initialization failed"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RegistrationError)
    async def registration_error_handler(request: Request, exc: RegistrationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(ServiceFailure)
    async def service_failure_handler(request: Request, exc: ServiceFailure) -> JSONResponse:
        cause = exc.__cause__ or exc
        logger.error("Request to %s failed: %s", request.url.path, cause, exc_info=cause)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)

    @app.exception_handler(StoreError)
    @app.exception_handler(VerificationError)
    async def dependency_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Request to %s failed: %s", request.url.path, exc, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def _initialize_store(app: FastAPI) -> None:
    """Build the services and prepare the sheet; flips ``store_ready``."""
    settings: Settings = app.state.settings
    missing = settings.missing_required()
    if missing:
        raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

    sheet = app.state.sheet
    try:
        if sheet is None:
            sheet = StudentSheet.from_settings(settings)
            app.state.sheet = sheet
        sheet.initialize()
    except Exception as exc:
        logger.error("Failed to initialise the registration sheet: %s", exc)
        if not settings.is_production:
            raise
        logger.warning("Continuing in production; API requests will answer 503")
        return

    verifier = app.state.verifier
    if verifier is None:
        verifier = RecaptchaVerifier.from_settings(settings)
    roster = RosterService(sheet, settings)
    app.state.verifier = verifier
    app.state.roster_service = roster
    app.state.registration_service = RegistrationService(settings, roster, sheet, verifier)
    app.state.store_ready = True
    logger.info("Registration sheet initialised; groups: %s", ", ".join(settings.group_names))


def create_app(
    settings: Optional[Settings] = None,
    sheet: Optional[StudentSheet] = None,
    verifier: Optional[Verifier] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration; read from the environment when omitted.
    sheet : Optional[StudentSheet]
        Store adapter; built from the service‑account credentials at
        startup when omitted.
    verifier : Optional[Verifier]
        Human‑verification check; a ``RecaptchaVerifier`` when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _initialize_store(app)
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.sheet = sheet
    app.state.verifier = verifier
    app.state.store_ready = False

    _register_exception_handlers(app)

    @app.middleware("http")
    async def require_store(request: Request, call_next):
        if request.url.path.startswith("/api") and not request.app.state.store_ready:
            return _error(status.HTTP_503_SERVICE_UNAVAILABLE, UNAVAILABLE_MESSAGE)
        return await call_next(request)

    app.include_router(v1_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
