"""
Registration endpoint.

``POST /register`` hands the submitted form to the
``RegistrationService``.  Rejections raise ``RegistrationError``,
which the application's exception handler turns into a 400 response
carrying the rejection message.  Storage and verification failures are
re‑raised as ``ServiceFailure`` and become a generic 500.
"""

from fastapi import APIRouter, Depends

from registration_api.app.core.dependencies import get_registration_service
from registration_api.app.core.exceptions import ServiceFailure, StoreError, VerificationError
from registration_api.app.schemas.common import ErrorResponse
from registration_api.app.schemas.student import RegistrationRequest, RegistrationResponse
from registration_api.app.services.registration_service import RegistrationService

router = APIRouter()

FAILURE_MESSAGE = "Failed to register student. Please try again."


@router.post(
    "",
    response_model=RegistrationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def register_student(
    candidate: RegistrationRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> RegistrationResponse:
    """Register a student in the selected group."""
    try:
        message = service.register(candidate)
    except (StoreError, VerificationError) as exc:
        raise ServiceFailure(FAILURE_MESSAGE) from exc
    return RegistrationResponse(message=message)
