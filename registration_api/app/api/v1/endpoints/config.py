"""
Public configuration endpoint.

Exposes the verification site key the front end needs to render the
CAPTCHA widget.  Secrets are never included.
"""

from fastapi import APIRouter, Depends

from registration_api.app.core.config import Settings
from registration_api.app.core.dependencies import get_settings
from registration_api.app.schemas.common import PublicConfigResponse

router = APIRouter()


@router.get("", response_model=PublicConfigResponse)
def get_public_config(settings: Settings = Depends(get_settings)) -> PublicConfigResponse:
    return PublicConfigResponse(verification_site_key=settings.verification_site_key)
