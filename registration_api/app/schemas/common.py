"""Response envelopes shared by several endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Shape of every failed response."""

    success: bool = False
    message: str


class PublicConfigResponse(BaseModel):
    """Public configuration for the front end.  Never carries secrets."""

    success: bool = True
    verification_site_key: str = Field("", alias="verificationSiteKey")

    model_config = {
        "populate_by_name": True,
    }
