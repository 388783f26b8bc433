"""
Human verification (CAPTCHA) check.

The registration workflow depends only on the :class:`Verifier`
protocol, a single ``verify(token) -> bool`` call.  The production
implementation posts the token to reCAPTCHA's ``siteverify`` endpoint.
Every submission gets a fresh check; results are never cached.
"""

import logging
from typing import Protocol

import httpx

from registration_api.app.core.config import Settings
from registration_api.app.core.exceptions import VerificationError


logger = logging.getLogger(__name__)


class Verifier(Protocol):
    def verify(self, token: str) -> bool: ...


class RecaptchaVerifier:
    """Verify tokens against the reCAPTCHA ``siteverify`` API."""

    def __init__(self, secret_key: str, verify_url: str, timeout: float = 10.0) -> None:
        self.secret_key = secret_key
        self.verify_url = verify_url
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecaptchaVerifier":
        return cls(
            secret_key=settings.verification_secret_key,
            verify_url=settings.verification_url,
            timeout=settings.verification_timeout,
        )

    def verify(self, token: str) -> bool:
        """Return ``True`` if the remote service accepts ``token``.

        Without a configured secret every token is refused.  Network
        errors, non‑2xx answers and bodies that are not JSON objects
        raise :class:`VerificationError`.
        """
        if not self.secret_key:
            logger.error("RECAPTCHA_SECRET_KEY is not set; refusing verification")
            return False
        try:
            response = httpx.post(
                self.verify_url,
                data={"secret": self.secret_key, "response": token},
                timeout=self.timeout,
            )
            response.raise_for_status()
            result = response.json()
        except httpx.HTTPError as exc:
            raise VerificationError("Verification service unavailable") from exc
        except ValueError as exc:
            raise VerificationError("Malformed verification response") from exc
        if not isinstance(result, dict):
            logger.error("Unexpected verification response: %r", result)
            raise VerificationError("Malformed verification response")
        if result.get("success") is not True:
            logger.info("Verification rejected: %s", result.get("error-codes"))
            return False
        return True
