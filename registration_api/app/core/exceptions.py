"""Custom exception classes."""

from typing import Optional


class ConfigurationError(ValueError):
    """Raised when a setting is missing or cannot be parsed."""
    pass


class RegistrationError(ValueError):
    """Raised when a submission is rejected by the registration workflow.

    ``message`` is safe to show to the visitor.  ``field`` names the
    offending attribute for duplicate rejections (``email`` or
    ``phone``) and is ``None`` otherwise.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class StoreError(RuntimeError):
    """Raised when the backing spreadsheet cannot be read or written."""
    pass


class RetrievalError(StoreError):
    """Raised when the roster cannot be fetched from the spreadsheet."""
    pass


class VerificationError(RuntimeError):
    """Raised when the human‑verification service cannot be reached."""
    pass


class ServiceFailure(RuntimeError):
    """Raised by an endpoint when a dependency fails mid‑request.

    ``message`` is the generic text returned to the caller; the
    underlying ``StoreError`` or ``VerificationError`` is chained as
    ``__cause__`` and only ever logged.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
