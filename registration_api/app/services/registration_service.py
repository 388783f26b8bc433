"""
Business logic for student registration.

``RegistrationService.register`` runs the submission through a fixed
sequence of checks and appends the student to the sheet only when
every check passes.  Pure field checks run first; the verification
round trip comes next so spam is dropped before the two full‑sheet
reads needed for the duplicate and capacity checks.

The duplicate check, the capacity check and the append run under a
lock held by the service, so two registrations handled by the same
process cannot both slip into the last seat or both claim one email.
Separate processes writing to the same sheet are not coordinated.
"""

import logging
import threading
from typing import Optional

from registration_api.app.core.config import Settings
from registration_api.app.core.exceptions import RegistrationError
from registration_api.app.core.sheets import StudentSheet
from registration_api.app.schemas.student import STUDENT_FIELDS, RegistrationRequest
from registration_api.app.services.roster_service import RosterService
from registration_api.app.services.verification_service import Verifier
from registration_api.app.utils.validation import (
    is_valid_email,
    is_valid_phone,
    missing_fields,
    normalize_email,
    normalize_phone,
)


logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Registration successful!"
MISSING_FIELDS_MESSAGE = "All fields are required"
TOKEN_REQUIRED_MESSAGE = "Verification is required"
TOKEN_REJECTED_MESSAGE = "Verification failed. Please try again."
INVALID_EMAIL_MESSAGE = "Invalid email format"
INVALID_PHONE_MESSAGE = "Invalid phone number format"
INVALID_GROUP_MESSAGE = "Invalid group selection"
GROUP_FULL_MESSAGE = "This group is already full. Please select another group."

_DUPLICATE_LABELS = {"email": "Email", "phone": "Phone number"}


class RegistrationService:
    """Validate submissions and append accepted students to the sheet."""

    def __init__(
        self,
        settings: Settings,
        roster: RosterService,
        sheet: StudentSheet,
        verifier: Verifier,
    ) -> None:
        self._settings = settings
        self._roster = roster
        self._sheet = sheet
        self._verifier = verifier
        self._write_lock = threading.Lock()

    def register(self, candidate: RegistrationRequest) -> str:
        """Register ``candidate`` and return the success message.

        Raises
        ------
        RegistrationError
            When the submission is rejected; the message is meant for
            the visitor.
        StoreError
            If the sheet cannot be read or written.
        VerificationError
            If the verification service cannot be reached.
        """
        missing = missing_fields(candidate.model_dump(), STUDENT_FIELDS)
        if missing:
            logger.info("Registration rejected, missing fields: %s", ", ".join(missing))
            raise RegistrationError(MISSING_FIELDS_MESSAGE)

        self._check_verification(candidate.verification_token)

        student = candidate.to_student()
        if not is_valid_email(student.email):
            raise RegistrationError(INVALID_EMAIL_MESSAGE)
        if not is_valid_phone(student.phone):
            raise RegistrationError(INVALID_PHONE_MESSAGE)
        if student.group not in self._settings.group_names:
            raise RegistrationError(INVALID_GROUP_MESSAGE)

        with self._write_lock:
            duplicate = self.find_duplicate(student.email, student.phone)
            if duplicate:
                label = _DUPLICATE_LABELS[duplicate]
                logger.info("Registration rejected, duplicate %s", duplicate)
                raise RegistrationError(
                    f"{label} already exists. Please use a different {duplicate}.",
                    field=duplicate,
                )
            if self._roster.is_group_full(student.group):
                logger.info("Registration rejected, group %s is full", student.group)
                raise RegistrationError(GROUP_FULL_MESSAGE)
            self._sheet.append_student(student)

        return SUCCESS_MESSAGE

    def find_duplicate(self, email: str, phone: str) -> Optional[str]:
        """Return ``"email"`` or ``"phone"`` if either is already taken.

        Emails compare case‑insensitively, phones after stripping
        whitespace and dashes.  Email is checked first.
        """
        students = self._roster.list_students()
        wanted_email = normalize_email(email)
        if any(normalize_email(s.email) == wanted_email for s in students):
            return "email"
        wanted_phone = normalize_phone(phone)
        if any(normalize_phone(s.phone) == wanted_phone for s in students):
            return "phone"
        return None

    def _check_verification(self, token: Optional[str]) -> None:
        if not token:
            raise RegistrationError(TOKEN_REQUIRED_MESSAGE)
        if not self._verifier.verify(token):
            logger.info("Registration rejected, verification token refused")
            raise RegistrationError(TOKEN_REJECTED_MESSAGE)
