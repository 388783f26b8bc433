"""Field format checks for registration submissions."""

import re
from typing import Iterable, List, Mapping, Optional


EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[0-9]{10,11}")
_PHONE_SEPARATORS = re.compile(r"[\s-]")


def normalize_phone(phone: str) -> str:
    """Strip whitespace and dashes: ``"0123-456 789"`` -> ``"0123456789"``."""
    return _PHONE_SEPARATORS.sub("", phone)


def normalize_email(email: str) -> str:
    return email.lower()


def is_valid_email(email: str) -> bool:
    """Check for ``local@domain.tld`` shape without embedded whitespace."""
    return bool(EMAIL_PATTERN.fullmatch(email))


def is_valid_phone(phone: str) -> bool:
    """Check that the digits-only form has 10 or 11 digits."""
    return bool(PHONE_PATTERN.fullmatch(normalize_phone(phone)))


def missing_fields(values: Mapping[str, Optional[str]], required: Iterable[str]) -> List[str]:
    """Return the names in ``required`` whose value is absent or empty."""
    return [name for name in required if not values.get(name)]
