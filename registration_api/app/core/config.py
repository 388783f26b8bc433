"""
Configuration management.

The ``Settings`` dataclass reads configuration from environment
variables exactly once, in :meth:`Settings.from_env`.  Instances are
frozen; the application factory builds one and hands the same object
to every component that needs it instead of letting modules read the
process environment on their own.
"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Tuple

from .exceptions import ConfigurationError


DEFAULT_VERIFY_URL = "https://www.google.com/recaptcha/api/siteverify"

# Environment variables without which the service cannot start.
REQUIRED_VARIABLES = ("GOOGLE_SHEET_ID", "GOOGLE_CREDENTIALS_PATH", "GROUP_NAMES")


def _parse_group_names(raw: str) -> Tuple[str, ...]:
    """Split a comma‑separated list of group names, dropping blanks."""
    return tuple(name.strip() for name in raw.split(",") if name.strip())


def _parse_int(name: str, raw: str, minimum: int = 0) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ConfigurationError(f"{name} must be at least {minimum}, got {value}")
    return value


def _parse_float(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = "Group Registration API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: str = ""
    # ``production`` keeps the process alive when the spreadsheet cannot
    # be initialised and answers 503 instead; any other value makes a
    # startup failure fatal.
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000

    spreadsheet_id: str = ""
    credentials_path: str = ""
    sheet_name: str = "Sheet1"

    group_names: Tuple[str, ...] = field(default_factory=tuple)
    # A single capacity applied uniformly to every group.
    max_students_per_group: int = 5

    verification_secret_key: str = ""
    verification_site_key: str = ""
    verification_url: str = DEFAULT_VERIFY_URL
    verification_timeout: float = 10.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        Raises
        ------
        ConfigurationError
            If a numeric variable cannot be parsed.
        """
        env = os.environ if environ is None else environ
        return cls(
            project_name=env.get("PROJECT_NAME", cls.project_name),
            api_version=env.get("API_VERSION", cls.api_version),
            log_level=env.get("LOG_LEVEL", cls.log_level),
            log_file=env.get("LOG_FILE", ""),
            environment=env.get("ENVIRONMENT", cls.environment).strip().lower(),
            host=env.get("HOST", cls.host),
            port=_parse_int("PORT", env.get("PORT", str(cls.port)), minimum=1),
            spreadsheet_id=env.get("GOOGLE_SHEET_ID", "").strip(),
            credentials_path=env.get("GOOGLE_CREDENTIALS_PATH", "").strip(),
            sheet_name=env.get("GOOGLE_SHEET_NAME", cls.sheet_name),
            group_names=_parse_group_names(env.get("GROUP_NAMES", "")),
            max_students_per_group=_parse_int(
                "MAX_STUDENTS_PER_GROUP",
                env.get("MAX_STUDENTS_PER_GROUP", str(cls.max_students_per_group)),
                minimum=1,
            ),
            verification_secret_key=env.get("RECAPTCHA_SECRET_KEY", ""),
            verification_site_key=env.get("RECAPTCHA_SITE_KEY", ""),
            verification_url=env.get("RECAPTCHA_VERIFY_URL", DEFAULT_VERIFY_URL),
            verification_timeout=_parse_float(
                "VERIFICATION_TIMEOUT",
                env.get("VERIFICATION_TIMEOUT", str(cls.verification_timeout)),
            ),
        )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def missing_required(self) -> List[str]:
        """Return the names of required variables that are not set."""
        values = {
            "GOOGLE_SHEET_ID": self.spreadsheet_id,
            "GOOGLE_CREDENTIALS_PATH": self.credentials_path,
            "GROUP_NAMES": self.group_names,
        }
        return [name for name in REQUIRED_VARIABLES if not values[name]]
