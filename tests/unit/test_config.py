"""Unit tests for Settings."""
import dataclasses

import pytest

from registration_api.app.core.config import DEFAULT_VERIFY_URL, Settings
from registration_api.app.core.exceptions import ConfigurationError


class TestSettingsFromEnv:
    """Test Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env({})

        assert settings.max_students_per_group == 5
        assert settings.sheet_name == "Sheet1"
        assert settings.port == 3000
        assert settings.verification_url == DEFAULT_VERIFY_URL
        assert settings.group_names == ()
        assert not settings.is_production

    def test_reads_environment(self):
        settings = Settings.from_env({
            "GOOGLE_SHEET_ID": "abc",
            "GOOGLE_CREDENTIALS_PATH": "/secrets/sa.json",
            "GROUP_NAMES": " Group 1, Group 2 ,,Group 3 ",
            "MAX_STUDENTS_PER_GROUP": "12",
            "RECAPTCHA_SITE_KEY": "public",
            "RECAPTCHA_SECRET_KEY": "private",
            "ENVIRONMENT": "Production",
            "PORT": "8080",
        })

        assert settings.spreadsheet_id == "abc"
        assert settings.credentials_path == "/secrets/sa.json"
        assert settings.group_names == ("Group 1", "Group 2", "Group 3")
        assert settings.max_students_per_group == 12
        assert settings.verification_site_key == "public"
        assert settings.verification_secret_key == "private"
        assert settings.port == 8080
        assert settings.is_production

    @pytest.mark.parametrize("variable,value", [
        ("MAX_STUDENTS_PER_GROUP", "five"),
        ("MAX_STUDENTS_PER_GROUP", "0"),
        ("PORT", "http"),
        ("VERIFICATION_TIMEOUT", "-1"),
    ])
    def test_invalid_numbers_raise(self, variable, value):
        with pytest.raises(ConfigurationError):
            Settings.from_env({variable: value})

    def test_missing_required(self):
        settings = Settings.from_env({"GOOGLE_SHEET_ID": "abc"})

        assert settings.missing_required() == ["GOOGLE_CREDENTIALS_PATH", "GROUP_NAMES"]

    def test_settings_are_immutable(self, settings):
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.max_students_per_group = 10
