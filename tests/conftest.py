"""Shared fixtures: an in-memory sheet, a stub verifier and settings."""
from typing import List, Sequence

import pytest

from registration_api.app.core.config import Settings
from registration_api.app.core.sheets import StudentSheet
from registration_api.app.services.registration_service import RegistrationService
from registration_api.app.services.roster_service import RosterService


class InMemorySheetsClient:
    """Stands in for ``GoogleSheetsClient``; understands the ranges StudentSheet uses."""

    def __init__(self, rows: Sequence[Sequence[str]] = ()) -> None:
        self.rows: List[List[str]] = [list(row) for row in rows]
        self.calls: List[str] = []

    def get_values(self, range_name: str) -> List[List[str]]:
        self.calls.append(f"get {range_name}")
        if range_name.endswith("A1:E1"):
            return [list(self.rows[0])] if self.rows else []
        if range_name.endswith("A2:E"):
            return [list(row) for row in self.rows[1:]]
        raise AssertionError(f"unexpected range {range_name}")

    def update_values(self, range_name: str, rows: Sequence[Sequence[str]]) -> None:
        self.calls.append(f"update {range_name}")
        assert range_name.endswith("A1:E1")
        header = list(rows[0])
        if self.rows:
            self.rows[0] = header
        else:
            self.rows.append(header)

    def append_values(self, range_name: str, rows: Sequence[Sequence[str]]) -> None:
        self.calls.append(f"append {range_name}")
        self.rows.extend(list(row) for row in rows)


class StubVerifier:
    """Accepts every token unless told otherwise; records what it saw."""

    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.tokens: List[str] = []

    def verify(self, token: str) -> bool:
        self.tokens.append(token)
        return self.result


HEADER = ["Name", "Email", "Phone", "School", "Group"]


@pytest.fixture
def settings():
    return Settings(
        spreadsheet_id="sheet-id",
        credentials_path="credentials.json",
        group_names=("A", "B"),
        max_students_per_group=2,
        verification_secret_key="secret",
        verification_site_key="site-key",
    )


@pytest.fixture
def sheets_client():
    return InMemorySheetsClient([HEADER])


@pytest.fixture
def sheet(sheets_client):
    return StudentSheet(sheets_client)


@pytest.fixture
def verifier():
    return StubVerifier()


@pytest.fixture
def roster(sheet, settings):
    return RosterService(sheet, settings)


@pytest.fixture
def registration_service(settings, roster, sheet, verifier):
    return RegistrationService(settings, roster, sheet, verifier)


@pytest.fixture
def valid_payload():
    return {
        "name": "Nguyen Van An",
        "email": "an@example.com",
        "phone": "0912-345-678",
        "school": "Hanoi High School",
        "group": "A",
        "verificationToken": "token-123",
    }
