"""
Google Sheets integration.

This module plays the part a database module plays in other services.
``GoogleSheetsClient`` is a thin wrapper over the ``values`` resource
of the Sheets v4 API, authenticated once with a service‑account
credential.  ``StudentSheet`` sits on top of it and translates between
:class:`Student` records and sheet rows; it owns no business logic.

Every call is attempted exactly once.  Failures are re‑raised as
:class:`StoreError` with the original exception chained.  Row reads
and appends leave the logging to the request handler that catches
the error; ``initialize`` runs at startup and logs its own failure.
"""

import logging
from typing import Any, List, Optional, Protocol, Sequence

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .config import Settings
from .exceptions import StoreError
from ..schemas.student import Student


logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
HEADER_ROW = ["Name", "Email", "Phone", "School", "Group"]
VALUE_INPUT_OPTION = "RAW"


class SheetsClient(Protocol):
    """The three range operations ``StudentSheet`` relies on."""

    def get_values(self, range_name: str) -> List[List[str]]: ...

    def update_values(self, range_name: str, rows: Sequence[Sequence[str]]) -> None: ...

    def append_values(self, range_name: str, rows: Sequence[Sequence[str]]) -> None: ...


class GoogleSheetsClient:
    """Range operations against a single spreadsheet."""

    def __init__(self, service: Any, spreadsheet_id: str) -> None:
        self._values = service.spreadsheets().values()
        self.spreadsheet_id = spreadsheet_id

    @classmethod
    def from_service_account_file(cls, credentials_path: str, spreadsheet_id: str) -> "GoogleSheetsClient":
        """Authenticate with a service‑account JSON key file."""
        credentials = service_account.Credentials.from_service_account_file(
            credentials_path, scopes=SCOPES
        )
        service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        return cls(service, spreadsheet_id)

    def get_values(self, range_name: str) -> List[List[str]]:
        response = self._values.get(
            spreadsheetId=self.spreadsheet_id,
            range=range_name,
        ).execute()
        return response.get("values") or []

    def update_values(self, range_name: str, rows: Sequence[Sequence[str]]) -> None:
        self._values.update(
            spreadsheetId=self.spreadsheet_id,
            range=range_name,
            valueInputOption=VALUE_INPUT_OPTION,
            body={"values": [list(row) for row in rows]},
        ).execute()

    def append_values(self, range_name: str, rows: Sequence[Sequence[str]]) -> None:
        self._values.append(
            spreadsheetId=self.spreadsheet_id,
            range=range_name,
            valueInputOption=VALUE_INPUT_OPTION,
            body={"values": [list(row) for row in rows]},
        ).execute()


def quote_sheet_name(sheet_name: str) -> str:
    """Quote a worksheet name for use in A1 notation when needed."""
    if sheet_name.replace("_", "").isalnum():
        return sheet_name
    return "'" + sheet_name.replace("'", "''") + "'"


def _http_status(exc: Exception) -> Optional[int]:
    if isinstance(exc, HttpError):
        return exc.resp.status
    return None


class StudentSheet:
    """Row‑level access to the registration sheet.

    The sheet layout is a header row ``Name, Email, Phone, School,
    Group`` followed by one row per registrant, append‑only.
    """

    def __init__(self, client: SheetsClient, sheet_name: str = "Sheet1") -> None:
        self._client = client
        prefix = quote_sheet_name(sheet_name)
        self.header_range = f"{prefix}!A1:E1"
        self.data_range = f"{prefix}!A2:E"
        self.append_range = f"{prefix}!A:E"

    @classmethod
    def from_settings(cls, settings: Settings) -> "StudentSheet":
        client = GoogleSheetsClient.from_service_account_file(
            settings.credentials_path, settings.spreadsheet_id
        )
        return cls(client, settings.sheet_name)

    def initialize(self) -> None:
        """Write the header row if the sheet is empty.

        Raises
        ------
        StoreError
            If the spreadsheet cannot be read or written.
        """
        try:
            existing = self._client.get_values(self.header_range)
            if existing:
                logger.info("Header row already present in %s", self.header_range)
                return
            self._client.update_values(self.header_range, [HEADER_ROW])
            logger.info("Header row written to %s", self.header_range)
        except Exception as exc:
            status = _http_status(exc)
            if status == 403:
                logger.error(
                    "Permission denied: share the spreadsheet with the service account's client_email"
                )
            elif status == 404:
                logger.error("Spreadsheet not found: check GOOGLE_SHEET_ID")
            logger.exception("Failed to initialise the registration sheet")
            raise StoreError(f"Failed to initialize sheet: {exc}") from exc

    def append_student(self, student: Student) -> None:
        try:
            self._client.append_values(self.append_range, [student.to_row()])
        except Exception as exc:
            raise StoreError("Failed to add student to the sheet") from exc
        logger.info("Student %s added to group %s", student.name, student.group)

    def read_rows(self) -> List[List[str]]:
        """Return every data row, header excluded."""
        try:
            return self._client.get_values(self.data_range)
        except Exception as exc:
            raise StoreError("Failed to read rows from the sheet") from exc
