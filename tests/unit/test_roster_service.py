"""Unit tests for RosterService."""
from unittest.mock import MagicMock

import pytest

from registration_api.app.core.exceptions import RetrievalError, StoreError
from registration_api.app.services.roster_service import RosterService


def student_row(name, group, email=None, phone="0912345678", school="HS"):
    return [name, email or f"{name.lower()}@example.com", phone, school, group]


class TestListStudents:
    """Test RosterService.list_students."""

    def test_empty_sheet(self, roster):
        assert roster.list_students() == []

    def test_skips_header_and_pads_missing_cells(self, roster, sheets_client):
        sheets_client.rows.append(["An", "an@example.com"])
        sheets_client.rows.append(student_row("Binh", "B"))

        students = roster.list_students()

        assert len(students) == 2
        assert students[0].name == "An"
        assert students[0].phone == ""
        assert students[0].group == ""
        assert students[1].group == "B"

    def test_reads_are_idempotent(self, roster, sheets_client):
        sheets_client.rows.append(student_row("An", "A"))
        sheets_client.rows.append(student_row("Binh", "B"))

        assert roster.list_students() == roster.list_students()

    def test_every_call_rereads_the_sheet(self, roster, sheets_client):
        assert roster.list_students() == []

        sheets_client.rows.append(student_row("An", "A"))

        assert [s.name for s in roster.list_students()] == ["An"]

    def test_store_failure_is_wrapped(self, settings):
        sheet = MagicMock()
        sheet.read_rows.side_effect = StoreError("boom")

        with pytest.raises(RetrievalError):
            RosterService(sheet, settings).list_students()


class TestGroupCounts:
    """Test group_counts, is_group_full and available_groups."""

    @pytest.fixture
    def populated(self, sheets_client):
        sheets_client.rows.extend([
            student_row("An", "A"),
            student_row("Binh", "A"),
            student_row("Chi", "B"),
            student_row("Dung", ""),
        ])

    def test_counts_by_group(self, roster, populated):
        assert roster.group_counts() == {"A": 2, "B": 1}

    def test_empty_groups_absent(self, roster):
        assert roster.group_counts() == {}

    def test_is_group_full_at_capacity(self, roster, populated):
        assert roster.is_group_full("A")
        assert not roster.is_group_full("B")
        assert not roster.is_group_full("C")

    def test_available_groups_preserves_order(self, roster, populated):
        assert roster.available_groups(["C", "A", "B"]) == ["C", "B"]

    def test_group_statuses(self, roster, populated):
        statuses = roster.group_statuses()

        assert [(s.name, s.count, s.is_full, s.max_students) for s in statuses] == [
            ("A", 2, True, 2),
            ("B", 1, False, 2),
        ]

    def test_group_statuses_ignore_unconfigured_groups(self, roster, sheets_client):
        sheets_client.rows.append(student_row("An", "Z"))

        assert [s.count for s in roster.group_statuses()] == [0, 0]
