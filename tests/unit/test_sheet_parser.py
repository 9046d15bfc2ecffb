from __future__ import annotations

from conftest import valid_row

from lktlog.logging.error_log import ParseErrorLog
from lktlog.parsing.sheet_parser import parse_sheet, parse_source


def test_scenario_valid_blank_and_incomplete_rows():
    """Row 1 valid, row 2 blank, row 3 without experimenter."""
    errors = ParseErrorLog()
    rows = [
        valid_row(),
        [""] * 12,
        valid_row(experimenter_name=""),
    ]
    sheet = parse_sheet("Sheet1", rows, errors)
    assert len(sheet.entries) == 1
    assert sheet.entries[0].project == "P1"
    assert sheet.total_rows == 3
    messages = errors.messages()
    assert len(messages) == 1
    assert "row 3" in messages[0]
    assert "experimenter" in messages[0]


def test_invalid_calendar_date_excludes_entry():
    errors = ParseErrorLog()
    sheet = parse_sheet("S", [valid_row(experiment_date="31.02.2020 10:00")], errors)
    assert sheet.entries == []
    assert any("31.02.2020 10:00" in m and "dd.MM.yyyy HH:mm" in m for m in errors.messages())


def test_entries_keep_row_order_and_duplicates():
    errors = ParseErrorLog()
    rows = [valid_row(experiment="E2"), valid_row(experiment="E1"), valid_row(experiment="E1")]
    sheet = parse_sheet("S", rows, errors)
    assert [e.experiment for e in sheet.entries] == ["E2", "E1", "E1"]


def test_first_row_number_offsets_diagnostics():
    errors = ParseErrorLog()
    parse_sheet("S", [valid_row(project="")], errors, first_row_number=2)
    assert errors.records[0].row == 2


def test_parse_source_shares_error_log_across_sheets():
    sheets = {
        "Mouse A": [valid_row(), valid_row(weight="bad")],
        "Mouse B": [valid_row(project=""), [""] * 12, valid_row()],
    }
    result = parse_source(sheets)
    assert [s.name for s in result.sheets] == ["Mouse A", "Mouse B"]
    assert len(result.entries) == 3
    assert result.errors.messages() == [
        "Sheet 'Mouse A' row 2: Invalid weight: bad",
        "Sheet 'Mouse B' row 1: missing required entries: Project",
    ]
    assert result.is_importable is False


def test_parse_source_without_errors_is_importable():
    result = parse_source({"S": [valid_row()]})
    assert result.is_importable is True
    assert len(result.errors) == 0


def test_parse_source_is_idempotent():
    sheets = {
        "A": [valid_row(), valid_row(experiment_date="1.1.2020 1:00"), valid_row(experiment="")],
        "B": [valid_row(weight="7,25")],
    }
    first = parse_source(sheets)
    second = parse_source(sheets)
    assert first.errors.messages() == second.errors.messages()
    assert first.entries == second.entries
