from __future__ import annotations

import logging
from collections.abc import Sequence

from lktlog.logging.error_log import ParseErrorLog
from lktlog.models.entry import LogbookEntry
from lktlog.models.error_record import ParseErrorRecord
from lktlog.models.field_result import FieldError

from .columns import COLUMN_MAP

"""Row parser: one positional row of cell text -> LogbookEntry.

Every column setter runs, in column order, regardless of earlier failures so a
user sees all problems of a row at once.
"""

__all__ = [
    "build_entry",
    "parse_row",
]

logger = logging.getLogger(__name__)


def _cell(cells: Sequence[str | None], index: int) -> str | None:
    # Short rows: trailing blank cells are often not stored at all.
    if index < len(cells):
        return cells[index]
    return None


def build_entry(cells: Sequence[str | None]) -> tuple[LogbookEntry, list[FieldError]]:
    """Apply every column setter and return the entry with its field errors."""
    entry = LogbookEntry()
    errors: list[FieldError] = []
    for column in COLUMN_MAP:
        error = getattr(entry, column.setter)(_cell(cells, column.index))
        if error is not None:
            errors.append(error)
    return entry, errors


def parse_row(
    cells: Sequence[str | None],
    row_number: int,
    errors: ParseErrorLog,
    sheet_name: str = "",
) -> LogbookEntry | None:
    """Parse one row, appending its diagnostics to ``errors``.

    Returns:
        The entry, or None when the row is blank (silently skipped) or lacks
        required fields (reported as one combined diagnostic).
    """
    entry, field_errors = build_entry(cells)
    for err in field_errors:
        errors.append(ParseErrorRecord.from_field_error(sheet_name, row_number, err))

    if entry.is_empty_line:
        logger.debug("sheet=%s row=%d blank, skipped", sheet_name, row_number)
        return None

    missing = entry.is_valid_entry()
    if missing:
        errors.append(ParseErrorRecord.missing_required(sheet_name, row_number, missing))
        return None
    return entry
