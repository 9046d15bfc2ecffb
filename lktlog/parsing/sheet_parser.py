from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from lktlog.logging.error_log import ParseErrorLog
from lktlog.models.entry import LogbookEntry
from lktlog.models.parse_result import ParsedSheet, ParseResult

from .row_parser import parse_row

"""Sheet parser: rows of a named sheet -> ordered valid entries.

Parsing always runs over every row of every sheet; diagnostics from all sheets
go to one shared ParseErrorLog so a user can fix a logbook in one pass.
"""

__all__ = [
    "parse_sheet",
    "parse_source",
]

logger = logging.getLogger(__name__)

Rows = Sequence[Sequence[str | None]]


def parse_sheet(
    sheet_name: str,
    rows: Rows,
    errors: ParseErrorLog,
    first_row_number: int = 1,
) -> ParsedSheet:
    """Parse the data rows of one sheet.

    Args:
        sheet_name: Name used in diagnostics
        rows: Data rows (header rows already removed), each a list of cell text
        errors: Shared sink receiving diagnostics in row order
        first_row_number: Number reported for ``rows[0]``; callers that strip
            header rows pass the physical sheet row number here

    Returns:
        ParsedSheet with the valid entries in input order
    """
    entries: list[LogbookEntry] = []
    errors_before = len(errors)
    for offset, cells in enumerate(rows):
        entry = parse_row(cells, first_row_number + offset, errors, sheet_name=sheet_name)
        if entry is not None:
            entries.append(entry)
    logger.debug(
        "sheet=%s rows=%d entries=%d errors=%d",
        sheet_name, len(rows), len(entries), len(errors) - errors_before,
    )
    return ParsedSheet(name=sheet_name, entries=entries, total_rows=len(rows))


def parse_source(
    sheets: Mapping[str, Rows],
    errors: ParseErrorLog | None = None,
    first_row_number: int = 1,
) -> ParseResult:
    """Parse every sheet of a workbook, in mapping order, into one ParseResult."""
    if errors is None:
        errors = ParseErrorLog()
    parsed = [
        parse_sheet(name, rows, errors, first_row_number=first_row_number)
        for name, rows in sheets.items()
    ]
    return ParseResult(sheets=parsed, errors=errors)
