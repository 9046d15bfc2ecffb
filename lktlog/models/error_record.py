from __future__ import annotations

import json
from dataclasses import asdict, dataclass

from .field_result import FieldError

"""ParseErrorRecord model for parse diagnostics.

A ParseErrorRecord is one diagnostic collected while parsing a logbook. It
renders to the human readable line shown to users and to a JSON line for the
error log file.
"""

__all__ = [
    "FIELD_FORMAT",
    "MISSING_REQUIRED",
    "ParseErrorRecord",
]

FIELD_FORMAT = "FIELD_FORMAT"
MISSING_REQUIRED = "MISSING_REQUIRED"


@dataclass(frozen=True)
class ParseErrorRecord:
    """Structured diagnostic for one logbook row.

    Attributes:
        sheet: Sheet name ("" when rows were not read from a named sheet)
        row: Row number (1-based) as reported to the user
        error_type: FIELD_FORMAT or MISSING_REQUIRED
        field: Entry field name, or None for row level diagnostics
        raw_value: Offending cell text, or None for row level diagnostics
        message: Description without sheet/row context
    """
    sheet: str
    row: int
    error_type: str
    field: str | None
    raw_value: str | None
    message: str

    @staticmethod
    def from_field_error(sheet: str, row: int, error: FieldError) -> ParseErrorRecord:
        return ParseErrorRecord(
            sheet=sheet,
            row=row,
            error_type=FIELD_FORMAT,
            field=error.field,
            raw_value=error.raw_value,
            message=error.message,
        )

    @staticmethod
    def missing_required(sheet: str, row: int, missing_labels: str) -> ParseErrorRecord:
        return ParseErrorRecord(
            sheet=sheet,
            row=row,
            error_type=MISSING_REQUIRED,
            field=None,
            raw_value=None,
            message=f"missing required entries: {missing_labels}",
        )

    def __str__(self) -> str:
        if self.sheet:
            return f"Sheet '{self.sheet}' row {self.row}: {self.message}"
        return f"Row {self.row}: {self.message}"

    def to_json_line(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)
