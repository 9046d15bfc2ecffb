from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

"""Field-level parsing helpers for logbook cells.

Each helper takes the raw cell text of one column and returns a FieldResult
carrying either the typed value or a FieldError. Expected format violations
never raise; the row parser collects the errors and keeps going.
"""

__all__ = [
    "DATE_TIME_PATTERN",
    "FieldError",
    "FieldResult",
    "clean_text",
    "parse_text",
    "parse_experiment_date",
    "parse_weight",
    "parse_flag",
]

# Display form of the accepted date pattern, reported back to users verbatim.
DATE_TIME_PATTERN = "dd.MM.yyyy HH:mm"
_DATE_TIME_FORMAT = "%d.%m.%Y %H:%M"
# strptime alone accepts single digit days/hours, the shape check does not.
_DATE_TIME_SHAPE = re.compile(r"^\d{2}\.\d{2}\.\d{4} \d{2}:\d{2}$")

FLAG_TRUE_TOKEN = "y"


@dataclass(frozen=True)
class FieldError:
    """Structured diagnostic for a single cell that could not be parsed."""
    field: str  # Entry attribute name
    kind: str  # INVALID_DATE | INVALID_WEIGHT
    raw_value: str  # Offending cell text, untouched
    message: str  # Human readable text shown to the user


@dataclass(frozen=True)
class FieldResult:
    value: Any = None
    error: FieldError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def clean_text(raw: str | None) -> str | None:
    """Return trimmed text, or None when the cell is blank."""
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


def parse_text(raw: str | None) -> FieldResult:
    return FieldResult(value=clean_text(raw))


def parse_experiment_date(raw: str | None) -> FieldResult:
    """Parse an experiment date in the fixed ``dd.MM.yyyy HH:mm`` pattern.

    Blank input yields an empty result without error; the missing value is
    reported later by the required field check.
    """
    text = clean_text(raw)
    if text is None:
        return FieldResult()
    try:
        if not _DATE_TIME_SHAPE.match(text):
            raise ValueError(text)
        value = datetime.strptime(text, _DATE_TIME_FORMAT)
    except ValueError:
        return FieldResult(
            error=FieldError(
                field="experiment_date",
                kind="INVALID_DATE",
                raw_value=str(raw),
                message=(
                    f"Invalid experiment date format ({raw}). "
                    f"Please check the date and use format '{DATE_TIME_PATTERN}'"
                ),
            )
        )
    return FieldResult(value=value)


def parse_weight(raw: str | None) -> FieldResult:
    """Parse a decimal weight accepting both ``,`` and ``.`` as separator."""
    text = clean_text(raw)
    if text is None:
        return FieldResult()
    try:
        # Decimal would take "1_000" digit grouping as 1000
        if "_" in text:
            raise InvalidOperation(text)
        value = Decimal(text.replace(",", "."))
    except InvalidOperation:
        value = None
    if value is None or not value.is_finite():
        return FieldResult(
            error=FieldError(
                field="weight",
                kind="INVALID_WEIGHT",
                raw_value=str(raw),
                message=f"Invalid weight: {raw}",
            )
        )
    return FieldResult(value=value)


def parse_flag(raw: str | None) -> FieldResult:
    # Only the literal token counts, "Y" or "yes" are False.
    return FieldResult(value=raw == FLAG_TRUE_TOKEN)
