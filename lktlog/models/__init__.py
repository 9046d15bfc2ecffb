"""Domain models for the LKT logbook crawler.

This package contains the entry model, its field-level parsing results, parse
diagnostics and the aggregated parse/crawl results.
"""

from .entry import IDENTIFYING_FIELDS, REQUIRED_FIELD_LABELS, LogbookEntry
from .error_record import FIELD_FORMAT, MISSING_REQUIRED, ParseErrorRecord
from .field_result import DATE_TIME_PATTERN, FieldError, FieldResult
from .parse_result import ParsedSheet, ParseResult

__all__ = [
    # Entry
    "IDENTIFYING_FIELDS",
    "REQUIRED_FIELD_LABELS",
    "LogbookEntry",
    "DATE_TIME_PATTERN",
    "FieldError",
    "FieldResult",
    # Diagnostics
    "FIELD_FORMAT",
    "MISSING_REQUIRED",
    "ParseErrorRecord",
    # Results
    "ParsedSheet",
    "ParseResult",
]
