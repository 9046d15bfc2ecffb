from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .entry import LogbookEntry

if TYPE_CHECKING:
    from lktlog.logging.error_log import ParseErrorLog

"""Parse result models for the LKT logbook crawler.

ParsedSheet holds the valid entries of one sheet, ParseResult the sheets of a
whole workbook plus the shared error log. A ParseResult with errors must not
be projected to RDF.
"""


@dataclass(frozen=True)
class ParsedSheet:
    """Valid entries of one sheet, in row order."""
    name: str
    entries: list[LogbookEntry] = field(default_factory=list)
    total_rows: int = 0  # Data rows seen, blank ones included


@dataclass(frozen=True)
class ParseResult:
    sheets: list[ParsedSheet]
    errors: ParseErrorLog

    @property
    def entries(self) -> list[LogbookEntry]:
        return [e for sheet in self.sheets for e in sheet.entries]

    @property
    def is_importable(self) -> bool:
        return len(self.errors) == 0
