from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

"""Crawl result models for the LKT logbook crawler.

CrawlResult aggregates one run over a logbook file: what was parsed, whether
the error gate let it through, and what was written.
"""


class CrawlStatus(Enum):
    """Outcome of a crawl.

    - SUCCESS: No parse errors, RDF written
    - FAILED: Parse errors collected, nothing written
    """
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class CrawlResult:
    input_file: Path
    status: CrawlStatus
    sheets: int  # Sheets parsed
    entries: int  # Valid entries over all sheets
    errors: list[str] = field(default_factory=list)  # Diagnostics in sheet/row order
    triples: int = 0  # Statements written (0 when FAILED)
    output_file: Path | None = None  # None when FAILED
    error_log_file: Path | None = None  # JSON Lines error log, when errors were flushed
    start_time: datetime | None = None
    end_time: datetime | None = None
    elapsed_seconds: float = 0.0
