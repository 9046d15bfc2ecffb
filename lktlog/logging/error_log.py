from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path

from lktlog.models.error_record import ParseErrorRecord

"""Parse error log: the shared, append-only diagnostic sink.

One ParseErrorLog spans a whole workbook parse. Row and sheet parsers append to
it in input order; the caller reads it back after parsing completes, either as
plain message lines or flushed to a JSON Lines file
(``<log_dir>/parse-errors-YYYYMMDD-HHMMSS.log``, UTC).
"""

__all__ = [
    "ParseErrorRecord",
    "ParseErrorLog",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class ParseErrorLog:
    """Ordered in-memory sink for parse diagnostics.

    Records are never reordered or deduplicated. flush() appends the buffered
    records to the log file but keeps them readable through messages().
    """
    def __init__(self, log_dir: Path | None = None) -> None:
        self._records: list[ParseErrorRecord] = []
        self._flushed = 0
        self._log_dir = log_dir if log_dir is not None else LOGS_DIR
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._log_dir / f"parse-errors-{stamp}.log"
        return self._file_path

    def append(self, record: ParseErrorRecord) -> None:
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __iter__(self) -> Iterator[ParseErrorRecord]:
        return iter(list(self._records))

    @property
    def records(self) -> list[ParseErrorRecord]:
        return list(self._records)

    def messages(self) -> list[str]:
        return [str(r) for r in self._records]

    def flush(self) -> Path | None:
        """Append records not yet written to the log file.

        Returns None when there was never anything to write, so a clean run
        leaves no empty log file behind.
        """
        pending = self._records[self._flushed:]
        if not pending:
            return self._file_path
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in pending:
                f.write(r.to_json_line() + "\n")
        self._flushed = len(self._records)
        return fp
