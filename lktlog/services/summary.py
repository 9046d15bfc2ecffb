from __future__ import annotations

from ..models.crawl_result import CrawlResult

"""Summary line rendering for the LKT logbook crawler."""


def _format_number(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # Avoid scientific notation for very short runs
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(round(value, 3))


def render_summary_line(result: CrawlResult) -> str:
    """Render the SUMMARY line of a crawl.

    Format:
    SUMMARY status={status} sheets={n} entries={n} errors={n} triples={n} elapsed_sec={x}

    Examples:
        >>> from pathlib import Path
        >>> from lktlog.models.crawl_result import CrawlStatus
        >>> r = CrawlResult(input_file=Path("log.ods"), status=CrawlStatus.SUCCESS,
        ...                 sheets=2, entries=10, triples=70, elapsed_seconds=2.0)
        >>> render_summary_line(r)
        'SUMMARY status=success sheets=2 entries=10 errors=0 triples=70 elapsed_sec=2'
    """
    return (
        f"SUMMARY status={result.status.value} "
        f"sheets={result.sheets} "
        f"entries={result.entries} "
        f"errors={len(result.errors)} "
        f"triples={result.triples} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)}"
    )
