from __future__ import annotations

import re
from pathlib import Path

from lktlog.models.crawl_result import CrawlResult, CrawlStatus
from lktlog.services.summary import render_summary_line

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY status=(success|failed) sheets=([0-9]+) entries=([0-9]+) errors=([0-9]+) "
    r"triples=([0-9]+) elapsed_sec=([0-9]+\.?[0-9]*)$"
)


def test_render_summary_line_success():
    result = CrawlResult(
        input_file=Path("log.ods"),
        status=CrawlStatus.SUCCESS,
        sheets=2,
        entries=10,
        triples=64,
        elapsed_seconds=2.0,
    )
    line = render_summary_line(result)
    match = SUMMARY_PATTERN.match(line)
    assert match, line
    assert match.groups() == ("success", "2", "10", "0", "64", "2")


def test_render_summary_line_failed_counts_errors():
    result = CrawlResult(
        input_file=Path("log.ods"),
        status=CrawlStatus.FAILED,
        sheets=1,
        entries=3,
        errors=["Sheet 'S' row 2: Invalid weight: x", "Sheet 'S' row 4: missing required entries: Project"],
        elapsed_seconds=0.5,
    )
    line = render_summary_line(result)
    assert SUMMARY_PATTERN.match(line), line
    assert "status=failed" in line and "errors=2" in line and "triples=0" in line
    assert line.endswith("elapsed_sec=0.5")


def test_render_summary_line_tiny_elapsed_has_no_exponent():
    result = CrawlResult(
        input_file=Path("log.ods"), status=CrawlStatus.SUCCESS, sheets=0, entries=0,
        elapsed_seconds=0.000012,
    )
    line = render_summary_line(result)
    assert "e-" not in line
    assert line.endswith("elapsed_sec=0.000012")
