from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import CrawlerConfig, default_config
from ..excel.reader import SUPPORTED_INPUT_TYPES, WorkbookReadError, read_workbook, sheet_rows
from ..logging.error_log import ParseErrorLog
from ..models.crawl_result import CrawlResult, CrawlStatus
from ..models.parse_result import ParsedSheet, ParseResult
from ..parsing.sheet_parser import parse_sheet
from ..rdf.projector import EntryToGraphProjector
from ..rdf.writer import (
    RDF_FORMAT_EXTENSIONS,
    RdfConversionError,
    UnsupportedFormatError,
    convert_rdf_file,
    normalize_format,
    resolve_output_path,
    write_graph,
)
from .file_checks import InputFileError, check_input_file
from .progress import SheetProgressTracker

"""Service orchestration for the LKT logbook crawler.

crawl() runs the whole pipeline for one logbook file:
1. Check the input file
2. Read every (targeted) sheet
3. Parse all sheets into entries, collecting every diagnostic
4. If any diagnostic was collected: report them all and stop
5. Otherwise project the entries to RDF and write the output file
"""

logger = logging.getLogger(__name__)


class CrawlError(Exception):
    """Fatal error preventing a crawl or conversion from running."""


def parse_workbook(path: Path, config: CrawlerConfig, errors: ParseErrorLog) -> ParseResult:
    """Read and parse every sheet of a logbook workbook.

    Row numbers in diagnostics are physical sheet rows: the first data row is
    ``header_rows + 1``.
    """
    try:
        raw_sheets = read_workbook(path, target_sheets=config.target_sheets)
    except WorkbookReadError as e:
        raise CrawlError(str(e)) from e

    if config.target_sheets is not None:
        for name in config.target_sheets:
            if name not in raw_sheets:
                logger.warning(f"sheet not found, skipped: {name}")

    parsed: list[ParsedSheet] = []
    with SheetProgressTracker(len(raw_sheets)) as progress:
        for sheet_name, df in raw_sheets.items():
            progress.start_sheet(sheet_name)
            errors_before = len(errors)
            sheet = parse_sheet(
                sheet_name,
                sheet_rows(df, config.header_rows),
                errors,
                first_row_number=config.header_rows + 1,
            )
            parsed.append(sheet)
            progress.finish_sheet(entries=len(sheet.entries), errors=len(errors) - errors_before)
    return ParseResult(sheets=parsed, errors=errors)


def crawl(
    input_file: Path,
    output_file: Path | None = None,
    output_format: str | None = None,
    config: CrawlerConfig | None = None,
) -> CrawlResult:
    """Convert one logbook file to RDF.

    Args:
        input_file: ODS/XLSX logbook
        output_file: Target file; derived from ``input_file`` when None
        output_format: RDF format name; config default when None
        config: Crawler configuration; defaults when None

    Returns:
        CrawlResult, FAILED when parse errors were found (nothing written)

    Raises:
        CrawlError: Missing/unsupported input, unreadable workbook, bad format
    """
    config = config or default_config()
    start_time = datetime.now(UTC)

    try:
        check_input_file(input_file, SUPPORTED_INPUT_TYPES)
        fmt = normalize_format(output_format or config.default_output_format)
    except (InputFileError, UnsupportedFormatError) as e:
        raise CrawlError(str(e)) from e
    out_path = resolve_output_path(input_file, output_file, fmt)

    logger.info("Parsing input file...")
    errors = ParseErrorLog(log_dir=Path(config.error_log_dir))
    result = parse_workbook(input_file, config, errors)
    entries = result.entries

    if not result.is_importable:
        messages = errors.messages()
        for msg in messages:
            logger.error(msg)
        log_path = errors.flush()
        logger.info(f"{len(messages)} parse error(s) written to {log_path}; no RDF written")
        end_time = datetime.now(UTC)
        return CrawlResult(
            input_file=input_file,
            status=CrawlStatus.FAILED,
            sheets=len(result.sheets),
            entries=len(entries),
            errors=messages,
            error_log_file=log_path,
            start_time=start_time,
            end_time=end_time,
            elapsed_seconds=(end_time - start_time).total_seconds(),
        )

    logger.info("Converting parsed data to RDF...")
    graph = EntryToGraphProjector(namespace=config.namespace).project(entries)
    write_graph(graph, out_path, fmt)

    end_time = datetime.now(UTC)
    return CrawlResult(
        input_file=input_file,
        status=CrawlStatus.SUCCESS,
        sheets=len(result.sheets),
        entries=len(entries),
        triples=len(graph),
        output_file=out_path,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
    )


def convert(input_file: Path, output_file: Path | None = None, output_format: str | None = None) -> Path:
    """Convert an RDF file to another RDF format.

    Raises:
        CrawlError: Missing/unsupported input, unparsable RDF, bad format
    """
    supported = {ext.upper() for ext in RDF_FORMAT_EXTENSIONS.values()}
    try:
        check_input_file(input_file, supported)
        fmt = normalize_format(output_format)
        out_path = resolve_output_path(input_file, output_file, fmt)
        return convert_rdf_file(input_file, out_path, fmt)
    except (InputFileError, UnsupportedFormatError, RdfConversionError) as e:
        raise CrawlError(str(e)) from e
