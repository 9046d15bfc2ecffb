from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from lktlog.config.loader import DEFAULT_CONFIG_PATH, ConfigError, CrawlerConfig, default_config, load_config
from lktlog.logging.init import get_logger, log_summary, setup_logging
from lktlog.models.crawl_result import CrawlStatus
from lktlog.rdf.writer import RDF_FORMATS
from lktlog.services.orchestrator import CrawlError, convert, crawl
from lktlog.services.summary import render_summary_line

"""CLI entrypoint.

Two tools:
- ``lkt``: crawl an LKT logbook (ODS/XLSX) and write RDF
- ``conv``: convert an RDF file into another RDF format

The config file is taken from $LKTLOG_CONFIG (``.env`` is read first) or
``config/lktlog.yml``; without either, defaults apply.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_PARSE_ERRORS = 2

CONFIG_ENV_VAR = "LKTLOG_CONFIG"


def _load_env_file(path: Path) -> None:
    # .env values override the process environment
    if path.exists():
        load_dotenv(dotenv_path=path, override=True)


def _resolve_config() -> CrawlerConfig:
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        # An explicitly named config must exist
        return load_config(Path(env_path))
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return default_config()


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="lktlog", description="LKT logbook to RDF crawler")
    sub = p.add_subparsers(dest="tool", required=True)
    formats = ", ".join(RDF_FORMATS)

    lkt = sub.add_parser("lkt", help="Convert an LKT logbook (ODS/XLSX) to RDF")
    conv = sub.add_parser("conv", help="Convert an RDF file to another RDF format")
    for sp in (lkt, conv):
        sp.add_argument("-i", "--in-file", required=True, type=Path, help="Input file")
        sp.add_argument("-o", "--out-file", type=Path, default=None,
                        help="Output file (default: <input>_out.<ext>)")
        sp.add_argument("-f", "--format", default=None, help=f"RDF output format: {formats}")
        sp.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _run_lkt(args: argparse.Namespace, cfg: CrawlerConfig) -> int:
    logger = get_logger()
    try:
        result = crawl(args.in_file, args.out_file, args.format, cfg)
    except CrawlError as e:
        logger.error(f"lkt: {e}")
        return EXIT_FATAL

    if result.output_file is not None:
        logger.info(f"output={result.output_file}")
    log_summary(render_summary_line(result)[len("SUMMARY "):])
    if result.status == CrawlStatus.FAILED:
        return EXIT_PARSE_ERRORS
    return EXIT_SUCCESS


def _run_conv(args: argparse.Namespace, cfg: CrawlerConfig) -> int:
    logger = get_logger()
    try:
        out = convert(args.in_file, args.out_file, args.format or cfg.default_output_format)
    except CrawlError as e:
        logger.error(f"conv: {e}")
        return EXIT_FATAL
    logger.info(f"output={out}")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    # None reads the process arguments; [] stays empty (tests call main([...]))
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    if args.debug:
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))
    try:
        cfg = _resolve_config()
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.tool == "lkt":
        return _run_lkt(args, cfg)
    return _run_conv(args, cfg)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
