from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from lktlog.rdf.projector import DEFAULT_NAMESPACE
from lktlog.rdf.writer import DEFAULT_OUTPUT_FORMAT, normalize_format

"""Config loader for the LKT logbook crawler.

Responsibilities:
- Load the YAML config file (default ``config/lktlog.yml``)
- Validate it against the bundled JSON schema (unknown keys are rejected)
- Apply defaults for every key that is missing
"""

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"
DEFAULT_CONFIG_PATH = Path("config/lktlog.yml")


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class CrawlerConfig:
    namespace: str = DEFAULT_NAMESPACE
    header_rows: int = 1  # Title row(s) above the first logbook entry
    target_sheets: tuple[str, ...] | None = None  # None = every sheet
    default_output_format: str = DEFAULT_OUTPUT_FORMAT
    error_log_dir: str = "./logs"


def default_config() -> CrawlerConfig:
    return CrawlerConfig()


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data violates it (unknown keys, wrong types ...).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> CrawlerConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    defaults = default_config()
    sheets = data.get("target_sheets")
    return CrawlerConfig(
        namespace=data.get("namespace", defaults.namespace),
        header_rows=data.get("header_rows", defaults.header_rows),
        target_sheets=tuple(sheets) if sheets is not None else None,
        default_output_format=normalize_format(
            data.get("default_output_format", defaults.default_output_format)
        ),
        error_log_dir=data.get("error_log_dir", defaults.error_log_dir),
    )
