from __future__ import annotations
import pytest
from pathlib import Path
from lktlog.config.loader import ConfigError, default_config, load_config


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.namespace == "https://example.org/lkt#"
    assert cfg.header_rows == 1
    assert cfg.default_output_format == "TTL"
    assert cfg.target_sheets is None


def test_load_config_applies_defaults(temp_workdir: Path):
    path = temp_workdir / "config" / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == default_config()


def test_load_config_normalizes_format_and_sheets(write_config: Path):
    write_config.write_text(
        "default_output_format: json-ld\ntarget_sheets: [Mouse 1, Mouse 2]\nheader_rows: 0\n",
        encoding="utf-8",
    )
    cfg = load_config(write_config)
    assert cfg.default_output_format == "JSON-LD"
    assert cfg.target_sheets == ("Mouse 1", "Mouse 2")
    assert cfg.header_rows == 0


def test_load_config_missing_file(temp_workdir: Path):
    with pytest.raises(ConfigError, match="config file not found"):
        load_config(temp_workdir / "config" / "not_exists.yml")


def test_load_config_invalid_yaml(write_config: Path):
    write_config.write_text("namespace: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid yaml"):
        load_config(write_config)


def test_load_config_extra_field(write_config: Path):
    text = write_config.read_text(encoding="utf-8") + "\nextra_field: not_allowed\n"
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


@pytest.mark.parametrize(
    "snippet",
    [
        "header_rows: -1\n",
        "default_output_format: CSV\n",
        "namespace: not-an-iri\n",
        "target_sheets: notalist\n",
    ],
)
def test_load_config_schema_violations(write_config: Path, snippet: str):
    write_config.write_text(snippet, encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)
