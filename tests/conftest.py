# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
from typing import Callable

import pandas as pd
import pytest

from lktlog.logging.init import reset_logging

HEADER = [
    "Project", "Experiment", "Paradigm", "Paradigm specifics", "Date", "Experimenter",
    "Comment experiment", "Comment animal", "Feed", "Diet", "Initial weight", "Weight",
]


def valid_row(**overrides: str) -> list[str]:
    """Fully valid logbook row (all 12 columns); override cells by field name."""
    cells = {
        "project": "P1",
        "experiment": "E1",
        "paradigm": "",
        "paradigm_specifics": "",
        "experiment_date": "10.02.2020 10:00",
        "experimenter_name": "Jane Doe",
        "comment_experiment": "",
        "comment_subject": "",
        "feed": "",
        "is_on_diet": "",
        "is_initial_weight": "",
        "weight": "",
    }
    cells.update(overrides)
    return list(cells.values())


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        reset_logging()
        yield p
        reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """namespace: https://example.org/lkt#
header_rows: 1
default_output_format: TTL
error_log_dir: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "lktlog.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def make_workbook(temp_workdir: Path) -> Callable[..., Path]:
    """Write an .xlsx or .ods logbook; every sheet gets the header row prepended."""
    def _make(
        name: str,
        sheets: dict[str, list[list[object]]],
        with_header: bool = True,
        engine: str | None = None,
    ) -> Path:
        path = temp_workdir / "data" / name
        if engine is None:
            engine = "odf" if path.suffix == ".ods" else "openpyxl"
        with pd.ExcelWriter(path, engine=engine) as writer:
            for sheet_name, rows in sheets.items():
                data = ([HEADER] if with_header else []) + rows
                pd.DataFrame(data).to_excel(writer, sheet_name=sheet_name, header=False, index=False)
        return path
    return _make
