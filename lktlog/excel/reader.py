from __future__ import annotations

import math
import zipfile
from collections.abc import Iterable
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

import pandas as pd

"""Logbook workbook reader.

Reads every sheet of an ODS/XLSX logbook with pandas and renders it as rows of
cell text, the only shape the parsers accept. Header rows are dropped here;
blank rows are kept so row numbers in diagnostics match the sheet.
"""

__all__ = [
    "SUPPORTED_INPUT_TYPES",
    "WorkbookReadError",
    "read_workbook",
    "cell_text",
    "sheet_rows",
    "read_logbook_rows",
]

SUPPORTED_INPUT_TYPES = frozenset({"ODS", "XLSX"})

_ENGINES = {
    ".ods": "odf",
    ".xlsx": "openpyxl",
}

# Same rendering users type into the date column.
_CELL_DATE_FORMAT = "%d.%m.%Y %H:%M"


class WorkbookReadError(Exception):
    """Raised when a workbook cannot be opened or parsed."""


def read_workbook(path: Path, target_sheets: Iterable[str] | None = None) -> dict[str, pd.DataFrame]:
    """Read a workbook returning raw DataFrames keyed by sheet name.

    Parameters
    ----------
    path: Workbook path (.ods or .xlsx)
    target_sheets: Restrict to these sheet names (None reads all sheets)

    ``keep_default_na=False`` keeps texts such as ``NA`` or ``null`` in
    comment columns instead of turning them into blanks.
    """
    engine = _ENGINES.get(path.suffix.lower())
    wanted = set(target_sheets) if target_sheets is not None else None
    dfs: dict[str, pd.DataFrame] = {}
    try:
        xls = pd.ExcelFile(path, engine=engine)
        for name in xls.sheet_names:
            if wanted is not None and str(name) not in wanted:
                continue
            dfs[str(name)] = xls.parse(name, header=None, dtype=object, keep_default_na=False)
    except (OSError, ValueError, KeyError, zipfile.BadZipFile) as e:
        raise WorkbookReadError(f"could not read workbook {path}: {e}") from e
    return dfs


def cell_text(value: Any) -> str:
    """Render one cell as the text a user would see in the sheet."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, bool):
        return "y" if value else "n"
    if isinstance(value, datetime):  # pd.Timestamp included
        if pd.isna(value):
            return ""
        return value.strftime(_CELL_DATE_FORMAT)
    if isinstance(value, date):
        return datetime.combine(value, time()).strftime(_CELL_DATE_FORMAT)
    return str(value)


def sheet_rows(df: pd.DataFrame, header_rows: int = 1) -> list[list[str]]:
    """Drop ``header_rows`` leading rows and render the rest as cell text."""
    data_part = df.iloc[header_rows:]
    return [[cell_text(v) for v in raw.tolist()] for _, raw in data_part.iterrows()]


def read_logbook_rows(
    path: Path, header_rows: int = 1, target_sheets: Iterable[str] | None = None
) -> dict[str, list[list[str]]]:
    return {
        name: sheet_rows(df, header_rows)
        for name, df in read_workbook(path, target_sheets=target_sheets).items()
    }
