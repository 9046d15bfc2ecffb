from __future__ import annotations

from dataclasses import dataclass

"""Column layout of an LKT logbook sheet.

The table below is the row contract between the spreadsheet and LogbookEntry:
column index -> entry setter. Changing the order or the setters is a breaking
change and must bump COLUMN_MAP_VERSION.
"""

__all__ = [
    "COLUMN_MAP_VERSION",
    "ColumnSpec",
    "COLUMN_MAP",
]

COLUMN_MAP_VERSION = 1


@dataclass(frozen=True)
class ColumnSpec:
    index: int  # 0-based column position in the sheet
    field: str  # LogbookEntry attribute
    setter: str  # LogbookEntry method receiving the raw cell text
    header: str  # Column title as printed in the logbook template


COLUMN_MAP: tuple[ColumnSpec, ...] = (
    ColumnSpec(0, "project", "set_project", "Project"),
    ColumnSpec(1, "experiment", "set_experiment", "Experiment"),
    ColumnSpec(2, "paradigm", "set_paradigm", "Paradigm"),
    ColumnSpec(3, "paradigm_specifics", "set_paradigm_specifics", "Paradigm specifics"),
    ColumnSpec(4, "experiment_date", "set_experiment_date", "Date"),
    ColumnSpec(5, "experimenter_name", "set_experimenter_name", "Experimenter"),
    ColumnSpec(6, "comment_experiment", "set_comment_experiment", "Comment experiment"),
    ColumnSpec(7, "comment_subject", "set_comment_subject", "Comment animal"),
    ColumnSpec(8, "feed", "set_feed", "Feed"),
    ColumnSpec(9, "is_on_diet", "set_is_on_diet", "Diet"),
    ColumnSpec(10, "is_initial_weight", "set_is_initial_weight", "Initial weight"),
    ColumnSpec(11, "weight", "set_weight", "Weight"),
)
