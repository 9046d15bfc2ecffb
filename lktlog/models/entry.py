from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from .field_result import (
    FieldError,
    FieldResult,
    clean_text,
    parse_experiment_date,
    parse_flag,
    parse_text,
    parse_weight,
)

"""LogbookEntry model for the LKT logbook crawler.

One LogbookEntry holds the typed values of a single logbook row (one
experimental session). Setters take raw cell text, store the typed value and
return a FieldError for values that cannot be parsed, None otherwise.
"""

__all__ = [
    "IDENTIFYING_FIELDS",
    "REQUIRED_FIELD_LABELS",
    "LogbookEntry",
]

# Fields whose presence decides whether a row is blank.
IDENTIFYING_FIELDS = ("project", "experiment", "experiment_date", "experimenter_name")

# Labels reported for missing required fields, in reporting order.
REQUIRED_FIELD_LABELS = {
    "project": "Project",
    "experiment": "Experiment",
    "experiment_date": "Experiment date",
    "experimenter_name": "Name of experimenter",
}


@dataclass
class LogbookEntry:
    """Parsed values of one logbook row.

    ``raw_values`` keeps the original cell text per field for diagnostics.
    ``is_empty_line`` stays True until one of the identifying fields receives
    non-empty text and can never be switched back.
    """
    project: str | None = None
    experiment: str | None = None
    paradigm: str | None = None
    paradigm_specifics: str | None = None
    experiment_date: datetime | None = None
    experimenter_name: str | None = None
    comment_experiment: str | None = None
    comment_subject: str | None = None
    feed: str | None = None
    is_on_diet: bool = False
    is_initial_weight: bool = False
    weight: Decimal | None = None
    raw_values: dict[str, str | None] = field(default_factory=dict, repr=False, compare=False)
    _has_identifier: bool = field(default=False, init=False, repr=False, compare=False)

    @property
    def is_empty_line(self) -> bool:
        return not self._has_identifier

    def _store(self, name: str, raw: str | None, result: FieldResult) -> FieldError | None:
        self.raw_values[name] = raw
        if name in IDENTIFYING_FIELDS and clean_text(raw) is not None:
            self._has_identifier = True
        if result.ok:
            setattr(self, name, result.value)
        return result.error

    def set_project(self, raw: str | None) -> FieldError | None:
        return self._store("project", raw, parse_text(raw))

    def set_experiment(self, raw: str | None) -> FieldError | None:
        return self._store("experiment", raw, parse_text(raw))

    def set_paradigm(self, raw: str | None) -> FieldError | None:
        return self._store("paradigm", raw, parse_text(raw))

    def set_paradigm_specifics(self, raw: str | None) -> FieldError | None:
        return self._store("paradigm_specifics", raw, parse_text(raw))

    def set_experiment_date(self, raw: str | None) -> FieldError | None:
        """Set the session date; an unparsable date still marks the row non-blank."""
        return self._store("experiment_date", raw, parse_experiment_date(raw))

    def set_experimenter_name(self, raw: str | None) -> FieldError | None:
        return self._store("experimenter_name", raw, parse_text(raw))

    def set_comment_experiment(self, raw: str | None) -> FieldError | None:
        return self._store("comment_experiment", raw, parse_text(raw))

    def set_comment_subject(self, raw: str | None) -> FieldError | None:
        return self._store("comment_subject", raw, parse_text(raw))

    def set_feed(self, raw: str | None) -> FieldError | None:
        return self._store("feed", raw, parse_text(raw))

    def set_is_on_diet(self, raw: str | None) -> FieldError | None:
        return self._store("is_on_diet", raw, parse_flag(raw))

    def set_is_initial_weight(self, raw: str | None) -> FieldError | None:
        return self._store("is_initial_weight", raw, parse_flag(raw))

    def set_weight(self, raw: str | None) -> FieldError | None:
        return self._store("weight", raw, parse_weight(raw))

    def missing_required_fields(self) -> list[str]:
        return [name for name in REQUIRED_FIELD_LABELS if getattr(self, name) is None]

    def is_valid_entry(self) -> str:
        """Return "" for a complete entry, else the labels of missing required fields.

        Labels are space separated in the order project, experiment,
        experiment date, experimenter.
        """
        return " ".join(REQUIRED_FIELD_LABELS[name] for name in self.missing_required_fields())
