from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from rdflib import Literal, Namespace
from rdflib.compare import isomorphic
from rdflib.namespace import XSD

from conftest import valid_row

from lktlog.logging.error_log import ParseErrorLog
from lktlog.models.entry import LogbookEntry
from lktlog.parsing.row_parser import parse_row
from lktlog.rdf.projector import EntryToGraphProjector, ProjectionContractError

NS = Namespace("https://example.org/lkt#")


def _entry(**overrides: str) -> LogbookEntry:
    entry = parse_row(valid_row(**overrides), 1, ParseErrorLog())
    assert entry is not None
    return entry


def test_minimal_entry_projects_required_and_flags_only():
    graph = EntryToGraphProjector(str(NS)).project([_entry()])
    assert len(graph) == 6
    subjects = set(graph.subjects())
    assert len(subjects) == 1
    s = subjects.pop()
    assert graph.value(s, NS.project) == Literal("P1")
    assert graph.value(s, NS.experiment) == Literal("E1")
    assert graph.value(s, NS.experimenterName) == Literal("Jane Doe")
    assert graph.value(s, NS.experimentDate) == Literal(datetime(2020, 2, 10, 10, 0), datatype=XSD.dateTime)
    assert graph.value(s, NS.isOnDiet) == Literal(False, datatype=XSD.boolean)
    assert graph.value(s, NS.isInitialWeight) == Literal(False, datatype=XSD.boolean)
    for absent in (NS.paradigm, NS.paradigmSpecifics, NS.commentExperiment,
                   NS.commentSubject, NS.feed, NS.weight):
        assert graph.value(s, absent) is None


def test_full_entry_projects_every_field():
    entry = _entry(
        paradigm="open field",
        paradigm_specifics="10 min",
        comment_experiment="calm",
        comment_subject="healthy",
        feed="pellets",
        is_on_diet="y",
        is_initial_weight="y",
        weight="21,5",
    )
    graph = EntryToGraphProjector(str(NS)).project([entry])
    assert len(graph) == 12
    s = next(iter(graph.subjects()))
    assert graph.value(s, NS.weight) == Literal(Decimal("21.5"), datatype=XSD.decimal)
    assert graph.value(s, NS.isOnDiet) == Literal(True, datatype=XSD.boolean)
    assert graph.value(s, NS.paradigmSpecifics) == Literal("10 min")


def test_n_entries_give_n_subjects():
    entries = [_entry(), _entry(), _entry(experiment="E2", feed="hay")]
    graph = EntryToGraphProjector(str(NS)).project(entries)
    assert len(set(graph.subjects())) == 3
    assert len(graph) == 6 + 6 + 7


def test_projection_is_deterministic():
    entries = [_entry(), _entry(weight="3.5")]
    projector = EntryToGraphProjector(str(NS))
    g1 = projector.project(entries)
    g2 = projector.project(entries)
    assert set(g1) == set(g2)
    assert isomorphic(g1, g2)


def test_invalid_entry_is_a_contract_violation():
    entry = LogbookEntry()
    entry.set_project("P1")
    with pytest.raises(ProjectionContractError):
        EntryToGraphProjector(str(NS)).project([entry])


def test_empty_entry_is_a_contract_violation():
    with pytest.raises(AssertionError):
        EntryToGraphProjector(str(NS)).project([LogbookEntry()])
