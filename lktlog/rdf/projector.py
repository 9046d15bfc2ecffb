from __future__ import annotations

import uuid
from collections.abc import Sequence

from rdflib import Graph, Literal, Namespace, URIRef
from rdflib.namespace import XSD

from lktlog.models.entry import LogbookEntry

"""Projection of valid logbook entries onto an RDF graph.

Each entry becomes one subject resource in ``<namespace>entry_<uuid>`` form.
The uuid is a uuid5 over the entry position and its identifying fields, so
projecting the same entry sequence twice yields the same graph. Every field
with a value becomes exactly one statement; empty optional fields produce none.
"""

__all__ = [
    "DEFAULT_NAMESPACE",
    "PREDICATES",
    "ProjectionContractError",
    "EntryToGraphProjector",
]

DEFAULT_NAMESPACE = "https://lktlog.g-node.org/terms#"

# Entry field -> predicate local name.
PREDICATES: dict[str, str] = {
    "project": "project",
    "experiment": "experiment",
    "paradigm": "paradigm",
    "paradigm_specifics": "paradigmSpecifics",
    "experiment_date": "experimentDate",
    "experimenter_name": "experimenterName",
    "comment_experiment": "commentExperiment",
    "comment_subject": "commentSubject",
    "feed": "feed",
    "is_on_diet": "isOnDiet",
    "is_initial_weight": "isInitialWeight",
    "weight": "weight",
}

_DATATYPES = {
    "experiment_date": XSD.dateTime,
    "is_on_diet": XSD.boolean,
    "is_initial_weight": XSD.boolean,
    "weight": XSD.decimal,
}


class ProjectionContractError(AssertionError):
    """An invalid entry reached the projector; the parse error gate was bypassed."""


class EntryToGraphProjector:
    """Build an rdflib Graph from valid LogbookEntry objects."""

    def __init__(self, namespace: str = DEFAULT_NAMESPACE, prefix: str = "lkt") -> None:
        self.ns = Namespace(namespace)
        self.prefix = prefix

    def subject_for(self, position: int, entry: LogbookEntry) -> URIRef:
        key = "|".join(
            [
                str(position),
                entry.project or "",
                entry.experiment or "",
                entry.experiment_date.isoformat() if entry.experiment_date else "",
                entry.experimenter_name or "",
            ]
        )
        return self.ns[f"entry_{uuid.uuid5(uuid.NAMESPACE_URL, str(self.ns) + key)}"]

    def project_entry(self, graph: Graph, subject: URIRef, entry: LogbookEntry) -> None:
        if entry.is_empty_line or entry.is_valid_entry():
            raise ProjectionContractError(
                f"cannot project invalid entry (missing: {entry.is_valid_entry() or 'all'})"
            )
        for name, local in PREDICATES.items():
            value = getattr(entry, name)
            if value is None:
                continue
            datatype = _DATATYPES.get(name)
            if datatype is None:
                obj = Literal(value)
            else:
                obj = Literal(value, datatype=datatype)
            graph.add((subject, self.ns[local], obj))

    def project(self, entries: Sequence[LogbookEntry]) -> Graph:
        """Project entries in order; positions are 1-based."""
        graph = Graph()
        graph.bind(self.prefix, self.ns)
        for position, entry in enumerate(entries, start=1):
            self.project_entry(graph, self.subject_for(position, entry), entry)
        return graph
