"""
Builds the person/family graph from a stream of RecordEvents.

The ingestor holds exactly one cursor per record type ("current person",
"current family"); a field event is applied to whichever record is open.
"""

from __future__ import annotations

from typing import Iterable, Optional

from gedcom_chart.graph.entities import Family, FamilyGraph, Person
from gedcom_chart.graph.events import EventKind, RecordEvent
from gedcom_chart.logging import get_logger

log = get_logger(__name__)

# Id some exporters write for an unknown parent ("1 HUSB @I-1@").
UNKNOWN_INDIVIDUAL = "I-1"

_PERSON_FIELDS = {
    EventKind.NAME,
    EventKind.PARENT_FAMILY,
    EventKind.CHILD_FAMILY,
    EventKind.PERSON_END,
}
_FAMILY_FIELDS = {EventKind.PARENT, EventKind.CHILD, EventKind.FAMILY_END}


def clean_id(value: Optional[str]) -> Optional[str]:
    """'@I12@' -> 'I12'; the unknown-individual placeholder -> None."""
    if value is None:
        return None
    cid = value.replace("@", "").strip()
    if not cid or cid == UNKNOWN_INDIVIDUAL:
        return None
    return cid


class GraphIngestor:
    """
    Consumes RecordEvents in document order and fills a FamilyGraph.

    ``root_requested`` decides the default visibility: with no root filter
    every entity is visible, otherwise the selector turns entities on.
    """

    def __init__(self, root_requested: bool = False, graph: Optional[FamilyGraph] = None):
        self.root_requested = root_requested
        self.graph = graph if graph is not None else FamilyGraph()
        self.current_person: Optional[Person] = None
        self.current_family: Optional[Family] = None

    def feed(self, event: RecordEvent) -> None:
        kind = event.kind

        # Fields of a skipped record have nowhere to go.
        if kind in _PERSON_FIELDS and self.current_person is None:
            return
        if kind in _FAMILY_FIELDS and self.current_family is None:
            return

        if kind is EventKind.PERSON_START:
            pid = clean_id(event.value)
            if pid is None:
                log.debug("Skipping individual without usable id %r (line %s)", event.value, event.lineno)
            self.current_person = Person(id=pid) if pid else None

        elif kind is EventKind.NAME:
            # Only the first NAME counts; later ones are alternate names.
            if self.current_person.name is None:
                self.current_person.name = event.value
            else:
                log.debug(
                    "Ignoring additional name %r for %s",
                    event.value,
                    self.current_person.id,
                )

        elif kind is EventKind.PARENT_FAMILY:
            self.current_person.parent_family = clean_id(event.value)

        elif kind is EventKind.CHILD_FAMILY:
            fid = clean_id(event.value)
            if fid:
                self.current_person.child_families.append(fid)

        elif kind is EventKind.PERSON_END:
            person = self.current_person
            person.visible = not self.root_requested
            self.graph.register_person(person)
            self.current_person = None

        elif kind is EventKind.FAMILY_START:
            fid = clean_id(event.value)
            if fid is None:
                log.debug("Skipping family without usable id %r (line %s)", event.value, event.lineno)
            self.current_family = Family(id=fid) if fid else None

        elif kind is EventKind.PARENT:
            pid = clean_id(event.value)
            if pid:
                self.current_family.parents.append(pid)

        elif kind is EventKind.CHILD:
            cid = clean_id(event.value)
            if cid:
                self.current_family.children.append(cid)

        elif kind is EventKind.FAMILY_END:
            family = self.current_family
            family.visible = not self.root_requested
            self.graph.register_family(family)
            self.current_family = None

        else:  # pragma: no cover - EventKind is closed
            raise ValueError(f"Unknown event kind: {kind!r}")

    def feed_all(self, events: Iterable[RecordEvent]) -> FamilyGraph:
        for event in events:
            self.feed(event)
        log.info(
            "Found %d people and %d families",
            len(self.graph.persons),
            len(self.graph.families),
        )
        return self.graph


def ingest(events: Iterable[RecordEvent], root_requested: bool = False) -> FamilyGraph:
    """Build a FamilyGraph from ``events``."""
    return GraphIngestor(root_requested=root_requested).feed_all(events)
