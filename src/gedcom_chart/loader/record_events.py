# src/gedcom_chart/loader/record_events.py

"""
Turns a GEDCOMTree into the RecordEvent stream the graph ingestor consumes.

Only the fields a descendant chart needs are emitted:

    INDI  -> PERSON_START, NAME, PARENT_FAMILY (FAMC), CHILD_FAMILY (FAMS), PERSON_END
    FAM   -> FAMILY_START, PARENT (HUSB/WIFE), CHILD (CHIL), FAMILY_END

Everything else in the file is skipped.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from gedcom_chart.graph.events import EventKind, RecordEvent

from .segmenter import GEDCOMNode

_PERSON_FIELDS = {
    "NAME": EventKind.NAME,
    "FAMC": EventKind.PARENT_FAMILY,
    "FAMS": EventKind.CHILD_FAMILY,
}

_FAMILY_FIELDS = {
    "HUSB": EventKind.PARENT,
    "WIFE": EventKind.PARENT,
    "CHIL": EventKind.CHILD,
}


def _field_events(record: GEDCOMNode, fields) -> Iterator[RecordEvent]:
    for child in record.children:
        kind = fields.get(child.tag)
        if kind is None:
            continue
        if kind is EventKind.NAME:
            value = child.value
        else:
            # Link lines carry the xref as their value ("1 FAMS @F1@").
            value = child.xref_value or child.pointer
            if not value:
                continue
        yield RecordEvent(kind, value, child.lineno)


def record_events(records: Iterable[GEDCOMNode]) -> Iterator[RecordEvent]:
    """Yield events for every INDI and FAM record, in document order."""
    for rec in records:
        if rec.tag == "INDI":
            yield RecordEvent(EventKind.PERSON_START, rec.pointer, rec.lineno)
            yield from _field_events(rec, _PERSON_FIELDS)
            yield RecordEvent(EventKind.PERSON_END, rec.pointer, rec.lineno)
        elif rec.tag == "FAM":
            yield RecordEvent(EventKind.FAMILY_START, rec.pointer, rec.lineno)
            yield from _field_events(rec, _FAMILY_FIELDS)
            yield RecordEvent(EventKind.FAMILY_END, rec.pointer, rec.lineno)
