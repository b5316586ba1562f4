"""
Typed record events consumed by the graph ingestor.

A record producer (see ``gedcom_chart.loader.record_events``) emits these in
document order; each INDI/FAM record is bracketed by a START and an END event
with the field events in between.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EventKind(Enum):
    PERSON_START = "person_start"
    NAME = "name"
    PARENT_FAMILY = "parent_family"   # INDI.FAMC
    CHILD_FAMILY = "child_family"     # INDI.FAMS
    PERSON_END = "person_end"

    FAMILY_START = "family_start"
    PARENT = "parent"                 # FAM.HUSB / FAM.WIFE
    CHILD = "child"                   # FAM.CHIL
    FAMILY_END = "family_end"


@dataclass(frozen=True, slots=True)
class RecordEvent:
    kind: EventKind
    value: Optional[str] = None
    lineno: Optional[int] = None
