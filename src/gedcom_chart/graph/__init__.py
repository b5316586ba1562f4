from __future__ import annotations

from .entities import Family, FamilyGraph, Person
from .events import EventKind, RecordEvent
from .ingestor import GraphIngestor, clean_id, ingest
from .selector import (
    SelectionMode,
    SubgraphSelector,
    normalize_root_id,
    resolve_mode,
    select,
)

__all__ = [
    "EventKind",
    "Family",
    "FamilyGraph",
    "GraphIngestor",
    "Person",
    "RecordEvent",
    "SelectionMode",
    "SubgraphSelector",
    "clean_id",
    "ingest",
    "normalize_root_id",
    "resolve_mode",
    "select",
]
