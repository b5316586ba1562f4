"""
Subgraph selection: decides which persons and families appear in the chart.

The ``visible`` flag on each entity is both the result of selection and the
traversal guard. A person is expanded only while still invisible, so every
entity is expanded at most once and cyclic input terminates.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from gedcom_chart.core.exceptions import RootNotFoundError, UsageError
from gedcom_chart.graph.entities import Family, FamilyGraph, Person
from gedcom_chart.logging import get_logger

log = get_logger(__name__)

ROOT_ID_RE = re.compile(r"^[FI]\d+$", re.IGNORECASE)


class SelectionMode(Enum):
    ANCESTORS = "ancestors"   # ancestor lines only
    CHILDREN = "children"     # plus every child of each ancestor family
    BLOOD = "blood"           # plus all descendants of each ancestor family


def resolve_mode(children: bool = False, blood: bool = False) -> SelectionMode:
    if children and blood:
        raise UsageError("Only one of --children and --blood can be specified")
    if children:
        return SelectionMode.CHILDREN
    if blood:
        return SelectionMode.BLOOD
    return SelectionMode.ANCESTORS


def normalize_root_id(root: Optional[str]) -> Optional[str]:
    """Validate a root id ('F12', 'i4') and return it uppercased."""
    if root is None:
        return None
    root_id = root.strip().upper()
    if not ROOT_ID_RE.match(root_id):
        raise UsageError(
            "--root argument must be F or I followed by digits, like F123 or I4"
        )
    return root_id


def is_family_id(root_id: str) -> bool:
    return root_id.upper().startswith("F")


class SubgraphSelector:
    def __init__(self, graph: FamilyGraph, mode: SelectionMode = SelectionMode.ANCESTORS):
        self.graph = graph
        self.mode = mode

    def mark_ancestors(self, person: Optional[Person]) -> None:
        if person is None or person.visible:
            return
        person.visible = True

        family = self.graph.get_family(person.parent_family)
        if family is None:
            return

        family.visible = True
        for pid in family.parents:
            self.mark_ancestors(self.graph.get_person(pid))

        if self.mode is SelectionMode.CHILDREN:
            for cid in family.children:
                child = self.graph.get_person(cid)
                if child is not None:
                    child.visible = True
        elif self.mode is SelectionMode.BLOOD:
            for cid in family.children:
                self.mark_children(self.graph.get_person(cid))

    def mark_children(self, person: Optional[Person]) -> None:
        if person is None or person.visible:
            return
        person.visible = True

        for fid in person.child_families:
            family = self.graph.get_family(fid)
            if family is None:
                continue
            family.visible = True
            for cid in family.children:
                self.mark_children(self.graph.get_person(cid))

    def mark_family(self, family: Family) -> None:
        family.visible = True
        for pid in family.parents:
            self.mark_ancestors(self.graph.get_person(pid))
        for cid in family.children:
            self.mark_children(self.graph.get_person(cid))

    def select(self, root_id: Optional[str]) -> None:
        """
        Mark everything related to ``root_id`` visible.

        Raises RootNotFoundError if the root is not in the graph. With no
        root, selection is skipped and visibility is left untouched.
        """
        if root_id is None:
            return

        if is_family_id(root_id):
            family = self.graph.get_family(root_id)
            if family is None:
                raise RootNotFoundError(root_id, "family")
            self.mark_family(family)
        else:
            person = self.graph.get_person(root_id)
            if person is None:
                raise RootNotFoundError(root_id, "person")
            self.mark_ancestors(person)
            # The root was marked by the ancestor pass; clear it so the
            # descendant pass expands it instead of stopping at the guard.
            person.visible = False
            self.mark_children(person)

        log.info(
            "Selected %d people and %d families for root %s (%s)",
            len(self.graph.visible_persons()),
            len(self.graph.visible_families()),
            root_id,
            self.mode.value,
        )


def select(graph: FamilyGraph, root_id: Optional[str], mode: SelectionMode = SelectionMode.ANCESTORS) -> FamilyGraph:
    SubgraphSelector(graph, mode).select(root_id)
    return graph
