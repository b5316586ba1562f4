from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass(slots=True)
class Person:
    """
    One INDI record.

    ``parent_family`` is the family this person is a child of (FAMC).
    ``child_families`` are the families this person is a parent in (FAMS),
    one per marriage, in record order.
    """
    id: str
    name: Optional[str] = None
    parent_family: Optional[str] = None
    child_families: List[str] = field(default_factory=list)
    visible: bool = False


@dataclass(slots=True)
class Family:
    """
    One FAM record.

    ``parents`` holds at most two person ids; unknown parents are never stored.
    ``children`` keeps record order, which is the chart's sibling order.
    """
    id: str
    parents: List[str] = field(default_factory=list)
    children: List[str] = field(default_factory=list)
    visible: bool = False


@dataclass(slots=True)
class FamilyGraph:
    """
    In-memory person/family store keyed by record id.

    Ids that point nowhere are treated as absent links: every lookup returns
    None instead of raising.
    """
    persons: Dict[str, Person] = field(default_factory=dict)
    families: Dict[str, Family] = field(default_factory=dict)

    def register_person(self, person: Person) -> None:
        self.persons[person.id] = person

    def register_family(self, family: Family) -> None:
        self.families[family.id] = family

    def get_person(self, person_id: Optional[str]) -> Optional[Person]:
        if person_id is None:
            return None
        return self.persons.get(person_id)

    def get_family(self, family_id: Optional[str]) -> Optional[Family]:
        if family_id is None:
            return None
        return self.families.get(family_id)

    # ------------------------------------------------------------------ #
    # Visibility views used by the renderer
    # ------------------------------------------------------------------ #

    def visible_persons(self) -> List[Person]:
        return [p for p in self.persons.values() if p.visible]

    def visible_families(self) -> List[Family]:
        return [f for f in self.families.values() if f.visible]

    def visible_children(self, family: Family) -> List[str]:
        """Child ids of ``family`` that exist and are visible, in birth order."""
        out: List[str] = []
        for cid in family.children:
            child = self.persons.get(cid)
            if child is not None and child.visible:
                out.append(cid)
        return out

    def visible_child_families(self, person: Person) -> List[Family]:
        """Families ``person`` is a parent in that exist and are visible."""
        out: List[Family] = []
        for fid in person.child_families:
            fam = self.families.get(fid)
            if fam is not None and fam.visible:
                out.append(fam)
        return out

    def spouses_of(self, person_id: str, family: Family) -> Iterator[Person]:
        """Yield the other recorded parent(s) of ``family``."""
        for pid in family.parents:
            if pid == person_id:
                continue
            spouse = self.persons.get(pid)
            if spouse is not None:
                yield spouse
