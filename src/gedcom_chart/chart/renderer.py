"""
Descendant chart renderer.

Walks the visible part of a FamilyGraph depth-first from a root and writes
one line per person, spouse and (optionally) family separator. Without
separators:

    Raja Siboro (1)
    |   + Boru Sinaga
    |-Ompu Martua Siboro (2)
    | |  + Nai Hutabarat
    | |-Martua Siboro (3)
    |-Tiur Siboro (2)

Lines go to a sink callable; ``render_chart`` collects them into a list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Set

from gedcom_chart.core.exceptions import RootNotFoundError
from gedcom_chart.graph.entities import Family, FamilyGraph
from gedcom_chart.graph.selector import is_family_id
from gedcom_chart.logging import get_logger
from gedcom_chart.normalization.name_formatter import NameFormatter

log = get_logger(__name__)

Sink = Callable[[str], None]

INDENT_BAR = "| "
INDENT_BLANK = "  "


@dataclass
class ChartState:
    """
    Mutable state threaded through one chart's recursion.

    ``separators`` counts separator lines written since the last name line;
    a separator is only written while it is 0, so two never follow each other.
    ``path`` holds the person ids on the current descent.
    """
    indent: str = ""
    generation: int = 1
    separators: int = 0
    path: Set[str] = field(default_factory=set)

    def push_indent(self, last_branch: bool) -> None:
        self.indent += INDENT_BLANK if last_branch else INDENT_BAR

    def pop_indent(self) -> None:
        self.indent = self.indent[:-2]


class DescendantChartRenderer:
    def __init__(
        self,
        graph: FamilyGraph,
        formatter: Optional[NameFormatter] = None,
        sink: Optional[Sink] = None,
        family_separator: bool = True,
    ):
        self.graph = graph
        self.formatter = formatter if formatter is not None else NameFormatter()
        self.lines: List[str] = []
        self.sink = sink if sink is not None else self.lines.append
        self.family_separator = family_separator

    def emit(self, line: str) -> None:
        self.sink(line)

    # ------------------------------------------------------------------ #
    # Roots
    # ------------------------------------------------------------------ #

    def chart_roots(self, root_id: Optional[str]) -> List[str]:
        """
        Person ids drawn at generation 1.

        - person root: that person
        - family root: its visible children, or its first parent if it has none
        - no root: every visible person without a parent family who is neither
          the second parent of some family nor married to someone who has one
        """
        if root_id is None:
            return self._default_roots()

        if is_family_id(root_id):
            family = self.graph.get_family(root_id)
            if family is None:
                raise RootNotFoundError(root_id, "family")
            children = self.graph.visible_children(family)
            if children:
                return children
            return [pid for pid in family.parents[:1] if self.graph.get_person(pid)]

        if self.graph.get_person(root_id) is None:
            raise RootNotFoundError(root_id, "person")
        return [root_id]

    def _has_parent_family(self, person_id: str) -> bool:
        person = self.graph.get_person(person_id)
        return person is not None and self.graph.get_family(person.parent_family) is not None

    def _default_roots(self) -> List[str]:
        # Spouses are drawn under the partner they married, never on their own.
        married_in: Set[str] = set()
        for family in self.graph.families.values():
            married_in.update(family.parents[1:])
            if any(self._has_parent_family(pid) for pid in family.parents):
                married_in.update(
                    pid for pid in family.parents if not self._has_parent_family(pid)
                )

        return [
            p.id
            for p in self.graph.persons.values()
            if p.visible
            and not self._has_parent_family(p.id)
            and p.id not in married_in
        ]

    def render(self, root_id: Optional[str] = None) -> None:
        roots = self.chart_roots(root_id)
        log.debug("Rendering %d chart root(s) for %s", len(roots), root_id or "all")
        for pid in roots:
            self.render_person(ChartState(), pid, 1, 1, 1, 0, 1)

    # ------------------------------------------------------------------ #
    # Recursion
    # ------------------------------------------------------------------ #

    def render_person(
        self,
        state: ChartState,
        person_id: str,
        child_no: int,
        parent_child_no: int,
        parent_sibling_count: Optional[int],
        parent_family_count: int,
        parent_family_no: int,
    ) -> None:
        """
        Write ``person_id`` and everything below it.

        child_no: 1-based position among this person's siblings
        parent_child_no: the parent's position among its own siblings
        parent_sibling_count: number of siblings of the parent (itself included)
        parent_family_count: number of families the parent has
        parent_family_no: 1-based position of this person's family among those
        """
        person = self.graph.get_person(person_id)
        if person is None or not person.visible:
            log.debug("Skipping absent or hidden person %s", person_id)
            return
        if person_id in state.path:
            log.warning("Cycle in family links at %s; not descending again", person_id)
            return
        state.path.add(person_id)

        parent_family = self.graph.get_family(person.parent_family)
        siblings = (
            len(self.graph.visible_children(parent_family))
            if parent_family is not None
            else None
        )
        last_sibling = siblings is not None and child_no == siblings
        last_parent_family = parent_family_no == parent_family_count

        label = self.formatter(person.name)
        if state.generation == 1:
            self.emit(f"{label} ({state.generation})")
        else:
            self.emit(f"{state.indent}|-{label} ({state.generation})")
        state.separators = 0

        families = self.graph.visible_child_families(person)
        family_count = len(families)

        for i, family in enumerate(families, start=1):
            state.separators = 0
            children = self.graph.visible_children(family)
            last_family = i == family_count

            self._write_spouses(
                state,
                person_id,
                family,
                has_children=bool(children),
                last_sibling=last_sibling,
                last_parent_family=last_parent_family,
            )

            if children:
                indented = state.generation > 1
                if indented:
                    state.push_indent(last_sibling and last_family and last_parent_family)
                state.generation += 1

                for j, child_id in enumerate(children, start=1):
                    self.render_person(state, child_id, j, child_no, siblings, family_count, i)

                if self.family_separator and state.separators == 0:
                    # more families of this person follow: keep the bar going
                    self.emit(state.indent if last_family else state.indent + "|")
                    state.separators += 1

                state.generation -= 1
                if indented:
                    state.pop_indent()

            elif self.family_separator and state.separators == 0:
                if family_count == 1:
                    self.emit(state.indent if last_sibling else state.indent + "|")
                elif not last_sibling:
                    self.emit(state.indent + "| |")
                state.separators += 1

        state.path.discard(person_id)

    def _write_spouses(
        self,
        state: ChartState,
        person_id: str,
        family: Family,
        *,
        has_children: bool,
        last_sibling: bool,
        last_parent_family: bool,
    ) -> None:
        for spouse in self.graph.spouses_of(person_id, family):
            if state.generation == 1:
                prefix = "|   + "
            elif has_children:
                prefix = "  |  + " if last_sibling and last_parent_family else "| |  + "
            else:
                prefix = "     + " if last_sibling else "| |  + "
            self.emit(f"{state.indent}{prefix}{self.formatter(spouse.name)}")


def render_chart(
    graph: FamilyGraph,
    root_id: Optional[str] = None,
    formatter: Optional[NameFormatter] = None,
    family_separator: bool = True,
) -> List[str]:
    """Render into a list of lines."""
    renderer = DescendantChartRenderer(
        graph, formatter=formatter, family_separator=family_separator
    )
    renderer.render(root_id)
    return renderer.lines
