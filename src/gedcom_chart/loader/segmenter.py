# src/gedcom_chart/loader/segmenter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .tokenizer import Token, as_xref


@dataclass
class GEDCOMNode:
    """
    A hierarchical GEDCOM node produced from the flat token stream.

    Attributes:
        level: GEDCOM level number (0 for records, >0 for substructures).
        tag: The GEDCOM tag (INDI, FAM, NAME, FAMC, CHIL, ...).
        value: The raw tag value (string).
        pointer: Optional @XREF@ pointer on level-0 records.
        lineno: Line number in original file (for debugging).
        children: Nested nodes in file order.
    """

    level: int
    tag: str
    value: str = ""
    pointer: Optional[str] = None
    lineno: int = 0
    children: List["GEDCOMNode"] = field(default_factory=list)

    def add_child(self, child: "GEDCOMNode") -> None:
        self.children.append(child)

    @property
    def xref_value(self) -> Optional[str]:
        return as_xref(self.value)

    def __repr__(self) -> str:
        ptr = f" {self.pointer}" if self.pointer else ""
        return f"<GEDCOMNode {self.level}{ptr} {self.tag}: {self.value!r}>"


class GEDCOMStructureError(Exception):
    """Raised when hierarchical structure rules are violated."""


def segment_records(tokens: List[Token]) -> List[GEDCOMNode]:
    """
    Convert a flat list of Tokens into level-0 record nodes with nested children.

    Rules:
        - Level 0 tokens start a new record.
        - A level N line belongs to the nearest previous line at level N-1.
        - Levels may not jump by more than +1.
    """
    records: List[GEDCOMNode] = []
    stack: List[GEDCOMNode] = []  # stack[level] = open node at that level

    for tok in tokens:
        node = GEDCOMNode(
            level=tok.level,
            tag=tok.tag,
            value=tok.value,
            pointer=tok.pointer,
            lineno=tok.lineno,
        )

        if tok.level == 0:
            records.append(node)
            stack = [node]
            continue

        if not stack:
            raise GEDCOMStructureError(
                f"Line {tok.lineno}: level {tok.level} line before any record"
            )

        if tok.level > len(stack):
            raise GEDCOMStructureError(
                f"Line {tok.lineno}: Level jumped from {len(stack) - 1} to {tok.level} without intermediate parent"
            )

        del stack[tok.level:]
        stack[-1].add_child(node)
        stack.append(node)

    return records
