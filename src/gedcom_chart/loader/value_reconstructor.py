# src/gedcom_chart/loader/value_reconstructor.py

"""
Folds GEDCOM CONC / CONT continuation lines into their parent value.

    CONC: append the text directly (no newline).
    CONT: append a newline, then the text.

A long NAME split by an exporter ("1 NAME Ompu Raja /Sibo/" + "2 CONC ro")
therefore reaches the ingestor as a single value.
"""

from __future__ import annotations

from typing import List

from .segmenter import GEDCOMNode


def _reconstruct_node(node: GEDCOMNode) -> None:
    kept: List[GEDCOMNode] = []
    value = node.value or ""

    for child in node.children:
        tag = (child.tag or "").upper()

        if tag == "CONC":
            value += child.value or ""
        elif tag == "CONT":
            value += "\n" + (child.value or "")
        else:
            _reconstruct_node(child)
            kept.append(child)

    node.value = value
    node.children = kept


def reconstruct_values(records: List[GEDCOMNode]) -> List[GEDCOMNode]:
    """
    Reconstruct values in place for every record and its descendants.

    Returns the same list; only CONC/CONT nodes are removed.
    """
    for rec in records:
        _reconstruct_node(rec)

    return records
