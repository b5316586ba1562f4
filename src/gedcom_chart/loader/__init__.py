# src/gedcom_chart/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

    from gedcom_chart.loader import load_tree, record_events

    tree = load_tree("family.ged")
    for event in record_events(tree.records):
        ...
"""

from __future__ import annotations

from .record_events import record_events
from .segmenter import GEDCOMNode, GEDCOMStructureError, segment_records
from .tokenizer import GedcomSyntaxError, Token, tokenize_file, tokenize_line
from .tree_builder import GEDCOMTree, build_tree, load_tree
from .value_reconstructor import reconstruct_values

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "GEDCOMNode",
    "GEDCOMStructureError",
    "GEDCOMTree",
    "tokenize_file",
    "tokenize_line",
    "segment_records",
    "build_tree",
    "load_tree",
    "reconstruct_values",
    "record_events",
]
