# src/gedcom_chart/loader/tree_builder.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from .segmenter import GEDCOMNode, segment_records
from .tokenizer import Token, tokenize_file
from .value_reconstructor import reconstruct_values


@dataclass
class GEDCOMTree:
    """
    Level-0 records of one GEDCOM file.

    The chart pipeline only reads INDI and FAM records, but every record is
    kept so the loader stays a faithful picture of the file.
    """

    records: List[GEDCOMNode]

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<GEDCOMTree records={len(self.records)}>"


def build_tree(tokens: Iterable[Token]) -> GEDCOMTree:
    """
    tokens -> GEDCOMTree(records=[GEDCOMNode, ...])

    CONC/CONT continuation lines are folded into their parent values.
    """
    records = segment_records(list(tokens))
    reconstruct_values(records)
    return GEDCOMTree(records=records)


def load_tree(path: Union[str, Path]) -> GEDCOMTree:
    """Tokenize and build the tree for the GEDCOM file at ``path``."""
    return build_tree(tokenize_file(path))
