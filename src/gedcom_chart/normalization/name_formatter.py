"""
name_formatter.py
Compact display labels for GEDCOM names.

    "John Robert /Smith/"       -> "John R. Smith"
    "John Robert Paul /Smith/"  -> "John R.P. Smith"
    "Ompu Martua /Siboro/"      -> "Ompu Martua Siboro"
    "(unknown) /Siboro/"        -> "(....) Siboro"

Rules:
- Slashes delimit the surname and are dropped.
- A slash segment written in brackets means the name is unknown.
- With more than two tokens, interior tokens become initials, except the
  second token when the first is a title/clan prefix such as "Ompu".
- Consecutive initials are written without a space ("R.P.").
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

SURNAME_DELIMITER = "/"
UNKNOWN_NAME = "(....)"

# Batak titles and kinship prefixes that belong to the following name.
HONORIFIC_PREFIXES = frozenset(
    {"Ompu", "O.", "Amani", "A.", "Aman", "Datu", "Nai", "Apa", "Pu", "Na", "Boru", "Raja"}
)

_UNKNOWN_SEGMENT_RE = re.compile(r"^\(.+\)")


def _replace_unknown_segments(raw: str) -> str:
    segments = raw.split(SURNAME_DELIMITER)
    return "".join(
        UNKNOWN_NAME + " " if _UNKNOWN_SEGMENT_RE.match(seg) else seg
        for seg in segments
    )


def _is_initial(token: str) -> bool:
    return token.endswith(".")


def _join_tokens(tokens: List[str]) -> str:
    out = []
    for i, tok in enumerate(tokens):
        out.append(tok)
        nxt = tokens[i + 1] if i + 1 < len(tokens) else None
        if nxt is not None and not (_is_initial(tok) and _is_initial(nxt)):
            out.append(" ")
    return "".join(out)


class NameFormatter:
    def __init__(self, use_initials: bool = True, honorifics: Optional[Iterable[str]] = None):
        self.use_initials = use_initials
        self.honorifics = frozenset(honorifics) if honorifics is not None else HONORIFIC_PREFIXES

    def _abbreviate(self, tokens: List[str]) -> List[str]:
        if len(tokens) <= 2:
            return list(tokens)

        keep_second = tokens[0].strip() in self.honorifics
        out = list(tokens)
        for i in range(1, len(tokens) - 1):
            if i == 1 and keep_second:
                continue
            out[i] = tokens[i][:1].upper() + "."
        return out

    def format(self, raw_name: Optional[str]) -> str:
        if raw_name is None:
            return UNKNOWN_NAME

        tokens = _replace_unknown_segments(raw_name).split()
        if self.use_initials:
            tokens = self._abbreviate(tokens)
        return _join_tokens(tokens)

    __call__ = format


def format_label(raw_name: Optional[str], use_initials: bool = True) -> str:
    """Module-level shortcut using the default honorific list."""
    return NameFormatter(use_initials=use_initials).format(raw_name)
