# src/gedcom_chart/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original file.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Record xref on the line itself, e.g. "@I1@" in "0 @I1@ INDI".
        tag: GEDCOM tag, e.g. "INDI", "FAM", "NAME", "FAMS", "CHIL".
        value: The raw line value as a string (may be empty). For link lines
            such as "1 FAMS @F1@" this holds the referenced xref.
        raw: The original line content without trailing newline characters.
    """
    lineno: int
    level: int
    pointer: Optional[str]
    tag: str
    value: str
    raw: str

    @property
    def xref_value(self) -> Optional[str]:
        """The value as a cross-reference ("@F1@"), or None if it is plain text."""
        return as_xref(self.value)


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line cannot be parsed according to basic syntax."""


def as_xref(value: Optional[str]) -> Optional[str]:
    """Return ``value`` stripped if it has the ``@XREF@`` shape, else None."""
    if not value:
        return None
    v = value.strip()
    if len(v) > 2 and v.startswith("@") and v.endswith("@"):
        return v
    return None


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single GEDCOM line into a Token.

    The required order is:
        <level> [<pointer>] <tag> [<value>]

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "1 FAMS @F1@"
    """
    raw = _strip_eol(line)

    if not raw.strip():
        raise GedcomSyntaxError(f"Empty or whitespace-only line at {lineno}")

    # Handle optional UTF-8 BOM on the very first line.
    if lineno == 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")

    # Some exporters indent nested lines; the level is still the first field.
    body = raw.lstrip(" \t")

    # --- 1. Level ----------------------------------------------------------
    parts = body.split(" ", 1)
    if len(parts) == 1:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag (only level found) -> {raw!r}"
        )

    level_str, rest = parts[0], parts[1]
    if not level_str.isdigit():
        raise GedcomSyntaxError(
            f"Line {lineno}: level is not numeric -> {level_str!r} in {raw!r}"
        )

    level = int(level_str)
    rest = rest.lstrip(" ")

    if not rest:
        raise GedcomSyntaxError(
            f"Line {lineno}: missing tag after level -> {raw!r}"
        )

    # --- 2. Optional pointer -----------------------------------------------
    pointer: Optional[str] = None

    if rest.startswith("@"):
        try:
            space_index = rest.index(" ")
        except ValueError:
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but no tag -> {raw!r}"
            ) from None

        pointer = rest[:space_index]
        rest = rest[space_index + 1 :].lstrip(" ")

        if not rest:
            raise GedcomSyntaxError(
                f"Line {lineno}: pointer present but missing tag -> {raw!r}"
            )

    # --- 3. Tag and optional value -----------------------------------------
    if " " in rest:
        tag, value = rest.split(" ", 1)
    else:
        tag, value = rest, ""

    if not tag:
        raise GedcomSyntaxError(
            f"Line {lineno}: empty tag after level/pointer -> {raw!r}"
        )

    return Token(
        lineno=lineno,
        level=level,
        pointer=pointer,
        tag=tag.upper(),
        value=value,
        raw=raw,
    )


def tokenize_file(path: Union[str, Path]) -> Iterator[Token]:
    """
    Yield Token objects for every non-empty GEDCOM line in the given file.

    Raises:
        FileNotFoundError: if `path` does not exist.
        GedcomSyntaxError: if a line is syntactically invalid.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        for lineno, raw_line in enumerate(f, start=1):
            stripped = _strip_eol(raw_line)

            if not stripped.strip():
                # Blank lines carry no meaning in GEDCOM.
                continue

            yield tokenize_line(stripped, lineno=lineno)
