# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from gedcom_chart.loader import GedcomSyntaxError, tokenize_file, tokenize_line
from gedcom_chart.utils import mock_file_path


def test_tokenize_line_simple_head() -> None:
    token = tokenize_line("0 HEAD", lineno=1)
    assert token.lineno == 1
    assert token.level == 0
    assert token.pointer is None
    assert token.tag == "HEAD"
    assert token.value == ""


def test_tokenize_line_with_pointer_and_tag_only() -> None:
    token = tokenize_line("0 @I1@ INDI", lineno=1)
    assert token.level == 0
    assert token.pointer == "@I1@"
    assert token.tag == "INDI"
    assert token.value == ""


def test_tokenize_line_name_value_keeps_slashes() -> None:
    line = "1 NAME John Robert /Smith/"
    token = tokenize_line(line, lineno=10)
    assert token.tag == "NAME"
    assert token.value == "John Robert /Smith/"
    assert token.xref_value is None
    assert token.raw == line


def test_tokenize_line_link_value_is_xref() -> None:
    token = tokenize_line("1 FAMS @F1@", lineno=3)
    assert token.pointer is None
    assert token.value == "@F1@"
    assert token.xref_value == "@F1@"


def test_tokenize_line_with_bom_on_first_line() -> None:
    token = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert token.level == 0
    assert token.tag == "HEAD"


def test_tokenize_line_lowercase_tag_is_uppercased() -> None:
    assert tokenize_line("1 chil @I3@", lineno=2).tag == "CHIL"


def test_tokenize_line_invalid_level_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("X HEAD", lineno=1)


def test_tokenize_line_missing_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 ", lineno=1)


def test_tokenize_line_pointer_without_tag_raises() -> None:
    with pytest.raises(GedcomSyntaxError):
        tokenize_line("0 @I1@", lineno=1)


def test_tokenize_file_reads_mock_file() -> None:
    tokens = list(tokenize_file(mock_file_path("siboro.ged")))

    assert tokens, "Expected at least one token from mock GEDCOM file"
    assert tokens[0].tag == "HEAD"
    assert tokens[-1].tag == "TRLR"


def test_tokenize_file_missing_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        list(tokenize_file(tmp_path / "nope.ged"))


def test_tokenize_file_skips_blank_lines(tmp_path) -> None:
    path = tmp_path / "blank.ged"
    path.write_text("0 HEAD\n\n   \n0 TRLR\n", encoding="utf-8")

    tokens = list(tokenize_file(path))
    assert [t.tag for t in tokens] == ["HEAD", "TRLR"]
    assert tokens[1].lineno == 4
