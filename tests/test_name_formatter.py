from __future__ import annotations

import pytest

from gedcom_chart.normalization import UNKNOWN_NAME, NameFormatter, format_label


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("John /Smith/", "John Smith"),
        ("John Robert /Smith/", "John R. Smith"),
        ("John Robert Smith", "John R. Smith"),
        ("John Robert Paul /Smith/", "John R.P. Smith"),
        ("john robert paul smith", "john R.P. smith"),
        ("Madonna", "Madonna"),
        ("", ""),
    ],
)
def test_middle_names_become_initials(raw, expected):
    assert format_label(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Ompu Martua Siboro", "Ompu Martua Siboro"),
        ("Ompu Martua /Siboro/", "Ompu Martua Siboro"),
        ("Ompu Martua Raja /Siboro/", "Ompu Martua R. Siboro"),
        ("Datu Bolon /Siboro/", "Datu Bolon Siboro"),
        ("O. Martua /Siboro/", "O. Martua Siboro"),
        ("Nai Tiur Boru /Sinaga/", "Nai Tiur B. Sinaga"),
    ],
)
def test_honorific_prefix_keeps_second_name(raw, expected):
    assert format_label(raw) == expected


def test_honorific_match_is_case_sensitive():
    assert format_label("ompu Martua Siboro") == "ompu M. Siboro"


def test_unknown_name_in_brackets():
    assert format_label("(unknown) /Siboro/") == "(....) Siboro"
    assert format_label("Tiur /(maiden name unknown)/") == "Tiur (....)"


def test_none_name_gets_placeholder():
    assert format_label(None) == UNKNOWN_NAME


def test_formatting_is_stable_on_compacted_names():
    for raw in ("John Smith", "Jane A. Doe", "John R.P. Smith", "Ompu Martua Siboro"):
        once = format_label(raw)
        assert format_label(once) == once


def test_initials_can_be_turned_off():
    formatter = NameFormatter(use_initials=False)

    assert formatter("John Robert Paul /Smith/") == "John Robert Paul Smith"
    assert formatter("(unknown) /Siboro/") == "(....) Siboro"


def test_custom_honorifics():
    formatter = NameFormatter(honorifics=["Sir"])

    assert formatter("Sir Walter Scott") == "Sir Walter Scott"
    assert formatter("Ompu Martua Siboro") == "Ompu M. Siboro"


def test_input_is_not_mutated():
    raw = "John Robert /Smith/"
    format_label(raw)
    assert raw == "John Robert /Smith/"
