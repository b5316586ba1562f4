"""
gedcom_chart.normalization package

- name_formatter: compact display labels for chart lines
"""

from .name_formatter import HONORIFIC_PREFIXES, UNKNOWN_NAME, NameFormatter, format_label

__all__ = [
    "HONORIFIC_PREFIXES",
    "NameFormatter",
    "UNKNOWN_NAME",
    "format_label",
]
