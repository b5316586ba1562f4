"""
CLI command modules for gedcom_chart.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_chart.cli.commands.chart import chart_command
from gedcom_chart.cli.commands.stats import stats_command

__all__ = [
    "chart_command",
    "stats_command",
]
