"""
CLI package for gedcom_chart.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_chart.cli.app import app, main

__all__ = [
    "app",
    "main",
]
