from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, NoReturn, Optional

import typer
from rich.console import Console

from gedcom_chart.core.exceptions import ChartError, UsageError
from gedcom_chart.graph.selector import SelectionMode, normalize_root_id, resolve_mode
from gedcom_chart.logging import set_console_level

# Diagnostics go to stderr; stdout is reserved for the chart itself.
console = Console(stderr=True)

USAGE_EXIT = 2
FAILURE_EXIT = 1


def root_callback(value: Optional[str]) -> Optional[str]:
    """Typer callback: validate and uppercase --root."""
    try:
        return normalize_root_id(value)
    except UsageError as exc:
        raise typer.BadParameter(str(exc)) from exc


def enable_verbose() -> None:
    """Show INFO log records on stderr for this run."""
    set_console_level(logging.INFO)


def mode_or_exit(children: bool, blood: bool) -> SelectionMode:
    try:
        return resolve_mode(children=children, blood=blood)
    except UsageError as exc:
        fail(exc)


def fail(exc: ChartError) -> NoReturn:
    """Report a chart error and exit with the matching status."""
    console.print(f"[red]{exc}[/red]")
    code = USAGE_EXIT if isinstance(exc, UsageError) else FAILURE_EXIT
    raise typer.Exit(code=code)


def write_lines(lines: Iterable[str], *, out: Optional[Path]) -> None:
    """
    Write chart lines to stdout or a file.
    """
    if out:
        text = "".join(f"{line}\n" for line in lines)
        out.write_text(text, encoding="utf-8")
    else:
        for line in lines:
            print(line)
