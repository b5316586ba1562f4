from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gedcom_chart.cli.utils import console as err_console
from gedcom_chart.cli.utils import enable_verbose, fail, mode_or_exit, root_callback
from gedcom_chart.core.context import ChartRequest
from gedcom_chart.core.exceptions import ChartError
from gedcom_chart.core.pipeline import ChartPipeline

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    root: Optional[str] = typer.Option(
        None,
        "--root",
        "-r",
        callback=root_callback,
        help="Root family or individual (Fxxx|Ixxx)",
    ),
    children: bool = typer.Option(False, "--children", "-c", help="Select children of related families"),
    blood: bool = typer.Option(False, "--blood", "-b", help="Select blood relatives of root"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log progress and pipeline details to stderr",
    ),
):
    """
    Show how many people and families a GEDCOM file holds and how many a root selects.
    """
    mode = mode_or_exit(children, blood)
    request = ChartRequest(input_path=str(gedcom), root_id=root, mode=mode)

    if verbose:
        enable_verbose()
        err_console.log(f"Loading {gedcom}")

    try:
        result = ChartPipeline(request).run(render=False)
    except ChartError as exc:
        fail(exc)

    stats = result.stats
    title = f"GEDCOM Statistics (root {root}, {mode.value})" if root else "GEDCOM Statistics"
    table = Table(title=title)
    table.add_column("Entity", style="bold")
    table.add_column("Total", justify="right")
    table.add_column("Selected", justify="right")

    table.add_row("People", str(stats["people"]), str(stats["visible_people"]))
    table.add_row("Families", str(stats["families"]), str(stats["visible_families"]))

    console.print(table)
