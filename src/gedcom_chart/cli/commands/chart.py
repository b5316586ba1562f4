from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_chart.cli.utils import (
    console,
    enable_verbose,
    fail,
    mode_or_exit,
    root_callback,
    write_lines,
)
from gedcom_chart.config import get_config
from gedcom_chart.core.context import ChartRequest
from gedcom_chart.core.exceptions import ChartError
from gedcom_chart.core.pipeline import ChartPipeline

_cfg = get_config()


def chart_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    root: Optional[str] = typer.Option(
        None,
        "--root",
        "-r",
        callback=root_callback,
        help="Root family or individual (Fxxx|Ixxx); prunes away unrelated people",
    ),
    children: bool = typer.Option(
        False,
        "--children",
        "-c",
        help="Show children in every related family if root is set",
    ),
    blood: bool = typer.Option(
        False,
        "--blood",
        "-b",
        help="Show only blood relatives of root",
    ),
    initials: bool = typer.Option(
        _cfg.initials,
        "--initials/--no-initials",
        "-i/-I",
        help="Abbreviate middle names to initials",
    ),
    separators: bool = typer.Option(
        _cfg.family_separator,
        "--separators/--no-separators",
        help="Mark the end of each family with a separator line",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write the chart to file instead of stdout",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log progress and pipeline details to stderr",
    ),
):
    """
    Print a descendant chart for a GEDCOM file.
    """
    mode = mode_or_exit(children, blood)

    request = ChartRequest(
        input_path=str(gedcom),
        root_id=root,
        mode=mode,
        use_initials=initials,
        family_separator=separators,
    )

    if verbose:
        enable_verbose()
        console.log(f"Charting {gedcom} (root={root or 'all'}, mode={mode.value})")

    try:
        result = ChartPipeline(request).run()
    except ChartError as exc:
        fail(exc)

    write_lines(result.lines, out=out)

    if verbose:
        stats = result.stats
        console.log(
            f"Found {stats['people']} people and {stats['families']} families; "
            f"wrote {stats['lines']} lines"
        )
