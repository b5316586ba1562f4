from __future__ import annotations

import typer

from gedcom_chart.cli.commands.chart import chart_command
from gedcom_chart.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-chart",
    help="Convert a GEDCOM file into a text-based descendant chart",
    add_completion=False,
)

app.command("chart")(chart_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
