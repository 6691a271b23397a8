"""Summary command — corpus totals and subroutine distribution statistics."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..analysis import analyze
from ..exceptions import MetricsLiteError
from ..logging_config import setup_logging
from ..math import SummaryStatistics
from . import app
from ._common import console, fail, read_records


def _fmt(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"{value:.2f}"


def _stats_row(label: str, stats: SummaryStatistics) -> list[str]:
    return [
        label,
        str(stats.count),
        _fmt(stats.min),
        _fmt(stats.max),
        _fmt(stats.mean),
        _fmt(stats.median),
        _fmt(stats.standard_deviation),
    ]


@app.command()
def summary(
    records: Path = typer.Argument(
        ...,
        help="JSON file of per-file metric records",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
):
    """
    Show corpus totals and subroutine length/complexity statistics.

    [bold cyan]Examples:[/bold cyan]

      metrics-lite summary metrics.json
    """
    setup_logging(verbose=verbose)

    file_records = read_records(records)
    try:
        analysis = analyze(file_records)
    except MetricsLiteError as e:
        fail(e)

    console.print(
        f"[bold]Files:[/bold] {analysis.file_count}   "
        f"[bold]Lines:[/bold] {analysis.lines}   "
        f"[bold]Packages:[/bold] {analysis.package_count}   "
        f"[bold]Subs:[/bold] {analysis.sub_count}   "
        f"[bold]Main lines:[/bold] {analysis.main_stats.lines}"
    )

    table = Table(title="Subroutine Statistics", show_lines=False, pad_edge=True)
    table.add_column("Metric", style="bold")
    for col in ("Count", "Min", "Max", "Mean", "Median", "Std Dev"):
        table.add_column(col, justify="right")

    stats = analysis.summary_stats
    table.add_row(*_stats_row("Length", stats.sub_length))
    table.add_row(*_stats_row("Complexity", stats.sub_complexity))
    console.print(table)
