"""Report command — file and subroutine tables plus the SARIF document."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis import analyze
from ..exceptions import MetricsLiteError
from ..formatters import TextReport
from ..logging_config import setup_logging
from . import app
from ._common import fail, read_records, resolve_config


@app.command()
def report(
    records: Path = typer.Argument(
        ...,
        help="JSON file of per-file metric records",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    max_sub_lines: Optional[int] = typer.Option(
        None,
        "--max-sub-lines",
        help="Line-count threshold for subroutines (default 60)",
        min=0,
    ),
    max_sub_complexity: Optional[int] = typer.Option(
        None,
        "--max-sub-complexity",
        help="McCabe complexity threshold for subroutines (default 10)",
        min=0,
    ),
    show_only_errors: Optional[bool] = typer.Option(
        None,
        "--show-only-errors/--show-all",
        help="Only list subroutines that reach both thresholds",
    ),
    only_json: Optional[bool] = typer.Option(
        None,
        "--only-json/--with-tables",
        help="Print only the SARIF document",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
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
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
):
    """
    Print metric tables and a SARIF document for a set of records.

    A subroutine is flagged only when it reaches [bold]both[/bold] the line
    and the complexity threshold. Without --show-only-errors every
    subroutine is listed and written to the SARIF document.

    [bold cyan]Examples:[/bold cyan]

      metrics-lite report metrics.json

      metrics-lite report metrics.json --show-only-errors --only-json
    """
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    try:
        settings = resolve_config(
            config=config,
            max_sub_lines=max_sub_lines,
            max_sub_complexity=max_sub_complexity,
            show_only_errors=show_only_errors,
            only_machine_output=only_json,
        )
    except MetricsLiteError as e:
        fail(e)

    file_records = read_records(records)
    try:
        analysis = analyze(file_records)
    except MetricsLiteError as e:
        fail(e)

    logger.debug(f"Reporting on {analysis.file_count} files with {settings}")
    TextReport(config=settings).report(analysis)
