"""Shared CLI helpers."""

from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console

from ..config import ReportConfig, load_config
from ..exceptions import MetricsLiteError
from ..loader import load_records
from ..models import FileMetric

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    max_sub_lines: Optional[int] = None,
    max_sub_complexity: Optional[int] = None,
    show_only_errors: Optional[bool] = None,
    only_machine_output: Optional[bool] = None,
) -> ReportConfig:
    """Build the report config from CLI options."""
    return load_config(
        config_file=config,
        max_sub_lines=max_sub_lines,
        max_sub_complexity=max_sub_complexity,
        show_only_errors=show_only_errors,
        only_machine_output=only_machine_output,
    )


def read_records(path: Path) -> List[FileMetric]:
    """Load records or exit with code 1 on malformed input."""
    try:
        return load_records(path)
    except MetricsLiteError as e:
        fail(e)


def fail(error: Exception) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)
