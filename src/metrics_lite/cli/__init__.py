"""CLI entry point — registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="metrics-lite",
    help="metrics-lite - Code metric summaries and SARIF threshold diagnostics",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"metrics-lite {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Summarize code metrics and report threshold violations."""


# Import subcommands to register them
from .report import report as _report  # noqa: F401, E402
from .summary import summary as _summary  # noqa: F401, E402


def main() -> None:
    app()
