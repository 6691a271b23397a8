"""Tabular text report for file and subroutine metrics."""

import json
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Sequence, TextIO, Tuple, Union

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..analysis import CorpusAnalysis
from ..config import DEFAULT_CONFIG, ReportConfig
from ..logging_config import get_logger
from ..models import SubroutineMetric
from .sarif_formatter import SarifEmitter

logger = get_logger(__name__)

FILE_COLUMNS = ("path", "loc", "subs", "packages")
SUB_COLUMNS = ("method", "loc", "line_number", "mccabe_complexity")

FILE_HEADER = (
    "#======================================#",
    "#           File Metrics               #",
    "#======================================#",
)
SUB_HEADER = (
    "#======================================#",
    "#         Subroutine Metrics           #",
    "#======================================#",
)

# Tables are never expanded, so this only bounds the longest row
DEFAULT_WIDTH = 1_000_000

SubStats = Union[
    Mapping[str, Sequence[SubroutineMetric]],
    Iterable[Tuple[str, Sequence[SubroutineMetric]]],
]


class TextReport:
    """Render metric tables and the SARIF document for one analysis.

    Threshold policy: a subroutine is OK when ``lines < max_sub_lines`` OR
    ``mccabe_complexity < max_sub_complexity``. It is reported as a
    violation only when it reaches BOTH thresholds.

    Forwarding policy: every row that survives the ``show_only_errors``
    filter is recorded in the SARIF document at level "error". With the
    filter off that means every subroutine, passing or not.
    """

    def __init__(
        self,
        config: ReportConfig = DEFAULT_CONFIG,
        file: Optional[TextIO] = None,
        emitter: Optional[SarifEmitter] = None,
        width: int = DEFAULT_WIDTH,
    ):
        self.config = config
        self.emitter = emitter if emitter is not None else SarifEmitter()
        self.console = Console(
            file=file,
            width=width,
            color_system=None,
            highlight=False,
            markup=False,
            emoji=False,
        )

    def report(self, analysis: CorpusAnalysis) -> None:
        """Print the file table, the subroutine tables and the SARIF document."""
        self.emitter.begin_document()
        self.render_file_summary(analysis)
        self.render_subroutine_section(analysis.sub_stats)
        self.write_document()

    # -- file metrics --

    def render_file_summary(self, analysis: CorpusAnalysis) -> None:
        self._print_header(FILE_HEADER)

        rows = [
            {
                "path": stat.path,
                "loc": stat.main_stats.lines,
                "subs": stat.sub_count,
                "packages": stat.package_count,
            }
            for stat in analysis.file_stats
        ]
        if rows and not self.config.only_machine_output:
            self.console.print(self._create_table(FILE_COLUMNS, rows))

    # -- subroutine metrics --

    def render_subroutine_section(self, sub_stats: SubStats) -> None:
        """Print one table per file and forward the same rows to the emitter.

        Args:
            sub_stats: ``(path, subs)`` pairs in file order, or a mapping of
                path to subs
        """
        self._print_header(SUB_HEADER)

        items = sub_stats.items() if isinstance(sub_stats, Mapping) else sub_stats
        for path, subs in items:
            table = self._create_table_for_subs(subs)
            if table is not None:
                self._print_table(path, table)

    def is_sub_metric_ok(self, sub: SubroutineMetric) -> bool:
        """False only when both the line and complexity thresholds are reached."""
        if sub.lines < self.config.max_sub_lines:
            return True
        if sub.mccabe_complexity < self.config.max_sub_complexity:
            return True
        return False

    def _create_table_for_subs(self, subs: Sequence[SubroutineMetric]) -> Optional[Table]:
        rows: List[Dict[str, Any]] = []
        for sub in subs:
            if self.config.show_only_errors and self.is_sub_metric_ok(sub):
                continue
            rows.append(self._create_row(sub))
            self.emitter.record_violation(sub)

        if not rows:
            return None
        logger.debug(f"Forwarded {len(rows)} subroutine rows")
        return self._create_table(SUB_COLUMNS, rows)

    @staticmethod
    def _create_row(sub: SubroutineMetric) -> Dict[str, Any]:
        return {
            "method": sub.name,
            "loc": sub.lines,
            "line_number": sub.line_number,
            "mccabe_complexity": sub.mccabe_complexity,
        }

    # -- output --

    def write_document(self) -> None:
        """Write the SARIF document to the sink as a single JSON line."""
        self.console.file.write(json.dumps(self.emitter.serialize()) + "\n")
        self.console.file.flush()

    def _print_header(self, lines: Sequence[str]) -> None:
        if self.config.only_machine_output:
            return
        for line in lines:
            self.console.print(line)

    def _print_table(self, path: str, table: Table) -> None:
        if self.config.only_machine_output:
            return
        self.console.print()
        self.console.print(f"Path: {path}", soft_wrap=True)
        self.console.print(table)

    @staticmethod
    def _create_table(columns: Sequence[str], rows: List[Dict[str, Any]]) -> Table:
        table = Table(box=box.ASCII, show_header=True, header_style=None, show_edge=True)
        for col in columns:
            justify = "left" if col in ("path", "method") else "right"
            table.add_column(col, justify=justify, no_wrap=True, min_width=len(col))
        for row in rows:
            table.add_row(*(Text(str(row[col])) for col in columns))
        return table
