"""Corpus-wide aggregation of per-file metric records.

``analyze`` makes a single pass over the records, in encounter order, and
freezes the totals, flattened lists and summary statistics into a
``CorpusAnalysis``. Nothing is deduplicated and nothing is re-sorted except
the ``sorted_values`` inside each ``SummaryStatistics``.

Mainline complexity is not aggregated; ``main_stats`` only carries lines.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from ..exceptions import InputError
from ..logging_config import get_logger
from ..math import SummaryStatistics, summarize
from ..models import FileMetric, MainStats, SubroutineMetric

logger = get_logger(__name__)


@dataclass(frozen=True)
class SummaryStats:
    """Summary statistics for subroutine length and complexity."""

    sub_length: SummaryStatistics
    sub_complexity: SummaryStatistics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sub_length": self.sub_length.to_dict(),
            "sub_complexity": self.sub_complexity.to_dict(),
        }


@dataclass(frozen=True)
class FileStat:
    """Path plus mainline stats for one analyzed file."""

    path: str
    main_stats: MainStats
    sub_count: int
    package_count: int


@dataclass(frozen=True)
class CorpusAnalysis:
    """Immutable analysis results for one batch of file records.

    Build it with :func:`analyze`; the constructor does no computation.
    """

    data: Tuple[FileMetric, ...]
    files: Tuple[str, ...]
    lines: int
    packages: Tuple[str, ...]
    subs: Tuple[SubroutineMetric, ...]
    main_stats: MainStats
    file_stats: Tuple[FileStat, ...]
    summary_stats: SummaryStats

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def package_count(self) -> int:
        return len(self.packages)

    @property
    def sub_count(self) -> int:
        return len(self.subs)

    @property
    def sub_stats(self) -> List[Tuple[str, Tuple[SubroutineMetric, ...]]]:
        """Subroutines grouped by the file that declared them, in file order."""
        return [(record.path, record.subs) for record in self.data]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files": list(self.files),
            "file_count": self.file_count,
            "lines": self.lines,
            "packages": list(self.packages),
            "package_count": self.package_count,
            "sub_count": self.sub_count,
            "main_stats": {"lines": self.main_stats.lines},
            "summary_stats": self.summary_stats.to_dict(),
        }


def is_sequence(thing: object) -> bool:
    """True for ordered sequences such as lists and tuples.

    Strings, bytes and mappings are rejected even though they are iterable.
    """
    if isinstance(thing, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(thing, Sequence)


def analyze(records: Sequence[FileMetric]) -> CorpusAnalysis:
    """Aggregate file records into a CorpusAnalysis.

    Args:
        records: Ordered sequence of FileMetric; may be empty

    Returns:
        Frozen CorpusAnalysis

    Raises:
        InputError: If ``records`` is not an ordered sequence
    """
    if not is_sequence(records):
        raise InputError("did not supply an ordered sequence of file records", received=records)

    files: List[str] = []
    packages: List[str] = []
    subs: List[SubroutineMetric] = []
    file_stats: List[FileStat] = []
    lines = 0
    main_lines = 0

    for record in records:
        lines += record.lines
        main_lines += record.main_stats.lines
        files.append(record.path)
        file_stats.append(
            FileStat(
                path=record.path,
                main_stats=record.main_stats,
                sub_count=len(record.subs),
                package_count=len(record.packages),
            )
        )
        packages.extend(record.packages)
        subs.extend(record.subs)

    summary = SummaryStats(
        sub_length=summarize([s.lines for s in subs]),
        sub_complexity=summarize([s.mccabe_complexity for s in subs]),
    )

    logger.debug(f"Analyzed {len(files)} files, {len(subs)} subroutines, {lines} lines")

    return CorpusAnalysis(
        data=tuple(records),
        files=tuple(files),
        lines=lines,
        packages=tuple(packages),
        subs=tuple(subs),
        main_stats=MainStats(lines=main_lines),
        file_stats=tuple(file_stats),
        summary_stats=summary,
    )
