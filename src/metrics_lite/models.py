"""Data models for metrics-lite.

Records arrive already measured by an external parser. ``SubroutineMetric``
and ``FileMetric`` are the raw observations; the aggregated views live in
``metrics_lite.analysis``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Sequence, Tuple

MAIN_CODE_NAME = "{code not in named subroutines}"


@dataclass(frozen=True)
class SubroutineMetric:
    """Metrics for one named subroutine."""

    name: str
    path: str
    line_number: int
    lines: int
    mccabe_complexity: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "line_number": self.line_number,
            "lines": self.lines,
            "mccabe_complexity": self.mccabe_complexity,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "SubroutineMetric":
        return cls(
            name=d["name"],
            path=d["path"],
            line_number=d["line_number"],
            lines=d["lines"],
            mccabe_complexity=d["mccabe_complexity"],
        )


@dataclass(frozen=True)
class MainStats:
    """Metrics for the code of a file outside any named subroutine."""

    lines: int
    path: str = ""
    name: str = MAIN_CODE_NAME

    def to_dict(self) -> Dict[str, Any]:
        return {"lines": self.lines, "path": self.path, "name": self.name}


@dataclass(frozen=True)
class FileMetric:
    """Raw observations for a single analyzed file.

    ``packages`` keeps duplicates and declaration order.
    """

    path: str
    lines: int
    packages: Tuple[str, ...] = ()
    subs: Tuple[SubroutineMetric, ...] = ()
    main_stats: MainStats = field(default_factory=lambda: MainStats(lines=0))

    def __post_init__(self) -> None:
        # Accept lists from callers but store immutable tuples
        object.__setattr__(self, "packages", tuple(self.packages))
        object.__setattr__(self, "subs", tuple(self.subs))

    @property
    def sub_count(self) -> int:
        return len(self.subs)

    @property
    def package_count(self) -> int:
        return len(self.packages)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "lines": self.lines,
            "packages": list(self.packages),
            "subs": [s.to_dict() for s in self.subs],
            "main_stats": self.main_stats.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "FileMetric":
        path = d["path"]
        main = d.get("main_stats") or {}
        return cls(
            path=path,
            lines=d["lines"],
            packages=tuple(_list_field(d, "packages")),
            subs=tuple(SubroutineMetric.from_dict(s) for s in _list_field(d, "subs")),
            main_stats=MainStats(
                lines=main.get("lines", 0),
                path=main.get("path", path),
                name=main.get("name", MAIN_CODE_NAME),
            ),
        )


def _list_field(d: Mapping[str, Any], key: str) -> Sequence[Any]:
    value = d.get(key, ())
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"'{key}' must be a list, got {type(value).__name__}")
    return value
