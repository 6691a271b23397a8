"""Shared test fixtures for metrics-lite tests."""

import io

import pytest

from metrics_lite.models import FileMetric, MainStats, SubroutineMetric


def _make_sub(
    name: str = "process",
    path: str = "lib/App.pm",
    line_number: int = 1,
    lines: int = 10,
    mccabe_complexity: int = 1,
) -> SubroutineMetric:
    """Create a SubroutineMetric with common defaults for testing."""
    return SubroutineMetric(
        name=name,
        path=path,
        line_number=line_number,
        lines=lines,
        mccabe_complexity=mccabe_complexity,
    )


def _make_file(
    path: str = "lib/App.pm",
    lines: int = 100,
    packages=("App",),
    subs=(),
    main_lines: int = 20,
) -> FileMetric:
    """Create a FileMetric with common defaults for testing."""
    return FileMetric(
        path=path,
        lines=lines,
        packages=tuple(packages),
        subs=tuple(subs),
        main_stats=MainStats(lines=main_lines, path=path),
    )


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch):
    """Keep project config files and METRICS_LITE_* variables out of tests."""
    monkeypatch.chdir(tmp_path)
    for key in (
        "METRICS_LITE_MAX_SUB_LINES",
        "METRICS_LITE_MAX_SUB_COMPLEXITY",
        "METRICS_LITE_SHOW_ONLY_ERRORS",
        "METRICS_LITE_ONLY_MACHINE_OUTPUT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sink():
    """In-memory output sink for report rendering."""
    return io.StringIO()


@pytest.fixture
def two_file_records():
    """Two files: one with a long-and-complex sub, one with only simple subs."""
    return [
        _make_file(
            path="lib/Big.pm",
            lines=300,
            packages=("Big", "Big::Helper"),
            main_lines=40,
            subs=[
                _make_sub("new", "lib/Big.pm", 5, 8, 1),
                _make_sub("monster", "lib/Big.pm", 20, 120, 25),
            ],
        ),
        _make_file(
            path="lib/Small.pm",
            lines=50,
            packages=("Small",),
            main_lines=10,
            subs=[_make_sub("tiny", "lib/Small.pm", 3, 4, 2)],
        ),
    ]


@pytest.fixture
def records_json():
    """Raw JSON-shaped records as an external parser writes them."""
    return [
        {
            "path": "lib/Big.pm",
            "lines": 300,
            "packages": ["Big", "Big::Helper"],
            "main_stats": {"lines": 40, "path": "lib/Big.pm"},
            "subs": [
                {
                    "name": "new",
                    "path": "lib/Big.pm",
                    "line_number": 5,
                    "lines": 8,
                    "mccabe_complexity": 1,
                },
                {
                    "name": "monster",
                    "path": "lib/Big.pm",
                    "line_number": 20,
                    "lines": 120,
                    "mccabe_complexity": 25,
                },
            ],
        },
        {
            "path": "lib/Empty.pm",
            "lines": 12,
            "packages": ["Empty"],
            "main_stats": {"lines": 12},
            "subs": [],
        },
    ]


@pytest.fixture
def normal_values():
    """Known values for statistics tests."""
    return [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


@pytest.fixture
def constant_values():
    """Constant values (zero variance)."""
    return [5.0, 5.0, 5.0, 5.0, 5.0]


@pytest.fixture
def make_sub():
    """Factory for SubroutineMetric records."""
    return _make_sub


@pytest.fixture
def make_file():
    """Factory for FileMetric records."""
    return _make_file
