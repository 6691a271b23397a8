"""
metrics-lite - Corpus summaries and threshold diagnostics for code metrics

Takes per-file and per-subroutine line counts and McCabe complexity measured
by an external parser, aggregates them into corpus-wide statistics, and
renders text tables plus a SARIF document of threshold violations.
"""

__version__ = "0.1.0"

from .analysis import CorpusAnalysis, analyze
from .config import ReportConfig, load_config
from .exceptions import InputError, MetricsLiteError
from .formatters import SarifEmitter, TextReport
from .math import SummaryStatistics
from .models import FileMetric, MainStats, SubroutineMetric

__all__ = [
    "analyze",
    "CorpusAnalysis",
    "FileMetric",
    "MainStats",
    "SubroutineMetric",
    "SummaryStatistics",
    "ReportConfig",
    "load_config",
    "TextReport",
    "SarifEmitter",
    "InputError",
    "MetricsLiteError",
]
