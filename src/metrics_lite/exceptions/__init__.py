"""Exception hierarchy for metrics-lite."""

from .analysis import AnalysisError, InputError
from .base import MetricsLiteError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "MetricsLiteError",
    "AnalysisError",
    "InputError",
    "ConfigurationError",
    "InvalidConfigError",
]
