"""Configuration loading and management for metrics-lite.

Configuration sources are merged in priority order:
    1. Defaults (defined in ReportConfig)
    2. Project config (./metrics-lite.toml)
    3. Explicit config file
    4. Environment variables (METRICS_LITE_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(show_only_errors=True)
    >>> config.max_sub_lines
    60
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from .exceptions import ConfigurationError, InvalidConfigError

DEFAULT_MAX_SUB_LINES = 60
DEFAULT_MAX_SUB_COMPLEXITY = 10

PROJECT_CONFIG_NAME = "metrics-lite.toml"
ENV_PREFIX = "METRICS_LITE_"


@dataclass(frozen=True)
class ReportConfig:
    """Report thresholds and output switches.

    A subroutine is flagged only when it reaches BOTH thresholds; see
    ``TextReport.is_sub_metric_ok``.

    Attributes:
        max_sub_lines: Line-count threshold for a subroutine
        max_sub_complexity: McCabe complexity threshold for a subroutine
        show_only_errors: Drop passing rows from the subroutine tables
        only_machine_output: Print nothing but the SARIF document
    """

    max_sub_lines: int = DEFAULT_MAX_SUB_LINES
    max_sub_complexity: int = DEFAULT_MAX_SUB_COMPLEXITY
    show_only_errors: bool = False
    only_machine_output: bool = False

    def __post_init__(self) -> None:
        """Validate thresholds."""
        for name in ("max_sub_lines", "max_sub_complexity"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigError(name, value, "must be an integer")
            if value < 0:
                raise InvalidConfigError(name, value, "must be non-negative")


DEFAULT_CONFIG = ReportConfig()


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ReportConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); ``None``
            values are ignored so unset flags keep lower-priority values

    Returns:
        Validated ReportConfig instance

    Raises:
        ConfigurationError: If a config file is missing, unreadable or
            holds unknown keys
    """
    merged: dict[str, Any] = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_config_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_config_file(config_file))

    merged.update(_load_env_vars())

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ReportConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_config_file(path: Path) -> dict[str, Any]:
    """Read a TOML file, using its [report] table when present."""
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    report = data.get("report")
    if isinstance(report, dict):
        return dict(report)
    return data


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from METRICS_LITE_* environment variables.

    Supported environment variables:
        METRICS_LITE_MAX_SUB_LINES: int
        METRICS_LITE_MAX_SUB_COMPLEXITY: int
        METRICS_LITE_SHOW_ONLY_ERRORS: bool (true/false/1/0)
        METRICS_LITE_ONLY_MACHINE_OUTPUT: bool
    """
    result: dict[str, Any] = {}

    for f in fields(ReportConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        default = getattr(DEFAULT_CONFIG, f.name)
        try:
            result[f.name] = _parse_env_value(env_value, type(default))
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, target: type) -> Any:
    """Parse environment variable string to the type of the field default."""
    if target is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if target is int:
        return int(value)

    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict."""
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
