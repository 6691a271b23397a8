"""Output formatters for metrics-lite."""

from .sarif_formatter import SarifEmitter
from .text_formatter import TextReport

__all__ = ["SarifEmitter", "TextReport"]
