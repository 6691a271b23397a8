"""Analysis-related exceptions: malformed metric input."""

from typing import Any, Dict, Optional

from .base import MetricsLiteError


class AnalysisError(MetricsLiteError):
    """Base class for analysis-related errors."""
    pass


class InputError(AnalysisError):
    """Raised when metric records are not a well-formed ordered sequence."""

    def __init__(self, reason: str, received: Any = None, index: Optional[int] = None):
        details: Dict[str, str] = {"reason": reason}
        if received is not None:
            details["received"] = type(received).__name__
        if index is not None:
            details["index"] = str(index)

        super().__init__("Invalid metric records", details=details)
        self.reason = reason
        self.received = received
        self.index = index
