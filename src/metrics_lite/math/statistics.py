"""Descriptive statistics: min, max, mean, median, population standard deviation."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

# Decimal places kept for mean, median and standard deviation
PRECISION = 2


@dataclass(frozen=True)
class SummaryStatistics:
    """Distribution summary for one metric over all subroutines.

    Every derived field is ``None`` when there were no values.
    """

    sorted_values: Tuple[float, ...] = field(default_factory=tuple)
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None
    median: Optional[float] = None
    standard_deviation: Optional[float] = None

    @property
    def count(self) -> int:
        return len(self.sorted_values)

    @property
    def is_empty(self) -> bool:
        return not self.sorted_values

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "sorted_values": list(self.sorted_values),
            "mean": self.mean,
            "median": self.median,
            "standard_deviation": self.standard_deviation,
        }


class Statistics:
    """Statistical helpers used by the summary computation."""

    @staticmethod
    def mean(values: Sequence[float]) -> Optional[float]:
        """Arithmetic mean rounded to two places."""
        if not values:
            return None
        return round(float(np.mean(values)), PRECISION)

    @staticmethod
    def median(values: Sequence[float]) -> Optional[float]:
        """Middle value, or the average of the two central values, rounded."""
        if not values:
            return None
        return round(float(np.median(values)), PRECISION)

    @staticmethod
    def pstdev(values: Sequence[float]) -> Optional[float]:
        """Population standard deviation (divisor n) rounded to two places."""
        if not values:
            return None
        return round(float(np.std(values, ddof=0)), PRECISION)


def summarize(values: Sequence[float]) -> SummaryStatistics:
    """Summarize a set of metric values.

    Args:
        values: Raw metric values in encounter order

    Returns:
        SummaryStatistics with ascending ``sorted_values``; the remaining
        fields are absent for an empty input
    """
    # sorted() is stable, so equal values keep their encounter order
    sorted_values = tuple(sorted(values))
    if not sorted_values:
        return SummaryStatistics()

    return SummaryStatistics(
        sorted_values=sorted_values,
        min=sorted_values[0],
        max=sorted_values[-1],
        mean=Statistics.mean(sorted_values),
        median=Statistics.median(sorted_values),
        standard_deviation=Statistics.pstdev(sorted_values),
    )
