"""Descriptive statistics over subroutine metrics."""

from .statistics import Statistics, SummaryStatistics, summarize

__all__ = ["Statistics", "SummaryStatistics", "summarize"]
