"""Aggregation of metric records into corpus-wide statistics."""

from .engine import CorpusAnalysis, FileStat, SummaryStats, analyze, is_sequence

__all__ = ["CorpusAnalysis", "FileStat", "SummaryStats", "analyze", "is_sequence"]
