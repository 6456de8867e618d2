"""Code analysis engine."""

from codecoach.analyzers.base import AnalysisIssue, AnalysisResult, Category, Severity
from codecoach.analyzers.catalog import DEFAULT_CATALOG
from codecoach.analyzers.engine import analyze
from codecoach.analyzers.notes import negative_signals, positive_signals
from codecoach.analyzers.patterns import PatternRule, scan
from codecoach.analyzers.scoring import aggregate

__all__ = [
    "AnalysisIssue",
    "AnalysisResult",
    "Category",
    "Severity",
    "PatternRule",
    "DEFAULT_CATALOG",
    "analyze",
    "scan",
    "aggregate",
    "positive_signals",
    "negative_signals",
]
