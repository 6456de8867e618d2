"""Entry point of the code analysis engine."""

from typing import Optional, Sequence

from codecoach.analyzers.base import AnalysisResult
from codecoach.analyzers.catalog import DEFAULT_CATALOG
from codecoach.analyzers.notes import negative_signals, positive_signals
from codecoach.analyzers.patterns import PatternRule, scan
from codecoach.analyzers.scoring import aggregate


def analyze(
    code: str,
    file_name: Optional[str] = None,
    catalog: Sequence[PatternRule] = DEFAULT_CATALOG,
) -> AnalysisResult:
    """Score ``code`` against ``catalog``.

    Pure and deterministic. ``file_name`` does not affect the scan; language
    specific enrichment lives in the analysis service.
    """
    issues, deltas = scan(code, catalog)
    return aggregate(
        deltas,
        issues,
        positive_signals(code),
        negative_signals(code),
    )
