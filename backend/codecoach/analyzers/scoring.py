"""Score aggregation."""

import math
from typing import Iterable, Mapping

from codecoach.analyzers.base import AnalysisIssue, AnalysisResult, Category

MAX_SCORE = 100


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (``round`` rounds to even)."""
    return int(math.floor(value + 0.5))


def category_score(delta: int) -> int:
    return max(0, MAX_SCORE - delta)


def unique(items: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))


def aggregate(
    deltas: Mapping[Category, int],
    issues: Iterable[AnalysisIssue],
    strengths: Iterable[str],
    improvements: Iterable[str],
) -> AnalysisResult:
    """Turn per-category penalties into a result.

    Categories missing from ``deltas`` keep a full score.
    """
    scores = {category: category_score(deltas.get(category, 0)) for category in Category}
    overall = round_half_up(sum(scores.values()) / len(scores))

    return AnalysisResult(
        overall_score=overall,
        best_practices=scores[Category.BEST_PRACTICES],
        performance=scores[Category.PERFORMANCE],
        maintainability=scores[Category.MAINTAINABILITY],
        security=scores[Category.SECURITY],
        issues=tuple(issues),
        strengths=unique(strengths),
        improvements=unique(improvements),
    )
