"""Base types shared by the code analysis engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Category(str, Enum):
    """Quality dimension a rule contributes to."""

    SECURITY = "security"
    PERFORMANCE = "performance"
    BEST_PRACTICES = "best_practices"
    MAINTAINABILITY = "maintainability"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]


CATEGORY_LABELS = {
    Category.SECURITY: "Security",
    Category.PERFORMANCE: "Performance",
    Category.BEST_PRACTICES: "Best Practice",
    Category.MAINTAINABILITY: "Maintainability",
}


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Sort weight, higher is more severe."""
        return {"error": 3, "warning": 2, "info": 1}[self.value]


@dataclass(frozen=True)
class AnalysisIssue:
    """One reported finding."""

    category: Category
    type: str  # display label, usually the category label
    severity: Severity
    message: str
    line: Optional[int] = None
    suggestion: Optional[str] = None


@dataclass(frozen=True)
class AnalysisResult:
    """Scores and notes produced for one piece of code.

    Every score is an integer in [0, 100]. ``overall_score`` is the rounded
    mean of the four category scores.
    """

    overall_score: int
    best_practices: int
    performance: int
    maintainability: int
    security: int
    issues: tuple[AnalysisIssue, ...] = field(default_factory=tuple)
    strengths: tuple[str, ...] = field(default_factory=tuple)
    improvements: tuple[str, ...] = field(default_factory=tuple)

    def score_for(self, category: Category) -> int:
        return {
            Category.SECURITY: self.security,
            Category.PERFORMANCE: self.performance,
            Category.BEST_PRACTICES: self.best_practices,
            Category.MAINTAINABILITY: self.maintainability,
        }[category]
