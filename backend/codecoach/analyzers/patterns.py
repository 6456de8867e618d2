"""Pattern-based scanning helpers."""

from dataclasses import dataclass
import re
from typing import Iterable, Optional

from codecoach.analyzers.base import AnalysisIssue, Category, Severity


@dataclass(frozen=True)
class PatternRule:
    category: Category
    pattern: str
    severity: Severity
    message: str
    suggestion: Optional[str]
    penalty: int
    flags: int = 0

    def finditer(self, content: str) -> Iterable[re.Match]:
        return re.finditer(self.pattern, content, self.flags)


def empty_deltas() -> dict[Category, int]:
    return {category: 0 for category in Category}


def find_line_number(content: str, needle: str) -> int:
    """Return the 1-based line of the first line containing ``needle``.

    The lookup re-searches the text instead of using the match offset, so a
    repeated snippet is always attributed to its first occurrence. Matches
    spanning several lines are not found on any single line and fall back to 1.
    """
    for index, line in enumerate(content.split("\n")):
        if needle in line:
            return index + 1
    return 1


def scan(
    content: str,
    rules: Iterable[PatternRule],
) -> tuple[list[AnalysisIssue], dict[Category, int]]:
    """Apply every rule to ``content``.

    Returns the issues in rule order and the accumulated penalty per category.
    """
    issues: list[AnalysisIssue] = []
    deltas = empty_deltas()
    if not content:
        return issues, deltas

    for rule in rules:
        for match in rule.finditer(content):
            issues.append(
                AnalysisIssue(
                    category=rule.category,
                    type=rule.category.label,
                    severity=rule.severity,
                    message=rule.message,
                    line=find_line_number(content, match.group(0)),
                    suggestion=rule.suggestion,
                )
            )
            deltas[rule.category] += rule.penalty
    return issues, deltas
