"""Code analysis service.

Runs the core engine and layers language-aware notes, a complexity check and
maintainability insights on top. Also merges per-file results into a single
project-level result.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from codecoach.analyzers import (
    DEFAULT_CATALOG,
    AnalysisIssue,
    AnalysisResult,
    Category,
    PatternRule,
    Severity,
    aggregate,
    negative_signals,
    positive_signals,
    scan,
)
from codecoach.analyzers.scoring import round_half_up, unique

logger = logging.getLogger(__name__)

EXTENSION_LANGUAGES = {
    "js": "javascript",
    "jsx": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "py": "python",
    "java": "java",
    "cpp": "cpp",
    "c": "c",
    "cs": "csharp",
    "php": "php",
    "rb": "ruby",
    "go": "go",
    "rs": "rust",
    "swift": "swift",
    "kt": "kotlin",
}

COMPLEXITY_KEYWORDS = ("if", "else if", "while", "for", "switch", "case", "catch")
COMPLEXITY_OPERATORS = ("&&", "||", "?")
COMPLEXITY_THRESHOLD = 10
COMPLEXITY_PENALTY = 10
LARGE_FILE_LINES = 100
LONG_FUNCTION_LINES = 20
MAGIC_NUMBER_LIMIT = 3

NAMED_FUNCTION = re.compile(r"function\s+\w+[^{]*\{[^}]*\}")
MAGIC_NUMBER = re.compile(r"\b\d{2,}\b")
DOCSTRING = re.compile(r'"""[\s\S]*?"""')
LIST_COMPREHENSION = re.compile(r"\[[^\]\n]*\bfor\b[^\]\n]*\bin\b")
MAIN_GUARD = re.compile(r"""if __name__ == ['"]__main__['"]:""")
COMMENT_LINE_PREFIXES = ("//", "/*", "*", "#")


class AnalysisError(Exception):
    """Raised when a piece of code could not be analyzed."""


@dataclass
class ProjectFile:
    name: str
    content: str


@dataclass
class Enrichment:
    """Extra notes and penalties collected on top of the core scan."""

    issues: list[AnalysisIssue]
    strengths: list[str]
    improvements: list[str]
    maintainability_penalty: int = 0


def detect_language(code: str, file_name: Optional[str] = None) -> str:
    """Guess the language from the file extension, then from the content."""
    if file_name and "." in file_name:
        extension = file_name.rsplit(".", 1)[-1].lower()
        if extension in EXTENSION_LANGUAGES:
            return EXTENSION_LANGUAGES[extension]

    if "function " in code or "const " in code or "let " in code:
        if "interface " in code or ": string" in code:
            return "typescript"
        return "javascript"

    if "def " in code or ("import " in code and "from " in code):
        return "python"

    if "public class " in code or "private " in code or "System.out" in code:
        return "java"

    return "unknown"


def cyclomatic_complexity(code: str) -> int:
    """Rough decision-point count; not a real control-flow analysis."""
    complexity = 1
    for keyword in COMPLEXITY_KEYWORDS:
        complexity += len(re.findall(rf"\b{keyword}\b", code))
    for operator in COMPLEXITY_OPERATORS:
        complexity += code.count(operator)
    return complexity


class CodeAnalysisService:
    """Service for analyzing single files and whole projects."""

    def __init__(
        self,
        catalog: Sequence[PatternRule] = DEFAULT_CATALOG,
        issue_limit: int = 10,
        note_limit: int = 5,
    ):
        self.catalog = catalog
        self.issue_limit = issue_limit
        self.note_limit = note_limit

    def analyze_code(self, code: str, file_name: Optional[str] = None) -> AnalysisResult:
        """Analyze one piece of code.

        Raises:
            AnalysisError: if the engine fails unexpectedly
        """
        try:
            language = detect_language(code, file_name)
            issues, deltas = scan(code, self.catalog)
            enrichment = self._enrich(code, language)

            deltas[Category.MAINTAINABILITY] += enrichment.maintainability_penalty
            result = aggregate(
                deltas,
                [*issues, *enrichment.issues],
                [*positive_signals(code), *enrichment.strengths],
                [*negative_signals(code), *enrichment.improvements],
            )
        except Exception as exc:
            logger.exception(f"Code analysis failed for {file_name or 'code snippet'}")
            raise AnalysisError("Code analysis failed") from exc

        logger.info(
            f"Analyzed {file_name or 'code snippet'} ({language}): "
            f"score={result.overall_score}, issues={len(result.issues)}"
        )
        return result

    def analyze_project(self, files: Iterable[ProjectFile]) -> AnalysisResult:
        """Analyze every file and merge the results.

        Raises:
            ValueError: if no files are given
            AnalysisError: if any file fails to analyze
        """
        results = [self.analyze_code(f.content, f.name) for f in files]
        return self.merge_results(results)

    def merge_results(self, results: Sequence[AnalysisResult]) -> AnalysisResult:
        """Average the category scores and keep the most severe issues and first notes.

        The overall score is recomputed from the merged categories.
        """
        if not results:
            raise ValueError("No results to aggregate")

        def mean(values: Iterable[int]) -> int:
            return round_half_up(sum(values) / len(results))

        best_practices = mean(r.best_practices for r in results)
        performance = mean(r.performance for r in results)
        maintainability = mean(r.maintainability for r in results)
        security = mean(r.security for r in results)

        all_issues = [issue for r in results for issue in r.issues]
        ranked = sorted(all_issues, key=lambda issue: issue.severity.rank, reverse=True)

        return AnalysisResult(
            overall_score=round_half_up(
                (best_practices + performance + maintainability + security) / 4
            ),
            best_practices=best_practices,
            performance=performance,
            maintainability=maintainability,
            security=security,
            issues=tuple(ranked[: self.issue_limit]),
            strengths=unique(s for r in results for s in r.strengths)[: self.note_limit],
            improvements=unique(i for r in results for i in r.improvements)[: self.note_limit],
        )

    def _enrich(self, code: str, language: str) -> Enrichment:
        enrichment = Enrichment(issues=[], strengths=[], improvements=[])

        if language in ("javascript", "typescript"):
            self._javascript_notes(code, enrichment)
        elif language == "python":
            self._python_notes(code, enrichment)
        elif language == "java":
            self._java_notes(code, enrichment)

        self._complexity_notes(code, enrichment)
        self._maintainability_notes(code, enrichment)
        return enrichment

    def _javascript_notes(self, code: str, enrichment: Enrichment) -> None:
        if "const " in code and "=>" in code:
            enrichment.strengths.append("Uses modern ES6+ features")
        if "useState" in code or "useEffect" in code:
            enrichment.strengths.append("Proper React hooks usage")
        if "async " in code and "await " in code:
            enrichment.strengths.append("Modern asynchronous programming")

        if "document.getElementById" in code:
            enrichment.improvements.append(
                "Consider using React refs or modern DOM selection methods"
            )
        if "var " in code:
            enrichment.improvements.append("Replace var with const or let for better scoping")

    def _python_notes(self, code: str, enrichment: Enrichment) -> None:
        if MAIN_GUARD.search(code):
            enrichment.strengths.append("Proper Python script structure")
        if DOCSTRING.search(code):
            enrichment.strengths.append("Good documentation with docstrings")
        if LIST_COMPREHENSION.search(code):
            enrichment.strengths.append("Efficient use of list comprehensions")

        if "range(len(" in code:
            enrichment.improvements.append("Consider using enumerate() instead of range(len())")

    def _java_notes(self, code: str, enrichment: Enrichment) -> None:
        if "public static void main" in code:
            enrichment.strengths.append("Proper Java entry point")
        if "@Override" in code:
            enrichment.strengths.append("Good use of annotations")

        if "System.out.println" in code and "logger" not in code:
            enrichment.improvements.append(
                "Consider using a logging framework instead of System.out"
            )

    def _complexity_notes(self, code: str, enrichment: Enrichment) -> None:
        complexity = cyclomatic_complexity(code)
        if complexity > COMPLEXITY_THRESHOLD:
            enrichment.issues.append(
                AnalysisIssue(
                    category=Category.MAINTAINABILITY,
                    type="Complexity",
                    severity=Severity.WARNING,
                    message=(
                        f"High cyclomatic complexity ({complexity}). "
                        "Consider breaking down complex functions."
                    ),
                    suggestion="Split complex functions into smaller, more focused functions",
                )
            )
            enrichment.maintainability_penalty += COMPLEXITY_PENALTY

        non_blank = [line for line in code.split("\n") if line.strip()]
        if len(non_blank) > LARGE_FILE_LINES:
            enrichment.improvements.append(
                "Consider breaking down large files into smaller modules"
            )

    def _maintainability_notes(self, code: str, enrichment: Enrichment) -> None:
        lines = code.split("\n")
        comment_lines = [
            line for line in lines if line.strip().startswith(COMMENT_LINE_PREFIXES)
        ]
        comment_ratio = len(comment_lines) / len(lines)

        if comment_ratio > 0.1:
            enrichment.strengths.append("Well-documented code")
        elif comment_ratio < 0.05:
            enrichment.improvements.append("Add more comments to explain complex logic")

        long_functions = [
            body
            for body in NAMED_FUNCTION.findall(code)
            if len(body.split("\n")) > LONG_FUNCTION_LINES
        ]
        if long_functions:
            enrichment.improvements.append(
                "Some functions are quite long - consider breaking them down"
            )

        if len(MAGIC_NUMBER.findall(code)) > MAGIC_NUMBER_LIMIT:
            enrichment.improvements.append(
                "Consider using named constants instead of magic numbers"
            )
