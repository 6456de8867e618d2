"""Default rule catalog.

Rules are grouped by category. Order within a group only affects the display
order of issues; every match of every rule is reported.
"""

import re

from codecoach.analyzers.base import Category, Severity
from codecoach.analyzers.patterns import PatternRule

SECURITY_RULES = (
    PatternRule(
        category=Category.SECURITY,
        pattern=r"\beval\s*\(",
        severity=Severity.ERROR,
        message="Use of eval() is dangerous and should be avoided",
        suggestion="Use JSON.parse() for parsing JSON or other safe alternatives",
        penalty=20,
    ),
    PatternRule(
        category=Category.SECURITY,
        pattern=r"\binnerHTML\s*=(?!=)",
        severity=Severity.WARNING,
        message="innerHTML can lead to XSS vulnerabilities",
        suggestion="Use textContent, createElement, or sanitize HTML content",
        penalty=10,
    ),
    PatternRule(
        category=Category.SECURITY,
        pattern=r"\bdocument\.write\s*\(",
        severity=Severity.WARNING,
        message="document.write() can be dangerous and affect performance",
        suggestion="Use DOM manipulation methods instead",
        penalty=10,
    ),
)

PERFORMANCE_RULES = (
    PatternRule(
        category=Category.PERFORMANCE,
        pattern=r"for\s*\(\s*var\s+\w+\s*=\s*0\s*;\s*\w+\s*<\s*\w+\.length\s*;\s*\w+\+\+\s*\)",
        severity=Severity.INFO,
        message="Consider caching array length in loops",
        suggestion="Cache array.length in a variable before the loop",
        penalty=5,
    ),
    PatternRule(
        category=Category.PERFORMANCE,
        pattern=r"querySelector(?:All)?\s*\(\s*['\"]",
        severity=Severity.INFO,
        message="Multiple DOM queries can impact performance",
        suggestion="Cache DOM elements in variables when used multiple times",
        penalty=5,
    ),
)

BEST_PRACTICE_RULES = (
    PatternRule(
        category=Category.BEST_PRACTICES,
        pattern=r"\bvar\s+",
        severity=Severity.WARNING,
        message="Use const or let instead of var",
        suggestion="const for values that never change, let for variables that change",
        penalty=5,
    ),
    PatternRule(
        category=Category.BEST_PRACTICES,
        pattern=r"(?<![=!<>])==(?!=)",
        severity=Severity.WARNING,
        message="Use strict equality (===) instead of loose equality (==)",
        suggestion="Replace == with === for type-safe comparisons",
        penalty=5,
    ),
    PatternRule(
        category=Category.BEST_PRACTICES,
        pattern=r"\bconsole\.log\s*\(",
        severity=Severity.INFO,
        message="Remove console.log statements in production code",
        suggestion="Use a proper logging library or remove debug statements",
        penalty=5,
    ),
)

MAINTAINABILITY_RULES = (
    PatternRule(
        category=Category.MAINTAINABILITY,
        pattern=r"function\s+\w+\s*\([^)]*\)\s*\{[^}]{200,}",
        severity=Severity.WARNING,
        message="Function appears to be too long",
        suggestion="Consider breaking down into smaller, focused functions",
        penalty=10,
    ),
)

DEFAULT_CATALOG: tuple[PatternRule, ...] = (
    SECURITY_RULES + PERFORMANCE_RULES + BEST_PRACTICE_RULES + MAINTAINABILITY_RULES
)

# Comment syntax is reported as a strength, never as an issue.
COMMENT_PATTERN = re.compile(r"/\*[\s\S]*?\*/|//.+$", re.MULTILINE)
