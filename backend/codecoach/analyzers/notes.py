"""Heuristic strength and improvement notes.

These are presence checks over the raw text. They are independent of the rule
catalog, so a construct such as ``var`` can both raise an issue and produce an
improvement note.
"""

import re

from codecoach.analyzers.catalog import COMMENT_PATTERN

MODERN_DECLARATION = re.compile(r"\b(?:const|let)\s+")
ASYNC_MARKER = re.compile(r"\basync\s+")
AWAIT_MARKER = re.compile(r"\bawait\s+")
TRY_BLOCK = re.compile(r"\btry\s*(?:\{|:)")
CATCH_BLOCK = re.compile(r"\b(?:catch|except)\b")
DOC_COMMENT = re.compile(r"/\*\*[\s\S]*?\*/")
MODULE_SYNTAX = re.compile(r"\b(?:import|export)\s+")

LEGACY_DECLARATION = re.compile(r"\bvar\s+")
LOOSE_EQUALITY = re.compile(r"(?<![=!<>])==(?!=)")
STRICT_EQUALITY = re.compile(r"===")
COMMENT_MARKER = re.compile(r"//|/\*")
FUNCTION_DEFINITION = re.compile(r"\bfunction\s+\w+|=>|\bdef\s+\w+\s*\(")
DEBUG_PRINT = re.compile(r"\bconsole\.log\b")

# Texts at or below these sizes are too small to judge.
MIN_LENGTH_FOR_COMMENTS = 40
MIN_LENGTH_FOR_FUNCTIONS = 100


def positive_signals(code: str) -> tuple[str, ...]:
    strengths: list[str] = []

    if COMMENT_PATTERN.search(code):
        strengths.append("Good use of comments for documentation")
    if MODERN_DECLARATION.search(code):
        strengths.append("Good use of modern variable declarations")
    if ASYNC_MARKER.search(code) and AWAIT_MARKER.search(code):
        strengths.append("Proper async/await usage")
    if TRY_BLOCK.search(code) and CATCH_BLOCK.search(code):
        strengths.append("Good error handling with try-catch blocks")
    if DOC_COMMENT.search(code):
        strengths.append("Well-documented code with JSDoc comments")
    if MODULE_SYNTAX.search(code):
        strengths.append("Good modular code structure")

    return tuple(strengths)


def negative_signals(code: str) -> tuple[str, ...]:
    improvements: list[str] = []

    if LEGACY_DECLARATION.search(code):
        improvements.append("Replace var declarations with const or let")
    if LOOSE_EQUALITY.search(code) and not STRICT_EQUALITY.search(code):
        improvements.append("Use strict equality (===) for better type safety")
    if len(code.strip()) > MIN_LENGTH_FOR_COMMENTS and not COMMENT_MARKER.search(code):
        improvements.append("Add comments to explain complex logic")
    if len(code) > MIN_LENGTH_FOR_FUNCTIONS and not FUNCTION_DEFINITION.search(code):
        improvements.append("Consider breaking code into smaller functions")
    if DEBUG_PRINT.search(code):
        improvements.append("Remove or replace console.log statements for production")

    return tuple(improvements)
