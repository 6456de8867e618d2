"""SQLAlchemy models."""

from codecoach.models.code_analysis import CodeAnalysis

__all__ = [
    "CodeAnalysis",
]
