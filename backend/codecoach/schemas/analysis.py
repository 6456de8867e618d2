"""Code analysis request and response schemas."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from codecoach.analyzers import AnalysisIssue, AnalysisResult


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CodeAnalysisRequest(CamelModel):
    """Request to analyze a single piece of code."""

    code: str
    file_name: str | None = Field(default=None, max_length=255)
    project_id: UUID | None = None


class ProjectFileRequest(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    content: str


class ProjectAnalysisRequest(CamelModel):
    """Request to analyze several files as one project."""

    files: list[ProjectFileRequest] = Field(min_length=1)


class AnalysisIssueSchema(CamelModel):
    type: str
    severity: Literal["error", "warning", "info"]
    message: str
    line: int | None = None
    suggestion: str | None = None

    @classmethod
    def from_issue(cls, issue: AnalysisIssue) -> "AnalysisIssueSchema":
        return cls(
            type=issue.type,
            severity=issue.severity.value,
            message=issue.message,
            line=issue.line,
            suggestion=issue.suggestion,
        )


class AnalysisResultSchema(CamelModel):
    overall_score: int = Field(ge=0, le=100)
    best_practices: int = Field(ge=0, le=100)
    performance: int = Field(ge=0, le=100)
    maintainability: int = Field(ge=0, le=100)
    security: int = Field(ge=0, le=100)
    issues: list[AnalysisIssueSchema]
    strengths: list[str]
    improvements: list[str]

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisResultSchema":
        return cls(
            overall_score=result.overall_score,
            best_practices=result.best_practices,
            performance=result.performance,
            maintainability=result.maintainability,
            security=result.security,
            issues=[AnalysisIssueSchema.from_issue(issue) for issue in result.issues],
            strengths=list(result.strengths),
            improvements=list(result.improvements),
        )


class CodeAnalysisResponse(CamelModel):
    """Stored analysis returned by the API."""

    id: UUID
    project_id: UUID | None
    user_id: str
    file_name: str | None
    language: str
    analysis_results: AnalysisResultSchema
    created_at: datetime


class ProjectAnalysisResponse(CamelModel):
    files_analyzed: int
    analysis_results: AnalysisResultSchema


class ProjectScoreResponse(CamelModel):
    project_id: UUID
    analysis_count: int
    code_quality_score: int
