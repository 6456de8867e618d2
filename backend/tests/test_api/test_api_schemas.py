"""Tests for API schemas and validation."""

import pytest
from pydantic import ValidationError

from codecoach.analyzers import analyze
from codecoach.schemas.analysis import (
    AnalysisResultSchema,
    CodeAnalysisRequest,
    ProjectAnalysisRequest,
)


class TestCodeAnalysisRequestSchema:
    """Test CodeAnalysisRequest validation."""

    def test_accepts_camel_case(self):
        """Accepts the camelCase keys sent by the client."""
        request = CodeAnalysisRequest.model_validate(
            {"code": "x", "fileName": "a.js", "projectId": "2b1f0a52-3f1b-4c55-9a36-5e3c1d7e6f00"}
        )

        assert request.file_name == "a.js"
        assert str(request.project_id) == "2b1f0a52-3f1b-4c55-9a36-5e3c1d7e6f00"

    def test_optional_fields(self):
        request = CodeAnalysisRequest(code="x")

        assert request.file_name is None
        assert request.project_id is None

    def test_rejects_long_file_name(self):
        with pytest.raises(ValidationError):
            CodeAnalysisRequest(code="x", file_name="a" * 256)


class TestProjectAnalysisRequestSchema:
    """Test ProjectAnalysisRequest validation."""

    def test_rejects_empty_file_list(self):
        with pytest.raises(ValidationError):
            ProjectAnalysisRequest(files=[])

    def test_rejects_unnamed_file(self):
        with pytest.raises(ValidationError):
            ProjectAnalysisRequest.model_validate({"files": [{"name": "", "content": "x"}]})

    def test_carries_only_files(self):
        request = ProjectAnalysisRequest.model_validate(
            {
                "files": [{"name": "a.js", "content": "x"}],
                "projectId": "2b1f0a52-3f1b-4c55-9a36-5e3c1d7e6f00",
            }
        )

        assert set(ProjectAnalysisRequest.model_fields) == {"files"}
        assert "project_id" not in request.model_dump()


class TestAnalysisResultSchema:
    """Test result serialization."""

    def test_serializes_with_camel_case(self, sample_js_bad):
        data = AnalysisResultSchema.from_result(analyze(sample_js_bad)).model_dump(by_alias=True)

        assert set(data) == {
            "overallScore",
            "bestPractices",
            "performance",
            "maintainability",
            "security",
            "issues",
            "strengths",
            "improvements",
        }
        assert data["issues"][0] == {
            "type": "Security",
            "severity": "error",
            "message": "Use of eval() is dangerous and should be avoided",
            "line": 1,
            "suggestion": "Use JSON.parse() for parsing JSON or other safe alternatives",
        }

    def test_round_trips_stored_document(self, sample_js_good):
        """Stored camelCase documents validate back into the schema."""
        schema = AnalysisResultSchema.from_result(analyze(sample_js_good))

        restored = AnalysisResultSchema.model_validate(schema.model_dump(by_alias=True))

        assert restored == schema

    def test_rejects_out_of_range_score(self):
        with pytest.raises(ValidationError):
            AnalysisResultSchema(
                overall_score=101,
                best_practices=100,
                performance=100,
                maintainability=100,
                security=100,
                issues=[],
                strengths=[],
                improvements=[],
            )
