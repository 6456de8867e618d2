"""Code analysis routes."""

import asyncio
import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from codecoach.api.deps import AnalysisServiceDep, AppSettings, CurrentUserId, DbSession
from codecoach.models.code_analysis import CodeAnalysis
from codecoach.schemas.analysis import (
    AnalysisResultSchema,
    CodeAnalysisRequest,
    CodeAnalysisResponse,
    ProjectAnalysisRequest,
    ProjectAnalysisResponse,
    ProjectScoreResponse,
)
from codecoach.services.analysis_service import AnalysisError, ProjectFile, detect_language
from codecoach.services.analysis_store import AnalysisStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(analysis: CodeAnalysis) -> CodeAnalysisResponse:
    return CodeAnalysisResponse(
        id=analysis.id,
        project_id=analysis.project_id,
        user_id=analysis.user_id,
        file_name=analysis.file_name,
        language=analysis.language,
        analysis_results=AnalysisResultSchema.model_validate(analysis.analysis_results),
        created_at=analysis.created_at,
    )


async def _run_with_timeout(settings: AppSettings, func, *args):
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(func, *args),
            timeout=settings.analysis_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning(f"Analysis timed out after {settings.analysis_timeout_seconds}s")
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail="Code analysis timed out",
        )
    except AnalysisError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to analyze code",
        )


@router.post("", response_model=CodeAnalysisResponse)
async def analyze_code(
    request: CodeAnalysisRequest,
    user_id: CurrentUserId,
    db: DbSession,
    service: AnalysisServiceDep,
    settings: AppSettings,
):
    """Analyze a piece of code and store the result."""
    if not request.code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Code is required",
        )
    if len(request.code) > settings.max_code_length:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Code exceeds the limit of {settings.max_code_length} characters",
        )

    result = await _run_with_timeout(settings, service.analyze_code, request.code, request.file_name)

    store = AnalysisStore(db)
    analysis = await store.create(
        user_id=user_id,
        analysis_results=AnalysisResultSchema.from_result(result).model_dump(by_alias=True),
        language=detect_language(request.code, request.file_name),
        file_name=request.file_name,
        project_id=request.project_id,
    )
    return _to_response(analysis)


@router.post("/project", response_model=ProjectAnalysisResponse)
async def analyze_project(
    request: ProjectAnalysisRequest,
    service: AnalysisServiceDep,
    settings: AppSettings,
):
    """Analyze several files and return one merged result."""
    oversized = [f.name for f in request.files if len(f.content) > settings.max_code_length]
    if oversized:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Files exceed the limit of {settings.max_code_length} characters: {', '.join(oversized)}",
        )

    files = [ProjectFile(name=f.name, content=f.content) for f in request.files]
    result = await _run_with_timeout(settings, service.analyze_project, files)

    return ProjectAnalysisResponse(
        files_analyzed=len(files),
        analysis_results=AnalysisResultSchema.from_result(result),
    )


@router.get("/history", response_model=list[CodeAnalysisResponse])
async def get_history(
    user_id: CurrentUserId,
    db: DbSession,
    limit: int = Query(default=10, ge=1, le=100),
):
    """List the caller's most recent analyses."""
    analyses = await AnalysisStore(db).user_history(user_id, limit=limit)
    return [_to_response(a) for a in analyses]


@router.get("/projects/{project_id}/score", response_model=ProjectScoreResponse)
async def get_project_score(
    project_id: UUID,
    db: DbSession,
):
    """Average overall score of a project's stored analyses."""
    count, score = await AnalysisStore(db).project_quality_score(project_id)
    if score is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No analyses found for project",
        )

    return ProjectScoreResponse(
        project_id=project_id,
        analysis_count=count,
        code_quality_score=score,
    )
