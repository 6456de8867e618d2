"""API dependencies for dependency injection."""

from typing import Annotated, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from codecoach.config import Settings, get_settings
from codecoach.database import get_db
from codecoach.services.analysis_service import CodeAnalysisService

# Type aliases for cleaner signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_current_user_id(
    settings: AppSettings,
    x_user_id: Annotated[Optional[str], Header()] = None,
) -> str:
    """Caller identity; authentication is handled upstream."""
    return x_user_id or settings.default_user_id


def get_analysis_service(settings: AppSettings) -> CodeAnalysisService:
    return CodeAnalysisService(
        issue_limit=settings.issue_display_limit,
        note_limit=settings.note_display_limit,
    )


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
AnalysisServiceDep = Annotated[CodeAnalysisService, Depends(get_analysis_service)]
