"""Persistence of analysis results."""

import logging
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from codecoach.analyzers.scoring import round_half_up
from codecoach.models.code_analysis import CodeAnalysis

logger = logging.getLogger(__name__)


class AnalysisStore:
    """Reads and writes ``CodeAnalysis`` rows."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        user_id: str,
        analysis_results: dict[str, Any],
        language: str,
        file_name: Optional[str] = None,
        project_id: Optional[UUID] = None,
    ) -> CodeAnalysis:
        analysis = CodeAnalysis(
            user_id=user_id,
            project_id=project_id,
            file_name=file_name,
            language=language,
            analysis_results=analysis_results,
        )
        self.db.add(analysis)
        await self.db.commit()
        await self.db.refresh(analysis)

        logger.info(f"Stored analysis {analysis.id} for user {user_id}")
        return analysis

    async def user_history(self, user_id: str, limit: int = 10) -> list[CodeAnalysis]:
        """Most recent analyses of a user, newest first."""
        result = await self.db.execute(
            select(CodeAnalysis)
            .where(CodeAnalysis.user_id == user_id)
            .order_by(CodeAnalysis.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def project_analyses(self, project_id: UUID) -> list[CodeAnalysis]:
        result = await self.db.execute(
            select(CodeAnalysis)
            .where(CodeAnalysis.project_id == project_id)
            .order_by(CodeAnalysis.created_at.asc())
        )
        return list(result.scalars().all())

    async def project_quality_score(self, project_id: UUID) -> tuple[int, Optional[int]]:
        """Return the number of analyses and the rounded mean overall score.

        The score is ``None`` when the project has no analyses.
        """
        analyses = await self.project_analyses(project_id)
        if not analyses:
            return 0, None

        total = sum(a.analysis_results.get("overallScore", 0) for a in analyses)
        return len(analyses), round_half_up(total / len(analyses))
