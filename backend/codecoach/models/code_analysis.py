"""Stored code analysis results."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, String, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from codecoach.database import Base


class CodeAnalysis(Base):
    """One analysis run submitted by a user."""

    __tablename__ = "code_analyses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, index=True)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    file_name: Mapped[str | None] = mapped_column(String(255))
    language: Mapped[str] = mapped_column(String(32), default="unknown")

    # camelCase result document, as returned by the API
    analysis_results: Mapped[dict] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"), nullable=False
    )

    # client-side with microseconds; history is ordered by it
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )
