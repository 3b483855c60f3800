"""Pydantic schemas for comments, reports and favorites."""

from datetime import datetime

from pydantic import Field

from lifelessons.infrastructure.common.schemas import CamelModel


class CommentCreateRequest(CamelModel):
    user_id: str | None = None
    text: str | None = None


class CommentResponse(CamelModel):
    id: int = Field(..., alias="_id")
    lesson_id: int
    user_id: str
    text: str
    created_at: datetime | None = None


class ReportCreateRequest(CamelModel):
    reporter_id: str | None = None
    reason: str | None = None


class FavoriteCreateRequest(CamelModel):
    user_email: str | None = None
    lesson_id: int | None = None
