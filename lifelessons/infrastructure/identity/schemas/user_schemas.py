"""Pydantic schemas for the user ledger API."""

from datetime import datetime

from pydantic import Field

from lifelessons.domain.identity.entities.user import User
from lifelessons.infrastructure.common.schemas import CamelModel


class UserResponse(CamelModel):
    id: int = Field(..., alias="_id")
    email: str
    name: str | None = None
    photo_url: str | None = Field(None, alias="photoURL")
    role: str
    is_premium: bool
    created_at: datetime | None = None
    last_login_at: datetime | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id.value,
            email=user.email,
            name=user.name,
            photo_url=user.photo_url,
            role=user.role.value,
            is_premium=user.is_premium,
            created_at=user.created_at,
            last_login_at=user.last_login_at,
        )


class UserUpsertRequest(CamelModel):
    email: str | None = None
    name: str | None = Field(None, max_length=255)
    photo_url: str | None = Field(None, alias="photoURL", max_length=1000)


class UserUpsertResponse(CamelModel):
    success: bool = True
    upserted: bool
    message: str


class RecentLesson(CamelModel):
    """Dashboard projection of a lesson."""

    id: int = Field(..., alias="_id")
    title: str
    category: str | None = None
    created_at: datetime | None = None
    likes: int


class UserStatsResponse(CamelModel):
    total_lessons: int = Field(..., ge=0)
    total_favorites: int = Field(..., ge=0)
    recent_lessons: list[RecentLesson]


class AdminCheckResponse(CamelModel):
    is_admin: bool
