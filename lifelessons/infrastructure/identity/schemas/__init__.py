"""Identity context schemas."""

from lifelessons.infrastructure.identity.schemas.user_schemas import (
    AdminCheckResponse,
    RecentLesson,
    UserResponse,
    UserStatsResponse,
    UserUpsertRequest,
    UserUpsertResponse,
)

__all__ = [
    "AdminCheckResponse",
    "RecentLesson",
    "UserResponse",
    "UserStatsResponse",
    "UserUpsertRequest",
    "UserUpsertResponse",
]
