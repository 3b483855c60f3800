import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from starlette import status

from lifelessons.application.identity.use_cases.user_ledger_use_case import UserLedgerUseCase
from lifelessons.core import container
from lifelessons.domain.common import DomainError
from lifelessons.exceptions import LifeLessonsError
from lifelessons.infrastructure.common.di import inject_use_case
from lifelessons.infrastructure.identity.schemas import (
    AdminCheckResponse,
    RecentLesson,
    UserResponse,
    UserStatsResponse,
    UserUpsertRequest,
    UserUpsertResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

_UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.get(
    "/user",
    response_model=UserResponse,
    responses={201: {"model": UserResponse, "description": "User was provisioned"}},
)
def get_or_create_user(
    response: Response,
    email: str | None = None,
    use_case: UserLedgerUseCase = Depends(inject_use_case(container.user_ledger_use_case)),
) -> UserResponse:
    """
    Fetch a user by email, creating the account on first contact.

    Returns 201 when a new account was created and 200 otherwise.
    """
    try:
        user, created = use_case.get_or_create(email)
        if created:
            response.status_code = status.HTTP_201_CREATED
        return UserResponse.from_entity(user)
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get or create user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.put("/users", response_model=UserUpsertResponse, status_code=status.HTTP_200_OK)
def upsert_user(
    request: UserUpsertRequest,
    use_case: UserLedgerUseCase = Depends(inject_use_case(container.user_ledger_use_case)),
) -> UserUpsertResponse:
    """Create a user or refresh their name and photo."""
    try:
        upserted = use_case.upsert(request.email, request.name, request.photo_url)
        return UserUpsertResponse(
            upserted=upserted,
            message="User created" if upserted else "User updated",
        )
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to upsert user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.get("/user-stats", response_model=UserStatsResponse, status_code=status.HTTP_200_OK)
def get_user_stats(
    email: str | None = Query(None),
    use_case: UserLedgerUseCase = Depends(inject_use_case(container.user_ledger_use_case)),
) -> UserStatsResponse:
    """Lesson and favorite totals plus the user's most recent lessons."""
    try:
        stats = use_case.get_stats(email)
        return UserStatsResponse(
            total_lessons=stats.total_lessons,
            total_favorites=stats.total_favorites,
            recent_lessons=[
                RecentLesson(
                    id=lesson.id.value,
                    title=lesson.title,
                    category=lesson.category,
                    created_at=lesson.created_at,
                    likes=lesson.likes,
                )
                for lesson in stats.recent_lessons
            ],
        )
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to compute user stats: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.get(
    "/users/admin/{email}", response_model=AdminCheckResponse, status_code=status.HTTP_200_OK
)
def check_admin(
    email: str,
    use_case: UserLedgerUseCase = Depends(inject_use_case(container.user_ledger_use_case)),
) -> AdminCheckResponse:
    """Whether the user exists and holds the admin role."""
    try:
        return AdminCheckResponse(is_admin=use_case.is_admin(email))
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to check admin role: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e
