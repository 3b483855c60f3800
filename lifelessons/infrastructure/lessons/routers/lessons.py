import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from starlette import status

from lifelessons.application.lessons.services.lesson_filter_compiler import LessonFilterParams
from lifelessons.application.lessons.use_cases.comment_use_case import CommentUseCase
from lifelessons.application.lessons.use_cases.engagement_use_case import EngagementUseCase
from lifelessons.application.lessons.use_cases.lesson_directory_use_case import (
    LessonDirectoryUseCase,
)
from lifelessons.application.lessons.use_cases.report_use_case import ReportUseCase
from lifelessons.config import get_settings
from lifelessons.core import container
from lifelessons.domain.common import DomainError
from lifelessons.domain.lessons.entities.comment import Comment
from lifelessons.domain.lessons.services.access_policy import Caller
from lifelessons.domain.lessons.services.engagement_mutator import LIKE, SAVE
from lifelessons.exceptions import LifeLessonsError
from lifelessons.infrastructure.common.di import inject_use_case
from lifelessons.infrastructure.common.rate_limit import limiter
from lifelessons.infrastructure.common.schemas import SuccessResponse
from lifelessons.infrastructure.identity.dependencies import get_caller
from lifelessons.infrastructure.lessons.schemas import (
    CommentCreateRequest,
    CommentResponse,
    LessonResponse,
    LessonsListResponse,
    LikeRequest,
    LikeResponse,
    ReportCreateRequest,
    SaveRequest,
    SaveResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lessons"])

_UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


def _comment_to_schema(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id.value,
        lesson_id=comment.lesson_id.value,
        user_id=comment.user_id,
        text=comment.text,
        created_at=comment.created_at,
    )


@router.get("/lessons", response_model=LessonsListResponse, status_code=status.HTTP_200_OK)
def list_lessons(
    caller: Annotated[Caller, Depends(get_caller)],
    search: Annotated[str | None, Query(description="Case-insensitive title search")] = None,
    category: Annotated[str | None, Query(description="Exact category, or 'all'")] = None,
    tone: Annotated[str | None, Query(description="Exact emotional tone, or 'all'")] = None,
    sort: Annotated[str | None, Query(description="newest, mostSaved or mostLiked")] = None,
    page: Annotated[str | None, Query(description="1-based page number")] = None,
    limit: Annotated[str | None, Query(description="Page size, capped at 100")] = None,
    access: Annotated[str | None, Query(description="free or premium (premium callers only)")] = None,
    use_case: LessonDirectoryUseCase = Depends(
        inject_use_case(container.lesson_directory_use_case)
    ),
) -> LessonsListResponse:
    """
    List public lessons with filtering, sorting and pagination.

    Anonymous and free callers only ever see free lessons. Malformed page or
    limit values fall back to their defaults instead of failing the request.
    """
    try:
        params = LessonFilterParams(
            search=search,
            category=category,
            tone=tone,
            sort=sort,
            page=page,
            limit=limit,
            access=access,
        )
        result = use_case.list_lessons(params, caller)
        return LessonsListResponse(
            lessons=[LessonResponse.from_entity(lesson) for lesson in result.items],
            total=result.total,
            page=result.page,
            total_pages=result.total_pages,
        )
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list lessons: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.get(
    "/lessons/{lesson_id}", response_model=LessonResponse, status_code=status.HTTP_200_OK
)
def get_lesson(
    lesson_id: int,
    use_case: LessonDirectoryUseCase = Depends(
        inject_use_case(container.lesson_directory_use_case)
    ),
) -> LessonResponse:
    """Get a single lesson and count the fetch as a view."""
    try:
        lesson = use_case.get_lesson(lesson_id)
        return LessonResponse.from_entity(lesson)
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.post(
    "/lessons/{lesson_id}/like", response_model=LikeResponse, status_code=status.HTTP_200_OK
)
def like_lesson(
    lesson_id: int,
    request: LikeRequest,
    use_case: EngagementUseCase = Depends(inject_use_case(container.engagement_use_case)),
) -> LikeResponse:
    """
    Like or unlike a lesson.

    Repeating the same action is accepted and leaves the count unchanged;
    ``changed`` reports whether anything moved.
    """
    try:
        result = use_case.toggle(lesson_id, LIKE, request.user_id, request.action)
        return LikeResponse(changed=result.changed, likes=result.counter)
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update likes for lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.post(
    "/lessons/{lesson_id}/save", response_model=SaveResponse, status_code=status.HTTP_200_OK
)
def save_lesson(
    lesson_id: int,
    request: SaveRequest,
    use_case: EngagementUseCase = Depends(inject_use_case(container.engagement_use_case)),
) -> SaveResponse:
    """Save or unsave a lesson."""
    try:
        result = use_case.toggle(lesson_id, SAVE, request.user_id, request.action)
        return SaveResponse(changed=result.changed, save_count=result.counter)
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update saves for lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.post(
    "/lessons/{lesson_id}/report",
    response_model=SuccessResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(get_settings().REPORT_RATE_LIMIT)  # type: ignore[misc]
def report_lesson(
    request: Request,
    lesson_id: int,
    payload: ReportCreateRequest,
    use_case: ReportUseCase = Depends(inject_use_case(container.report_use_case)),
) -> SuccessResponse:
    """File an abuse report against a lesson."""
    try:
        use_case.report_lesson(lesson_id, payload.reporter_id or "", payload.reason or "")
        return SuccessResponse()
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to report lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.get(
    "/lessons/{lesson_id}/comments",
    response_model=list[CommentResponse],
    status_code=status.HTTP_200_OK,
)
def list_comments(
    lesson_id: int,
    use_case: CommentUseCase = Depends(inject_use_case(container.comment_use_case)),
) -> list[CommentResponse]:
    """List comments on a lesson, newest first. Unknown lessons yield an empty list."""
    try:
        return [_comment_to_schema(comment) for comment in use_case.list_comments(lesson_id)]
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list comments for lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.post(
    "/lessons/{lesson_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    lesson_id: int,
    request: CommentCreateRequest,
    use_case: CommentUseCase = Depends(inject_use_case(container.comment_use_case)),
) -> CommentResponse:
    """Append a comment to a lesson."""
    try:
        comment = use_case.add_comment(lesson_id, request.user_id or "", request.text or "")
        return _comment_to_schema(comment)
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to add comment to lesson {lesson_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e


@router.get(
    "/recommended-lessons",
    response_model=list[LessonResponse],
    status_code=status.HTTP_200_OK,
)
def get_recommended_lessons(
    category: str | None = None,
    tone: str | None = None,
    exclude_id: Annotated[str | None, Query(alias="excludeId")] = None,
    use_case: LessonDirectoryUseCase = Depends(
        inject_use_case(container.lesson_directory_use_case)
    ),
) -> list[LessonResponse]:
    """Lessons sharing a category and tone, excluding the one being viewed."""
    try:
        lessons = use_case.get_recommended(category, tone, exclude_id)
        return [LessonResponse.from_entity(lesson) for lesson in lessons]
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch recommended lessons: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=_UNEXPECTED_ERROR
        ) from e
