import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from lifelessons.application.lessons.use_cases.favorite_use_case import FavoriteUseCase
from lifelessons.core import container
from lifelessons.domain.common import DomainError
from lifelessons.exceptions import LifeLessonsError
from lifelessons.infrastructure.common.di import inject_use_case
from lifelessons.infrastructure.common.schemas import SuccessResponse
from lifelessons.infrastructure.lessons.schemas import FavoriteCreateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.post("", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def add_favorite(
    request: FavoriteCreateRequest,
    use_case: FavoriteUseCase = Depends(inject_use_case(container.favorite_use_case)),
) -> SuccessResponse:
    """
    Add a lesson to a user's favorites.

    A new favorite also saves the lesson for that user, so the lesson's save
    count moves with it. Adding the same favorite twice fails without touching
    the count.
    """
    try:
        use_case.add_favorite(request.user_email, request.lesson_id)
        return SuccessResponse()
    except (LifeLessonsError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to add favorite for lesson {request.lesson_id}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
