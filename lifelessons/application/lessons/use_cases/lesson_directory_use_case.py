"""Use case for lesson reads: listing, detail and recommendations."""

import structlog

from lifelessons.application.common.pagination import PaginatedResult
from lifelessons.application.lessons.protocols.lesson_repository import LessonRepositoryProtocol
from lifelessons.application.lessons.services.lesson_filter_compiler import (
    DEFAULT_PAGE_SIZE,
    LessonFilterParams,
    compile_lesson_query,
    compile_recommendation_predicate,
)
from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.entities.lesson import Lesson
from lifelessons.domain.lessons.services.access_policy import AccessPolicy, Caller
from lifelessons.exceptions import LessonNotFoundError

logger = structlog.get_logger(__name__)

RECOMMENDED_LESSONS_LIMIT = 6


class LessonDirectoryUseCase:
    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        access_policy: AccessPolicy,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        recommended_limit: int = RECOMMENDED_LESSONS_LIMIT,
    ) -> None:
        self.lesson_repository = lesson_repository
        self.access_policy = access_policy
        self.default_page_size = default_page_size
        self.recommended_limit = recommended_limit

    def list_lessons(self, params: LessonFilterParams, caller: Caller) -> PaginatedResult[Lesson]:
        """
        List public lessons visible to the caller.

        Args:
            params: Raw filter, sort and pagination parameters
            caller: Identity and tier of the requesting user

        Returns:
            One page of lessons plus the total matching count. The count and
            the page are separate reads and may disagree under concurrent writes.
        """
        query = compile_lesson_query(
            params,
            caller,
            access_policy=self.access_policy,
            default_page_size=self.default_page_size,
        )
        lessons = self.lesson_repository.find_page(
            query.predicate,
            query.sort,
            offset=query.pagination.offset,
            limit=query.pagination.limit,
        )
        total = self.lesson_repository.count(query.predicate)
        return PaginatedResult(items=lessons, total=total, pagination=query.pagination)

    def get_lesson(self, lesson_id: int) -> Lesson:
        """
        Fetch a lesson by id, counting the fetch as a view.

        Detail reads are not gated by visibility or tier.

        Raises:
            LessonNotFoundError: If the lesson does not exist
        """
        lesson = self.lesson_repository.increment_views(LessonId(lesson_id))
        if lesson is None:
            raise LessonNotFoundError(lesson_id)
        return lesson

    def get_recommended(
        self,
        category: str | None,
        tone: str | None,
        exclude_id: str | int | None,
    ) -> list[Lesson]:
        """Lessons sharing category and tone with a reference lesson, excluding it."""
        predicate = compile_recommendation_predicate(category, tone, exclude_id)
        if predicate is None:
            return []
        lessons = self.lesson_repository.find_matching(predicate, limit=self.recommended_limit)
        logger.debug(
            "recommended_lessons",
            category=category,
            tone=tone,
            exclude_id=exclude_id,
            count=len(lessons),
        )
        return lessons
