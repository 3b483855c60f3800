"""Read-only queries behind the per-user dashboard."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lifelessons.domain.lessons.entities.lesson import Lesson
from lifelessons.infrastructure.lessons.mappers.lesson_mapper import LessonMapper
from lifelessons.models import Favorite as FavoriteORM
from lifelessons.models import Lesson as LessonORM


class DashboardRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.lesson_mapper = LessonMapper()

    def count_lessons_and_favorites(self, email: str) -> tuple[int, int]:
        """
        Count lessons authored by and favorites held by a user.

        Both counts are independent scalar subqueries issued in one statement.
        """
        lesson_count = (
            select(func.count(LessonORM.id))
            .where(LessonORM.creator_email == email)
            .scalar_subquery()
        )
        favorite_count = (
            select(func.count(FavoriteORM.id))
            .where(FavoriteORM.user_email == email)
            .scalar_subquery()
        )
        total_lessons, total_favorites = self.db.execute(
            select(lesson_count, favorite_count)
        ).one()
        return total_lessons or 0, total_favorites or 0

    def find_recent_lessons(self, email: str, limit: int) -> list[Lesson]:
        """Most recently created lessons by a user, newest first."""
        stmt = (
            select(LessonORM)
            .where(LessonORM.creator_email == email)
            .order_by(LessonORM.created_at.desc(), LessonORM.id.desc())
            .limit(limit)
        )
        return [self.lesson_mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars()]
