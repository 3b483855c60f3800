"""Repositories for comments, reports and favorites."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.entities.comment import Comment
from lifelessons.domain.lessons.entities.favorite import Favorite
from lifelessons.domain.lessons.entities.report import Report
from lifelessons.exceptions import AlreadyExistsError
from lifelessons.infrastructure.lessons.mappers.record_mappers import (
    CommentMapper,
    FavoriteMapper,
    ReportMapper,
)
from lifelessons.models import Comment as CommentORM
from lifelessons.models import Favorite as FavoriteORM

logger = logging.getLogger(__name__)


class CommentRepository:
    """Repository for Comment domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CommentMapper()

    def find_by_lesson(self, lesson_id: LessonId) -> list[Comment]:
        """
        Get all comments for a lesson.

        Returns:
            Comments ordered newest first
        """
        if not lesson_id.is_storable:
            return []
        stmt = (
            select(CommentORM)
            .where(CommentORM.lesson_id == lesson_id.value)
            .order_by(CommentORM.created_at.desc(), CommentORM.id.desc())
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def save(self, comment: Comment) -> Comment:
        orm_model = self.mapper.to_orm(comment)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)


class ReportRepository:
    """Repository for Report domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ReportMapper()

    def save(self, report: Report) -> Report:
        orm_model = self.mapper.to_orm(report)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)


class FavoriteRepository:
    """Repository for Favorite domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FavoriteMapper()

    def exists(self, user_email: str, lesson_id: LessonId) -> bool:
        stmt = select(FavoriteORM.id).where(
            FavoriteORM.user_email == user_email,
            FavoriteORM.lesson_id == lesson_id.value,
        )
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def add(self, favorite: Favorite) -> Favorite:
        """
        Insert a favorite without committing.

        The row is flushed so it gets an id, and becomes durable with the next
        commit on the session. Call ``rollback`` to drop it instead.

        Raises:
            AlreadyExistsError: If the (user_email, lesson_id) pair already exists
        """
        try:
            orm_model = self.mapper.to_orm(favorite)
            self.db.add(orm_model)
            self.db.flush()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)
        except IntegrityError as e:
            self.db.rollback()
            logger.info(
                f"Duplicate favorite for {favorite.user_email} on lesson {favorite.lesson_id}"
            )
            raise AlreadyExistsError("Already in favorites") from e

    def rollback(self) -> None:
        """Discard favorites added since the last commit."""
        self.db.rollback()
