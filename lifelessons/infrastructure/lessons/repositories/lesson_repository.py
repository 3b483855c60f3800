"""Repository for Lesson domain entities."""

import logging

from sqlalchemy import ColumnElement, case, delete, func, insert, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import InstrumentedAttribute, Session

from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.entities.lesson import Lesson
from lifelessons.domain.lessons.services.engagement_mutator import (
    LIKE,
    SAVE,
    EngagementIntent,
    EngagementKind,
    EngagementMutator,
    EngagementOutcome,
)
from lifelessons.domain.lessons.value_objects.lesson_predicate import (
    Contains,
    Equals,
    LessonPredicate,
    LessonSort,
)
from lifelessons.infrastructure.lessons.mappers.lesson_mapper import LessonMapper
from lifelessons.models import Lesson as LessonORM
from lifelessons.models import LessonLike as LessonLikeORM
from lifelessons.models import LessonSave as LessonSaveORM

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"

SORT_COLUMNS: dict[LessonSort, InstrumentedAttribute[object]] = {
    LessonSort.NEWEST: LessonORM.created_at,
    LessonSort.MOST_SAVED: LessonORM.save_count,
    LessonSort.MOST_LIKED: LessonORM.likes,
}


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so the text matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def predicate_conditions(predicate: LessonPredicate) -> list[ColumnElement[bool]]:
    """Translate a typed lesson predicate into SQL conditions."""
    conditions: list[ColumnElement[bool]] = []

    equality_filters = (
        (LessonORM.visibility, predicate.visibility),
        (LessonORM.category, predicate.category),
        (LessonORM.emotional_tone, predicate.emotional_tone),
        (LessonORM.access_level, predicate.access_level),
        (LessonORM.creator_email, predicate.creator_email),
    )
    for column, field_filter in equality_filters:
        if isinstance(field_filter, Equals):
            conditions.append(column == field_filter.value)

    if isinstance(predicate.search, Contains):
        pattern = f"%{escape_like(predicate.search.text)}%"
        conditions.append(
            or_(
                LessonORM.title.ilike(pattern, escape=LIKE_ESCAPE),
                LessonORM.short_description.ilike(pattern, escape=LIKE_ESCAPE),
            )
        )

    if predicate.exclude_id is not None:
        conditions.append(LessonORM.id != predicate.exclude_id.value)

    return conditions


class LessonRepository:
    """Domain-centric repository for Lesson persistence."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LessonMapper()

    def _membership_model(self, kind: EngagementKind) -> type[LessonLikeORM | LessonSaveORM]:
        if kind == LIKE:
            return LessonLikeORM
        if kind == SAVE:
            return LessonSaveORM
        raise ValueError(f"Unsupported engagement kind: {kind.name}")

    def _counter_column(self, kind: EngagementKind) -> InstrumentedAttribute[int]:
        return LessonORM.likes if kind == LIKE else LessonORM.save_count

    def find_by_id(self, lesson_id: LessonId) -> Lesson | None:
        """Find lesson by ID, regardless of visibility or access level."""
        if not lesson_id.is_storable:
            return None
        stmt = select(LessonORM).where(LessonORM.id == lesson_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists(self, lesson_id: LessonId) -> bool:
        if not lesson_id.is_storable:
            return False
        stmt = select(LessonORM.id).where(LessonORM.id == lesson_id.value)
        return self.db.execute(stmt).scalar_one_or_none() is not None

    def find_page(
        self, predicate: LessonPredicate, sort: LessonSort, offset: int, limit: int
    ) -> list[Lesson]:
        """
        Get one page of lessons matching the predicate.

        Ties on the sort column break on id descending, so paging is stable.
        """
        stmt = (
            select(LessonORM)
            .where(*predicate_conditions(predicate))
            .order_by(SORT_COLUMNS[sort].desc(), LessonORM.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def count(self, predicate: LessonPredicate) -> int:
        stmt = select(func.count(LessonORM.id)).where(*predicate_conditions(predicate))
        return self.db.execute(stmt).scalar() or 0

    def find_matching(self, predicate: LessonPredicate, limit: int) -> list[Lesson]:
        """Get up to ``limit`` lessons matching the predicate in insertion order."""
        stmt = (
            select(LessonORM)
            .where(*predicate_conditions(predicate))
            .order_by(LessonORM.id)
            .limit(limit)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def increment_views(self, lesson_id: LessonId) -> Lesson | None:
        """
        Atomically bump the view counter and return the updated lesson.

        Returns:
            The lesson after the increment, or None if it does not exist
        """
        if not lesson_id.is_storable:
            return None
        stmt = (
            update(LessonORM)
            .where(LessonORM.id == lesson_id.value)
            .values(views=LessonORM.views + 1)
        )
        result = self.db.execute(stmt)
        if result.rowcount == 0:
            self.db.rollback()
            return None
        self.db.commit()
        return self.find_by_id(lesson_id)

    def apply_engagement(
        self,
        lesson_id: LessonId,
        mutator: EngagementMutator,
        actor_id: str,
        intent: EngagementIntent,
    ) -> EngagementOutcome | None:
        """
        Add or remove a member and move the paired counter, then commit.

        The counter only moves by the number of membership rows actually
        inserted or deleted, so a duplicate request (or a concurrent one that
        wins the insert) leaves the counter untouched. Writes already pending
        on the session, such as a flushed favorite, commit with it.

        Returns:
            Counter after the update, or None if the lesson does not exist
        """
        if not self.exists(lesson_id):
            return None

        membership = self._membership_model(mutator.kind)
        counter = self._counter_column(mutator.kind)
        member_match = (
            membership.lesson_id == lesson_id.value,
            membership.user_id == actor_id,
        )

        is_member = self.db.execute(select(membership.user_id).where(*member_match)).first()
        delta = mutator.plan(is_member is not None, intent)

        changed = False
        if delta.add_member:
            try:
                with self.db.begin_nested():
                    self.db.execute(
                        insert(membership).values(lesson_id=lesson_id.value, user_id=actor_id)
                    )
                changed = True
            except IntegrityError:
                # A concurrent request inserted the same member first
                logger.info(
                    f"Concurrent {mutator.kind.name} for lesson {lesson_id.value} by {actor_id}"
                )
        elif delta.remove_member:
            result = self.db.execute(delete(membership).where(*member_match))
            changed = result.rowcount > 0

        step = mutator.counter_delta(intent, changed)
        if step:
            self.db.execute(
                update(LessonORM)
                .where(LessonORM.id == lesson_id.value)
                .values({counter.key: case((counter + step < 0, 0), else_=counter + step)})
            )
        self.db.commit()

        count = self.db.execute(
            select(counter).where(LessonORM.id == lesson_id.value)
        ).scalar_one()
        return EngagementOutcome(counter=count, changed=changed)
