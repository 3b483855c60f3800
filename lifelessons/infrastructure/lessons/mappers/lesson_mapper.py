"""Mapper for Lesson ORM ↔ Domain conversion."""

from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.entities.lesson import Lesson
from lifelessons.models import Lesson as LessonORM


class LessonMapper:
    """Mapper for Lesson ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LessonORM) -> Lesson:
        """Convert ORM model (with membership rows loaded) to domain entity."""
        return Lesson.create_with_id(
            id=LessonId(orm_model.id),
            title=orm_model.title,
            short_description=orm_model.short_description,
            category=orm_model.category,
            emotional_tone=orm_model.emotional_tone,
            visibility=orm_model.visibility,
            access_level=orm_model.access_level,
            creator_email=orm_model.creator_email,
            created_at=orm_model.created_at,
            likes=orm_model.likes,
            save_count=orm_model.save_count,
            views=orm_model.views,
            liked_by=[member.user_id for member in orm_model.like_members],
            saved_by=[member.user_id for member in orm_model.save_members],
        )
