"""Mappers for the append-only lesson records: comments, reports, favorites."""

from lifelessons.domain.common.value_objects.ids import CommentId, FavoriteId, LessonId, ReportId
from lifelessons.domain.lessons.entities.comment import Comment
from lifelessons.domain.lessons.entities.favorite import Favorite
from lifelessons.domain.lessons.entities.report import Report
from lifelessons.models import Comment as CommentORM
from lifelessons.models import Favorite as FavoriteORM
from lifelessons.models import Report as ReportORM


class CommentMapper:
    def to_domain(self, orm_model: CommentORM) -> Comment:
        return Comment.create_with_id(
            id=CommentId(orm_model.id),
            lesson_id=LessonId(orm_model.lesson_id),
            user_id=orm_model.user_id,
            text=orm_model.text,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Comment) -> CommentORM:
        return CommentORM(
            lesson_id=domain_entity.lesson_id.value,
            user_id=domain_entity.user_id,
            text=domain_entity.text,
        )


class ReportMapper:
    def to_domain(self, orm_model: ReportORM) -> Report:
        return Report(
            id=ReportId(orm_model.id),
            lesson_id=LessonId(orm_model.lesson_id),
            reporter_id=orm_model.reporter_id,
            reason=orm_model.reason,
            timestamp=orm_model.timestamp,
        )

    def to_orm(self, domain_entity: Report) -> ReportORM:
        return ReportORM(
            lesson_id=domain_entity.lesson_id.value,
            reporter_id=domain_entity.reporter_id,
            reason=domain_entity.reason,
        )


class FavoriteMapper:
    def to_domain(self, orm_model: FavoriteORM) -> Favorite:
        return Favorite(
            id=FavoriteId(orm_model.id),
            user_email=orm_model.user_email,
            lesson_id=LessonId(orm_model.lesson_id),
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Favorite) -> FavoriteORM:
        return FavoriteORM(
            user_email=domain_entity.user_email,
            lesson_id=domain_entity.lesson_id.value,
        )
