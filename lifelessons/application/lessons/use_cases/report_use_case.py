"""Use case for reporting lessons."""

import structlog

from lifelessons.application.lessons.protocols.lesson_repository import LessonRepositoryProtocol
from lifelessons.application.lessons.protocols.report_repository import ReportRepositoryProtocol
from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.entities.report import Report
from lifelessons.exceptions import LessonNotFoundError

logger = structlog.get_logger(__name__)


class ReportUseCase:
    def __init__(
        self,
        lesson_repository: LessonRepositoryProtocol,
        report_repository: ReportRepositoryProtocol,
    ) -> None:
        self.lesson_repository = lesson_repository
        self.report_repository = report_repository

    def report_lesson(self, lesson_id: int, reporter_id: str, reason: str) -> Report:
        """
        File a report against a lesson.

        Raises:
            ValidationError: If reporter_id or reason is blank
            LessonNotFoundError: If the lesson does not exist
        """
        lesson_id_vo = LessonId(lesson_id)
        report = Report.create(lesson_id=lesson_id_vo, reporter_id=reporter_id, reason=reason)

        if not self.lesson_repository.exists(lesson_id_vo):
            raise LessonNotFoundError(lesson_id)

        report = self.report_repository.save(report)
        logger.info(
            "lesson_reported",
            report_id=report.id.value,
            lesson_id=lesson_id,
            reporter_id=reporter_id,
        )
        return report
