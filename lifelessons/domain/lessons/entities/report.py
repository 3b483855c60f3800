"""Report entity."""

from dataclasses import dataclass
from datetime import datetime

from lifelessons.domain.common.entity import Entity
from lifelessons.domain.common.exceptions import ValidationError
from lifelessons.domain.common.value_objects.ids import LessonId, ReportId


@dataclass
class Report(Entity[ReportId]):
    """
    Abuse report filed against a lesson.

    Reports are write-only from the API's perspective.
    """

    id: ReportId
    lesson_id: LessonId
    reporter_id: str
    reason: str
    timestamp: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.reporter_id or not self.reporter_id.strip():
            raise ValidationError("reporterId is required", field="reporterId")
        if not self.reason or not self.reason.strip():
            raise ValidationError("reason is required", field="reason")

    @classmethod
    def create(cls, lesson_id: LessonId, reporter_id: str, reason: str) -> "Report":
        return cls(
            id=ReportId.generate(),
            lesson_id=lesson_id,
            reporter_id=reporter_id,
            reason=reason.strip(),
        )
