from typing import Protocol

from lifelessons.domain.lessons.entities.report import Report


class ReportRepositoryProtocol(Protocol):
    def save(self, report: Report) -> Report: ...
