from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lifelessons.application.identity.use_cases.user_ledger_use_case import UserLedgerUseCase
from lifelessons.application.lessons.use_cases.comment_use_case import CommentUseCase
from lifelessons.application.lessons.use_cases.engagement_use_case import EngagementUseCase
from lifelessons.application.lessons.use_cases.favorite_use_case import FavoriteUseCase
from lifelessons.application.lessons.use_cases.lesson_directory_use_case import (
    LessonDirectoryUseCase,
)
from lifelessons.application.lessons.use_cases.report_use_case import ReportUseCase
from lifelessons.config import get_settings
from lifelessons.domain.lessons.services.access_policy import AccessPolicy
from lifelessons.infrastructure.identity.repositories import DashboardRepository, UserRepository
from lifelessons.infrastructure.lessons.repositories import (
    CommentRepository,
    FavoriteRepository,
    LessonRepository,
    ReportRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Singleton(get_settings)

    # Repositories
    lesson_repository = providers.Factory(LessonRepository, db=db)
    comment_repository = providers.Factory(CommentRepository, db=db)
    report_repository = providers.Factory(ReportRepository, db=db)
    favorite_repository = providers.Factory(FavoriteRepository, db=db)
    user_repository = providers.Factory(UserRepository, db=db)
    dashboard_repository = providers.Factory(DashboardRepository, db=db)

    # Domain services (pure domain logic, no db)
    access_policy = providers.Singleton(AccessPolicy)

    # Lessons module, application use cases
    lesson_directory_use_case = providers.Factory(
        LessonDirectoryUseCase,
        lesson_repository=lesson_repository,
        access_policy=access_policy,
        default_page_size=settings.provided.DEFAULT_PAGE_SIZE,
        recommended_limit=settings.provided.RECOMMENDED_LESSONS_LIMIT,
    )
    engagement_use_case = providers.Factory(
        EngagementUseCase,
        lesson_repository=lesson_repository,
    )
    favorite_use_case = providers.Factory(
        FavoriteUseCase,
        lesson_repository=lesson_repository,
        favorite_repository=favorite_repository,
    )
    comment_use_case = providers.Factory(
        CommentUseCase,
        lesson_repository=lesson_repository,
        comment_repository=comment_repository,
    )
    report_use_case = providers.Factory(
        ReportUseCase,
        lesson_repository=lesson_repository,
        report_repository=report_repository,
    )

    # Identity use cases
    user_ledger_use_case = providers.Factory(
        UserLedgerUseCase,
        user_repository=user_repository,
        dashboard_repository=dashboard_repository,
        recent_lessons_limit=settings.provided.RECENT_LESSONS_LIMIT,
    )


# Initialize container
container = Container()
