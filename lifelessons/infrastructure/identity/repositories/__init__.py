from .dashboard_repository import DashboardRepository
from .user_repository import UserRepository

__all__ = [
    "DashboardRepository",
    "UserRepository",
]
