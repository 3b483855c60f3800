"""Bridges the dependency-injector container and FastAPI's Depends."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from lifelessons.core import container
from lifelessons.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Wrap a container provider as a FastAPI dependency.

    The request's session is bound to ``container.db`` only while the use case
    and its repositories are being built; each repository keeps its own
    reference to that session afterwards.
    """

    def dependency(db: DatabaseSession) -> T:
        with container.db.override(db):
            return provider()

    return dependency
