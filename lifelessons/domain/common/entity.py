"""Identity types shared by the lesson and user aggregates."""

from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .exceptions import ValidationError
from .value_object import ValueObject

UNSAVED_ID = 0

# Largest id a signed 64-bit integer column can hold
MAX_ID = 2**63 - 1


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Strongly-typed row id.

    ``UNSAVED_ID`` marks an entity built in memory that storage has not
    assigned an id to yet.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValidationError(
                f"{self.__class__.__name__} must be non-negative", field="id", value=self.value
            )

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id for a new entity; storage assigns the real one."""
        return cls(UNSAVED_ID)

    @property
    def is_unsaved(self) -> bool:
        return self.value == UNSAVED_ID

    @property
    def is_storable(self) -> bool:
        """False for ids too large to ever match a stored row."""
        return self.value <= MAX_ID


IdType = TypeVar("IdType", bound=EntityId)


class Entity(Generic[IdType]):
    """Aggregate root carrying a typed id. Subclasses are dataclasses."""

    id: IdType

    @property
    def is_persisted(self) -> bool:
        return not self.id.is_unsaved
