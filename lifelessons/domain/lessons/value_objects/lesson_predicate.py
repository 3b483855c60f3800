"""
Typed predicate and sort key for lesson queries.

Each filterable field holds one of three variants:

- ``Absent``: the field does not constrain the query
- ``Equals``: exact match on the stored value
- ``Contains``: case-insensitive literal substring match

Keeping the variants closed means every filter combination can be
enumerated in tests and translated by the repository without guessing.
"""

from dataclasses import dataclass
from enum import StrEnum

from lifelessons.domain.common.value_object import ValueObject
from lifelessons.domain.common.value_objects.ids import LessonId


@dataclass(frozen=True)
class Absent(ValueObject):
    """No constraint on the field."""


@dataclass(frozen=True)
class Equals(ValueObject):
    """Field must equal ``value`` exactly."""

    value: str


@dataclass(frozen=True)
class Contains(ValueObject):
    """Field must contain ``text`` as a case-insensitive substring."""

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Contains filter requires non-empty text")


FieldFilter = Absent | Equals | Contains

ANY = Absent()


@dataclass(frozen=True)
class LessonPredicate(ValueObject):
    """
    Conjunction of per-field filters over lessons.

    ``search`` applies to title OR short description; every other field is
    matched on its own column. ``exclude_id`` removes a single lesson.
    """

    visibility: Absent | Equals = ANY
    search: Absent | Contains = ANY
    category: Absent | Equals = ANY
    emotional_tone: Absent | Equals = ANY
    access_level: Absent | Equals = ANY
    creator_email: Absent | Equals = ANY
    exclude_id: LessonId | None = None


class LessonSort(StrEnum):
    """Supported sort orders; every order is descending."""

    NEWEST = "newest"
    MOST_SAVED = "mostSaved"
    MOST_LIKED = "mostLiked"

    @classmethod
    def parse(cls, raw: str | None) -> "LessonSort":
        """Map a client value to a sort order, falling back to newest."""
        try:
            return cls(raw) if raw else cls.NEWEST
        except ValueError:
            return cls.NEWEST
