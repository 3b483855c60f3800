from .lesson_predicate import (
    ANY,
    Absent,
    Contains,
    Equals,
    FieldFilter,
    LessonPredicate,
    LessonSort,
)

__all__ = [
    "ANY",
    "Absent",
    "Contains",
    "Equals",
    "FieldFilter",
    "LessonPredicate",
    "LessonSort",
]
