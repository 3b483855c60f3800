"""
Filter compiler for lesson listings.

Turns loosely typed query-string parameters into a ``CompiledLessonQuery``:
a typed predicate, a sort order and a pagination window. Compilation is a
pure function of its inputs; nothing here touches storage.
"""

from dataclasses import dataclass

from lifelessons.application.common.pagination import Pagination
from lifelessons.domain.common.entity import MAX_ID
from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.services.access_policy import AccessPolicy, Caller
from lifelessons.domain.lessons.value_objects.lesson_predicate import (
    ANY,
    Absent,
    Contains,
    Equals,
    LessonPredicate,
    LessonSort,
)

FILTER_ALL = "all"
DEFAULT_PAGE_SIZE = 12


@dataclass(frozen=True)
class LessonFilterParams:
    """Raw listing parameters exactly as the client sent them."""

    search: str | None = None
    category: str | None = None
    tone: str | None = None
    sort: str | None = None
    page: str | int | None = None
    limit: str | int | None = None
    access: str | None = None


@dataclass(frozen=True)
class CompiledLessonQuery:
    predicate: LessonPredicate
    sort: LessonSort
    pagination: Pagination


def search_filter(raw: str | None) -> Absent | Contains:
    """Blank or whitespace-only search never filters."""
    text = (raw or "").strip()
    return Contains(text) if text else ANY


def equals_unless_all(raw: str | None) -> Absent | Equals:
    """Exact match, unless the value is missing, blank or the "all" sentinel."""
    value = (raw or "").strip()
    if not value or value == FILTER_ALL:
        return ANY
    return Equals(value)


def parse_lesson_id(raw: str | int | None) -> LessonId | None:
    """Parse an optional lesson id; anything unparseable or out of range is absent."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return LessonId(value) if 0 < value <= MAX_ID else None


def compile_lesson_query(
    params: LessonFilterParams,
    caller: Caller,
    access_policy: AccessPolicy | None = None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> CompiledLessonQuery:
    """
    Compile listing parameters for the public lesson listing.

    Visibility is always restricted to public lessons, and the tier filter
    comes from the access policy, so client parameters cannot widen either.
    """
    policy = access_policy or AccessPolicy()
    predicate = LessonPredicate(
        visibility=policy.listing_visibility(),
        search=search_filter(params.search),
        category=equals_unless_all(params.category),
        emotional_tone=equals_unless_all(params.tone),
        access_level=policy.tier_filter(caller, (params.access or "").strip() or None),
    )
    return CompiledLessonQuery(
        predicate=predicate,
        sort=LessonSort.parse(params.sort),
        pagination=Pagination.coerce(params.page, params.limit, default_page_size),
    )


def compile_recommendation_predicate(
    category: str | None,
    tone: str | None,
    exclude_id: str | int | None,
) -> LessonPredicate | None:
    """
    Same category and tone as the reference lesson, minus the lesson itself.

    Both fields must name a concrete value. A missing, blank or "all" category
    or tone describes no reference lesson, so the result is None and nothing
    should be recommended.
    """
    category_filter = equals_unless_all(category)
    tone_filter = equals_unless_all(tone)
    if not isinstance(category_filter, Equals) or not isinstance(tone_filter, Equals):
        return None
    return LessonPredicate(
        category=category_filter,
        emotional_tone=tone_filter,
        exclude_id=parse_lesson_id(exclude_id),
    )
