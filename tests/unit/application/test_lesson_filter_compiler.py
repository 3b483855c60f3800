"""Tests for the lesson filter compiler."""

import pytest

from lifelessons.application.lessons.services.lesson_filter_compiler import (
    LessonFilterParams,
    compile_lesson_query,
    compile_recommendation_predicate,
    parse_lesson_id,
)
from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.services.access_policy import Caller
from lifelessons.domain.lessons.value_objects.lesson_predicate import (
    ANY,
    Contains,
    Equals,
    LessonSort,
)

ANONYMOUS = Caller.anonymous()
PREMIUM = Caller(email="vip@example.com", is_premium=True)


class TestCompileLessonQuery:
    def test_defaults(self) -> None:
        query = compile_lesson_query(LessonFilterParams(), ANONYMOUS)

        assert query.predicate.visibility == Equals("public")
        assert query.predicate.search == ANY
        assert query.predicate.category == ANY
        assert query.predicate.emotional_tone == ANY
        assert query.predicate.access_level == Equals("free")
        assert query.sort == LessonSort.NEWEST
        assert (query.pagination.page, query.pagination.page_size) == (1, 12)

    def test_filters_are_trimmed_and_typed(self) -> None:
        params = LessonFilterParams(search="  grief ", category="career", tone="hopeful")
        predicate = compile_lesson_query(params, ANONYMOUS).predicate

        assert predicate.search == Contains("grief")
        assert predicate.category == Equals("career")
        assert predicate.emotional_tone == Equals("hopeful")

    @pytest.mark.parametrize("value", [None, "", "   ", "all"])
    def test_all_sentinel_and_blank_mean_no_filter(self, value: str | None) -> None:
        params = LessonFilterParams(category=value, tone=value)
        predicate = compile_lesson_query(params, ANONYMOUS).predicate
        assert predicate.category == ANY
        assert predicate.emotional_tone == ANY

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("newest", LessonSort.NEWEST),
            ("mostSaved", LessonSort.MOST_SAVED),
            ("mostLiked", LessonSort.MOST_LIKED),
            ("oldest", LessonSort.NEWEST),
            (None, LessonSort.NEWEST),
        ],
    )
    def test_sort_parsing(self, raw: str | None, expected: LessonSort) -> None:
        assert compile_lesson_query(LessonFilterParams(sort=raw), ANONYMOUS).sort == expected

    @pytest.mark.parametrize(
        ("page", "limit", "expected"),
        [
            ("2", "5", (2, 5)),
            (3, 20, (3, 20)),
            ("abc", "xyz", (1, 12)),
            ("0", "-1", (1, 12)),
            ("1", "1000", (1, 100)),
        ],
    )
    def test_pagination_is_coerced(
        self, page: str | int, limit: str | int, expected: tuple[int, int]
    ) -> None:
        pagination = compile_lesson_query(
            LessonFilterParams(page=page, limit=limit), ANONYMOUS
        ).pagination
        assert (pagination.page, pagination.page_size) == expected

    def test_offset_follows_page_and_limit(self) -> None:
        pagination = compile_lesson_query(
            LessonFilterParams(page="3", limit="10"), ANONYMOUS
        ).pagination
        assert pagination.offset == 20

    def test_client_cannot_widen_tier_for_non_premium(self) -> None:
        params = LessonFilterParams(access="premium")
        assert compile_lesson_query(params, ANONYMOUS).predicate.access_level == Equals("free")

    def test_premium_caller_access_parameter(self) -> None:
        assert compile_lesson_query(LessonFilterParams(), PREMIUM).predicate.access_level == ANY
        narrowed = compile_lesson_query(LessonFilterParams(access=" premium "), PREMIUM)
        assert narrowed.predicate.access_level == Equals("premium")


class TestRecommendationPredicate:
    def test_category_tone_and_exclusion(self) -> None:
        predicate = compile_recommendation_predicate("career", "hopeful", "7")
        assert predicate is not None
        assert predicate.category == Equals("career")
        assert predicate.emotional_tone == Equals("hopeful")
        assert predicate.exclude_id == LessonId(7)
        assert predicate.visibility == ANY
        assert predicate.access_level == ANY

    @pytest.mark.parametrize(
        ("category", "tone"),
        [(None, "hopeful"), ("career", None), ("all", "hopeful"), ("career", "all"), (" ", " ")],
    )
    def test_missing_or_all_reference_fields_match_nothing(
        self, category: str | None, tone: str | None
    ) -> None:
        assert compile_recommendation_predicate(category, tone, None) is None

    @pytest.mark.parametrize(
        "raw", [None, "", "abc", "0", "-4", True, "100000000000000000000"]
    )
    def test_unparseable_ids_are_absent(self, raw: object) -> None:
        assert parse_lesson_id(raw) is None  # type: ignore[arg-type]
