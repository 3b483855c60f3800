"""Tests for the Lesson entity."""

from datetime import UTC, datetime

import pytest

from lifelessons.domain.common.exceptions import ValidationError
from lifelessons.domain.common.value_objects.ids import LessonId
from lifelessons.domain.lessons.entities.lesson import AccessLevel, Lesson, Visibility


def _make_lesson(**overrides: object) -> Lesson:
    fields: dict[str, object] = {
        "id": LessonId(1),
        "title": "Forgive early",
        "short_description": "",
        "category": "relationships",
        "emotional_tone": "hopeful",
        "visibility": "public",
        "access_level": "free",
        "creator_email": "author@example.com",
        "created_at": datetime(2026, 1, 1, tzinfo=UTC),
        "likes": 0,
        "save_count": 0,
        "views": 0,
        "liked_by": [],
        "saved_by": [],
    }
    fields.update(overrides)
    return Lesson.create_with_id(**fields)  # type: ignore[arg-type]


class TestLesson:
    def test_reconstitutes_enums(self) -> None:
        lesson = _make_lesson(visibility="private", access_level="premium")
        assert lesson.visibility == Visibility.PRIVATE
        assert lesson.access_level == AccessLevel.PREMIUM
        assert not lesson.is_public()
        assert lesson.is_premium()

    def test_unknown_visibility_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            _make_lesson(visibility="unlisted")

    @pytest.mark.parametrize("counter", ["likes", "save_count", "views"])
    def test_negative_counters_are_rejected(self, counter: str) -> None:
        with pytest.raises(ValidationError):
            _make_lesson(**{counter: -1})

    def test_duplicate_members_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_lesson(likes=2, liked_by=["u1", "u1"])

    def test_counter_membership_invariant(self) -> None:
        assert _make_lesson(likes=1, liked_by=["u1"], save_count=0).counters_match_members()
        assert not _make_lesson(likes=3, liked_by=["u1"]).counters_match_members()
