"""Tests for AccessPolicy domain service."""

import pytest

from lifelessons.domain.lessons.services.access_policy import AccessPolicy, Caller
from lifelessons.domain.lessons.value_objects.lesson_predicate import ANY, Equals

FREE_ONLY = Equals("free")


class TestTierFilter:
    @pytest.mark.parametrize("requested", [None, "free", "premium", "all", "gold"])
    def test_anonymous_caller_is_always_free_only(self, requested: str | None) -> None:
        assert AccessPolicy().tier_filter(Caller.anonymous(), requested) == FREE_ONLY

    @pytest.mark.parametrize("requested", [None, "premium", "all"])
    def test_free_user_is_always_free_only(self, requested: str | None) -> None:
        caller = Caller(email="free@example.com", is_premium=False)
        assert AccessPolicy().tier_filter(caller, requested) == FREE_ONLY

    def test_premium_caller_can_narrow_to_one_tier(self) -> None:
        caller = Caller(email="vip@example.com", is_premium=True)
        policy = AccessPolicy()
        assert policy.tier_filter(caller, "premium") == Equals("premium")
        assert policy.tier_filter(caller, "free") == Equals("free")

    @pytest.mark.parametrize("requested", [None, "all", "gold"])
    def test_premium_caller_without_valid_tier_sees_everything(
        self, requested: str | None
    ) -> None:
        caller = Caller(email="vip@example.com", is_premium=True)
        assert AccessPolicy().tier_filter(caller, requested) == ANY


def test_listing_is_limited_to_public_lessons() -> None:
    assert AccessPolicy().listing_visibility() == Equals("public")


def test_anonymous_caller() -> None:
    assert Caller.anonymous().is_anonymous
    assert not Caller(email="x@example.com").is_anonymous
