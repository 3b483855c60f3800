"""Tests for EngagementMutator domain service."""

import pytest

from lifelessons.domain.common.exceptions import ValidationError
from lifelessons.domain.lessons.services.engagement_mutator import (
    LIKE,
    NO_CHANGE,
    SAVE,
    EngagementIntent,
    EngagementMutator,
)

APPLY = EngagementIntent.APPLY
REVOKE = EngagementIntent.REVOKE


class TestParseAction:
    def test_like_verbs(self) -> None:
        assert LIKE.parse_action("like") == APPLY
        assert LIKE.parse_action("unlike") == REVOKE

    def test_save_verbs(self) -> None:
        assert SAVE.parse_action("save") == APPLY
        assert SAVE.parse_action("unsave") == REVOKE

    @pytest.mark.parametrize("action", [None, "", "LIKE", "save", "toggle"])
    def test_foreign_or_unknown_verbs_are_rejected(self, action: str | None) -> None:
        with pytest.raises(ValidationError):
            LIKE.parse_action(action)


class TestPlan:
    def test_apply_for_non_member_adds(self) -> None:
        delta = EngagementMutator(LIKE).plan(is_member=False, intent=APPLY)
        assert delta.add_member and not delta.remove_member
        assert delta.counter_delta == 1

    def test_revoke_for_member_removes(self) -> None:
        delta = EngagementMutator(LIKE).plan(is_member=True, intent=REVOKE)
        assert delta.remove_member and not delta.add_member
        assert delta.counter_delta == -1

    def test_redundant_intents_are_no_ops(self) -> None:
        mutator = EngagementMutator(SAVE)
        assert mutator.plan(is_member=True, intent=APPLY) == NO_CHANGE
        assert mutator.plan(is_member=False, intent=REVOKE) == NO_CHANGE
        assert not NO_CHANGE.changed

    def test_counter_only_moves_when_membership_changed(self) -> None:
        mutator = EngagementMutator(LIKE)
        assert mutator.counter_delta(APPLY, membership_changed=False) == 0
        assert mutator.counter_delta(APPLY, membership_changed=True) == 1
        assert mutator.counter_delta(REVOKE, membership_changed=True) == -1




class TestRequireActor:
    @pytest.mark.parametrize("actor", [None, "", "   "])
    def test_missing_actor_is_rejected(self, actor: str | None) -> None:
        with pytest.raises(ValidationError):
            EngagementMutator.require_actor(actor)

    def test_actor_is_trimmed(self) -> None:
        assert EngagementMutator.require_actor("  u1 ") == "u1"
