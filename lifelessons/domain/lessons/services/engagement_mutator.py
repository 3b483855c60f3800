"""
Engagement mutator domain service.

Applies toggle-style engagement (like/unlike, save/unsave) to a membership
set and the counter paired with it. The counter moves only when membership
actually changes, so repeating an action is a no-op and the counter always
tracks the size of the set.
"""

from dataclasses import dataclass
from enum import StrEnum

from lifelessons.domain.common.exceptions import ValidationError


class EngagementIntent(StrEnum):
    APPLY = "apply"
    REVOKE = "revoke"


@dataclass(frozen=True)
class EngagementKind:
    """One membership set / counter pair and the client verbs that drive it."""

    name: str
    apply_action: str
    revoke_action: str
    counter_name: str

    def parse_action(self, action: str | None) -> EngagementIntent:
        """
        Translate a client action verb into an intent.

        Raises:
            ValidationError: If the verb is missing or does not belong to this kind
        """
        if action == self.apply_action:
            return EngagementIntent.APPLY
        if action == self.revoke_action:
            return EngagementIntent.REVOKE
        raise ValidationError(
            f"action must be '{self.apply_action}' or '{self.revoke_action}'",
            field="action",
            value=action,
        )


LIKE = EngagementKind(name="like", apply_action="like", revoke_action="unlike", counter_name="likes")
SAVE = EngagementKind(
    name="save", apply_action="save", revoke_action="unsave", counter_name="saveCount"
)


@dataclass(frozen=True)
class EngagementDelta:
    """Planned change: add/remove the actor, and how far the counter moves."""

    add_member: bool
    remove_member: bool
    counter_delta: int

    @property
    def changed(self) -> bool:
        return self.add_member or self.remove_member


NO_CHANGE = EngagementDelta(add_member=False, remove_member=False, counter_delta=0)


@dataclass(frozen=True)
class EngagementOutcome:
    """Counter after an engagement was applied, and whether membership moved."""

    counter: int
    changed: bool


class EngagementMutator:
    """Computes no-op aware membership/counter updates for one engagement kind."""

    def __init__(self, kind: EngagementKind) -> None:
        self.kind = kind

    @staticmethod
    def require_actor(actor_id: str | None) -> str:
        """
        Validate and normalize the acting user's identifier.

        Raises:
            ValidationError: If the identifier is missing or blank
        """
        if actor_id is None or not str(actor_id).strip():
            raise ValidationError("userId is required", field="userId")
        return str(actor_id).strip()

    def plan(self, is_member: bool, intent: EngagementIntent) -> EngagementDelta:
        """Decide the delta given whether the actor is currently in the set."""
        if intent == EngagementIntent.APPLY and not is_member:
            return EngagementDelta(add_member=True, remove_member=False, counter_delta=1)
        if intent == EngagementIntent.REVOKE and is_member:
            return EngagementDelta(add_member=False, remove_member=True, counter_delta=-1)
        return NO_CHANGE

    def counter_delta(self, intent: EngagementIntent, membership_changed: bool) -> int:
        """Counter movement for a membership write that did or did not take effect."""
        if not membership_changed:
            return 0
        return 1 if intent == EngagementIntent.APPLY else -1
