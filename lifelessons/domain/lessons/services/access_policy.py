"""Access policy: which lessons a caller may see."""

from dataclasses import dataclass

from lifelessons.domain.lessons.entities.lesson import AccessLevel, Visibility
from lifelessons.domain.lessons.value_objects.lesson_predicate import ANY, Absent, Equals

ACCESS_ALL = "all"


@dataclass(frozen=True)
class Caller:
    """Identity attached to a request by the authentication layer."""

    email: str | None = None
    is_premium: bool = False

    @property
    def is_anonymous(self) -> bool:
        return self.email is None

    @classmethod
    def anonymous(cls) -> "Caller":
        return cls(email=None, is_premium=False)


class AccessPolicy:
    """
    Visibility and tier gating for lesson listings.

    Non-premium callers only ever see free lessons; the requested access level
    cannot widen that. Premium callers may narrow to one level.
    """

    def listing_visibility(self) -> Equals:
        return Equals(Visibility.PUBLIC.value)

    def tier_filter(self, caller: Caller, requested_access: str | None) -> Absent | Equals:
        if not caller.is_premium:
            return Equals(AccessLevel.FREE.value)
        if requested_access in (AccessLevel.FREE.value, AccessLevel.PREMIUM.value):
            return Equals(requested_access)
        # "all", empty, or an unknown level: no tier restriction
        return ANY
