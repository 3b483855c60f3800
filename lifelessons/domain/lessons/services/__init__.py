from .access_policy import ACCESS_ALL, AccessPolicy, Caller
from .engagement_mutator import (
    LIKE,
    SAVE,
    EngagementDelta,
    EngagementIntent,
    EngagementKind,
    EngagementMutator,
    EngagementOutcome,
)

__all__ = [
    "ACCESS_ALL",
    "LIKE",
    "SAVE",
    "AccessPolicy",
    "Caller",
    "EngagementDelta",
    "EngagementIntent",
    "EngagementKind",
    "EngagementMutator",
    "EngagementOutcome",
]
