"""Vendor eligibility matching."""

from .base import EligibilityDecision, EligibilityTier, QueryContext, TierOutcome, TierResult
from .dispatcher import DEFAULT_TIER_ORDER, build_tiers, get_tier
from .matcher import EligibilityMatcher

__all__ = [
    "DEFAULT_TIER_ORDER",
    "EligibilityDecision",
    "EligibilityMatcher",
    "EligibilityTier",
    "QueryContext",
    "TierOutcome",
    "TierResult",
    "build_tiers",
    "get_tier",
]
