"""Base classes for eligibility tier implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ...models.domain import Coordinate, VendorProfile
from ...schemas.location import LocationQuery
from ..geocoding import GeocodeResolver


class TierOutcome(str, Enum):
    MATCH = "match"
    NO_MATCH = "no_match"
    NOT_APPLICABLE = "not_applicable"


@dataclass(frozen=True, slots=True)
class TierResult:
    outcome: TierOutcome
    distance_km: Optional[float] = None

    @property
    def matched(self) -> bool:
        return self.outcome is TierOutcome.MATCH


NOT_APPLICABLE = TierResult(TierOutcome.NOT_APPLICABLE)


@dataclass(frozen=True, slots=True)
class QueryContext:
    """Per-query values computed once and shared by every vendor evaluation."""

    query: LocationQuery
    search_text: str
    coordinate: Optional[Coordinate]
    resolver: GeocodeResolver


@dataclass(frozen=True, slots=True)
class EligibilityDecision:
    vendor_id: str
    eligible: bool
    tier: Optional[str] = None
    distance_km: Optional[float] = None


class EligibilityTier(ABC):
    """Contract for one heuristic stage of the matching procedure."""

    name: str = ""

    @abstractmethod
    def evaluate(self, vendor: VendorProfile, context: QueryContext) -> TierResult:
        raise NotImplementedError


def text_overlaps(left: str, right: str) -> bool:
    """Case-insensitive containment in either direction; blanks never match."""

    a = left.strip().lower()
    b = right.strip().lower()
    if not a or not b:
        return False
    return a in b or b in a


def any_tag_matches(tags: tuple[str, ...] | list[str], search_text: str) -> bool:
    return any(text_overlaps(tag, search_text) for tag in tags)
