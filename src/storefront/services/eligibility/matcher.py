"""Per-vendor eligibility decisions as an ordered OR of tiers."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ...models.domain import VendorProfile
from ...schemas.location import LocationQuery, ensure_valid_query
from ..geocoding import GeocodeResolver
from .base import EligibilityDecision, EligibilityTier, QueryContext
from .dispatcher import build_tiers

logger = logging.getLogger(__name__)


class EligibilityMatcher:
    """Decide whether a vendor may serve a buyer location.

    Tiers run in order and the first MATCH grants eligibility; a later tier
    can never revoke it. Unapproved vendors and vendors with neither a store
    location nor delivery-area tags are rejected before any tier runs.
    """

    def __init__(self, resolver: GeocodeResolver, tiers: Optional[Sequence[EligibilityTier]] = None) -> None:
        self.resolver = resolver
        self.tiers: tuple[EligibilityTier, ...] = tuple(tiers) if tiers is not None else build_tiers()

    def prepare(self, query: LocationQuery) -> QueryContext:
        query = ensure_valid_query(query)
        coordinate = None
        if query.has_location:
            coordinate = self.resolver.resolve_place(query.city, query.state, query.postal_code)
        return QueryContext(
            query=query,
            search_text=query.search_text,
            coordinate=coordinate,
            resolver=self.resolver,
        )

    def evaluate(self, vendor: VendorProfile, context: QueryContext) -> EligibilityDecision:
        if not vendor.approved:
            return EligibilityDecision(vendor.vendor_id, eligible=False)
        if vendor.store_location is None and not vendor.delivery_areas:
            return EligibilityDecision(vendor.vendor_id, eligible=False)

        for tier in self.tiers:
            result = tier.evaluate(vendor, context)
            if result.matched:
                logger.debug("Vendor %s eligible via %s tier", vendor.vendor_id, tier.name)
                return EligibilityDecision(
                    vendor.vendor_id,
                    eligible=True,
                    tier=tier.name,
                    distance_km=result.distance_km,
                )
        return EligibilityDecision(vendor.vendor_id, eligible=False)

    def is_eligible(self, vendor: VendorProfile, query: LocationQuery) -> bool:
        return self.evaluate(vendor, self.prepare(query)).eligible
