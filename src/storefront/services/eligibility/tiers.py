"""Eligibility tier implementations, highest confidence first."""

from __future__ import annotations

import logging
from typing import Optional

from ...models.domain import Coordinate, VendorProfile
from ..geospatial import distance_km, effective_radius_km
from .base import NOT_APPLICABLE, EligibilityTier, QueryContext, TierOutcome, TierResult, any_tag_matches, text_overlaps

logger = logging.getLogger(__name__)


def _within_radius(buyer: Coordinate, store: Coordinate, vendor: VendorProfile, context: QueryContext) -> TierResult:
    distance = distance_km(buyer, store)
    limit = effective_radius_km(context.query.radius_km, vendor.delivery_radius_km)
    outcome = TierOutcome.MATCH if distance <= limit else TierOutcome.NO_MATCH
    logger.debug(
        "Vendor %s is %.2f km from buyer (limit %.2f km): %s",
        vendor.vendor_id,
        distance,
        limit,
        outcome.value,
    )
    return TierResult(outcome, distance_km=distance)


class GeoTier(EligibilityTier):
    """Distance check against the vendor's stored coordinates."""

    name = "geo"

    def evaluate(self, vendor: VendorProfile, context: QueryContext) -> TierResult:
        if context.coordinate is None or vendor.store_location is None:
            return NOT_APPLICABLE
        store = vendor.store_location.coordinate
        if store is None:
            return NOT_APPLICABLE
        return _within_radius(context.coordinate, store, vendor, context)


class DeliveryAreaTier(EligibilityTier):
    """Vendor delivery-area tags against the buyer's search text."""

    name = "delivery_area"

    def evaluate(self, vendor: VendorProfile, context: QueryContext) -> TierResult:
        if not vendor.delivery_areas or not context.search_text:
            return NOT_APPLICABLE
        if any_tag_matches(vendor.delivery_areas, context.search_text):
            return TierResult(TierOutcome.MATCH)
        return TierResult(TierOutcome.NO_MATCH)


class DerivedCoordinateTier(EligibilityTier):
    """Geocode the vendor's own city/state when no coordinates were stored."""

    name = "derived_coordinate"

    def evaluate(self, vendor: VendorProfile, context: QueryContext) -> TierResult:
        location = vendor.store_location
        if context.coordinate is None or location is None or location.coordinate is not None:
            return NOT_APPLICABLE
        store: Optional[Coordinate] = context.resolver.resolve_place(location.city, location.state)
        if store is None:
            return NOT_APPLICABLE
        return _within_radius(context.coordinate, store, vendor, context)


class TextFallbackTier(EligibilityTier):
    """Field-by-field substring comparison of buyer and store address text."""

    name = "text_fallback"

    def evaluate(self, vendor: VendorProfile, context: QueryContext) -> TierResult:
        location = vendor.store_location
        if location is None or not context.query.has_location:
            return NOT_APPLICABLE
        query = context.query
        pairs = (
            (query.city, location.city),
            (query.state, location.state),
            (query.postal_code, location.postal_code),
        )
        compared = False
        for buyer_value, store_value in pairs:
            if not buyer_value or not store_value:
                continue
            compared = True
            if text_overlaps(buyer_value, store_value):
                return TierResult(TierOutcome.MATCH)
        return TierResult(TierOutcome.NO_MATCH) if compared else NOT_APPLICABLE
