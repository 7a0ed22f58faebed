"""Location filtering of vendors and products."""

from __future__ import annotations

import functools
import logging
from typing import Iterable, Optional, Sequence

from ...config import settings
from ...models.domain import Product, VendorProfile
from ...schemas.location import LocationQuery
from ..eligibility import EligibilityDecision, EligibilityMatcher, build_tiers
from ..eligibility.base import any_tag_matches
from ..geocoding import GeocodeResolver, default_gazetteer

logger = logging.getLogger(__name__)


class CatalogFilter:
    """Vendor gate first, then product-level area refinement."""

    def __init__(self, matcher: EligibilityMatcher) -> None:
        self.matcher = matcher

    def match_vendors(
        self, vendors: Iterable[VendorProfile], query: LocationQuery
    ) -> list[tuple[VendorProfile, EligibilityDecision]]:
        context = self.matcher.prepare(query)
        matches: list[tuple[VendorProfile, EligibilityDecision]] = []
        for vendor in vendors:
            decision = self.matcher.evaluate(vendor, context)
            if decision.eligible:
                matches.append((vendor, decision))
        return matches

    def filter_vendors(self, vendors: Iterable[VendorProfile], query: LocationQuery) -> list[VendorProfile]:
        return [vendor for vendor, _ in self.match_vendors(vendors, query)]

    def filter_products(
        self,
        products: Iterable[Product],
        vendors: Iterable[VendorProfile],
        query: LocationQuery,
    ) -> list[Product]:
        vendor_list = list(vendors)
        eligible_ids = {vendor.vendor_id for vendor in self.filter_vendors(vendor_list, query)}
        search_text = query.search_text

        results: list[Product] = []
        for product in products:
            if not product.active or product.vendor_id not in eligible_ids:
                continue
            if product.available_in_areas and not any_tag_matches(product.available_in_areas, search_text):
                continue
            results.append(product)

        logger.debug(
            "Location filter kept %d products from %d of %d vendors",
            len(results),
            len(eligible_ids),
            len(vendor_list),
        )
        return results


def refine_products(
    products: Iterable[Product],
    search: Optional[str] = None,
    category: Optional[str] = None,
) -> list[Product]:
    """Apply the storefront's name/description search and exact category filter."""

    items = list(products)
    if search and search.strip():
        term = search.strip().lower()
        items = [
            product
            for product in items
            if term in product.name.lower() or term in (product.description or "").lower()
        ]
    if category:
        items = [product for product in items if product.category_id == category]
    return items


@functools.lru_cache(maxsize=1)
def get_catalog_filter() -> CatalogFilter:
    """Default engine: process-wide gazetteer and the configured tier order."""

    resolver = GeocodeResolver(default_gazetteer())
    matcher = EligibilityMatcher(resolver, tiers=build_tiers(settings.eligibility_tiers))
    return CatalogFilter(matcher)


def filter_vendors_by_location(query: LocationQuery, vendors: Sequence[VendorProfile]) -> list[VendorProfile]:
    return get_catalog_filter().filter_vendors(vendors, query)


def filter_products_by_location(
    query: LocationQuery,
    vendors: Sequence[VendorProfile],
    products: Sequence[Product],
) -> list[Product]:
    return get_catalog_filter().filter_products(products, vendors, query)
