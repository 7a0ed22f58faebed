"""Vendor location endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...data.catalog_repository import CatalogSnapshot
from ...models.domain import VendorProfile
from ...schemas.catalog import StoreLocationModel, VendorMatchModel
from ...services.catalog import CatalogFilter, get_catalog_filter
from ...services.eligibility import EligibilityDecision
from ..dependencies import build_location_query, get_catalog_snapshot

router = APIRouter(prefix="/vendors", tags=["vendors"])


def _to_model(vendor: VendorProfile, decision: EligibilityDecision) -> VendorMatchModel:
    location = vendor.store_location
    return VendorMatchModel(
        id=vendor.vendor_id,
        storeName=vendor.store_name,
        storeLocation=StoreLocationModel(
            street=location.street,
            city=location.city,
            state=location.state,
            zipCode=location.postal_code,
            country=location.country,
            latitude=location.latitude,
            longitude=location.longitude,
        )
        if location
        else None,
        deliveryAreas=list(vendor.delivery_areas),
        deliveryRadius=vendor.delivery_radius_km,
        matchedTier=decision.tier or "",
        distanceKm=round(decision.distance_km, 2) if decision.distance_km is not None else None,
    )


@router.get("/nearby", response_model=List[VendorMatchModel], status_code=status.HTTP_200_OK)
def list_nearby_vendors(
    city: str | None = Query(default=None, description="Buyer city"),
    state: str | None = Query(default=None, description="Buyer state"),
    zip_code: str | None = Query(default=None, alias="zipCode", description="Buyer postal code"),
    radius: str | None = Query(default=None, description="Search radius in km (1-100)"),
    snapshot: CatalogSnapshot = Depends(get_catalog_snapshot),
    catalog_filter: CatalogFilter = Depends(get_catalog_filter),
) -> List[VendorMatchModel]:
    query = build_location_query(city, state, zip_code, radius)
    if not query.has_location:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one of city, state or zipCode is required.",
        )
    matches = catalog_filter.match_vendors(snapshot.vendors, query)
    return [_to_model(vendor, decision) for vendor, decision in matches]
