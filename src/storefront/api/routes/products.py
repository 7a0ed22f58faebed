"""Product listing endpoints with optional location filtering."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status

from ...data.catalog_repository import CatalogSnapshot
from ...models.domain import Product, VendorProfile
from ...schemas.catalog import ProductModel, VendorSummaryModel
from ...services.catalog import CatalogFilter, get_catalog_filter, refine_products
from ..dependencies import build_location_query, get_catalog_snapshot

router = APIRouter(prefix="/products", tags=["products"])


def _to_model(product: Product, vendor: VendorProfile | None) -> ProductModel:
    return ProductModel(
        id=product.product_id,
        vendorId=product.vendor_id,
        categoryId=product.category_id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        sku=product.sku,
        stock=product.stock,
        images=list(product.images),
        availableInAreas=list(product.available_in_areas),
        isActive=product.active,
        vendor=VendorSummaryModel(
            storeName=vendor.store_name,
            deliveryFee=str(vendor.delivery_fee),
            freeDeliveryThreshold=str(vendor.free_delivery_threshold),
            deliveryRadius=vendor.delivery_radius_km,
            deliveryAreas=list(vendor.delivery_areas),
        )
        if vendor
        else None,
    )


@router.get("", response_model=List[ProductModel], status_code=status.HTTP_200_OK)
def list_products(
    search: str | None = Query(default=None, description="Case-insensitive name/description search"),
    category: str | None = Query(default=None, description="Category id filter"),
    city: str | None = Query(default=None, description="Buyer city"),
    state: str | None = Query(default=None, description="Buyer state"),
    zip_code: str | None = Query(default=None, alias="zipCode", description="Buyer postal code"),
    radius: str | None = Query(default=None, description="Search radius in km (1-100)"),
    snapshot: CatalogSnapshot = Depends(get_catalog_snapshot),
    catalog_filter: CatalogFilter = Depends(get_catalog_filter),
) -> List[ProductModel]:
    if city or state or zip_code:
        query = build_location_query(city, state, zip_code, radius)
        products = catalog_filter.filter_products(snapshot.products, snapshot.vendors, query)
    else:
        products = [product for product in snapshot.products if product.active]

    products = refine_products(products, search=search, category=category)
    vendors = {vendor.vendor_id: vendor for vendor in snapshot.vendors}
    return [_to_model(product, vendors.get(product.vendor_id)) for product in products]
