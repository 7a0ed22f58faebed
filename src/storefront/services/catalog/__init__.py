"""Catalog location filtering."""

from .filter import (
    CatalogFilter,
    filter_products_by_location,
    filter_vendors_by_location,
    get_catalog_filter,
    refine_products,
)

__all__ = [
    "CatalogFilter",
    "filter_products_by_location",
    "filter_vendors_by_location",
    "get_catalog_filter",
    "refine_products",
]
