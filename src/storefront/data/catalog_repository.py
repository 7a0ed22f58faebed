"""Data access helpers for loading vendor and product snapshots."""

from __future__ import annotations

import functools
import json
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Optional

from ..config import settings
from ..models.domain import Coordinate, Product, StoreLocation, VendorProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    vendors: tuple[VendorProfile, ...]
    products: tuple[Product, ...]


def _coerce_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"Unable to parse float from value '{value}'")
    try:
        return float(str(value).replace(",", "")) if isinstance(value, str) else float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Unable to parse float from value '{value}'") from exc


def _coerce_decimal(value: Any, default: str) -> Decimal:
    if value is None or value == "":
        return Decimal(default)
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Unable to parse decimal from value '{value}'") from exc


def _coerce_int(value: Any, default: int = 0) -> int:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise ValueError(f"Unable to parse integer from value '{value}'")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Unable to parse integer from value '{value}'")
    try:
        return int(value.strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Unable to parse integer from value '{value}'") from exc


def _string_list(value: Any, field_name: str) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value.strip(),) if value.strip() else ()
    if not isinstance(value, list):
        raise ValueError(f"{field_name} must be a list, got {type(value).__name__}")
    if not all(isinstance(item, str) for item in value):
        raise ValueError(f"{field_name} must contain only strings")
    return tuple(item.strip() for item in value if item.strip())


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _tags(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        value = [value]
    return tuple(str(tag).strip() for tag in value if str(tag).strip())


def _parse_store_location(raw: Any) -> Optional[StoreLocation]:
    if not raw:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"storeLocation must be an object, got {type(raw).__name__}")
    latitude = _coerce_float(raw.get("latitude"))
    longitude = _coerce_float(raw.get("longitude"))
    if latitude is not None and longitude is not None:
        Coordinate(latitude, longitude)  # range check
    return StoreLocation(
        street=_text(raw.get("street")),
        city=_text(raw.get("city")),
        state=_text(raw.get("state")),
        postal_code=_text(raw.get("zipCode") or raw.get("postalCode")),
        country=_text(raw.get("country")),
        latitude=latitude,
        longitude=longitude,
    )


def parse_vendor(row: dict) -> VendorProfile:
    vendor_id = _text(row.get("id"))
    if not vendor_id:
        raise ValueError("vendor record is missing 'id'")
    radius = _coerce_float(row.get("deliveryRadius"))
    return VendorProfile(
        vendor_id=vendor_id,
        store_name=_text(row.get("storeName")) or vendor_id,
        store_location=_parse_store_location(row.get("storeLocation")),
        delivery_areas=_tags(row.get("deliveryAreas")),
        delivery_radius_km=radius if radius is not None else settings.default_delivery_radius_km,
        approved=bool(row.get("isApproved", True)),
        delivery_fee=_coerce_decimal(row.get("deliveryFee"), "0"),
        free_delivery_threshold=_coerce_decimal(row.get("freeDeliveryThreshold"), "50"),
    )


def parse_product(row: dict) -> Product:
    product_id = _text(row.get("id"))
    vendor_id = _text(row.get("vendorId"))
    if not product_id or not vendor_id:
        raise ValueError("product record requires 'id' and 'vendorId'")
    return Product(
        product_id=product_id,
        vendor_id=vendor_id,
        name=_text(row.get("name")) or "",
        description=_text(row.get("description")) or "",
        price=_coerce_decimal(row.get("price"), "0"),
        category_id=_text(row.get("categoryId")),
        available_in_areas=_tags(row.get("availableInAreas")),
        active=bool(row.get("isActive", True)),
        sku=_text(row.get("sku")),
        stock=_coerce_int(row.get("stock")),
        images=_string_list(row.get("images"), "images"),
    )


@functools.lru_cache(maxsize=1)
def load_catalog(source: Optional[Path] = None) -> CatalogSnapshot:
    """Load vendors and products from the configured JSON snapshot."""

    json_path = source or settings.catalog_file
    if not json_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {json_path}")

    with json_path.open(mode="r", encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Catalog file '{json_path}' is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise ValueError(f"Catalog file '{json_path}' must contain an object with 'vendors' and 'products'.")

    vendors: list[VendorProfile] = []
    for index, row in enumerate(payload.get("vendors") or []):
        try:
            vendors.append(parse_vendor(row))
        except (ValueError, TypeError, AttributeError) as exc:
            logger.warning("Skipping invalid vendor record #%d: %s", index, exc)

    products: list[Product] = []
    for index, row in enumerate(payload.get("products") or []):
        try:
            products.append(parse_product(row))
        except (ValueError, TypeError, AttributeError) as exc:
            logger.warning("Skipping invalid product record #%d: %s", index, exc)

    logger.info("Loaded catalog snapshot %s: %d vendors, %d products", json_path, len(vendors), len(products))
    return CatalogSnapshot(vendors=tuple(vendors), products=tuple(products))


def set_active_catalog_file(path: Path) -> None:
    """Update the active catalog snapshot and clear the cached copy."""

    settings.catalog_file = path
    load_catalog.cache_clear()
