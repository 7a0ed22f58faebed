"""Shared request helpers for the catalog endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException, status
from pydantic import ValidationError

from ..config import settings
from ..data.catalog_repository import CatalogSnapshot, load_catalog
from ..schemas.location import LocationQuery

logger = logging.getLogger(__name__)


def get_catalog_snapshot() -> CatalogSnapshot:
    try:
        return load_catalog()
    except FileNotFoundError as exc:
        logger.error("Catalog snapshot unavailable: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Catalog snapshot is not available.",
        ) from exc
    except ValueError as exc:
        logger.error("Catalog snapshot could not be parsed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to load catalog: {exc}",
        ) from exc


def build_location_query(
    city: Optional[str],
    state: Optional[str],
    zip_code: Optional[str],
    radius: Optional[str],
) -> LocationQuery:
    """Validate raw query-string values into a ``LocationQuery`` or answer 400."""

    payload = {
        "city": city,
        "state": state,
        "zipCode": zip_code,
        "radius": radius if radius not in (None, "") else settings.default_search_radius_km,
    }
    try:
        return LocationQuery.model_validate(payload)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Invalid location parameters",
                "errors": exc.errors(include_url=False, include_context=False, include_input=False),
            },
        ) from exc
