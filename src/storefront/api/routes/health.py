"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/catalog", status_code=status.HTTP_200_OK)
def health_catalog() -> dict:
    """Report whether the active catalog snapshot can be loaded."""
    from ...config import settings
    from ...data.catalog_repository import load_catalog

    try:
        snapshot = load_catalog()
    except (FileNotFoundError, ValueError) as exc:
        return {
            "loaded": False,
            "catalog_file": str(settings.catalog_file),
            "error": str(exc),
        }
    return {
        "loaded": True,
        "catalog_file": str(settings.catalog_file),
        "vendors": len(snapshot.vendors),
        "approved_vendors": sum(1 for vendor in snapshot.vendors if vendor.approved),
        "products": len(snapshot.products),
    }


@router.get("/health/gazetteer", status_code=status.HTTP_200_OK)
def health_gazetteer() -> dict:
    from ...services.geocoding import default_gazetteer

    gazetteer = default_gazetteer()
    return {
        "entries": len(gazetteer),
        "ambiguous_city_names": sorted(gazetteer.ambiguous_names),
    }
