"""Factory for eligibility tiers based on configured names."""

from __future__ import annotations

from typing import Iterable

from .base import EligibilityTier
from .tiers import DeliveryAreaTier, DerivedCoordinateTier, GeoTier, TextFallbackTier

DEFAULT_TIER_ORDER = ("geo", "delivery_area", "derived_coordinate", "text_fallback")


def get_tier(name: str) -> EligibilityTier:
    match name:
        case "geo":
            return GeoTier()
        case "delivery_area":
            return DeliveryAreaTier()
        case "derived_coordinate":
            return DerivedCoordinateTier()
        case "text_fallback":
            return TextFallbackTier()
        case _:
            raise ValueError(f"Unknown eligibility tier '{name}'.")


def build_tiers(names: Iterable[str] = DEFAULT_TIER_ORDER) -> tuple[EligibilityTier, ...]:
    tiers = tuple(get_tier(name) for name in names)
    if not tiers:
        raise ValueError("At least one eligibility tier must be configured.")
    return tiers
