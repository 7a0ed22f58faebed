"""Buyer location query schema and its fail-fast guard."""

from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SEARCH_RADIUS_KM = 25.0
MIN_SEARCH_RADIUS_KM = 1.0
MAX_SEARCH_RADIUS_KM = 100.0


class InvalidLocationQueryError(ValueError):
    """Raised when a malformed location query reaches the matching engine."""


class LocationQuery(BaseModel):
    """Immutable buyer location filter."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    postal_code: Optional[str] = Field(default=None, alias="zipCode", max_length=20)
    radius_km: float = Field(
        default=DEFAULT_SEARCH_RADIUS_KM,
        alias="radius",
        ge=MIN_SEARCH_RADIUS_KM,
        le=MAX_SEARCH_RADIUS_KM,
        description="Search radius in kilometres.",
    )

    @field_validator("city", "state", "postal_code", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("radius_km", mode="before")
    @classmethod
    def _reject_bool_radius(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("radius must be a number")
        return value

    @field_validator("radius_km")
    @classmethod
    def _finite_radius(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("radius must be finite")
        return value

    def location_fields(self) -> list[str]:
        """Non-empty city, state and postal code, in that order."""

        return [value for value in (self.city, self.state, self.postal_code) if value]

    @property
    def has_location(self) -> bool:
        return bool(self.location_fields())

    @property
    def search_text(self) -> str:
        """Buyer fields joined by spaces, lower-cased."""

        return " ".join(self.location_fields()).lower()


def ensure_valid_query(query: Any) -> LocationQuery:
    """Reject anything that is not a well-formed ``LocationQuery``.

    Queries built with ``model_construct`` skip pydantic validation, so the
    radius is re-checked here rather than coerced.
    """

    if not isinstance(query, LocationQuery):
        raise InvalidLocationQueryError(f"Expected LocationQuery, got {type(query).__name__}")
    radius = query.radius_km
    if isinstance(radius, bool) or not isinstance(radius, (int, float)):
        raise InvalidLocationQueryError(f"radius_km must be numeric, got {radius!r}")
    if not math.isfinite(radius) or not MIN_SEARCH_RADIUS_KM <= radius <= MAX_SEARCH_RADIUS_KM:
        raise InvalidLocationQueryError(
            f"radius_km must be between {MIN_SEARCH_RADIUS_KM:g} and {MAX_SEARCH_RADIUS_KM:g}, got {radius!r}"
        )
    for name in ("city", "state", "postal_code"):
        value = getattr(query, name)
        if value is not None and not isinstance(value, str):
            raise InvalidLocationQueryError(f"{name} must be a string, got {type(value).__name__}")
    return query
