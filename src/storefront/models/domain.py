"""Domain models for vendor, product and coordinate records."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

DEFAULT_DELIVERY_RADIUS_KM = 10.0


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A (latitude, longitude) pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Invalid latitude: {self.latitude}. Must be between -90 and 90.")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Invalid longitude: {self.longitude}. Must be between -180 and 180.")


@dataclass(frozen=True, slots=True)
class StoreLocation:
    """Physical store address, optionally carrying explicit coordinates."""

    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def coordinate(self) -> Optional[Coordinate]:
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class VendorProfile:
    """Read-only view over a vendor record used for location matching."""

    vendor_id: str
    store_name: str
    store_location: Optional[StoreLocation] = None
    delivery_areas: tuple[str, ...] = ()
    delivery_radius_km: float = DEFAULT_DELIVERY_RADIUS_KM
    approved: bool = True
    delivery_fee: Decimal = Decimal("0")
    free_delivery_threshold: Decimal = Decimal("50")


@dataclass(frozen=True, slots=True)
class Product:
    """Read-only view over a catalog product."""

    product_id: str
    vendor_id: str
    name: str
    description: str = ""
    price: Decimal = Decimal("0")
    category_id: Optional[str] = None
    available_in_areas: tuple[str, ...] = ()
    active: bool = True
    sku: Optional[str] = None
    stock: int = 0
    images: tuple[str, ...] = ()
