"""Pydantic response models for vendor and product endpoints."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel


class StoreLocationModel(BaseModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipCode: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class VendorMatchModel(BaseModel):
    id: str
    storeName: str
    storeLocation: Optional[StoreLocationModel] = None
    deliveryAreas: List[str]
    deliveryRadius: float
    matchedTier: str
    distanceKm: Optional[float] = None


class VendorSummaryModel(BaseModel):
    storeName: str
    deliveryFee: str
    freeDeliveryThreshold: str
    deliveryRadius: float
    deliveryAreas: List[str]


class ProductModel(BaseModel):
    id: str
    vendorId: str
    categoryId: Optional[str] = None
    name: str
    description: str
    price: str
    sku: Optional[str] = None
    stock: int = 0
    images: List[str] = []
    availableInAreas: List[str]
    isActive: bool
    vendor: Optional[VendorSummaryModel] = None
