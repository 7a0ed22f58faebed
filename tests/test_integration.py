import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.storefront.main import create_app

CATALOG = {
    "vendors": [
        {
            "id": "v-austin",
            "storeName": "Austin Greens",
            "storeLocation": {
                "city": "Austin",
                "state": "TX",
                "zipCode": "78701",
                "latitude": 30.2669,
                "longitude": -97.7428,
            },
            "deliveryAreas": ["Austin"],
            "deliveryRadius": 20,
            "deliveryFee": "4.99",
            "freeDeliveryThreshold": "40",
        },
        {
            "id": "v-springfield",
            "storeName": "Springfield Bakery",
            "storeLocation": {"city": "Springfield", "state": "IL", "zipCode": "62701"},
            "deliveryAreas": ["Downtown Springfield"],
        },
        {
            "id": "v-seattle",
            "storeName": "Seattle Roasters",
            "storeLocation": {"city": "Seattle", "state": "WA", "latitude": 47.6062, "longitude": -122.3321},
            "deliveryAreas": ["Seattle"],
            "isApproved": False,
        },
    ],
    "products": [
        {
            "id": "p-kale",
            "vendorId": "v-austin",
            "categoryId": "produce",
            "name": "Organic Kale",
            "description": "Fresh kale",
            "price": "3.49",
            "sku": "AG-KALE",
            "stock": 40,
            "availableInAreas": ["78701"],
        },
        {
            "id": "p-honey",
            "vendorId": "v-austin",
            "categoryId": "pantry",
            "name": "Wildflower Honey",
            "description": "Raw local honey",
            "price": "9.00",
        },
        {
            "id": "p-bread",
            "vendorId": "v-springfield",
            "categoryId": "bakery",
            "name": "Sourdough",
            "description": "Naturally leavened",
            "price": "6.50",
        },
        {
            "id": "p-coffee",
            "vendorId": "v-seattle",
            "categoryId": "pantry",
            "name": "Espresso Roast",
            "description": "Whole bean",
            "price": "15.00",
        },
        {
            "id": "p-retired",
            "vendorId": "v-austin",
            "name": "Old Stock",
            "price": "1.00",
            "isActive": False,
        },
    ],
}


@pytest.fixture
def api_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TestClient:
    from src.storefront.config import settings
    from src.storefront.data.catalog_repository import load_catalog

    catalog_path = tmp_path / "catalog.json"
    catalog_path.write_text(json.dumps(CATALOG), encoding="utf-8")
    monkeypatch.setattr(settings, "catalog_file", catalog_path)
    load_catalog.cache_clear()

    yield TestClient(create_app())

    load_catalog.cache_clear()


def test_health_endpoints(api_client: TestClient):
    assert api_client.get("/api/health").json() == {"status": "ok"}

    catalog = api_client.get("/api/health/catalog").json()
    assert catalog["loaded"] is True
    assert catalog["vendors"] == 3
    assert catalog["approved_vendors"] == 2

    gazetteer = api_client.get("/api/health/gazetteer").json()
    assert gazetteer["entries"] > 150
    assert "springfield" in gazetteer["ambiguous_city_names"]


def test_products_filtered_by_location(api_client: TestClient):
    response = api_client.get("/api/products", params={"city": "Austin", "state": "TX", "zipCode": "78701"})

    assert response.status_code == 200
    payload = response.json()
    assert [item["id"] for item in payload] == ["p-kale", "p-honey"]
    assert payload[0]["sku"] == "AG-KALE"
    assert payload[0]["vendor"]["storeName"] == "Austin Greens"
    assert payload[0]["vendor"]["deliveryFee"] == "4.99"


def test_product_area_tags_exclude_other_postal_codes(api_client: TestClient):
    response = api_client.get("/api/products", params={"city": "Austin", "zipCode": "78705"})

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == ["p-honey"]


def test_products_search_and_category_after_location(api_client: TestClient):
    response = api_client.get(
        "/api/products",
        params={"city": "Austin", "zipCode": "78701", "search": "HONEY", "category": "pantry"},
    )

    assert [item["id"] for item in response.json()] == ["p-honey"]


def test_products_without_location_list_active_products(api_client: TestClient):
    response = api_client.get("/api/products", params={"category": "pantry"})

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == ["p-honey", "p-coffee"]


def test_nearby_vendors_report_matching_tier(api_client: TestClient):
    response = api_client.get("/api/vendors/nearby", params={"city": "Springfield", "state": "IL"})

    assert response.status_code == 200
    payload = response.json()
    assert [item["id"] for item in payload] == ["v-springfield"]
    assert payload[0]["matchedTier"] == "derived_coordinate"
    assert payload[0]["distanceKm"] == 0.0


def test_nearby_vendors_by_delivery_area(api_client: TestClient):
    response = api_client.get("/api/vendors/nearby", params={"city": "Springfield"})

    payload = response.json()
    assert [item["id"] for item in payload] == ["v-springfield"]
    assert payload[0]["matchedTier"] == "delivery_area"
    assert payload[0]["distanceKm"] is None


def test_unapproved_vendor_hidden(api_client: TestClient):
    response = api_client.get("/api/vendors/nearby", params={"city": "Seattle", "state": "WA"})

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize("radius", ["abc", "0", "500"])
def test_invalid_radius_rejected(api_client: TestClient, radius: str):
    response = api_client.get("/api/products", params={"city": "Austin", "radius": radius})

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["message"] == "Invalid location parameters"
    assert detail["errors"]


def test_nearby_vendors_require_location(api_client: TestClient):
    response = api_client.get("/api/vendors/nearby")

    assert response.status_code == 400


def test_missing_catalog_returns_503(api_client: TestClient, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    from src.storefront.config import settings
    from src.storefront.data.catalog_repository import load_catalog

    monkeypatch.setattr(settings, "catalog_file", tmp_path / "absent.json")
    load_catalog.cache_clear()

    response = api_client.get("/api/vendors/nearby", params={"city": "Austin"})

    assert response.status_code == 503


def test_malformed_product_rows_are_skipped(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    from src.storefront.config import settings
    from src.storefront.data.catalog_repository import load_catalog

    catalog = {
        "vendors": CATALOG["vendors"],
        "products": [
            {"id": "p-bad-stock", "vendorId": "v-austin", "name": "Bad Stock", "stock": "ten"},
            {"id": "p-bad-images", "vendorId": "v-austin", "name": "Bad Images", "images": [1, 2]},
            CATALOG["products"][1],
        ],
    }
    catalog_path = tmp_path / "broken.json"
    catalog_path.write_text(json.dumps(catalog), encoding="utf-8")
    monkeypatch.setattr(settings, "catalog_file", catalog_path)
    load_catalog.cache_clear()

    try:
        response = TestClient(create_app()).get("/api/products")
    finally:
        load_catalog.cache_clear()

    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == ["p-honey"]
    assert response.json()[0]["images"] == []
