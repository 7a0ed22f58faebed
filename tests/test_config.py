from pathlib import Path

from src.storefront.config import Settings


def test_settings_defaults():
    config = Settings()

    assert config.api_prefix == "/api"
    assert config.default_search_radius_km == 25
    assert config.default_delivery_radius_km == 10
    assert config.eligibility_tiers == ("geo", "delivery_area", "derived_coordinate", "text_fallback")
    assert config.catalog_file.is_absolute()


def test_settings_read_environment(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("STOREFRONT_ELIGIBILITY_TIERS", '["geo", "text_fallback"]')
    monkeypatch.setenv("STOREFRONT_CATALOG_FILE", str(tmp_path / "snapshot.json"))
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "debug")

    config = Settings()

    assert config.eligibility_tiers == ("geo", "text_fallback")
    assert config.catalog_file == (tmp_path / "snapshot.json").resolve()
    assert config.log_level == "DEBUG"


def test_settings_accept_comma_separated_tuples(monkeypatch):
    monkeypatch.setenv("STOREFRONT_ELIGIBILITY_TIERS", "geo, text_fallback")
    monkeypatch.setenv("STOREFRONT_FRONTEND_ALLOWED_ORIGINS", "https://shop.example.com,http://localhost:5173")

    config = Settings()

    assert config.eligibility_tiers == ("geo", "text_fallback")
    assert config.frontend_allowed_origins == ("https://shop.example.com", "http://localhost:5173")


def test_settings_accept_single_tier(monkeypatch):
    monkeypatch.setenv("STOREFRONT_ELIGIBILITY_TIERS", "delivery_area")

    assert Settings().eligibility_tiers == ("delivery_area",)
