import pytest

from src.storefront.models.domain import Coordinate
from src.storefront.services.geocoding import Gazetteer, GeocodeResolver, default_gazetteer

ROWS = [
    ("Springfield", "IL", 39.7817, -89.6501),
    ("Springfield", "MO", 37.2090, -93.2923),
    ("Chicago", "IL", 41.8781, -87.6298),
    ("Austin", "TX", 30.2672, -97.7431),
    ("New York", "NY", 40.7128, -74.0060),
]
STATES = {"illinois": "IL", "missouri": "MO", "texas": "TX", "new york": "NY"}


def _gazetteer() -> Gazetteer:
    return Gazetteer.from_rows(ROWS, state_codes=STATES)


def _resolver() -> GeocodeResolver:
    return GeocodeResolver(_gazetteer())


def test_lookup_by_pair_key_and_unique_city():
    gazetteer = _gazetteer()

    assert gazetteer.lookup("springfield, il") == Coordinate(39.7817, -89.6501)
    assert gazetteer.lookup("  CHICAGO ") == Coordinate(41.8781, -87.6298)
    assert gazetteer.lookup("Austin, Texas") == Coordinate(30.2672, -97.7431)
    assert gazetteer.lookup("boston") is None


def test_shared_city_name_is_ambiguous_without_state():
    gazetteer = _gazetteer()

    assert gazetteer.is_ambiguous("Springfield")
    assert gazetteer.lookup("springfield") is None
    assert not gazetteer.is_ambiguous("chicago")


def test_duplicate_pair_rejected():
    with pytest.raises(ValueError):
        Gazetteer.from_rows(ROWS + [("Chicago", "IL", 41.0, -87.0)])


def test_out_of_range_row_rejected():
    with pytest.raises(ValueError):
        Gazetteer.from_rows([("Nowhere", "ZZ", 120.0, 0.0)])


def test_resolve_empty_text_returns_none():
    resolver = _resolver()

    assert resolver.resolve("") is None
    assert resolver.resolve("   ") is None
    assert resolver.resolve(None) is None


def test_resolve_uses_text_before_comma():
    resolver = _resolver()

    assert resolver.resolve("Austin, TX 78701") == Coordinate(30.2672, -97.7431)
    assert resolver.resolve("New York, 10001") == Coordinate(40.7128, -74.0060)


def test_resolve_containment_in_either_direction():
    resolver = _resolver()

    assert resolver.resolve("Downtown Austin") == Coordinate(30.2672, -97.7431)
    assert resolver.resolve("chica") == Coordinate(41.8781, -87.6298)


def test_resolve_containment_prefers_pair_keys():
    resolver = _resolver()

    assert resolver.resolve("springfield, mo 65801") == Coordinate(37.2090, -93.2923)


def test_resolve_ambiguous_city_returns_none():
    resolver = _resolver()

    assert resolver.resolve("Springfield") is None
    assert resolver.resolve("Springfield, XX") is None


def test_resolve_unknown_place_returns_none():
    assert _resolver().resolve("Atlantis") is None


def test_resolve_place_canonicalizes_state_names():
    resolver = _resolver()

    assert resolver.resolve_place("Springfield", "Missouri") == Coordinate(37.2090, -93.2923)
    assert resolver.resolve_place("Springfield", "IL", "62701") == Coordinate(39.7817, -89.6501)
    assert resolver.resolve_place(None, None, None) is None


def test_default_gazetteer_covers_major_cities():
    gazetteer = default_gazetteer()

    assert len(gazetteer) > 150
    assert gazetteer.lookup("new york") == Coordinate(40.7128, -74.0060)
    assert gazetteer.lookup("los angeles, california") == Coordinate(34.0522, -118.2437)
    assert gazetteer.is_ambiguous("portland")
    assert gazetteer.lookup("portland, or") == Coordinate(45.5152, -122.6784)
    assert gazetteer.lookup("washington, district of columbia") == Coordinate(38.9072, -77.0369)
    assert default_gazetteer() is gazetteer
