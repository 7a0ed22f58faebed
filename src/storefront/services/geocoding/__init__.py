"""Gazetteer-backed geocoding helpers."""

from .gazetteer import Gazetteer, GazetteerEntry, default_gazetteer, normalize_text
from .resolver import GeocodeResolver

__all__ = [
    "Gazetteer",
    "GazetteerEntry",
    "GeocodeResolver",
    "default_gazetteer",
    "normalize_text",
]
