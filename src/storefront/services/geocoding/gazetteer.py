"""Static place-name to coordinate lookup table."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Optional

from ...data.gazetteer_data import STATE_CODES, US_CITIES
from ...models.domain import Coordinate

logger = logging.getLogger(__name__)


def normalize_text(value: str) -> str:
    """Lower-case, trim and collapse internal whitespace."""

    return " ".join(value.lower().split())


@dataclass(frozen=True, slots=True)
class GazetteerEntry:
    city: str
    state: str
    coordinate: Coordinate

    @property
    def city_key(self) -> str:
        return normalize_text(self.city)

    @property
    def key(self) -> str:
        return f"{self.city_key}, {normalize_text(self.state)}"


class Gazetteer:
    """Read-only lookup keyed by ``"city, st"`` pairs.

    Bare city names form a secondary index that only answers for names carried
    by a single entry. Names shared by several states are ambiguous and never
    resolve without a state.
    """

    def __init__(
        self,
        entries: Iterable[GazetteerEntry],
        state_codes: Mapping[str, str] | None = None,
    ) -> None:
        self._entries: tuple[GazetteerEntry, ...] = tuple(entries)
        self._state_codes = {normalize_text(name): code.lower() for name, code in (state_codes or {}).items()}
        self._known_codes = set(self._state_codes.values())

        by_pair: dict[str, Coordinate] = {}
        by_city: dict[str, list[GazetteerEntry]] = {}
        for entry in self._entries:
            if entry.key in by_pair:
                raise ValueError(f"Duplicate gazetteer entry '{entry.key}'.")
            by_pair[entry.key] = entry.coordinate
            by_city.setdefault(entry.city_key, []).append(entry)
            self._known_codes.add(normalize_text(entry.state))

        self._by_pair = by_pair
        self._by_city = {
            city: matches[0].coordinate for city, matches in by_city.items() if len(matches) == 1
        }
        self._ambiguous = frozenset(city for city, matches in by_city.items() if len(matches) > 1)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[tuple[str, str, float, float]],
        state_codes: Mapping[str, str] | None = None,
    ) -> "Gazetteer":
        entries = [
            GazetteerEntry(city=city, state=state, coordinate=Coordinate(lat, lon))
            for city, state, lat, lon in rows
        ]
        return cls(entries, state_codes=state_codes)

    def __len__(self) -> int:
        return len(self._entries)

    def state_code(self, state: str) -> str:
        """Map a state name or code to its lower-case code; unknown values are only normalized."""

        normalized = normalize_text(state)
        return self._state_codes.get(normalized, normalized)

    def normalize_key(self, value: str) -> str:
        """Normalize free text; a ``"city, state"`` pair gets a canonical state code."""

        normalized = normalize_text(value)
        parts = [part.strip() for part in normalized.split(",")]
        if len(parts) == 2 and parts[0]:
            state = self.state_code(parts[1])
            if state in self._known_codes:
                return f"{parts[0]}, {state}"
        return normalized

    def lookup(self, key: str) -> Optional[Coordinate]:
        """Exact lookup of a pair key or an unambiguous bare city name."""

        normalized = self.normalize_key(key)
        if not normalized:
            return None
        coordinate = self._by_pair.get(normalized)
        if coordinate is not None:
            return coordinate
        return self._by_city.get(normalized)

    @property
    def ambiguous_names(self) -> frozenset[str]:
        return self._ambiguous

    def is_ambiguous(self, city: str) -> bool:
        return normalize_text(city) in self._ambiguous

    def keys(self) -> Iterator[str]:
        """Pair keys in table order, then unambiguous bare city names."""

        for entry in self._entries:
            yield entry.key
        for entry in self._entries:
            if entry.city_key in self._by_city:
                yield entry.city_key

    def coordinate_for_key(self, key: str) -> Optional[Coordinate]:
        coordinate = self._by_pair.get(key)
        if coordinate is None:
            coordinate = self._by_city.get(key)
        return coordinate


@functools.lru_cache(maxsize=1)
def default_gazetteer() -> Gazetteer:
    """Process-wide gazetteer built once from the curated city table."""

    gazetteer = Gazetteer.from_rows(US_CITIES, state_codes=STATE_CODES)
    logger.info("Gazetteer loaded with %d entries (%d ambiguous city names)", len(gazetteer), len(gazetteer.ambiguous_names))
    return gazetteer
