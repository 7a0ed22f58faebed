"""Free-text location to coordinate resolution over a gazetteer."""

from __future__ import annotations

import logging
from typing import Optional

from ...models.domain import Coordinate
from .gazetteer import Gazetteer

logger = logging.getLogger(__name__)


class GeocodeResolver:
    """Approximate geocoder: some coordinate is better than none.

    Stages, first hit wins: exact key, the part before the first comma, then a
    bidirectional containment scan over the gazetteer keys in table order.
    """

    def __init__(self, gazetteer: Gazetteer) -> None:
        self.gazetteer = gazetteer

    def resolve(self, text: Optional[str]) -> Optional[Coordinate]:
        if not text or not text.strip():
            return None

        normalized = self.gazetteer.normalize_key(text)
        coordinate = self.gazetteer.lookup(normalized)
        if coordinate is not None:
            return coordinate

        if "," in normalized:
            head = normalized.split(",", 1)[0].strip()
            coordinate = self.gazetteer.lookup(head)
            if coordinate is not None:
                return coordinate

        if self.gazetteer.is_ambiguous(normalized):
            logger.debug("Location '%s' names several cities; state required", text)
            return None

        for key in self.gazetteer.keys():
            if key in normalized or normalized in key:
                logger.debug("Location '%s' resolved by containment on '%s'", text, key)
                return self.gazetteer.coordinate_for_key(key)

        logger.debug("Location '%s' not found in gazetteer", text)
        return None

    def resolve_place(
        self,
        city: Optional[str] = None,
        state: Optional[str] = None,
        postal_code: Optional[str] = None,
    ) -> Optional[Coordinate]:
        """Resolve structured address fields joined as ``"city, state, postal"``."""

        parts: list[str] = []
        if city and city.strip():
            parts.append(city.strip())
        if state and state.strip():
            # a pair key needs the canonical state code
            parts.append(self.gazetteer.state_code(state) if parts else state.strip())
        if postal_code and postal_code.strip():
            parts.append(postal_code.strip())
        if not parts:
            return None
        return self.resolve(", ".join(parts))
