"""
Pre-flight checks for a raw {cities, edges} dataset.

Validation never raises for bad content: it reports the first problem it
finds as data, so callers can decide what to do before building a Graph.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from .graph import is_valid_city_name, is_valid_distance

DUPLICATE_CITIES = "duplicate cities"
INVALID_CITY_ENTRY = "invalid city entry"
UNKNOWN_EDGE_CITY = "edge references unknown city"
INVALID_DISTANCE = "invalid distance"


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason: Optional[str] = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> "ValidationResult":
        return cls(ok=False, reason=reason)

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {"ok": True}
        return {"ok": False, "reason": self.reason}


def _has_duplicates(cities: Sequence[Any]) -> bool:
    seen_hashable = set()
    seen_other = []
    for city in cities:
        try:
            if city in seen_hashable:
                return True
            seen_hashable.add(city)
        except TypeError:
            if city in seen_other:
                return True
            seen_other.append(city)
    return False


def _edge_field(edge: Any, key: str) -> Any:
    if isinstance(edge, Mapping):
        return edge.get(key)
    return None


def validate_graph_data(data: Mapping) -> ValidationResult:
    """
    Checks run in a fixed order and stop at the first failure:
    1) duplicate city names;
    2) a city entry that is not a non-empty string;
    3) an edge whose "from" or "to" is not in the city list;
    4) an edge distance that is not a finite, non-negative number.
    """
    cities = list(data.get("cities") or [])
    edges = list(data.get("edges") or [])

    if _has_duplicates(cities):
        return ValidationResult.failure(DUPLICATE_CITIES)

    if not all(is_valid_city_name(city) for city in cities):
        return ValidationResult.failure(INVALID_CITY_ENTRY)

    known = set(cities)
    for edge in edges:
        for key in ("from", "to"):
            endpoint = _edge_field(edge, key)
            if not isinstance(endpoint, str) or endpoint not in known:
                return ValidationResult.failure(UNKNOWN_EDGE_CITY)

    for edge in edges:
        if not is_valid_distance(_edge_field(edge, "distance")):
            return ValidationResult.failure(INVALID_DISTANCE)

    return ValidationResult.success()
