from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Dict, List, Optional

from .errors import InvalidCityNameError, InvalidDistanceError, UnknownCityError


@dataclass(frozen=True)
class Neighbor:
    """
    One adjacency record.
    city     – the other endpoint of the road;
    distance – road length in kilometres.
    """
    city: str
    distance: float


@dataclass(frozen=True)
class Road:
    """Undirected road between two cities, as it was added."""
    source: str
    target: str
    distance: float


def is_valid_city_name(name: object) -> bool:
    return isinstance(name, str) and bool(name.strip())


def is_valid_distance(distance: object) -> bool:
    # bool is a subclass of int, but True is not a distance
    if isinstance(distance, bool) or not isinstance(distance, Real):
        return False
    return math.isfinite(distance) and distance >= 0


class Graph:
    """
    Undirected weighted graph of cities.
    Stores:
    - mapping city name -> list of Neighbor records;
    - list of roads in the order they were added.

    Not thread-safe: build it from one thread, then share it read-only.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, List[Neighbor]] = {}
        self._roads: List[Road] = []

    # ----------------- basic methods -----------------

    @property
    def cities(self) -> List[str]:
        return list(self._adjacency)

    def has_city(self, name: object) -> bool:
        return isinstance(name, str) and name in self._adjacency

    def __contains__(self, name: object) -> bool:
        return self.has_city(name)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(cities={len(self)}, roads={len(self._roads)})"

    def add_city(self, name: str) -> None:
        """
        Registers a city with an empty neighbor list.
        Adding a city that already exists is a no-op.
        """
        if not is_valid_city_name(name):
            raise InvalidCityNameError(name)
        self._adjacency.setdefault(name, [])

    def add_edge(self, source: str, target: str, distance: float) -> None:
        """
        Adds an undirected road: records source -> target and target -> source
        with the same distance. Both cities must already be registered.

        Duplicate roads are kept as parallel records; a road from a city to
        itself is recorded once.
        """
        for city in (source, target):
            if not self.has_city(city):
                raise UnknownCityError(city)
        if not is_valid_distance(distance):
            raise InvalidDistanceError(distance)

        self._roads.append(Road(source=source, target=target, distance=distance))
        self._adjacency[source].append(Neighbor(city=target, distance=distance))
        if source != target:
            self._adjacency[target].append(Neighbor(city=source, distance=distance))

    # ----------------- queries -----------------

    def neighbors(self, city: str) -> List[Neighbor]:
        """
        Returns the neighbors of a city in the order their roads were added.
        """
        if not self.has_city(city):
            raise UnknownCityError(city)
        return list(self._adjacency[city])

    def edges(self) -> List[Road]:
        """
        Every road once, in the order the roads were added.
        """
        return list(self._roads)

    def distance_between(self, a: str, b: str) -> Optional[float]:
        """
        Length of the shortest direct road between a and b, or None.
        """
        if not self.has_city(a) or not self.has_city(b):
            return None
        distances = [n.distance for n in self._adjacency[a] if n.city == b]
        return min(distances) if distances else None
