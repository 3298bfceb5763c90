from __future__ import annotations

import logging
from typing import List, Optional

from bookingmx.models import Graph, Neighbor, get_nearby_cities

log = logging.getLogger(__name__)


class GraphService:
    """
    Service around the city graph.
    Wraps the add/query operations used by the GUI.
    Unlike the graph itself it keeps the city list sorted for display.
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @property
    def graph(self) -> Graph:
        return self._graph

    # ---------- cities ----------

    def list_cities(self) -> List[str]:
        return sorted(self._graph.cities)

    def has_city(self, name: str) -> bool:
        return self._graph.has_city(name)

    def add_city(self, name: str) -> None:
        """
        Adds a city; the name is stripped first.
        InvalidCityNameError propagates to the caller.
        """
        name = name.strip() if isinstance(name, str) else name
        self._graph.add_city(name)
        log.info("City added: %s", name)

    # ---------- roads ----------

    def add_road(self, source: str, target: str, distance: float) -> None:
        """
        Adds a two-way road. UnknownCityError / InvalidDistanceError
        propagate to the caller.
        """
        self._graph.add_edge(source, target, distance)
        log.info("Road added: %s - %s (%s km)", source, target, distance)

    def distance_between(self, a: str, b: str) -> Optional[float]:
        return self._graph.distance_between(a, b)

    # ---------- queries ----------

    def nearby(self, origin: str, max_distance: Optional[float] = None) -> List[Neighbor]:
        result = get_nearby_cities(self._graph, origin, max_distance)
        log.debug(
            "nearby origin=%s max=%s -> %d cities",
            origin,
            "unbounded" if max_distance is None else max_distance,
            len(result),
        )
        return result
