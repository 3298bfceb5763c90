from __future__ import annotations

from typing import List, Optional

from .graph import Graph, Neighbor


def get_nearby_cities(
    graph: Graph,
    origin: str,
    max_distance: Optional[float] = None,
) -> List[Neighbor]:
    """
    Direct neighbors of origin no farther than max_distance, nearest first.
    Roads of equal length keep the order they were added in.

    Only one hop: cities reachable through other cities are not included.
    An unknown origin gives an empty list instead of an error.
    """
    if not isinstance(graph, Graph):
        raise TypeError("graph must be Graph")

    if not graph.has_city(origin):
        return []

    candidates = graph.neighbors(origin)
    if max_distance is not None:
        candidates = [n for n in candidates if n.distance <= max_distance]

    # sorted() is stable, so ties stay in insertion order
    return sorted(candidates, key=lambda n: n.distance)
