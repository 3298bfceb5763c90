from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Union

from .graph import Graph


@dataclass(frozen=True)
class EdgeData:
    """
    Edge descriptor as it comes from a dataset.
    Serialised with the dataset's own keys: from / to / distance.
    """
    source: str
    target: str
    distance: float

    @classmethod
    def from_mapping(cls, raw: Mapping) -> "EdgeData":
        return cls(source=raw["from"], target=raw["to"], distance=raw["distance"])

    def to_mapping(self) -> Dict[str, Any]:
        return {"from": self.source, "to": self.target, "distance": self.distance}


EdgeLike = Union[EdgeData, Mapping]


def build_graph(cities: Iterable[str], edges: Iterable[EdgeLike]) -> Graph:
    """
    Builds a Graph from an already validated dataset:
    first every city in listed order, then every edge in listed order.

    Nothing is re-checked here; Graph errors propagate as they are.
    """
    graph = Graph()

    for city in cities:
        graph.add_city(city)

    for edge in edges:
        item = edge if isinstance(edge, EdgeData) else EdgeData.from_mapping(edge)
        graph.add_edge(item.source, item.target, item.distance)

    return graph
