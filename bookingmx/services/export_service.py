from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Set

from graphviz import Graph as DotGraph

from bookingmx.models import Graph, get_nearby_cities

log = logging.getLogger(__name__)

FONT = "DejaVu Sans"
COLOR_ORIGIN = "#2e7d32"
COLOR_NEARBY = "#ff6d00"


def to_graphviz(
    graph: Graph,
    highlight: Optional[str] = None,
    max_distance: Optional[float] = None,
    name: str = "cities",
) -> DotGraph:
    """
    Undirected graphviz diagram of the city graph.
    Each road becomes one edge labelled with its length.
    If highlight names a city, it and its nearby cities
    (within max_distance) are coloured.
    """
    dot = DotGraph(name, format="png")
    dot.attr(layout="neato", overlap="false")
    dot.attr("graph", fontname=FONT)
    dot.attr("node", fontname=FONT, shape="ellipse")
    dot.attr("edge", fontname=FONT)

    nearby: Set[str] = set()
    if highlight is not None:
        nearby = {n.city for n in get_nearby_cities(graph, highlight, max_distance)}

    for city in graph.cities:
        if city == highlight:
            dot.node(city, style="filled", fillcolor=COLOR_ORIGIN, fontcolor="white")
        elif city in nearby:
            dot.node(city, style="filled", fillcolor=COLOR_NEARBY)
        else:
            dot.node(city)

    for road in graph.edges():
        attrs = {"label": f"{road.distance:g} km"}
        touches_origin = highlight in (road.source, road.target)
        other = road.target if road.source == highlight else road.source
        if touches_origin and other in nearby:
            attrs["color"] = COLOR_NEARBY
            attrs["penwidth"] = "2"
        dot.edge(road.source, road.target, **attrs)

    return dot


def render_graph(
    graph: Graph,
    path: Path,
    fmt: str = "png",
    highlight: Optional[str] = None,
    max_distance: Optional[float] = None,
) -> Path:
    """
    Renders the diagram next to path (graphviz adds the extension).
    Needs the graphviz binaries on PATH.
    """
    dot = to_graphviz(graph, highlight=highlight, max_distance=max_distance)
    dot.format = fmt
    out = dot.render(str(path), cleanup=True)
    log.info("Graph diagram saved to %s", out)
    return Path(out)
