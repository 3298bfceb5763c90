from .export_service import render_graph, to_graphviz
from .graph_service import GraphService

__all__ = ["GraphService", "render_graph", "to_graphviz"]
