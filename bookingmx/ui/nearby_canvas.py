from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPen, QBrush, QFont, QColor
from PySide6.QtWidgets import (
    QGraphicsView,
    QGraphicsScene,
    QGraphicsEllipseItem,
    QGraphicsLineItem,
    QGraphicsTextItem,
)

from bookingmx.models import Neighbor
from bookingmx.models.layout import radial_layout
from bookingmx.services import GraphService


@dataclass
class NodeItems:
    """Graphics items of one city."""
    circle: QGraphicsEllipseItem
    label: QGraphicsTextItem


@dataclass
class EdgeItems:
    """Graphics items of one road from the origin."""
    line: QGraphicsLineItem
    label: QGraphicsTextItem


class NearbyCanvas(QGraphicsView):
    """
    Canvas with the origin city in the middle and its direct neighbors
    around it:
    - distance from the centre follows the road length;
    - neighbors inside the search radius are highlighted;
    - click on a neighbor to make it the new origin;
    - zoom with the mouse wheel.
    """

    COLOR_NODE_BASE = QColor("#90a4ae")  # out of range
    COLOR_NODE_BORDER = QColor("#ffffff")
    COLOR_NODE_LABEL = QColor("#0d0d0d")

    COLOR_EDGE_BASE = QColor(0, 0, 0, 90)
    COLOR_EDGE_LABEL = QColor("#37474f")

    COLOR_ORIGIN = QColor("#2e7d32")  # green origin
    COLOR_NEARBY = QColor("#ff6d00")  # orange in range

    node_selected = Signal(str)

    NODE_RADIUS = 16
    LAYOUT_RADIUS = 260.0

    def __init__(self, graph_service: GraphService, parent=None) -> None:
        super().__init__(parent)

        self._graph_service = graph_service
        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        self._node_items: Dict[str, NodeItems] = {}
        self._edge_items: Dict[str, EdgeItems] = {}

        self._origin: Optional[str] = None
        self._in_range: Set[str] = set()

        self.setDragMode(QGraphicsView.ScrollHandDrag)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)

    # ---------- public API ----------

    def set_origin(self, name: str) -> None:
        """Redraws the canvas around a new origin; clears highlighting."""
        self._origin = name if self._graph_service.has_city(name) else None
        self._in_range = set()
        self.refresh()

    def show_nearby(self, origin: str, nearby: List[Neighbor]) -> None:
        """Highlights the result of a nearby query."""
        if origin != self._origin:
            self._origin = origin if self._graph_service.has_city(origin) else None
            self.refresh()
        self._in_range = {n.city for n in nearby}
        self._apply_coloring()

    def refresh(self) -> None:
        """Full redraw from the graph."""
        self._scene.clear()
        self._node_items.clear()
        self._edge_items.clear()

        if self._origin is None:
            return

        # all direct neighbors, nearest first, without a distance limit
        neighbors = self._graph_service.nearby(self._origin)
        positions = radial_layout(self._origin, neighbors, radius=self.LAYOUT_RADIUS)

        ox, oy = positions[self._origin]
        for n in neighbors:
            if n.city in self._edge_items or n.city == self._origin:
                continue  # parallel road, the nearest one is already drawn
            x, y = positions[n.city]
            self._edge_items[n.city] = self._draw_edge(ox, oy, x, y, n.distance)

        for city, (x, y) in positions.items():
            self._draw_vertex(city, x, y)

        self._scene.setSceneRect(self._scene.itemsBoundingRect().adjusted(-40, -40, 40, 40))
        self._apply_coloring()

    # ---------- drawing ----------

    def _draw_vertex(self, name: str, x: float, y: float) -> None:
        r = self.NODE_RADIUS
        circle = self._scene.addEllipse(
            x - r,
            y - r,
            2 * r,
            2 * r,
            QPen(self.COLOR_NODE_BORDER, 2),
            QBrush(self.COLOR_NODE_BASE),
        )
        circle.setData(0, name)

        label = self._scene.addText(name)
        font = QFont()
        font.setPointSize(8)
        font.setBold(True)
        label.setFont(font)
        label.setDefaultTextColor(self.COLOR_NODE_LABEL)
        br = label.boundingRect()
        label.setPos(x - br.width() / 2, y + r)

        circle.setZValue(1)
        label.setZValue(2)
        self._node_items[name] = NodeItems(circle=circle, label=label)

    def _draw_edge(self, x1: float, y1: float, x2: float, y2: float, distance: float) -> EdgeItems:
        line = self._scene.addLine(x1, y1, x2, y2, QPen(self.COLOR_EDGE_BASE, 2))
        line.setZValue(0)

        label = self._scene.addText(f"{distance:g} km")
        font = QFont()
        font.setPointSize(7)
        label.setFont(font)
        label.setDefaultTextColor(self.COLOR_EDGE_LABEL)
        br = label.boundingRect()
        label.setPos((x1 + x2) / 2 - br.width() / 2, (y1 + y2) / 2 - br.height() / 2)
        label.setZValue(2)
        return EdgeItems(line=line, label=label)

    def _apply_coloring(self) -> None:
        for name, node in self._node_items.items():
            if name == self._origin:
                color = self.COLOR_ORIGIN
            elif name in self._in_range:
                color = self.COLOR_NEARBY
            else:
                color = self.COLOR_NODE_BASE
            node.circle.setBrush(QBrush(color))

        for name, edge in self._edge_items.items():
            if name in self._in_range:
                edge.line.setPen(QPen(self.COLOR_NEARBY, 3))
            else:
                edge.line.setPen(QPen(self.COLOR_EDGE_BASE, 2))

    # ---------- mouse ----------

    def wheelEvent(self, event):  # noqa: N802
        zoom_in_factor = 1.25
        if event.angleDelta().y() > 0:
            self.scale(zoom_in_factor, zoom_in_factor)
        else:
            self.scale(1 / zoom_in_factor, 1 / zoom_in_factor)

    def mousePressEvent(self, event):  # noqa: N802
        if event.button() == Qt.LeftButton:
            item = self.itemAt(event.pos())
            name = item.data(0) if item is not None else None
            if name and name != self._origin:
                self.node_selected.emit(name)
                return
        super().mousePressEvent(event)
