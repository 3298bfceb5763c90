from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
    QSplitter,
    QTextEdit,
    QMessageBox,
)

from bookingmx.models import Neighbor
from bookingmx.models.data_loader import load_graph
from bookingmx.services import GraphService
from .controls_panel import ControlsPanel
from .nearby_canvas import NearbyCanvas

log = logging.getLogger(__name__)

DEFAULT_ORIGIN = "Guadalajara"


class MainWindow(QMainWindow):
    """
    Main window.
    Left: the nearby canvas with the result text below it.
    Right: the control panel.
    """

    def __init__(self, data_file: Optional[Path] = None) -> None:
        super().__init__()
        self.setWindowTitle("BookingMx – nearby cities")

        try:
            graph = load_graph(data_file)
        except (OSError, ValueError) as exc:
            log.exception("Failed to load the city graph")
            QMessageBox.critical(
                self,
                "Data loading error",
                f"Could not load the city graph: {exc}",
            )
            raise

        self._graph_service = GraphService(graph)

        self._init_ui()
        self._connect_signals()

        self.resize(1100, 750)

    def _init_ui(self) -> None:
        central = QWidget(self)
        root_layout = QHBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Horizontal, central)

        # ---- left: canvas + result ----
        left_container = QWidget(splitter)
        left_layout = QVBoxLayout(left_container)
        left_layout.setContentsMargins(4, 4, 4, 4)
        left_layout.setSpacing(6)

        self.canvas = NearbyCanvas(self._graph_service)
        left_layout.addWidget(self.canvas, stretch=4)

        self.result_view = QTextEdit(left_container)
        self.result_view.setReadOnly(True)
        self.result_view.setMinimumHeight(110)
        self.result_view.setMaximumHeight(180)
        self.result_view.setPlaceholderText("Nearby cities will be listed here.")
        left_layout.addWidget(self.result_view, stretch=1)

        splitter.addWidget(left_container)

        # ---- right: controls ----
        self.controls = ControlsPanel(self._graph_service)
        splitter.addWidget(self.controls)

        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)

        root_layout.addWidget(splitter)
        self.setCentralWidget(central)

        cities = self._graph_service.list_cities()
        self.controls.update_cities(cities)

        origin = DEFAULT_ORIGIN if DEFAULT_ORIGIN in cities else (cities[0] if cities else "")
        if origin:
            self.controls.set_origin_city(origin)
            self.canvas.set_origin(origin)

    def _connect_signals(self) -> None:
        self.controls.request_nearby.connect(self._on_find_nearby)
        self.controls.graph_changed.connect(self._on_graph_changed)
        self.controls.origin_changed.connect(self._on_origin_changed)

        self.canvas.node_selected.connect(self.controls.set_origin_city)

    # ----------- signal handlers -----------

    def _on_find_nearby(self, origin: str, max_distance: Optional[float]) -> None:
        nearby = self._graph_service.nearby(origin, max_distance)
        self.canvas.show_nearby(origin, nearby)
        self._set_result_text(self._format_nearby(origin, max_distance, nearby))

    def _on_origin_changed(self, origin: str) -> None:
        self.canvas.set_origin(origin)
        self._set_result_text("")

    def _on_graph_changed(self) -> None:
        self.controls.update_cities(self._graph_service.list_cities())
        self.canvas.refresh()
        self._set_result_text("")

    # ----------- result text -----------

    def _set_result_text(self, text: str) -> None:
        self.result_view.setPlainText(text)

    @staticmethod
    def _format_nearby(
        origin: str, max_distance: Optional[float], nearby: List[Neighbor]
    ) -> str:
        """
        Guadalajara, up to 20 km: 2 cities
          Tlaquepaque – 10 km
          Zapopan – 15 km
        """
        limit = "no limit" if max_distance is None else f"up to {max_distance:g} km"
        if not nearby:
            return f"{origin}, {limit}: no nearby cities."

        lines = [f"{n.city} – {n.distance:g} km" for n in nearby]
        return f"{origin}, {limit}: {len(nearby)} cities\n  " + "\n  ".join(lines)
