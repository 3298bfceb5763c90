from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QGroupBox,
    QFormLayout,
    QComboBox,
    QPushButton,
    QDoubleSpinBox,
    QLineEdit,
    QCheckBox,
    QMessageBox,
)

from bookingmx.models import GraphError
from bookingmx.services import GraphService


class ControlsPanel(QWidget):
    """
    Right-hand control panel:
    - origin city and search radius;
    - "unbounded" switch for the radius;
    - adding cities and roads to the graph.
    """

    # --- signals handled by MainWindow ---
    request_nearby = Signal(str, object)  # origin, max distance or None
    graph_changed = Signal()
    origin_changed = Signal(str)

    def __init__(self, graph_service: GraphService, parent=None) -> None:
        super().__init__(parent)
        self._graph_service = graph_service

        self._init_ui()

    # ---------- building the interface ----------

    def _init_ui(self) -> None:
        root_layout = QVBoxLayout(self)
        root_layout.setAlignment(Qt.AlignTop)

        # ---------- nearby search ----------
        search_group = QGroupBox("Nearby cities")
        search_form = QFormLayout()

        self.combo_origin = QComboBox()
        self.radius_spin = QDoubleSpinBox()
        self.radius_spin.setRange(0.0, 10000.0)
        self.radius_spin.setDecimals(1)
        self.radius_spin.setSuffix(" km")
        self.radius_spin.setValue(100.0)

        self.unbounded_checkbox = QCheckBox("No distance limit")
        self.btn_find = QPushButton("Find nearby")

        search_form.addRow("Origin:", self.combo_origin)
        search_form.addRow("Max distance:", self.radius_spin)
        search_form.addRow(self.unbounded_checkbox)
        search_form.addRow(self.btn_find)

        search_group.setLayout(search_form)
        root_layout.addWidget(search_group)

        # ---------- graph editing ----------
        add_city_group = QGroupBox("Add city")
        add_city_form = QFormLayout()
        self.city_name_edit = QLineEdit()
        self.btn_add_city = QPushButton("Add city")
        add_city_form.addRow("Name:", self.city_name_edit)
        add_city_form.addRow(self.btn_add_city)
        add_city_group.setLayout(add_city_form)

        add_road_group = QGroupBox("Add road")
        add_road_form = QFormLayout()
        self.combo_road_from = QComboBox()
        self.combo_road_to = QComboBox()
        self.road_distance_spin = QDoubleSpinBox()
        self.road_distance_spin.setRange(0.0, 10000.0)
        self.road_distance_spin.setSuffix(" km")
        self.road_distance_spin.setValue(10.0)
        self.btn_add_road = QPushButton("Add road")

        add_road_form.addRow("From:", self.combo_road_from)
        add_road_form.addRow("To:", self.combo_road_to)
        add_road_form.addRow("Distance:", self.road_distance_spin)
        add_road_form.addRow(self.btn_add_road)
        add_road_group.setLayout(add_road_form)

        root_layout.addWidget(add_city_group)
        root_layout.addWidget(add_road_group)
        root_layout.addStretch()

        self._connect_signals()

    def _connect_signals(self) -> None:
        self.btn_find.clicked.connect(self._on_find_clicked)
        self.btn_add_city.clicked.connect(self._on_add_city)
        self.btn_add_road.clicked.connect(self._on_add_road)

        self.combo_origin.currentTextChanged.connect(self.origin_changed.emit)
        self.unbounded_checkbox.toggled.connect(
            lambda checked: self.radius_spin.setEnabled(not checked)
        )

    # ---------- API for MainWindow ----------

    def update_cities(self, cities: List[str]) -> None:
        """
        Refreshes every city combo box, keeping the current selection.
        """
        for combo in (self.combo_origin, self.combo_road_from, self.combo_road_to):
            current = combo.currentText()
            combo.blockSignals(True)
            combo.clear()
            combo.addItems(cities)
            if current and current in cities:
                combo.setCurrentText(current)
            combo.blockSignals(False)

    def set_origin_city(self, name: str) -> None:
        idx = self.combo_origin.findText(name)
        if idx >= 0:
            self.combo_origin.setCurrentIndex(idx)

    def max_distance(self) -> Optional[float]:
        if self.unbounded_checkbox.isChecked():
            return None
        return self.radius_spin.value()

    # ---------- internal handlers ----------

    def _on_find_clicked(self) -> None:
        origin = self.combo_origin.currentText()
        if not origin:
            return
        self.request_nearby.emit(origin, self.max_distance())

    def _on_add_city(self) -> None:
        name = self.city_name_edit.text()
        try:
            self._graph_service.add_city(name)
        except GraphError as exc:
            QMessageBox.warning(self, "Cannot add city", str(exc))
            return
        self.city_name_edit.clear()
        self.graph_changed.emit()

    def _on_add_road(self) -> None:
        source = self.combo_road_from.currentText()
        target = self.combo_road_to.currentText()
        distance = self.road_distance_spin.value()
        if not source or not target:
            return
        try:
            self._graph_service.add_road(source, target, distance)
        except GraphError as exc:
            QMessageBox.warning(self, "Cannot add road", str(exc))
            return
        self.graph_changed.emit()
