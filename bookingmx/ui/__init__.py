from .controls_panel import ControlsPanel
from .main_window import MainWindow
from .nearby_canvas import NearbyCanvas

__all__ = ["ControlsPanel", "MainWindow", "NearbyCanvas"]
