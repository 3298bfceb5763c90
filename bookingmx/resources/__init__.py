from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QApplication

log = logging.getLogger(__name__)


def load_dark_theme(app: QApplication, qss_path: Optional[Path] = None) -> None:
    """
    Loads the dark theme from a QSS file.
    A missing file is not an error: the default Qt style stays.
    """
    if qss_path is None:
        qss_path = Path(__file__).resolve().parent / "dark_theme.qss"

    if not qss_path.exists():
        log.debug("Theme %s not found, keeping the default style", qss_path)
        return

    with qss_path.open("r", encoding="utf-8") as f:
        app.setStyleSheet(f.read())
