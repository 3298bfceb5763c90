import sys

from PySide6.QtWidgets import QApplication

from bookingmx.config import Settings
from bookingmx.logging_config import configure
from bookingmx.resources import load_dark_theme
from bookingmx.ui.main_window import MainWindow


def main() -> None:
    """
    Application entry point.
    Only responsible for:
    - logging and settings;
    - creating the QApplication and loading the style;
    - showing the main window.
    """
    settings = Settings.from_env()
    configure(settings.log_level)

    app = QApplication(sys.argv)
    load_dark_theme(app)

    window = MainWindow(settings.data_file)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
