"""
Application Initialization
==========================
Builds the host window around the visual and starts the Qt event loop.

Why is this file needed?
------------------------
It is the composition root. It:
1. Configures logging (BARCHART_DEBUG=1 for debug output).
2. Creates the QApplication and applies pyqtgraph's global look.
3. Loads the sample data view (or the file given on the command line).
4. Shows the MainWindow.
"""
import logging
import sys
from typing import Optional

import pyqtgraph as pg
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from barchartvisual.config import SAMPLE_DATA_PATH, VISIBLE_APP_NAME
from barchartvisual.logging_config import level_from_env, setup_logging
from barchartvisual.model.data_view import DataView
from barchartvisual.model.io import DataLoadError, load_data_view
from barchartvisual.view.main_window import MainWindow

logger = logging.getLogger(__name__)

APP_ID = "barchartvisual"

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOption("antialias", True)


def _initial_data_view(argv: list[str]) -> Optional[DataView]:
    path = argv[1] if len(argv) > 1 else SAMPLE_DATA_PATH
    try:
        return load_data_view(path)
    except DataLoadError as e:
        logger.warning(f"Starting with an empty chart: {e}")
        return None


def main() -> int:
    # 1. Logging
    setup_logging(level=level_from_env())

    # 2. Qt Application
    QCoreApplication.setApplicationName(APP_ID)
    app = QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    # 3. Data
    data_view = _initial_data_view(sys.argv)

    # 4. Main Window
    window = MainWindow(data_view)
    window.show()

    # 5. Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
