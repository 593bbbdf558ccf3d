"""
Configuration & Constants
=========================
Central registry for layout constants and resource paths.

Why is this file needed?
------------------------
1. Layout: the renderer's magic numbers (axis reservation, band padding, font
   factor, selection opacities) live in one place instead of inline.
2. Deployment: it handles the PyInstaller lookup (sys._MEIPASS) so the sample
   dataset is found when the app is frozen into an executable.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    SAMPLE_DATA_PATH (str): Absolute path to the bundled sample data view.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/barchartvisual/
    project_root: Path = Path(__file__).parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# ---- Layout ----
AXIS_RESERVED_HEIGHT: float = 25.0
BAND_PADDING: float = 0.1
BAND_OUTER_PADDING: float = 0.2
AXIS_FONT_SCALE: float = 0.04

# d3-style bottom axis geometry (px)
AXIS_TICK_SIZE: float = 6.0
AXIS_TICK_PADDING: float = 3.0

# ---- Selection highlighting ----
FULL_OPACITY: float = 1.0
DIMMED_OPACITY: float = 0.5

# ---- Host defaults ----
VISIBLE_APP_NAME: str = "Bar Chart"
DEFAULT_VIEWPORT: tuple[int, int] = (400, 300)

# ---- Resources ----
ASSETS_PATH: str = get_resource_path("assets")
SAMPLE_DATA_PATH: str = os.path.join(ASSETS_PATH, "sample_dataview.json")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
