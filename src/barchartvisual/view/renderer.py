"""
Chart Renderer
==============
Maps a ChartViewModel onto the drawing surface (a QGraphicsScene).

Why is this file needed?
------------------------
1. Geometry: it derives the value and category scales for the current surface
   size and settings, and positions every bar and the axis from them.
2. Reconciliation: bar items persist across renders and are keyed by their
   index in `data_points`. New indices get a new item, existing ones are
   updated in place (their selection opacity survives), surplus ones are
   removed from the scene.
3. State: the settings of the last render are kept so the property pane can
   read them back.
"""
from __future__ import annotations

from concurrent.futures import Future
import logging
import math
from typing import List, Optional, TYPE_CHECKING

from PySide6.QtCore import QRectF, QSize
from PySide6.QtGui import QPainter
from PySide6.QtSvg import QSvgGenerator
from PySide6.QtWidgets import QGraphicsRectItem, QGraphicsScene

import pyqtgraph as pg

from barchartvisual.config import (
    AXIS_FONT_SCALE, AXIS_RESERVED_HEIGHT, BAND_OUTER_PADDING, BAND_PADDING
)
from barchartvisual.model.settings import DisplaySettings, VisualObjectInstance, enumerate_settings
from barchartvisual.view.interactivity import SelectionBinding, SelectionService, bind_bar_click, clear_selection
from barchartvisual.view.items import AxisItem, BarItem
from barchartvisual.view.scales import BandScale, LinearScale

if TYPE_CHECKING:
    from barchartvisual.model.view_model import ChartViewModel, DataPoint

logger = logging.getLogger(__name__)


def _numeric(value: object) -> float:
    """Bars for missing or non-numeric values sit on the baseline."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return float(value)


class ChartRenderer:
    """
    Owns the drawing surface and everything drawn on it.

    The scene holds a bar container (parent of all BarItems) and the AxisItem.
    """

    def __init__(self, selection_manager: SelectionService, scene: Optional[QGraphicsScene] = None) -> None:
        self.scene: QGraphicsScene = scene if scene is not None else QGraphicsScene()
        self.width: float = 0.0
        self.height: float = 0.0
        self.plot_height: float = 0.0
        self.settings: DisplaySettings = DisplaySettings()

        # Container only: no pen, no brush, empty rect
        self.bar_container = QGraphicsRectItem()
        self.bar_container.setPen(pg.mkPen(None))
        self.scene.addItem(self.bar_container)

        self.axis = AxisItem()
        self.scene.addItem(self.axis)

        self.bars: List[BarItem] = []
        self.selection = SelectionBinding(bars=self.bars, selection_manager=selection_manager)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def resize(self, width: float, height: float) -> None:
        """Set the pixel size of the drawing surface."""
        self.width = float(width)
        self.height = float(height)
        self.scene.setSceneRect(0, 0, self.width, self.height)

    def render(self, view_model: ChartViewModel) -> None:
        self.settings = view_model.settings

        width = self.width
        height = self.height
        if self.settings.enable_axis.show:
            height = max(height - AXIS_RESERVED_HEIGHT, 0.0)
        self.plot_height = height

        y_scale = LinearScale(domain=(0, _numeric(view_model.data_max)), range_=(height, 0))
        x_scale = BandScale(
            domain=[dp.category for dp in view_model.data_points],
            range_=(0, width),
            padding=BAND_PADDING,
            outer_padding=BAND_OUTER_PADDING,
        )
        font_size = min(width, height) * AXIS_FONT_SCALE

        self._reconcile_bars(view_model.data_points, x_scale, y_scale, height)

        if self.settings.enable_axis.show:
            self.axis.redraw(x_scale, y=height, font_size=font_size)
        else:
            self.axis.hide_axis()

        logger.debug(
            f"Rendered {len(self.bars)} bars on {width:g}x{self.height:g} "
            f"(plot height {height:g}, axis {'on' if self.settings.enable_axis.show else 'off'})"
        )

    def enumerate_settings(self, object_name: str) -> List[VisualObjectInstance]:
        return enumerate_settings(self.settings, object_name)

    def clear_selection(self) -> Future:
        return clear_selection(self.selection)

    def export_svg(self, filepath: str, title: str = "Bar chart") -> None:
        """Write the current surface to an SVG file."""
        size = QSize(max(1, int(self.width)), max(1, int(self.height)))
        generator = QSvgGenerator()
        generator.setFileName(filepath)
        generator.setSize(size)
        generator.setViewBox(QRectF(0, 0, size.width(), size.height()))
        generator.setTitle(title)

        painter = QPainter()
        if not painter.begin(generator):
            raise OSError(f"Cannot write SVG to {filepath}")
        try:
            self.scene.render(painter, QRectF(0, 0, size.width(), size.height()), self.scene.sceneRect())
        finally:
            painter.end()
        logger.info(f"Exported chart to: {filepath}")

    def destroy(self) -> None:
        self._remove_bars(0)
        self.axis.hide_axis()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _reconcile_bars(
        self,
        data_points: List[DataPoint],
        x_scale: BandScale,
        y_scale: LinearScale,
        plot_height: float,
    ) -> None:
        # enter
        for _ in range(len(self.bars), len(data_points)):
            bar = BarItem(self.bar_container)
            bind_bar_click(bar, self.selection)
            self.bars.append(bar)

        # exit
        self._remove_bars(len(data_points))

        # update
        for bar, dp in zip(self.bars, data_points):
            y = min(y_scale(_numeric(dp.value)), plot_height)
            bar.update_geometry(
                dp,
                x=x_scale(dp.category),
                y=y,
                width=x_scale.bandwidth,
                height=plot_height - y,
            )

    def _remove_bars(self, keep: int) -> None:
        # In-place so the SelectionBinding keeps seeing the live list
        surplus = self.bars[keep:]
        del self.bars[keep:]
        for bar in surplus:
            bar.set_click_handler(None)
            bar.setParentItem(None)
            self.scene.removeItem(bar)
