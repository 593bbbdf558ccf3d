"""
Scene Items
===========
Drawable primitives placed on the chart's QGraphicsScene.

Classes:
    BarItem: One clickable bar, bound to its DataPoint.
    AxisItem: Bottom category axis (domain line + one tick per band).
"""
from __future__ import annotations

from typing import Callable, List, Optional, TYPE_CHECKING

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont, QPainterPath
from PySide6.QtWidgets import (
    QGraphicsItem, QGraphicsItemGroup, QGraphicsLineItem, QGraphicsPathItem,
    QGraphicsRectItem, QGraphicsSimpleTextItem
)

from barchartvisual.config import AXIS_TICK_PADDING, AXIS_TICK_SIZE

if TYPE_CHECKING:
    from barchartvisual.model.view_model import DataPoint
    from barchartvisual.view.scales import BandScale

AXIS_COLOR = "k"


class BarItem(QGraphicsRectItem):
    """A bar rectangle carrying the data point it was last updated with."""

    def __init__(self, parent: Optional[QGraphicsItem] = None) -> None:
        super().__init__(parent)
        self.setPen(pg.mkPen(None))
        self.setAcceptedMouseButtons(Qt.LeftButton)
        self.setCursor(Qt.PointingHandCursor)
        self.data_point: Optional[DataPoint] = None
        self._on_click: Optional[Callable[[BarItem], object]] = None

    def update_geometry(self, data_point: DataPoint, x: float, y: float, width: float, height: float) -> None:
        self.data_point = data_point
        self.setRect(x, y, width, height)
        self.setBrush(pg.mkBrush(data_point.color))

    @property
    def fill(self) -> str:
        return self.brush().color().name()

    def set_click_handler(self, handler: Optional[Callable[[BarItem], object]]) -> None:
        self._on_click = handler

    def click(self) -> object:
        """Run the bound click handler, as a left-button press does."""
        if self._on_click is None:
            return None
        return self._on_click(self)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton and self._on_click is not None:
            self.click()
            event.accept()
            return
        super().mousePressEvent(event)


class AxisItem(QGraphicsItemGroup):
    """
    Bottom-oriented category axis.

    Positioned at the bottom edge of the plot area; ticks point down from the
    domain line with their labels centered underneath. Children are attached
    with setParentItem so their coordinates stay local to the axis.
    """

    def __init__(self, parent: Optional[QGraphicsItem] = None) -> None:
        super().__init__(parent)
        self.font_size: float = 0.0
        self.ticks: List[tuple[QGraphicsLineItem, QGraphicsSimpleTextItem]] = []
        self.domain_path = QGraphicsPathItem(self)
        self.domain_path.setPen(pg.mkPen(AXIS_COLOR))
        self.setVisible(False)

    def redraw(self, scale: BandScale, y: float, font_size: float) -> None:
        self.clear_ticks()
        self.setPos(0, y)
        self.font_size = font_size

        start, stop = scale.range_extent
        path = QPainterPath()
        path.moveTo(start, AXIS_TICK_SIZE)
        path.lineTo(start, 0)
        path.lineTo(stop, 0)
        path.lineTo(stop, AXIS_TICK_SIZE)
        self.domain_path.setPath(path)

        font = QFont()
        font.setPixelSize(max(1, int(round(font_size))))

        for key in scale.domain:
            cx = scale.center(key)
            line = QGraphicsLineItem(cx, 0, cx, AXIS_TICK_SIZE, self)
            line.setPen(pg.mkPen(AXIS_COLOR))

            label = QGraphicsSimpleTextItem("" if key is None else str(key), self)
            label.setFont(font)
            label.setBrush(pg.mkBrush(AXIS_COLOR))
            label_width = label.boundingRect().width()
            label.setPos(cx - label_width / 2, AXIS_TICK_SIZE + AXIS_TICK_PADDING)

            self.ticks.append((line, label))

        self.setVisible(True)

    def clear_ticks(self) -> None:
        scene = self.scene()
        for line, label in self.ticks:
            for item in (line, label):
                item.setParentItem(None)
                if scene is not None:
                    scene.removeItem(item)
        self.ticks = []

    def hide_axis(self) -> None:
        self.clear_ticks()
        self.domain_path.setPath(QPainterPath())
        self.setVisible(False)

    def tick_labels(self) -> List[str]:
        return [label.text() for _, label in self.ticks]
