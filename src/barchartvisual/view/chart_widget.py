"""Qt view hosting the chart scene."""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QFrame, QGraphicsScene, QGraphicsView, QWidget

logger = logging.getLogger(__name__)


class ChartView(QGraphicsView):
    """
    Shows the scene 1:1 in the top-left corner, without scrollbars.

    Emits `viewport_resized(width, height)` so the host can trigger a new
    update cycle, and `background_clicked` for clicks that hit no bar.
    """
    viewport_resized = Signal(int, int)
    background_clicked = Signal()

    def __init__(self, scene: QGraphicsScene, parent: Optional[QWidget] = None) -> None:
        super().__init__(scene, parent)
        self.setRenderHint(QPainter.Antialiasing)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setFrameShape(QFrame.NoFrame)
        self.setBackgroundBrush(Qt.white)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        size = self.viewport().size()
        self.viewport_resized.emit(size.width(), size.height())

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton and self.itemAt(event.position().toPoint()) is None:
            self.background_clicked.emit()
        super().mousePressEvent(event)
