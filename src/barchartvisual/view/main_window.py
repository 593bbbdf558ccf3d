"""
Main Application Window
=======================
The host application around the visual: chart view, format pane and menus.

Why is this file needed?
------------------------
1. Host lifecycle: it plays the part of the analytics application. It owns the
   current data view and viewport and calls `Visual.update` whenever either of
   them, or a formatting property, changes.
2. Routing: it connects File -> Open / Export SVG to the data loaders and the
   renderer's SVG export.
"""
import logging
import os
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QFileDialog, QMainWindow, QMessageBox, QSplitter

from barchartvisual.config import DEFAULT_VIEWPORT, VISIBLE_APP_NAME
from barchartvisual.host.visual_host import VisualHost
from barchartvisual.model.data_view import DataView, Viewport, VisualUpdateOptions
from barchartvisual.model.io import DataLoadError, load_data_view
from barchartvisual.view.chart_widget import ChartView
from barchartvisual.view.format_pane import FormatPane
from barchartvisual.view.visual import Visual

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, data_view: Optional[DataView] = None, host: Optional[VisualHost] = None) -> None:
        super().__init__()
        self.host: VisualHost = host if host is not None else VisualHost()
        self.data_view: Optional[DataView] = data_view
        self.filepath: Optional[str] = None
        self.viewport = Viewport(*DEFAULT_VIEWPORT)

        self.visual = Visual(self.host)

        self.update_window_title()
        self.resize(900, 600)

        # --- LEFT: format pane | RIGHT: chart ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        self.format_pane = FormatPane()
        splitter.addWidget(self.format_pane)

        self.chart_view = ChartView(self.visual.scene)
        splitter.addWidget(self.chart_view)
        splitter.setSizes([220, 680])

        # --- SIGNAL CONNECTIONS ---
        self.chart_view.viewport_resized.connect(self.on_viewport_resized)
        self.chart_view.background_clicked.connect(self.visual.renderer.clear_selection)
        self.format_pane.property_changed.connect(self.on_property_changed)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial Render
        self.refresh()

    def _create_actions(self) -> None:
        self.act_open = QAction("Open Data...", self)
        self.act_open.setShortcut("Ctrl+O")
        self.act_open.triggered.connect(self.on_file_open)

        self.act_export_svg = QAction("Export SVG...", self)
        self.act_export_svg.setShortcut("Ctrl+E")
        self.act_export_svg.triggered.connect(self.on_export_svg)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.act_open)
        file_menu.addAction(self.act_export_svg)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- HELPER METHODS ---

    def update_window_title(self) -> None:
        filename = os.path.basename(self.filepath) if self.filepath else "Untitled"
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - [{filename}]")

    def refresh(self) -> None:
        """Run one update cycle of the visual and sync the format pane."""
        data_views = [self.data_view] if self.data_view is not None else None
        self.visual.update(VisualUpdateOptions(viewport=self.viewport, data_views=data_views))
        self.format_pane.populate(self.visual.enumerate_object_instances)

    # --- SLOTS ---

    def on_viewport_resized(self, width: int, height: int) -> None:
        self.viewport = Viewport(width, height)
        self.refresh()

    def on_property_changed(self, object_name: str, property_name: str, value: object) -> None:
        if self.data_view is None:
            self.data_view = DataView()
        self.data_view.set_object_property(object_name, property_name, value)
        self.refresh()

    def on_file_open(self) -> None:
        fname, _ = QFileDialog.getOpenFileName(
            self, "Open Data", "", "Data Files (*.json *.csv)"
        )
        if fname:
            self.open_file(fname)

    def open_file(self, fname: str) -> bool:
        try:
            data_view = load_data_view(fname)
        except DataLoadError as e:
            QMessageBox.critical(self, "Error", f"Could not open file:\n{e}")
            return False

        # Keep the user's formatting when only the data is replaced
        if self.data_view is not None and self.data_view.metadata.objects and not data_view.metadata.objects:
            data_view.metadata = self.data_view.metadata

        self.data_view = data_view
        self.filepath = fname
        self.update_window_title()
        self.visual.renderer.clear_selection()
        self.refresh()
        return True

    def on_export_svg(self) -> None:
        fname, _ = QFileDialog.getSaveFileName(
            self, "Export SVG", "", "SVG Files (*.svg)"
        )
        if fname:
            if not fname.endswith(".svg"):
                fname += ".svg"
            try:
                self.visual.renderer.export_svg(fname, title=VISIBLE_APP_NAME)
            except OSError as e:
                QMessageBox.critical(self, "Error", f"Could not export chart:\n{e}")
