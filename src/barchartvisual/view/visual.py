"""
Visual
======
The seam between the host lifecycle and the chart.

The host constructs one Visual, then calls `update` whenever data, size or
formatting changes, and `enumerate_object_instances` when the property pane
asks for current values.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtWidgets import QGraphicsScene

from barchartvisual.host.visual_host import VisualHost
from barchartvisual.model.data_view import VisualUpdateOptions
from barchartvisual.model.settings import VisualObjectInstance
from barchartvisual.model.view_model import ChartViewModel, build_view_model
from barchartvisual.view.renderer import ChartRenderer

logger = logging.getLogger(__name__)


class Visual:
    def __init__(self, host: VisualHost, scene: Optional[QGraphicsScene] = None) -> None:
        self.host = host
        self.renderer = ChartRenderer(host.selection_manager, scene=scene)
        self.view_model: ChartViewModel = ChartViewModel()

    @property
    def scene(self) -> QGraphicsScene:
        return self.renderer.scene

    def update(self, options: VisualUpdateOptions) -> ChartViewModel:
        self.view_model = build_view_model(
            options.data_views,
            self.host.color_palette,
            self.host.create_selection_id_builder,
        )
        self.renderer.resize(options.viewport.width, options.viewport.height)
        self.renderer.render(self.view_model)
        return self.view_model

    def enumerate_object_instances(self, object_name: str) -> List[VisualObjectInstance]:
        return self.renderer.enumerate_settings(object_name)

    def destroy(self) -> None:
        logger.debug("Destroying visual")
        self.renderer.destroy()
