"""Bundle of host services handed to the visual at construction time."""
from __future__ import annotations

from dataclasses import dataclass, field

from barchartvisual.host.palette import ColorPalette
from barchartvisual.host.selection import SelectionIdBuilder, SelectionManager


@dataclass
class VisualHost:
    color_palette: ColorPalette = field(default_factory=ColorPalette)
    selection_manager: SelectionManager = field(default_factory=SelectionManager)

    def create_selection_id_builder(self) -> SelectionIdBuilder:
        return SelectionIdBuilder()
