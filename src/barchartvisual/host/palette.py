"""
Color Palette Service
=====================
Hands out one color per key and remembers it, so the same category keeps its
color across update cycles within a session.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict, List, Optional

from matplotlib import colormaps
from matplotlib.colors import to_hex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorInfo:
    value: str


class ColorPalette:
    """
    Deterministic key -> color assignment backed by a qualitative colormap.

    Colors are assigned in first-request order and cycle when the colormap
    runs out.
    """

    def __init__(self, colormap_name: str = "tab10", colors: Optional[List[str]] = None) -> None:
        if colors is None:
            cmap = colormaps[colormap_name]
            colors = [to_hex(cmap(i)) for i in range(cmap.N)]
        if not colors:
            raise ValueError("A color palette needs at least one color.")
        self._colors: List[str] = list(colors)
        self._assigned: Dict[str, ColorInfo] = {}

    def get_color(self, key: str) -> ColorInfo:
        color = self._assigned.get(key)
        if color is None:
            color = ColorInfo(self._colors[len(self._assigned) % len(self._colors)])
            self._assigned[key] = color
            logger.debug(f"Assigned color {color.value} to '{key}'")
        return color
