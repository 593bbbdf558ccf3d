"""Tests for the color palette service."""

from __future__ import annotations

import pytest

from barchartvisual.host.palette import ColorPalette


def test_default_palette_follows_tab10() -> None:
    """Keys get tab10 colors in first-request order."""

    palette = ColorPalette()

    colors = [palette.get_color(key).value for key in ("China", "USA", "India", "Germany")]

    assert colors == ["#1f77b4", "#ff7f0e", "#2ca02c", "#d62728"]


def test_same_key_keeps_its_color() -> None:
    """Repeated requests are stable across update cycles."""

    palette = ColorPalette()
    first = palette.get_color("USA")
    palette.get_color("China")

    assert palette.get_color("USA") == first


def test_colors_cycle_when_exhausted() -> None:
    """More keys than colors wraps around."""

    palette = ColorPalette(colors=["#000000", "#ffffff"])

    assert [palette.get_color(k).value for k in "abc"] == ["#000000", "#ffffff", "#000000"]


def test_empty_color_list_is_rejected() -> None:
    """A palette without colors cannot assign anything."""

    with pytest.raises(ValueError):
        ColorPalette(colors=[])
