"""Tests for the selection manager and click-to-select highlighting."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future

import pytest
from PySide6.QtCore import QEvent, Qt
from PySide6.QtWidgets import QApplication, QGraphicsSceneMouseEvent

from barchartvisual.host.palette import ColorPalette
from barchartvisual.host.selection import SelectionId, SelectionIdBuilder, SelectionManager
from barchartvisual.model.data_view import CategoryColumn, ColumnSource, DataView
from barchartvisual.model.view_model import build_view_model
from barchartvisual.view.interactivity import on_bar_clicked
from barchartvisual.view.items import BarItem
from barchartvisual.view.renderer import ChartRenderer


class ManualSelection:
    """Selection service whose futures the test resolves by hand."""

    def __init__(self) -> None:
        self.requests: list[tuple[SelectionId, Future]] = []

    def select(self, selection_id: SelectionId, multi_select: bool = False) -> Future:
        future: Future = Future()
        self.requests.append((selection_id, future))
        return future

    def clear(self) -> Future:
        future: Future = Future()
        self.requests.append((None, future))
        return future


@pytest.fixture
def manual() -> ManualSelection:
    return ManualSelection()


@pytest.fixture
def renderer(qapp: QApplication, manual: ManualSelection, make_data_view: Callable[..., DataView]) -> ChartRenderer:
    renderer = ChartRenderer(manual)
    renderer.resize(400, 300)
    renderer.render(build_view_model([make_data_view()], ColorPalette(), SelectionIdBuilder))
    return renderer


def opacities(renderer: ChartRenderer) -> list[float]:
    return [bar.opacity() for bar in renderer.bars]


# ---------------------------------------------------------------------------
# SelectionManager
# ---------------------------------------------------------------------------


def test_selection_ids_compare_by_key() -> None:
    """Identities built from the same column and row are equal."""

    column = CategoryColumn(source=ColumnSource("Country", "Sales.Country"), values=["a", "b"])

    first = SelectionIdBuilder().with_category(column, 1).create_selection_id()
    again = SelectionIdBuilder().with_category(column, 1).create_selection_id()
    other = SelectionIdBuilder().with_category(column, 0).create_selection_id()

    assert first == again
    assert hash(first) == hash(again)
    assert first != other


def test_select_resolves_asynchronously(wait) -> None:
    """The future completes on the event loop, never inline."""

    manager = SelectionManager()
    changes: list[list[SelectionId]] = []
    manager.selection_changed.connect(changes.append)
    sid = SelectionId(("q", 0))

    future = manager.select(sid)

    assert not future.done()
    assert wait(future) == [sid]
    assert changes == [[sid]]


def test_single_select_toggles_and_replaces(wait) -> None:
    """Selecting another id replaces; re-selecting the only id clears."""

    manager = SelectionManager()
    a, b = SelectionId(("q", 0)), SelectionId(("q", 1))

    assert wait(manager.select(a)) == [a]
    assert wait(manager.select(b)) == [b]
    assert wait(manager.select(b)) == []
    assert wait(manager.select(a)) == [a]


def test_multi_select_adds_and_removes(wait) -> None:
    """Multi select toggles membership of one id."""

    manager = SelectionManager()
    a, b = SelectionId(("q", 0)), SelectionId(("q", 1))

    wait(manager.select(a, multi_select=True))
    assert wait(manager.select(b, multi_select=True)) == [a, b]
    assert wait(manager.select(a, multi_select=True)) == [b]


def test_clear_empties_selection(wait) -> None:
    """Clearing resolves with an empty list."""

    manager = SelectionManager()
    wait(manager.select(SelectionId(("q", 0))))

    assert wait(manager.clear()) == []
    assert wait(manager.select(SelectionId(("q", 1)), multi_select=True)) == [SelectionId(("q", 1))]


# ---------------------------------------------------------------------------
# Click highlighting
# ---------------------------------------------------------------------------


def test_click_dims_others_once_resolved(renderer: ChartRenderer, manual: ManualSelection) -> None:
    """Opacity only changes after the selection request completes."""

    usa = renderer.bars[1]
    usa.click()

    sid, future = manual.requests[-1]
    assert sid == usa.data_point.selection_id
    assert opacities(renderer) == [1.0] * 4

    future.set_result([sid])

    assert opacities(renderer) == [0.5, 1.0, 0.5, 0.5]


def test_click_with_empty_result_restores_all(renderer: ChartRenderer, manual: ManualSelection) -> None:
    """Deselecting brings every bar back to full opacity."""

    renderer.bars[1].click()
    manual.requests[-1][1].set_result([renderer.bars[1].data_point.selection_id])
    renderer.bars[1].click()
    manual.requests[-1][1].set_result([])

    assert opacities(renderer) == [1.0] * 4


def test_failed_selection_keeps_highlight(
    renderer: ChartRenderer, manual: ManualSelection, caplog: pytest.LogCaptureFixture
) -> None:
    """A rejected request is logged and leaves opacity untouched."""

    renderer.bars[0].click()

    with caplog.at_level(logging.WARNING, logger="barchartvisual.view.interactivity"):
        manual.requests[-1][1].set_exception(RuntimeError("host unavailable"))

    assert opacities(renderer) == [1.0] * 4
    assert "host unavailable" in caplog.text


def test_cancelled_selection_is_ignored(renderer: ChartRenderer, manual: ManualSelection) -> None:
    """Cancellation is not an error."""

    renderer.bars[0].click()
    manual.requests[-1][1].cancel()

    assert opacities(renderer) == [1.0] * 4


def test_highlight_survives_rerender(
    renderer: ChartRenderer, manual: ManualSelection, make_data_view: Callable[..., DataView]
) -> None:
    """Updating bars in place keeps the current dimming."""

    renderer.bars[2].click()
    manual.requests[-1][1].set_result([renderer.bars[2].data_point.selection_id])
    renderer.render(build_view_model([make_data_view()], ColorPalette(), SelectionIdBuilder))

    assert opacities(renderer) == [0.5, 0.5, 1.0, 0.5]


def test_clear_selection_restores_full_opacity(renderer: ChartRenderer, manual: ManualSelection) -> None:
    """Clearing from the host undoes the dimming."""

    renderer.bars[0].click()
    manual.requests[-1][1].set_result([renderer.bars[0].data_point.selection_id])

    future = renderer.clear_selection()
    future.set_result([])

    assert opacities(renderer) == [1.0] * 4


def test_unbound_bar_is_not_selectable(qapp: QApplication, manual: ManualSelection) -> None:
    """A bar that never received a data point issues no request."""

    bar = BarItem()

    assert bar.click() is None
    assert manual.requests == []


def test_on_bar_clicked_without_data_point(qapp: QApplication, renderer: ChartRenderer) -> None:
    """The handler ignores bars without a data point."""

    assert on_bar_clicked(BarItem(), renderer.selection) is None


def test_left_mouse_press_triggers_click(renderer: ChartRenderer, manual: ManualSelection) -> None:
    """A real left-button press on a bar requests its selection."""

    event = QGraphicsSceneMouseEvent(QEvent.Type.GraphicsSceneMousePress)
    event.setButton(Qt.LeftButton)

    renderer.bars[3].mousePressEvent(event)

    assert event.isAccepted()
    assert manual.requests[-1][0] == renderer.bars[3].data_point.selection_id


def test_selection_round_trip_with_real_manager(
    qapp: QApplication, wait, make_data_view: Callable[..., DataView]
) -> None:
    """End to end with the event-loop backed manager."""

    manager = SelectionManager()
    renderer = ChartRenderer(manager)
    renderer.resize(400, 300)
    renderer.render(build_view_model([make_data_view()], ColorPalette(), SelectionIdBuilder))

    wait(renderer.bars[0].click())
    assert opacities(renderer) == [1.0, 0.5, 0.5, 0.5]

    wait(renderer.bars[0].click())
    assert opacities(renderer) == [1.0] * 4
