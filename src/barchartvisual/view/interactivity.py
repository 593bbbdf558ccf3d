"""
Click Selection
===============
Binds bar clicks to the host selection service and applies the resulting
highlight: when anything is selected all bars are dimmed and the clicked bar
is restored to full opacity.

The handler never captures renderer state implicitly; it receives a
`SelectionBinding` holding the live bar list and the selection manager.
"""
from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
import logging
from typing import List, Optional, Protocol, Sequence, TYPE_CHECKING

from barchartvisual.config import DIMMED_OPACITY, FULL_OPACITY

if TYPE_CHECKING:
    from barchartvisual.host.selection import SelectionId
    from barchartvisual.view.items import BarItem

logger = logging.getLogger(__name__)


class SelectionService(Protocol):
    def select(self, selection_id: SelectionId, multi_select: bool = False) -> Future: ...

    def clear(self) -> Future: ...


@dataclass
class SelectionBinding:
    """Explicit context for click handlers. `bars` is the renderer's live list."""
    bars: List[BarItem]
    selection_manager: SelectionService


def bind_bar_click(bar: BarItem, binding: SelectionBinding) -> None:
    bar.set_click_handler(lambda clicked: on_bar_clicked(clicked, binding))


def on_bar_clicked(bar: BarItem, binding: SelectionBinding) -> Optional[Future]:
    """Request a selection toggle for `bar` and highlight once it completes."""
    if bar.data_point is None:
        return None

    future = binding.selection_manager.select(bar.data_point.selection_id)

    def on_done(done: Future) -> None:
        if done.cancelled():
            return
        error = done.exception()
        if error is not None:
            logger.warning(f"Selection request failed, keeping current highlight: {error}")
            return
        apply_selection_highlight(binding.bars, bar, done.result())

    future.add_done_callback(on_done)
    return future


def apply_selection_highlight(
    bars: Sequence[BarItem],
    active: BarItem,
    selected_ids: Sequence[SelectionId],
) -> None:
    """Dim every bar if the selection is non-empty, then restore `active`."""
    opacity = DIMMED_OPACITY if selected_ids else FULL_OPACITY
    for bar in bars:
        bar.setOpacity(opacity)
    active.setOpacity(FULL_OPACITY)


def clear_selection(binding: SelectionBinding) -> Future:
    """Clear the host selection and return every bar to full opacity."""
    future = binding.selection_manager.clear()

    def on_done(done: Future) -> None:
        if done.cancelled():
            return
        error = done.exception()
        if error is not None:
            logger.warning(f"Clearing the selection failed: {error}")
            return
        for bar in binding.bars:
            bar.setOpacity(FULL_OPACITY)

    future.add_done_callback(on_done)
    return future
