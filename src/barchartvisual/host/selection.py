"""
Selection Services
==================
Opaque selection identities and the host-side selection manager.

Why is this file needed?
------------------------
1. Identity: every data row is correlated with a `SelectionId` created by the
   host's builder. The visual only compares identities, it never looks inside.
2. Persistence: the `SelectionManager` owns the set of selected identities and
   answers each request asynchronously with a Future, resolved on the Qt event
   loop (GUI thread).
"""
from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
import logging
from typing import Hashable, List, Optional, TYPE_CHECKING

from PySide6.QtCore import QObject, QTimer, Signal

if TYPE_CHECKING:
    from barchartvisual.model.data_view import CategoryColumn

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionId:
    """Opaque identity token. Only equality and hashing are meaningful."""
    key: tuple[Hashable, ...]


class SelectionIdBuilder:
    """
    Builds a SelectionId keyed by (category column, row index).

    Usage:
        builder.with_category(column, 3).create_selection_id()
    """

    def __init__(self) -> None:
        self._parts: list[Hashable] = []

    def with_category(self, column: CategoryColumn, index: int) -> SelectionIdBuilder:
        query_name = column.source.query_name if column.source is not None else ""
        self._parts.extend([query_name, index])
        return self

    def create_selection_id(self) -> SelectionId:
        return SelectionId(key=tuple(self._parts))


class SelectionManager(QObject):
    """
    Host selection service.

    `select` toggles an identity and returns a Future carrying the identities
    selected afterwards. Futures are completed from the event loop, never
    inline, so callers always observe an asynchronous continuation.
    """
    selection_changed = Signal(object)  # list[SelectionId]

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._selected: List[SelectionId] = []

    def select(self, selection_id: SelectionId, multi_select: bool = False) -> Future:
        """
        Toggle `selection_id`.

        Single select: re-selecting the only selected identity clears the
        selection, anything else replaces it.
        Multi select: the identity is added or removed.
        """
        if multi_select:
            if selection_id in self._selected:
                self._selected.remove(selection_id)
            else:
                self._selected.append(selection_id)
        elif self._selected == [selection_id]:
            self._selected = []
        else:
            self._selected = [selection_id]

        logger.debug(f"Selection now holds {len(self._selected)} identities")
        return self._resolve_later(list(self._selected))

    def clear(self) -> Future:
        self._selected = []
        logger.debug("Selection cleared")
        return self._resolve_later([])

    def _resolve_later(self, selected: List[SelectionId]) -> Future:
        future: Future = Future()

        def resolve() -> None:
            future.set_result(selected)
            self.selection_changed.emit(selected)

        QTimer.singleShot(0, resolve)
        return future
