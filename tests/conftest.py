"""Pytest fixtures shared across the visual's tests."""

from __future__ import annotations

import os
import time
from collections.abc import Callable, Sequence
from concurrent.futures import Future
from typing import Any

# Must be set before the first Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QCoreApplication, QEventLoop
from PySide6.QtWidgets import QApplication

from barchartvisual.model.data_view import (
    CategoricalSection,
    CategoryColumn,
    ColumnSource,
    DataView,
    DataViewMetadata,
    ValueColumn,
)


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """Return the process-wide QApplication, creating it on first use."""

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def wait_for(future: Future, timeout: float = 2.0) -> Any:
    """Spin the Qt event loop until `future` resolves and return its result."""

    deadline = time.monotonic() + timeout
    while not future.done():
        if time.monotonic() > deadline:
            raise AssertionError("Future did not resolve in time")
        QCoreApplication.processEvents(QEventLoop.AllEvents, 50)
    return future.result()


@pytest.fixture
def make_data_view() -> Callable[..., DataView]:
    """Return a factory building a single-category, single-measure DataView."""

    def factory(
        categories: Sequence[Any] = ("China", "USA", "India", "Germany"),
        values: Sequence[float | None] = (10, 8, 11, 5),
        max_local: float | None = 11,
        objects: dict[str, dict[str, Any]] | None = None,
    ) -> DataView:
        return DataView(
            categorical=CategoricalSection(
                categories=[
                    CategoryColumn(
                        source=ColumnSource(display_name="Country", query_name="Sales.Country"),
                        values=list(categories),
                    )
                ],
                values=[ValueColumn(values=list(values), max_local=max_local)],
            ),
            metadata=DataViewMetadata(objects=objects),
        )

    return factory


@pytest.fixture
def wait(qapp: QApplication) -> Callable[..., Any]:
    """Return `wait_for`, bound to a running QApplication."""

    return wait_for
