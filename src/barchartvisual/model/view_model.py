"""
View Model
==========
Transforms the host's data views into the render-ready view model.

Why is this file needed?
------------------------
1. Validation: the host table may be missing any of its levels. Instead of
   raising, every structural gap yields the empty view model, which renders as
   an empty chart.
2. Projection: rows are zipped from the category and value columns, colored via
   the palette service and tagged with a selection identity.

Functions:
    build_view_model: The ViewModelBuilder.
    empty_view_model: The canonical "nothing to draw" result.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Callable, List, Optional, Protocol, Sequence, TYPE_CHECKING

from barchartvisual.model.data_view import DataView
from barchartvisual.model.settings import DisplaySettings, parse_settings

if TYPE_CHECKING:
    from barchartvisual.host.palette import ColorInfo
    from barchartvisual.host.selection import SelectionId, SelectionIdBuilder

logger = logging.getLogger(__name__)


class ColorPaletteService(Protocol):
    def get_color(self, key: str) -> ColorInfo: ...


@dataclass
class DataPoint:
    """
    One bar.

    `category` / `value` are None when the row index lies beyond the end of
    the corresponding (shorter) source column.
    """
    category: Optional[str]
    value: Optional[float]
    color: str
    selection_id: SelectionId


@dataclass
class ChartViewModel:
    data_points: List[DataPoint] = field(default_factory=list)
    data_max: float = 0
    settings: DisplaySettings = field(default_factory=DisplaySettings)


def empty_view_model() -> ChartViewModel:
    return ChartViewModel(data_points=[], data_max=0, settings=DisplaySettings())


def _first_or_none(items: Optional[Sequence[Any]]) -> Any:
    if not items:
        return None
    return items[0]


def _value_at(values: Sequence[Any], index: int) -> Any:
    return values[index] if index < len(values) else None


def build_view_model(
    data_views: Optional[Sequence[Optional[DataView]]],
    color_palette: ColorPaletteService,
    selection_id_builder: Callable[[], SelectionIdBuilder],
) -> ChartViewModel:
    """
    Build the view model for one update cycle.

    Args:
        data_views: The host's data views; only the first one is used.
        color_palette: Service mapping a category label to a stable color.
        selection_id_builder: Factory returning a fresh identity builder.

    Returns:
        The populated view model, or the empty view model when the input is
        structurally incomplete.
    """
    data_view = _first_or_none(data_views)
    if data_view is None:
        logger.debug("No data view supplied; rendering empty chart")
        return empty_view_model()

    categorical = data_view.categorical
    if categorical is None:
        logger.debug("Data view has no categorical section")
        return empty_view_model()

    category = _first_or_none(categorical.categories)
    if category is None or category.source is None:
        logger.debug("Category column or its source descriptor is missing")
        return empty_view_model()

    data_value = _first_or_none(categorical.values)
    if data_value is None:
        logger.debug("Value column is missing")
        return empty_view_model()

    settings = parse_settings(data_view.metadata.objects)

    data_points: List[DataPoint] = []
    for i in range(max(len(category.values), len(data_value.values))):
        raw_category = _value_at(category.values, i)
        label = None if raw_category is None else str(raw_category)
        data_points.append(
            DataPoint(
                category=label,
                value=_value_at(data_value.values, i),
                color=color_palette.get_color(label if label is not None else "").value,
                selection_id=selection_id_builder().with_category(category, i).create_selection_id(),
            )
        )

    if len(category.values) != len(data_value.values):
        logger.debug(
            f"Column lengths differ ({len(category.values)} categories, "
            f"{len(data_value.values)} values); padding with None"
        )

    # Reported maximum is taken as-is, even if it disagrees with the values
    data_max = data_value.max_local if data_value.max_local is not None else 0

    return ChartViewModel(data_points=data_points, data_max=data_max, settings=settings)
