"""
Host Data View
==============
Typed mirror of the table the host hands to the visual on every update.

Every level is optional: the host may send no views at all, a view without a
categorical section, a category column without a source descriptor, and so on.
The view model builder is responsible for tolerating all of that; these classes
only carry what arrived.

Classes:
    ColumnSource: Descriptor of a bound column.
    CategoryColumn / ValueColumn: The two column kinds of a categorical view.
    CategoricalSection: Categories + values of one view.
    DataViewMetadata: User-set formatting objects.
    DataView: One data view.
    Viewport / VisualUpdateOptions: The update payload.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any, Dict, List, Optional, Sequence

# object name -> property name -> value
DataViewObjects = Dict[str, Dict[str, Any]]


def _finite_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class ColumnSource:
    display_name: str
    query_name: str = ""
    roles: tuple[str, ...] = ()

    @staticmethod
    def from_dict(data: Any) -> Optional[ColumnSource]:
        if not isinstance(data, dict):
            return None
        display_name = str(data.get("displayName", data.get("queryName", "")))
        roles = data.get("roles") or {}
        return ColumnSource(
            display_name=display_name,
            query_name=str(data.get("queryName", display_name)),
            roles=tuple(name for name, enabled in roles.items() if enabled) if isinstance(roles, dict) else (),
        )


@dataclass
class CategoryColumn:
    source: Optional[ColumnSource]
    values: List[Any] = field(default_factory=list)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> CategoryColumn:
        values = data.get("values")
        return CategoryColumn(
            source=ColumnSource.from_dict(data.get("source")),
            values=list(values) if isinstance(values, list) else [],
        )


@dataclass
class ValueColumn:
    """
    A numeric measure column.

    `max_local` is whatever maximum the host reported for this column; it is
    not guaranteed to match max(values). Non-numeric or non-finite reports
    are dropped on parsing.
    """
    values: List[Optional[float]] = field(default_factory=list)
    max_local: Optional[float] = None
    source: Optional[ColumnSource] = None

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> ValueColumn:
        values = data.get("values")
        return ValueColumn(
            values=list(values) if isinstance(values, list) else [],
            max_local=_finite_number(data.get("maxLocal")),
            source=ColumnSource.from_dict(data.get("source")),
        )


@dataclass
class CategoricalSection:
    categories: Optional[List[CategoryColumn]] = None
    values: Optional[List[ValueColumn]] = None

    @staticmethod
    def from_dict(data: Any) -> Optional[CategoricalSection]:
        if not isinstance(data, dict):
            return None
        categories = data.get("categories")
        values = data.get("values")
        return CategoricalSection(
            categories=[CategoryColumn.from_dict(c) for c in categories if isinstance(c, dict)]
            if isinstance(categories, list) else None,
            values=[ValueColumn.from_dict(v) for v in values if isinstance(v, dict)]
            if isinstance(values, list) else None,
        )


@dataclass
class DataViewMetadata:
    objects: Optional[DataViewObjects] = None

    @staticmethod
    def from_dict(data: Any) -> DataViewMetadata:
        if not isinstance(data, dict):
            return DataViewMetadata()
        objects = data.get("objects")
        if not isinstance(objects, dict):
            return DataViewMetadata()
        return DataViewMetadata(objects={
            name: dict(props) for name, props in objects.items() if isinstance(props, dict)
        })


@dataclass
class DataView:
    categorical: Optional[CategoricalSection] = None
    metadata: DataViewMetadata = field(default_factory=DataViewMetadata)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> DataView:
        """Build a DataView from its JSON form (camelCase keys as the host emits them)."""
        return DataView(
            categorical=CategoricalSection.from_dict(data.get("categorical")),
            metadata=DataViewMetadata.from_dict(data.get("metadata")),
        )

    def set_object_property(self, object_name: str, property_name: str, value: Any) -> None:
        """Persist a user-set formatting property the way the host does."""
        if self.metadata.objects is None:
            self.metadata.objects = {}
        self.metadata.objects.setdefault(object_name, {})[property_name] = value


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float


@dataclass
class VisualUpdateOptions:
    viewport: Viewport
    data_views: Optional[Sequence[Optional[DataView]]] = None
