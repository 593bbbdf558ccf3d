"""
Display Settings
================
User-configurable formatting options of the visual and their resolution from
the host's per-visual metadata objects.

Why is this file needed?
------------------------
1. Resolution: the host stores user-set values as loosely typed
   object -> property -> value mappings. `get_option_value` turns one of those
   into a typed value, falling back to the hard-coded default.
2. Property pane: `enumerate_settings` answers the host's "what are the
   current values of group X" query.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Dict, List, Optional, TypeVar

from barchartvisual.model.data_view import DataViewObjects

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENABLE_AXIS = "enableAxis"


@dataclass
class EnableAxisSettings:
    show: bool = False


@dataclass
class DisplaySettings:
    enable_axis: EnableAxisSettings = field(default_factory=EnableAxisSettings)


@dataclass
class SettingsObjectMetadata:
    display_name: str
    properties: Dict[str, str]


# Objects the visual exposes in the property pane: object name -> metadata
SETTINGS_OBJECTS: Dict[str, SettingsObjectMetadata] = {
    ENABLE_AXIS: SettingsObjectMetadata(
        display_name="Enable Axis",
        properties={"show": "Show"},
    ),
}


@dataclass
class VisualObjectInstance:
    """One entry of the property-pane enumeration."""
    object_name: str
    display_name: str
    properties: Dict[str, Any]
    selector: Optional[Any] = None


def get_option_value(
    objects: Optional[DataViewObjects],
    object_name: str,
    property_name: str,
    default: T,
) -> T:
    """
    Look up a user-set property value, falling back to `default`.

    The default also fixes the expected type: a value whose type does not
    match (e.g. the string "true" for a boolean) is treated as missing. Ints are
    accepted where a float is expected; bools are never accepted as numbers.

    Examples:
        - get_option_value(objects, "enableAxis", "show", False)
        - get_option_value(objects, "labels", "fontSize", 12.0)
        - get_option_value(objects, "dataPoint", "fill", "#01B8AA")
    """
    if not objects:
        return default

    group = objects.get(object_name)
    if not isinstance(group, dict):
        return default

    value = group.get(property_name)
    if value is None:
        return default

    expected = type(default)
    if isinstance(value, bool) and expected is not bool:
        logger.debug(f"Ignoring boolean value for {object_name}.{property_name}")
        return default
    if expected is float and isinstance(value, int):
        return float(value)  # type: ignore[return-value]
    if not isinstance(value, expected):
        logger.debug(
            f"Ignoring {object_name}.{property_name}={value!r}: expected {expected.__name__}"
        )
        return default
    return value


def parse_settings(objects: Optional[DataViewObjects]) -> DisplaySettings:
    """Resolve every recognized settings key against the user-set objects."""
    defaults = DisplaySettings()
    return DisplaySettings(
        enable_axis=EnableAxisSettings(
            show=get_option_value(objects, ENABLE_AXIS, "show", defaults.enable_axis.show),
        ),
    )


def enumerate_settings(settings: DisplaySettings, object_name: str) -> List[VisualObjectInstance]:
    """
    Return the current values of one settings group for the property pane.

    Unknown group names yield an empty list.
    """
    metadata = SETTINGS_OBJECTS.get(object_name)
    if metadata is None:
        return []

    if object_name == ENABLE_AXIS:
        properties: Dict[str, Any] = {"show": settings.enable_axis.show}
    else:
        return []

    return [
        VisualObjectInstance(
            object_name=object_name,
            display_name=metadata.display_name,
            properties=properties,
            selector=None,
        )
    ]
