"""Unit tests for typed settings resolution and property-pane enumeration."""

from __future__ import annotations

import pytest

from barchartvisual.model.settings import (
    DisplaySettings,
    EnableAxisSettings,
    enumerate_settings,
    get_option_value,
    parse_settings,
)


def test_missing_objects_fall_back_to_default() -> None:
    """No objects, no group, or no property all yield the default."""

    assert get_option_value(None, "enableAxis", "show", False) is False
    assert get_option_value({}, "enableAxis", "show", False) is False
    assert get_option_value({"other": {"show": True}}, "enableAxis", "show", False) is False
    assert get_option_value({"enableAxis": {}}, "enableAxis", "show", False) is False
    assert get_option_value({"enableAxis": {"show": None}}, "enableAxis", "show", True) is True


def test_user_set_value_wins_over_default() -> None:
    """A present, correctly typed value is returned as-is."""

    assert get_option_value({"enableAxis": {"show": True}}, "enableAxis", "show", False) is True


@pytest.mark.parametrize(
    ("value", "default", "expected"),
    [
        ("true", False, False),
        (1, False, False),
        (True, 12.0, 12.0),
        (14, 12.0, 14.0),
        (13.5, 12.0, 13.5),
        ("#01B8AA", "#000000", "#01B8AA"),
        (5, "#000000", "#000000"),
    ],
)
def test_value_type_must_match_default(value: object, default: object, expected: object) -> None:
    """Wrongly typed values degrade to the default; ints widen to floats."""

    resolved = get_option_value({"group": {"prop": value}}, "group", "prop", default)
    assert resolved == expected
    assert type(resolved) is type(expected)


def test_non_mapping_group_is_ignored() -> None:
    """A group that is not a mapping never raises."""

    assert get_option_value({"enableAxis": ["show"]}, "enableAxis", "show", False) is False  # type: ignore[dict-item]


def test_parse_settings_reads_enable_axis() -> None:
    """`enableAxis.show` is read from the metadata objects."""

    assert parse_settings(None) == DisplaySettings()
    assert parse_settings({"enableAxis": {"show": True}}).enable_axis.show is True


def test_enumerate_settings_returns_current_values() -> None:
    """The property pane gets the persisted values of the requested group."""

    settings = DisplaySettings(enable_axis=EnableAxisSettings(show=True))

    instances = enumerate_settings(settings, "enableAxis")

    assert len(instances) == 1
    assert instances[0].object_name == "enableAxis"
    assert instances[0].display_name == "Enable Axis"
    assert instances[0].properties == {"show": True}
    assert instances[0].selector is None


def test_enumerate_settings_unknown_group_is_empty() -> None:
    """Unknown group names are not an error."""

    assert enumerate_settings(DisplaySettings(), "dataColors") == []
