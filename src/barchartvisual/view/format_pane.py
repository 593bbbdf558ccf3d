"""
Format Pane
===========
The host's property pane: one group box per settings object, with an editor
per property chosen from the type of its current value.

It knows nothing about the individual settings; it is generated from
`Visual.enumerate_object_instances` and reports edits through
`property_changed(object_name, property_name, value)`.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QCheckBox, QDoubleSpinBox, QFormLayout, QGroupBox, QLineEdit, QVBoxLayout, QWidget
)

from barchartvisual.model.settings import SETTINGS_OBJECTS, VisualObjectInstance

logger = logging.getLogger(__name__)


class FormatPane(QWidget):
    property_changed = Signal(str, str, object)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._layout = QVBoxLayout(self)
        self._layout.addStretch()
        self.editors: Dict[tuple[str, str], QWidget] = {}

    def populate(self, enumerate_instances: Callable[[str], List[VisualObjectInstance]]) -> None:
        """(Re)build or refresh the editors from the visual's current settings."""
        for object_name in SETTINGS_OBJECTS:
            for instance in enumerate_instances(object_name):
                self._populate_instance(instance)

    def _populate_instance(self, instance: VisualObjectInstance) -> None:
        labels = SETTINGS_OBJECTS[instance.object_name].properties
        group: Optional[QGroupBox] = None

        for property_name, value in instance.properties.items():
            key = (instance.object_name, property_name)
            editor = self.editors.get(key)
            if editor is None:
                if group is None:
                    group = QGroupBox(instance.display_name)
                    group.setLayout(QFormLayout())
                    self._layout.insertWidget(self._layout.count() - 1, group)
                editor = self._create_editor(instance.object_name, property_name, value)
                if editor is None:
                    continue
                group.layout().addRow(labels.get(property_name, property_name), editor)
                self.editors[key] = editor
            self._set_editor_value(editor, value)

    def _create_editor(self, object_name: str, property_name: str, value: Any) -> Optional[QWidget]:
        def emit(new_value: Any) -> None:
            logger.debug(f"Format pane: {object_name}.{property_name} -> {new_value!r}")
            self.property_changed.emit(object_name, property_name, new_value)

        if isinstance(value, bool):
            editor = QCheckBox()
            editor.toggled.connect(emit)
            return editor
        if isinstance(value, (int, float)):
            editor = QDoubleSpinBox()
            editor.setRange(-1e9, 1e9)
            editor.valueChanged.connect(emit)
            return editor
        if isinstance(value, str):
            editor = QLineEdit()
            editor.editingFinished.connect(lambda: emit(editor.text()))
            return editor

        logger.warning(f"No editor for {object_name}.{property_name} of type {type(value).__name__}")
        return None

    @staticmethod
    def _set_editor_value(editor: QWidget, value: Any) -> None:
        editor.blockSignals(True)
        try:
            if isinstance(editor, QCheckBox):
                editor.setChecked(bool(value))
            elif isinstance(editor, QDoubleSpinBox):
                editor.setValue(float(value))
            elif isinstance(editor, QLineEdit):
                editor.setText(str(value))
        finally:
            editor.blockSignals(False)
