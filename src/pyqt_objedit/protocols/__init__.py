"""
Widget protocol definitions, adapters and editor configuration.

ABC-based widget contracts that eliminate duck typing in favor of
explicit, fail-loud inheritance-based architecture.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    RangeConfigurable,
    OptionSelectable,
    ChangeSignalEmitter,
)
from .widget_adapters import (
    LineEditAdapter,
    ComboBoxAdapter,
    CheckBoxAdapter,
    ToggleButtonAdapter,
    PyQtWidgetMeta,
)
from .editable_object import EditableObject, is_editable_object
from .editor_config import EditorConfig, EditorOptions, set_editor_config, get_editor_config

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "RangeConfigurable",
    "OptionSelectable",
    "ChangeSignalEmitter",
    "LineEditAdapter",
    "ComboBoxAdapter",
    "CheckBoxAdapter",
    "ToggleButtonAdapter",
    "PyQtWidgetMeta",
    "EditableObject",
    "is_editable_object",
    "EditorConfig",
    "EditorOptions",
    "set_editor_config",
    "get_editor_config",
]
