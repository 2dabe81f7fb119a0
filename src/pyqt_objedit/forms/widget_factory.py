"""
Widget factory with explicit widget-kind dispatch.

Design:
- WIDGET_KIND_REGISTRY: WidgetKind -> factory function mapping
- Explicit dispatch (no hasattr checks)
- Fail-loud if kind not registered
- Widgets come back configured (range, options) and showing the field's value,
  but not yet connected to the field
"""

import logging
from typing import Any, Callable, Dict, Optional

from pyqt_objedit.protocols import (
    CheckBoxAdapter, EditorConfig, LineEditAdapter, ToggleButtonAdapter, get_editor_config
)
from pyqt_objedit.widgets import NoScrollComboBox, RangeSliderAdapter
from .attribute_schema import WidgetKind
from .dropdown_options import options_for
from .field_binder import FieldSpec

logger = logging.getLogger(__name__)

# factory(field, config, switch_is_checkbox) -> widget
WidgetFactoryFunc = Callable[[FieldSpec, EditorConfig, bool], Any]


def _create_text_entry(field: FieldSpec, config: EditorConfig, switch_is_checkbox: bool) -> Any:
    return LineEditAdapter()


def _create_range(field: FieldSpec, config: EditorConfig, switch_is_checkbox: bool) -> Any:
    widget = RangeSliderAdapter()
    default_min, default_max = config.default_range
    minimum = field.min_value if field.min_value is not None else default_min
    maximum = field.max_value if field.max_value is not None else default_max
    widget.configure_range(minimum, maximum, field.step,
                           config.decimals if field.use_decimals else 0)
    return widget


def _create_toggle(field: FieldSpec, config: EditorConfig, switch_is_checkbox: bool) -> Any:
    return CheckBoxAdapter() if switch_is_checkbox else ToggleButtonAdapter()


def _create_dropdown(field: FieldSpec, config: EditorConfig, switch_is_checkbox: bool) -> Any:
    widget = NoScrollComboBox()
    widget.set_options(options_for(field.widget))
    return widget


# Widget-kind based creation dispatch - NO DUCK TYPING
WIDGET_KIND_REGISTRY: Dict[WidgetKind, WidgetFactoryFunc] = {
    WidgetKind.TEXT_ENTRY: _create_text_entry,
    WidgetKind.RANGE: _create_range,
    WidgetKind.TOGGLE: _create_toggle,
    WidgetKind.FONT_DROPDOWN: _create_dropdown,
    WidgetKind.COLOR_DROPDOWN: _create_dropdown,
    WidgetKind.OUTLINE_DROPDOWN: _create_dropdown,
    WidgetKind.ANCHOR_DROPDOWN: _create_dropdown,
}


class WidgetFactory:
    """
    Widget factory using explicit widget-kind dispatch.

    Example:
        factory = WidgetFactory()
        widget = factory.create_widget(field)
        widget.connect_change_signal(field.set)
    """

    def __init__(self, config: Optional[EditorConfig] = None):
        self.config = config or get_editor_config()

    def create_widget(self, field: FieldSpec, switch_is_checkbox: bool = True) -> Any:
        """
        Create the widget for a field and load the field's value into it.

        Args:
            field: Field to create a widget for
            switch_is_checkbox: Render toggles as check boxes

        Returns:
            Widget implementing ValueGettable/ValueSettable/ChangeSignalEmitter

        Raises:
            TypeError: If no widget registered for the field's kind
        """
        factory_func = WIDGET_KIND_REGISTRY.get(field.widget)
        if factory_func is None:
            raise TypeError(
                f"No widget registered for kind {field.widget!r} (field: '{field.name}'). "
                f"Available kinds: {[k.value for k in WIDGET_KIND_REGISTRY]}."
            )

        widget = factory_func(field, self.config, switch_is_checkbox)
        widget.set_value(field.get())
        logger.debug(f"Created {type(widget).__name__} for field '{field.name}' ({field.widget.value})")
        return widget

    def register_widget_kind(self, kind: WidgetKind, factory_func: WidgetFactoryFunc) -> None:
        """
        Register a custom widget factory for a widget kind.

        Args:
            kind: Widget kind to register
            factory_func: Called with (field, config, switch_is_checkbox)
        """
        if kind in WIDGET_KIND_REGISTRY:
            logger.warning(f"Overwriting existing widget factory for kind {kind.value}")

        WIDGET_KIND_REGISTRY[kind] = factory_func
        logger.debug(f"Registered widget factory for kind {kind.value}")
