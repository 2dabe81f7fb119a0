"""
Attribute schemas, value resolution, field binding and menu building.

The schema, resolver, binder and assembler are pure Python; the widget
factory and menu builder create Qt widgets.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .attribute_schema import (
        AttributeDescriptor,
        WidgetKind,
        AnchorSide,
        SCHEMA_REGISTRY,
        schema_for,
        register_schema,
    )
    from .value_resolver import Resolution, Unmapped, Excluded, Present, resolve
    from .field_binder import BindingPath, FieldSpec, bind
    from .menu_assembler import MenuDescription, assemble, build_field_specs
    from .widget_factory import WidgetFactory
    from .menu_builder import build_menu_volatile

_EXPORTS = {
    "AttributeDescriptor": ("pyqt_objedit.forms.attribute_schema", "AttributeDescriptor"),
    "WidgetKind": ("pyqt_objedit.forms.attribute_schema", "WidgetKind"),
    "AnchorSide": ("pyqt_objedit.forms.attribute_schema", "AnchorSide"),
    "FONT_STRING": ("pyqt_objedit.forms.attribute_schema", "FONT_STRING"),
    "SCHEMA_REGISTRY": ("pyqt_objedit.forms.attribute_schema", "SCHEMA_REGISTRY"),
    "schema_for": ("pyqt_objedit.forms.attribute_schema", "schema_for"),
    "register_schema": ("pyqt_objedit.forms.attribute_schema", "register_schema"),
    "Resolution": ("pyqt_objedit.forms.value_resolver", "Resolution"),
    "Unmapped": ("pyqt_objedit.forms.value_resolver", "Unmapped"),
    "Excluded": ("pyqt_objedit.forms.value_resolver", "Excluded"),
    "Present": ("pyqt_objedit.forms.value_resolver", "Present"),
    "resolve": ("pyqt_objedit.forms.value_resolver", "resolve"),
    "BindingPath": ("pyqt_objedit.forms.field_binder", "BindingPath"),
    "FieldSpec": ("pyqt_objedit.forms.field_binder", "FieldSpec"),
    "bind": ("pyqt_objedit.forms.field_binder", "bind"),
    "MenuDescription": ("pyqt_objedit.forms.menu_assembler", "MenuDescription"),
    "assemble": ("pyqt_objedit.forms.menu_assembler", "assemble"),
    "build_field_specs": ("pyqt_objedit.forms.menu_assembler", "build_field_specs"),
    "WidgetFactory": ("pyqt_objedit.forms.widget_factory", "WidgetFactory"),
    "build_menu_volatile": ("pyqt_objedit.forms.menu_builder", "build_menu_volatile"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
