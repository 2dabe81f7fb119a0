"""
pyqt-objedit: declarative object property editors for PyQt6.

Given an object and a mapping describing where its editable attributes live
in a caller-owned settings table, derives the editable fields and renders
them as a scrollable options panel whose widgets write back into the table.

Architecture:
- Tier 1 (Protocols): Widget ABCs, adapters, editable object protocol, config
- Tier 2 (Forms): Attribute schemas, value resolution, field binding, menu building
- Tier 3 (Editor): ObjectEditor controller and editing sessions

Key Features:
- Table-driven attribute schemas per object type
- Explicit Unmapped / Excluded / Present resolution
- Inspectable (key, sub-key) binding paths
- ABC-based widget protocols (no duck typing)
"""

import importlib

__version__ = "0.1.0"

_EXPORTS = {
    "ObjectEditor": ("pyqt_objedit.editor.object_editor", "ObjectEditor"),
    "create_editor": ("pyqt_objedit.editor.object_editor", "create_editor"),
    "EditorPreconditionError": ("pyqt_objedit.editor.exceptions", "EditorPreconditionError"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__", *_EXPORTS.keys()]
