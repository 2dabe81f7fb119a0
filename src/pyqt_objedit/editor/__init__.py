"""
Object editor controller and editing sessions.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .object_editor import ObjectEditor, create_editor
    from .editing_session import EditingSession
    from .exceptions import EditorPreconditionError

_EXPORTS = {
    "ObjectEditor": ("pyqt_objedit.editor.object_editor", "ObjectEditor"),
    "create_editor": ("pyqt_objedit.editor.object_editor", "create_editor"),
    "EditingSession": ("pyqt_objedit.editor.editing_session", "EditingSession"),
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


__all__ = list(_EXPORTS.keys())
