"""Protocol for objects that can be edited by an ObjectEditor.

The editor only needs a type discriminator to select an attribute schema;
everything else about the object is opaque to it.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class EditableObject(Protocol):
    """Protocol for editable UI objects.

    Example:
        class MyLabel(QLabel):
            def get_object_type(self) -> str:
                return "FontString"
    """

    def get_object_type(self) -> str:
        """Get the type tag used to look up the object's attribute schema."""
        ...


def is_editable_object(obj: Any) -> bool:
    """Check that ``obj`` exposes a callable type discriminator."""
    return obj is not None and callable(getattr(obj, "get_object_type", None))
