"""
Attribute schema registry for editable object types.

Each object type maps to an ordered tuple of AttributeDescriptor entries.
Declaration order is display order. The registry is process-wide and is
read-only after import; extend it by registering a new type tag rather
than branching on object types in the editor.

Design:
- AttributeDescriptor: frozen dataclass, pure data
- WidgetKind: enumerated rendering/interaction type
- SCHEMA_REGISTRY: type tag -> descriptor tuple
- schema_for(): empty tuple for unknown types (render nothing, never fail)
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


class WidgetKind(str, Enum):
    """Widget kind of an editable attribute."""
    TEXT_ENTRY = "textentry"
    RANGE = "range"
    TOGGLE = "toggle"
    FONT_DROPDOWN = "fontdropdown"
    COLOR_DROPDOWN = "colordropdown"
    OUTLINE_DROPDOWN = "outlinedropdown"
    ANCHOR_DROPDOWN = "anchordropdown"

    @property
    def is_dropdown(self) -> bool:
        return self.value.endswith("dropdown")


class AnchorSide(IntEnum):
    """Anchor sides stored under the ``side`` sub-key of an anchor setting."""
    TOPLEFT = 1
    LEFT = 2
    BOTTOMLEFT = 3
    BOTTOM = 4
    BOTTOMRIGHT = 5
    RIGHT = 6
    TOPRIGHT = 7
    TOP = 8
    CENTER = 9
    INSIDE_LEFT = 10
    INSIDE_RIGHT = 11
    INSIDE_TOP = 12
    INSIDE_BOTTOM = 13


OUTLINE_STYLES: Tuple[str, ...] = ("NONE", "OUTLINE", "THICKOUTLINE", "MONOCHROME")


@dataclass(frozen=True)
class AttributeDescriptor:
    """Static definition of one editable attribute of an object type.

    ``min_value``, ``max_value`` and ``step`` are advisory bounds for numeric
    widgets. When ``sub_key`` is set the stored value is a mapping and the
    edited value lives at ``stored[sub_key]``.
    """
    name: str
    label: str
    widget: WidgetKind
    default: Any = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    step: Optional[float] = None
    use_decimals: bool = False
    sub_key: Optional[str] = None


FONT_STRING = "FontString"

_ANCHOR_DEFAULT = MappingProxyType({"side": int(AnchorSide.TOPLEFT), "x": 0, "y": 0})

FONT_STRING_ATTRIBUTES: Tuple[AttributeDescriptor, ...] = (
    AttributeDescriptor("text", "Text", WidgetKind.TEXT_ENTRY, default="font string text"),
    AttributeDescriptor("size", "Size", WidgetKind.RANGE, min_value=5, max_value=120),
    AttributeDescriptor("font", "Font", WidgetKind.FONT_DROPDOWN),
    AttributeDescriptor("color", "Color", WidgetKind.COLOR_DROPDOWN),
    AttributeDescriptor("alpha", "Alpha", WidgetKind.RANGE,
                        min_value=0, max_value=1, step=0.05, use_decimals=True),
    AttributeDescriptor("shadow", "Draw Shadow", WidgetKind.TOGGLE),
    AttributeDescriptor("shadowcolor", "Shadow Color", WidgetKind.COLOR_DROPDOWN),
    AttributeDescriptor("shadowoffsetx", "Shadow X Offset", WidgetKind.RANGE,
                        min_value=-10, max_value=10),
    AttributeDescriptor("shadowoffsety", "Shadow Y Offset", WidgetKind.RANGE,
                        min_value=-10, max_value=10),
    AttributeDescriptor("outline", "Outline", WidgetKind.OUTLINE_DROPDOWN),
    AttributeDescriptor("monochrome", "Monochrome", WidgetKind.TOGGLE),
    # anchor is stored as {side, x, y}; three attributes share one settings key
    AttributeDescriptor("anchor", "Anchor", WidgetKind.ANCHOR_DROPDOWN,
                        default=_ANCHOR_DEFAULT, sub_key="side"),
    AttributeDescriptor("anchoroffsetx", "Anchor X Offset", WidgetKind.RANGE,
                        default=_ANCHOR_DEFAULT, min_value=-20, max_value=20, sub_key="x"),
    AttributeDescriptor("anchoroffsety", "Anchor Y Offset", WidgetKind.RANGE,
                        default=_ANCHOR_DEFAULT, min_value=-20, max_value=20, sub_key="y"),
    AttributeDescriptor("rotation", "Rotation", WidgetKind.RANGE,
                        min_value=0, max_value=math.pi * 2, use_decimals=True),
)

# Global registry of object type -> ordered attribute descriptors
SCHEMA_REGISTRY: Dict[str, Tuple[AttributeDescriptor, ...]] = {
    FONT_STRING: FONT_STRING_ATTRIBUTES,
}


def schema_for(object_type: str) -> Tuple[AttributeDescriptor, ...]:
    """
    Get the declared attribute list for an object type.

    Args:
        object_type: Type tag reported by the object's get_object_type()

    Returns:
        Descriptors in declaration order, or an empty tuple for unknown types
    """
    return SCHEMA_REGISTRY.get(object_type, ())


def register_schema(object_type: str, descriptors: Iterable[AttributeDescriptor]) -> None:
    """
    Register the attribute list for an object type.

    Args:
        object_type: Type tag to register
        descriptors: Descriptors in display order

    Raises:
        ValueError: If two descriptors share a name
    """
    descriptors = tuple(descriptors)
    seen = set()
    for descriptor in descriptors:
        if descriptor.name in seen:
            raise ValueError(
                f"Duplicate attribute '{descriptor.name}' in schema for '{object_type}'"
            )
        seen.add(descriptor.name)

    if object_type in SCHEMA_REGISTRY:
        logger.warning(f"Overwriting existing schema for object type '{object_type}'")

    SCHEMA_REGISTRY[object_type] = descriptors
    logger.debug(f"Registered schema for '{object_type}' with {len(descriptors)} attributes")
