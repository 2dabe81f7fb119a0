"""
Value resolution for attribute descriptors.

Resolution is a discriminated union instead of a nullable value:

    Unmapped  - the session's key map has no key for the attribute
    Excluded  - mapped, but there is nothing to bind (no stored value,
                no default, the sub-key is missing from the container,
                or a range attribute holds a non-numeric value)
    Present   - value to display plus the settings key it was read from

Only Present results reach the field binder. Exclusion is never an error;
an incomplete settings table yields a smaller menu.

Absence is tested with ``is None``. Stored ``0``, ``False`` and ``""`` are
present values.
"""

import logging
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from .attribute_schema import AttributeDescriptor, WidgetKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unmapped:
    """Attribute has no settings key in this session."""
    name: str


@dataclass(frozen=True)
class Excluded:
    """Attribute is mapped but has no bindable value."""
    name: str
    key: Any
    reason: str


@dataclass(frozen=True)
class Present:
    """Attribute resolved to a displayable value."""
    value: Any
    key: Any


Resolution = Union[Unmapped, Excluded, Present]


def resolve(descriptor: AttributeDescriptor,
            settings_table: Mapping,
            key_map: Optional[Mapping]) -> Resolution:
    """
    Resolve the current value of an attribute.

    Args:
        descriptor: Attribute to resolve
        settings_table: Caller-owned settings mapping (read only here)
        key_map: Attribute name -> settings key; may be partial or None

    Returns:
        Unmapped, Excluded or Present
    """
    key = key_map.get(descriptor.name) if key_map else None
    if key is None:
        logger.debug(f"'{descriptor.name}' excluded: no settings key mapped")
        return Unmapped(descriptor.name)

    value = settings_table.get(key)
    if value is None:
        value = descriptor.default
    if value is None:
        logger.debug(f"'{descriptor.name}' excluded: no value at '{key}' and no default")
        return Excluded(descriptor.name, key, "no stored value and no default")

    if descriptor.sub_key is not None:
        if not isinstance(value, Mapping):
            logger.debug(f"'{descriptor.name}' excluded: value at '{key}' is not a mapping")
            return Excluded(descriptor.name, key, "stored value is not a mapping")
        value = value.get(descriptor.sub_key)
        if value is None:
            logger.debug(
                f"'{descriptor.name}' excluded: sub-key '{descriptor.sub_key}' missing at '{key}'"
            )
            return Excluded(descriptor.name, key, f"sub-key '{descriptor.sub_key}' missing")

    if descriptor.widget is WidgetKind.RANGE and not isinstance(value, numbers.Real):
        logger.debug(f"'{descriptor.name}' excluded: value at '{key}' is {type(value).__name__}")
        return Excluded(descriptor.name, key, "stored value is not numeric")

    return Present(value, key)
