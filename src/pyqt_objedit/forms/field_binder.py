"""
Field binding: resolved attribute -> widget-agnostic field specification.

A FieldSpec does not own the settings table. It carries the BindingPath
(settings key plus optional sub-key) it was resolved through and a
reference to the session that owns the table. ``set`` writes back through
the same path and then notifies the session's change callback.

Bounds (min/max/step) are passed through to the widget untouched; no
validation happens here.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from .attribute_schema import AttributeDescriptor, WidgetKind

if TYPE_CHECKING:
    from pyqt_objedit.editor.editing_session import EditingSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BindingPath:
    """Location of an attribute's value inside a settings table."""
    key: Any
    sub_key: Optional[str] = None

    def read(self, settings_table: Mapping) -> Any:
        value = settings_table.get(self.key)
        if self.sub_key is None or value is None:
            return value
        return value.get(self.sub_key)

    def write(self, settings_table: MutableMapping, value: Any, default: Any = None) -> None:
        """
        Write ``value`` at this path.

        With a sub-key and no container stored under the key, a copy of
        ``default`` is installed first so the shared default is never mutated.
        """
        if self.sub_key is None:
            settings_table[self.key] = value
            return

        container = settings_table.get(self.key)
        if container is None:
            container = copy.deepcopy(dict(default)) if isinstance(default, Mapping) else {}
            settings_table[self.key] = container
        container[self.sub_key] = value


@dataclass
class FieldSpec:
    """One editable field ready to be handed to the renderer."""
    name: str
    label: str
    widget: WidgetKind
    path: BindingPath
    value: Any
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    step: Optional[float] = None
    use_decimals: bool = False
    default: Any = field(default=None, repr=False, compare=False)
    session: Optional['EditingSession'] = field(default=None, repr=False, compare=False)

    def get(self) -> Any:
        """Value captured when the field was bound."""
        return self.value

    def set(self, new_value: Any) -> None:
        """Write ``new_value`` into the settings table and notify the session."""
        if self.session is None:
            raise RuntimeError(f"Field '{self.name}' is not bound to an editing session")

        self.path.write(self.session.settings_table, new_value, self.default)
        logger.debug(f"Set '{self.name}' at {self.path} = {new_value!r}")
        self.session.notify(self.name, new_value, self.path.key)


def bind(descriptor: AttributeDescriptor, settings_key: Any, current_value: Any,
         session: 'EditingSession') -> FieldSpec:
    """
    Create the FieldSpec for a resolved attribute.

    Args:
        descriptor: Attribute being bound
        settings_key: Key the value was resolved from
        current_value: Resolved value (snapshot returned by ``get``)
        session: Session owning the settings table and callback

    Returns:
        FieldSpec bound to ``session``
    """
    return FieldSpec(
        name=descriptor.name,
        label=descriptor.label,
        widget=descriptor.widget,
        path=BindingPath(settings_key, descriptor.sub_key),
        value=current_value,
        min_value=descriptor.min_value,
        max_value=descriptor.max_value,
        step=descriptor.step,
        use_decimals=descriptor.use_decimals,
        default=descriptor.default,
        session=session,
    )
