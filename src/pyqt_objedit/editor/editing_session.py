"""Live state of one editing session."""

import logging
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

# (object, attribute_name, new_value, settings_table, settings_key) -> None
ChangeCallback = Callable[[Any, str, Any, MutableMapping, Any], None]


@dataclass(eq=False)
class EditingSession:
    """
    Object under edit plus references to its caller-owned settings.

    The session never copies the settings table or key map. A session is
    deactivated when the editor starts a new one; fields built under a
    deactivated session stop notifying.
    """
    editing_object: Any
    settings_table: MutableMapping
    key_map: Mapping = field(default_factory=dict)
    on_change: Optional[ChangeCallback] = None
    active: bool = True

    @property
    def object_type(self) -> str:
        return self.editing_object.get_object_type()

    def deactivate(self) -> None:
        self.active = False
        self.on_change = None

    def notify(self, attribute_name: str, new_value: Any, settings_key: Any) -> bool:
        """
        Invoke the change callback for a completed write.

        Returns:
            True if a callback was invoked
        """
        if not self.active:
            logger.warning(
                f"Ignoring change of '{attribute_name}' from a replaced editing session"
            )
            return False
        if self.on_change is None:
            return False
        self.on_change(self.editing_object, attribute_name, new_value,
                       self.settings_table, settings_key)
        return True
