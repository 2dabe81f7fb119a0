"""
Widget ABC contracts for option menus.

Defines explicit contracts that every option widget implements, so the menu
builder never has to duck-type Qt's inconsistent value APIs.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional, Tuple


class ValueGettable(ABC):
    """
    ABC for widgets that can return a value.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value. None if no value set.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for widgets that can accept a value.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value without emitting a change.

        Args:
            value: The value to display
        """
        pass


class RangeConfigurable(ABC):
    """
    ABC for widgets that support numeric range configuration.

    Implemented by sliders; bounds constrain user input before it reaches
    a field's ``set``.
    """

    @abstractmethod
    def configure_range(self, minimum: float, maximum: float,
                        step: Optional[float] = None, decimals: int = 0) -> None:
        """
        Configure the valid range for numeric input.

        Args:
            minimum: Minimum allowed value
            maximum: Maximum allowed value
            step: Single-step increment, None for the widget default
            decimals: Number of decimals, 0 for integer input
        """
        pass


class OptionSelectable(ABC):
    """
    ABC for widgets that select from a list of (label, value) options.
    """

    @abstractmethod
    def set_options(self, options: Iterable[Tuple[str, Any]]) -> None:
        """
        Replace the selectable options.

        Args:
            options: (display label, stored value) pairs in display order
        """
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that emit change signals.

    Provides explicit contract for signal connection, eliminating duck typing
    of signal names (editingFinished vs valueChanged vs currentIndexChanged).
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to the widget's user-change signal.

        Args:
            callback: Called with the new value. Signature: callback(new_value) -> None
        """
        pass
