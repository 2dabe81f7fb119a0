"""
Widget adapters that wrap Qt widgets to implement the option widget ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QCheckBox.isChecked() vs QComboBox.currentData()
- QLineEdit.setText() vs QCheckBox.setChecked() vs QComboBox.setCurrentIndex()
- editingFinished vs clicked vs activated

All adapters implement a consistent interface via ABCs:
- get_value() / set_value() for all widgets
- connect_change_signal() for all widgets, fired on user changes only
"""

from abc import ABCMeta
from typing import Any, Callable, Iterable, Tuple

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QCheckBox, QComboBox, QLineEdit, QPushButton

from .widget_protocols import (
    ValueGettable, ValueSettable, OptionSelectable, ChangeSignalEmitter
)


# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class LineEditAdapter(QLineEdit, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit.

    Commits on editingFinished, and only when the text actually changed.
    Empty text is a valid value.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._committed = ""

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.text()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self._committed = "" if value is None else str(value)
        self.setText(self._committed)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        def on_finished():
            value = self.get_value()
            if value != self._committed:
                self._committed = value
                callback(value)
        self.editingFinished.connect(on_finished)


class ComboBoxAdapter(QComboBox, ValueGettable, ValueSettable, OptionSelectable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QComboBox.

    Stores actual values in itemData, not just display text. A value that is
    not among the options is inserted first so it stays displayable.
    """

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.blockSignals(True)
        try:
            for i in range(self.count()):
                if self.itemData(i) == value:
                    self.setCurrentIndex(i)
                    return
            if value is None:
                self.setCurrentIndex(-1)
                return
            self.insertItem(0, str(value), value)
            self.setCurrentIndex(0)
        finally:
            self.blockSignals(False)

    def set_options(self, options: Iterable[Tuple[str, Any]]) -> None:
        """Implement OptionSelectable ABC."""
        self.blockSignals(True)
        try:
            self.clear()
            for label, value in options:
                self.addItem(label, value)
        finally:
            self.blockSignals(False)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        # activated fires on user selection only
        self.activated.connect(lambda index: callback(self.itemData(index)))


class CheckBoxAdapter(QCheckBox, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QCheckBox.

    Returns bool values, treats None as False.
    """

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setChecked(bool(value) if value is not None else False)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.clicked.connect(lambda _checked: callback(self.get_value()))


class ToggleButtonAdapter(QPushButton, ValueGettable, ValueSettable,
                          ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Two-state push button used for toggles when switches are not check boxes.
    """

    ON_TEXT = "On"
    OFF_TEXT = "Off"

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setCheckable(True)
        self.toggled.connect(self._update_text)
        self._update_text(self.isChecked())

    def _update_text(self, checked: bool) -> None:
        self.setText(self.ON_TEXT if checked else self.OFF_TEXT)

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setChecked(bool(value) if value is not None else False)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.clicked.connect(lambda _checked: callback(self.get_value()))
