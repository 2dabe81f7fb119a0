"""
No-scroll input widgets for PyQt6.

Prevents accidental value changes from mouse wheel events while the user
scrolls an options panel.
"""

from PyQt6.QtGui import QWheelEvent
from PyQt6.QtWidgets import QSlider

from pyqt_objedit.protocols import ComboBoxAdapter


class NoScrollComboBox(ComboBoxAdapter):
    """ComboBox that ignores wheel events to prevent accidental value changes.

    Inherits from ComboBoxAdapter which already implements the value ABCs.
    """

    def wheelEvent(self, event: QWheelEvent):
        """Ignore wheel events to prevent accidental value changes."""
        event.ignore()


class NoScrollSlider(QSlider):
    """Slider that ignores wheel events to prevent accidental value changes."""

    def wheelEvent(self, event: QWheelEvent):
        """Ignore wheel events to prevent accidental value changes."""
        event.ignore()
