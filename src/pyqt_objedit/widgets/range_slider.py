"""
Numeric slider with a value readout.

QSlider only handles integers, so decimal ranges are scaled by
``10 ** decimals`` internally.
"""

from typing import Any, Callable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from pyqt_objedit.protocols import (
    ValueGettable, ValueSettable, RangeConfigurable, ChangeSignalEmitter, PyQtWidgetMeta
)
from .no_scroll_widgets import NoScrollSlider


class RangeSliderAdapter(QWidget, ValueGettable, ValueSettable, RangeConfigurable,
                         ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """Horizontal slider plus value label, int or float valued."""

    READOUT_WIDTH = 44

    def __init__(self, parent=None):
        super().__init__(parent)
        self._decimals = 0
        self._scale = 1

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.slider = NoScrollSlider(Qt.Orientation.Horizontal, self)
        self.readout = QLabel(self)
        self.readout.setFixedWidth(self.READOUT_WIDTH)
        self.readout.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

        layout.addWidget(self.slider, 1)
        layout.addWidget(self.readout)

        self.slider.valueChanged.connect(self._update_readout)
        self._update_readout()

    @property
    def decimals(self) -> int:
        return self._decimals

    def _to_slider(self, value: float) -> int:
        return int(round(float(value) * self._scale))

    def _update_readout(self, *_args) -> None:
        value = self.get_value()
        self.readout.setText(f"{value:.{self._decimals}f}" if self._decimals else str(value))

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        raw = self.slider.value()
        if self._decimals:
            return raw / self._scale
        return raw

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.slider.blockSignals(True)
        try:
            self.slider.setValue(self._to_slider(value if value is not None else 0))
        finally:
            self.slider.blockSignals(False)
        self._update_readout()

    def configure_range(self, minimum: float, maximum: float,
                        step: Optional[float] = None, decimals: int = 0) -> None:
        """Implement RangeConfigurable ABC."""
        self._decimals = max(0, int(decimals))
        self._scale = 10 ** self._decimals
        self.slider.blockSignals(True)
        try:
            self.slider.setRange(self._to_slider(minimum), self._to_slider(maximum))
            if step:
                self.slider.setSingleStep(max(1, self._to_slider(step)))
        finally:
            self.slider.blockSignals(False)
        self._update_readout()

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        self.slider.valueChanged.connect(lambda _raw: callback(self.get_value()))
