"""
Extended widget implementations.

Specialized widget subclasses that build on the protocol layer
with enhanced behavior.
"""

from .no_scroll_widgets import NoScrollComboBox, NoScrollSlider
from .range_slider import RangeSliderAdapter
from .canvas_scroll_box import CanvasScrollBox
from .styled_text_label import StyledTextLabel

__all__ = [
    "NoScrollComboBox",
    "NoScrollSlider",
    "RangeSliderAdapter",
    "CanvasScrollBox",
    "StyledTextLabel",
]
