"""
Theming and styling system.

Color schemes and stylesheet generation for option templates.
"""

from .color_scheme import ColorScheme
from .style_generator import StyleSheetGenerator, StyleTemplates

__all__ = [
    "ColorScheme",
    "StyleSheetGenerator",
    "StyleTemplates",
]
