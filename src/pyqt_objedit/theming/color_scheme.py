"""
PyQt6 Color Scheme for object editors

Centralized color management for option menus with light/dark variants.
Option templates are generated from these colors by StyleSheetGenerator.
"""

from dataclasses import dataclass, fields
from typing import Dict, Tuple

from PyQt6.QtGui import QColor


@dataclass
class ColorScheme:
    """
    Color scheme for the editor frame and its option widgets.

    All colors are RGB tuples.
    """

    # ========== BASE UI ARCHITECTURE COLORS ==========

    # Window and Panel Backgrounds
    window_bg: Tuple[int, int, int] = (43, 43, 43)      # #2b2b2b - Editor frame background
    panel_bg: Tuple[int, int, int] = (30, 30, 30)       # #1e1e1e - Options frame background

    # Borders
    border_color: Tuple[int, int, int] = (85, 85, 85)   # #555555 - Primary borders

    # ========== TEXT HIERARCHY COLORS ==========

    text_primary: Tuple[int, int, int] = (255, 255, 255)   # #ffffff - Primary text
    text_secondary: Tuple[int, int, int] = (204, 204, 204) # #cccccc - Field labels
    text_accent: Tuple[int, int, int] = (0, 170, 255)      # #00aaff - Accent
    text_disabled: Tuple[int, int, int] = (102, 102, 102)  # #666666 - Disabled text

    # ========== INTERACTIVE ELEMENT COLORS ==========

    # Button States
    button_normal_bg: Tuple[int, int, int] = (64, 64, 64)    # #404040
    button_hover_bg: Tuple[int, int, int] = (80, 80, 80)     # #505050
    button_pressed_bg: Tuple[int, int, int] = (48, 48, 48)   # #303030
    button_text: Tuple[int, int, int] = (255, 255, 255)      # #ffffff

    # Input Fields
    input_bg: Tuple[int, int, int] = (64, 64, 64)        # #404040
    input_border: Tuple[int, int, int] = (102, 102, 102) # #666666
    input_text: Tuple[int, int, int] = (255, 255, 255)   # #ffffff
    input_focus_border: Tuple[int, int, int] = (0, 170, 255) # #00aaff

    # Selection / slider fill
    selection_bg: Tuple[int, int, int] = (0, 120, 212)   # #0078d4
    selection_text: Tuple[int, int, int] = (255, 255, 255)

    def to_qcolor(self, color_tuple: Tuple[int, int, int]) -> QColor:
        """Convert RGB tuple to QColor object."""
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: Tuple[int, int, int]) -> str:
        """
        Convert RGB tuple to hex color string.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            str: Hex color string (e.g., "#ff0000")
        """
        r, g, b = color_tuple
        return f"#{r:02x}{g:02x}{b:02x}"

    def get_color_dict(self) -> Dict[str, Tuple[int, int, int]]:
        """Get all colors as a dictionary for inspection."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def create_dark_theme(cls) -> 'ColorScheme':
        """Dark theme (the default colors)."""
        return cls()

    @classmethod
    def create_light_theme(cls) -> 'ColorScheme':
        """
        Light theme variant with colors adjusted for light backgrounds.
        """
        return cls(
            window_bg=(245, 245, 245),
            panel_bg=(255, 255, 255),
            border_color=(180, 180, 180),

            text_primary=(0, 0, 0),
            text_secondary=(80, 80, 80),
            text_accent=(0, 100, 200),
            text_disabled=(160, 160, 160),

            button_normal_bg=(230, 230, 230),
            button_hover_bg=(210, 210, 210),
            button_pressed_bg=(190, 190, 190),
            button_text=(0, 0, 0),

            input_bg=(255, 255, 255),
            input_border=(180, 180, 180),
            input_text=(0, 0, 0),
            input_focus_border=(0, 100, 200),

            selection_bg=(0, 120, 215),
            selection_text=(255, 255, 255),
        )
