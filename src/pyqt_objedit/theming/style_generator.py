"""
QStyleSheet Generator for object editors

Generates the option templates (one stylesheet per widget family) and the
editor frame style from a ColorScheme.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .color_scheme import ColorScheme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleTemplates:
    """Stylesheets applied to option widgets, one per widget family."""
    text: str
    dropdown: str
    switch: str
    slider: str
    button: str


class StyleSheetGenerator:
    """
    Generates QStyleSheet strings from ColorScheme objects.
    """

    def __init__(self, color_scheme: Optional[ColorScheme] = None):
        """
        Initialize the style generator with a color scheme.

        Args:
            color_scheme: ColorScheme instance to use for styling (dark if None)
        """
        self.color_scheme = color_scheme or ColorScheme.create_dark_theme()

    def update_color_scheme(self, color_scheme: ColorScheme):
        """Update the color scheme used for style generation."""
        self.color_scheme = color_scheme

    def generate_editor_style(self) -> str:
        """
        Generate QStyleSheet for the editor frame and its scroll canvas.
        """
        cs = self.color_scheme
        return f"""
            ObjectEditor {{
                background-color: {cs.to_hex(cs.window_bg)};
                border: 1px solid {cs.to_hex(cs.border_color)};
            }}
            QScrollArea {{
                background-color: {cs.to_hex(cs.panel_bg)};
                border: none;
            }}
            QLabel {{
                color: {cs.to_hex(cs.text_secondary)};
            }}
        """

    def generate_text_template(self) -> str:
        """Template for text entries."""
        cs = self.color_scheme
        return f"""
            QLineEdit {{
                background-color: {cs.to_hex(cs.input_bg)};
                color: {cs.to_hex(cs.input_text)};
                border: 1px solid {cs.to_hex(cs.input_border)};
                border-radius: 3px;
                padding: 3px;
            }}
            QLineEdit:focus {{
                border: 1px solid {cs.to_hex(cs.input_focus_border)};
            }}
        """

    def generate_dropdown_template(self) -> str:
        """Template for dropdowns."""
        cs = self.color_scheme
        return f"""
            QComboBox {{
                background-color: {cs.to_hex(cs.input_bg)};
                color: {cs.to_hex(cs.input_text)};
                border: 1px solid {cs.to_hex(cs.input_border)};
                border-radius: 3px;
                padding: 3px;
            }}
            QComboBox:focus {{
                border: 1px solid {cs.to_hex(cs.input_focus_border)};
            }}
            QComboBox QAbstractItemView {{
                background-color: {cs.to_hex(cs.input_bg)};
                color: {cs.to_hex(cs.input_text)};
                selection-background-color: {cs.to_hex(cs.selection_bg)};
                selection-color: {cs.to_hex(cs.selection_text)};
            }}
        """

    def generate_switch_template(self) -> str:
        """Template for toggles, covering both check box and button forms."""
        cs = self.color_scheme
        return f"""
            QCheckBox {{
                color: {cs.to_hex(cs.text_primary)};
            }}
            QPushButton:checkable {{
                background-color: {cs.to_hex(cs.button_normal_bg)};
                color: {cs.to_hex(cs.button_text)};
                border: 1px solid {cs.to_hex(cs.input_border)};
                border-radius: 3px;
                padding: 3px 10px;
            }}
            QPushButton:checked {{
                background-color: {cs.to_hex(cs.selection_bg)};
                color: {cs.to_hex(cs.selection_text)};
            }}
        """

    def generate_slider_template(self) -> str:
        """Template for numeric sliders."""
        cs = self.color_scheme
        return f"""
            QSlider::groove:horizontal {{
                height: 4px;
                background: {cs.to_hex(cs.input_bg)};
                border: 1px solid {cs.to_hex(cs.input_border)};
                border-radius: 2px;
            }}
            QSlider::sub-page:horizontal {{
                background: {cs.to_hex(cs.selection_bg)};
                border-radius: 2px;
            }}
            QSlider::handle:horizontal {{
                background: {cs.to_hex(cs.button_hover_bg)};
                border: 1px solid {cs.to_hex(cs.border_color)};
                width: 10px;
                margin: -5px 0;
                border-radius: 5px;
            }}
            QLabel {{
                color: {cs.to_hex(cs.text_primary)};
            }}
        """

    def generate_button_template(self) -> str:
        """Template for plain push buttons."""
        cs = self.color_scheme
        return f"""
            QPushButton {{
                background-color: {cs.to_hex(cs.button_normal_bg)};
                color: {cs.to_hex(cs.button_text)};
                border: none;
                border-radius: 3px;
                padding: 5px;
            }}
            QPushButton:hover {{
                background-color: {cs.to_hex(cs.button_hover_bg)};
            }}
            QPushButton:pressed {{
                background-color: {cs.to_hex(cs.button_pressed_bg)};
            }}
        """

    def generate_option_templates(self) -> StyleTemplates:
        """
        Generate the full set of option templates.

        Returns:
            StyleTemplates with one stylesheet per widget family
        """
        logger.debug(f"Generating option templates from {type(self.color_scheme).__name__}")
        return StyleTemplates(
            text=self.generate_text_template(),
            dropdown=self.generate_dropdown_template(),
            switch=self.generate_switch_template(),
            slider=self.generate_slider_template(),
            button=self.generate_button_template(),
        )
