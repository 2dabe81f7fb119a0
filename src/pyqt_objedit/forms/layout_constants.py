"""
Layout constants for option menus.

This module centralizes spacing and margin configuration so every editor
panel has a uniform appearance.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EditorLayoutConfig:
    """Configuration for option menu spacing and margins."""

    # Editor frame layout settings
    frame_margins: tuple = (2, 2, 2, 2)

    # Options frame (menu grid) settings
    menu_margins: tuple = (6, 6, 6, 6)
    # Vertical spacing between field rows
    row_spacing: int = 4
    # Horizontal spacing between label and control columns
    column_spacing: int = 6

    # Minimum height of each field row
    row_min_height: int = 20


# Default compact configuration
COMPACT_LAYOUT = EditorLayoutConfig()

# Current active configuration - change this to switch layouts globally
CURRENT_LAYOUT = COMPACT_LAYOUT
