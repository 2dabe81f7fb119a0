"""Base configuration for object editors.

Provides hooks for applications to customize how option menus are laid out
and how editor frames are sized.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple


@dataclass
class EditorConfig:
    """Global configuration for option menu generation.

    Attributes:
        align_as_pairs: Lay label/control pairs out in two aligned columns
        label_column_width: Pixel width of the label column
        max_panel_height: Maximum height of the options frame
        use_colon: Append ':' to field labels
        switch_is_checkbox: Render toggles as check boxes instead of buttons
        default_range: Bounds for range fields whose descriptor has none
        decimals: Precision of range fields that use decimals
        color_scheme: ColorScheme for option templates (dark scheme if None)
    """

    align_as_pairs: bool = True
    label_column_width: int = 150
    max_panel_height: int = 5000
    use_colon: bool = True
    switch_is_checkbox: bool = True
    default_range: Tuple[float, float] = (0.0, 100.0)
    decimals: int = 2
    color_scheme: Optional[Any] = None


# Global config instance (set by application)
_editor_config: Optional[EditorConfig] = None


def set_editor_config(config: Optional[EditorConfig]) -> None:
    """Set the global editor configuration (None restores defaults)."""
    global _editor_config
    _editor_config = config


def get_editor_config() -> EditorConfig:
    """Get the current editor configuration, or defaults if none was set."""
    if _editor_config is None:
        return EditorConfig()
    return _editor_config


@dataclass(frozen=True)
class EditorOptions:
    """Per-editor construction options."""

    width: int = 400
    height: int = 600

    @classmethod
    def from_dict(cls, options: Optional[Dict[str, Any]]) -> 'EditorOptions':
        """
        Build options from a plain dict, filling missing keys with defaults.

        Raises:
            ValueError: If the dict has keys that are not editor options
        """
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = set(options) - known
        if unknown:
            raise ValueError(f"Invalid editor option keys: {sorted(unknown)}")
        return cls(**options)
