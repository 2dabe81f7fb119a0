"""
UI utilities for pyqt-objedit.

Simple formatting helpers used across the forms layer.
"""


def format_field_label(label: str, use_colon: bool = True) -> str:
    """Create field label: 'Size' -> 'Size:'"""
    return f"{label}:" if use_colon else label


def format_field_id(parent: str, name: str) -> str:
    """Generate field ID: 'Editor1', 'size' -> 'Editor1_size'"""
    return f"{parent}_{name}"
