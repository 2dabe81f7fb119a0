"""
Option providers for dropdown widget kinds.

Explicit kind -> provider mapping; each provider returns (label, value)
pairs in display order. Font and color providers query Qt and need a
running QGuiApplication.
"""

import logging
from typing import Any, Callable, Dict, List, Tuple

from PyQt6.QtGui import QColor, QFontDatabase

from .attribute_schema import AnchorSide, OUTLINE_STYLES, WidgetKind

logger = logging.getLogger(__name__)

Option = Tuple[str, Any]


def font_options() -> List[Option]:
    return [(family, family) for family in QFontDatabase.families()]


def color_options() -> List[Option]:
    return [(name, name) for name in QColor.colorNames()]


def outline_options() -> List[Option]:
    return [(style.title(), style) for style in OUTLINE_STYLES]


def anchor_options() -> List[Option]:
    return [(side.name.replace("_", " ").title(), int(side)) for side in AnchorSide]


DROPDOWN_OPTION_PROVIDERS: Dict[WidgetKind, Callable[[], List[Option]]] = {
    WidgetKind.FONT_DROPDOWN: font_options,
    WidgetKind.COLOR_DROPDOWN: color_options,
    WidgetKind.OUTLINE_DROPDOWN: outline_options,
    WidgetKind.ANCHOR_DROPDOWN: anchor_options,
}


def options_for(kind: WidgetKind) -> List[Option]:
    """
    Get dropdown options for a widget kind.

    Raises:
        TypeError: If no provider is registered for ``kind``
    """
    provider = DROPDOWN_OPTION_PROVIDERS.get(kind)
    if provider is None:
        raise TypeError(
            f"No dropdown options registered for widget kind {kind!r}. "
            f"Available kinds: {[k.value for k in DROPDOWN_OPTION_PROVIDERS]}"
        )
    options = provider()
    logger.debug(f"Loaded {len(options)} options for {kind.value}")
    return options
