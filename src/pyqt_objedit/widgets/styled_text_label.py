"""
Styled text label that can be edited with an ObjectEditor.

Reports the ``FontString`` object type and applies every attribute of the
FontString schema, so a change callback can re-render it live:

    def on_change(obj, name, value, settings, key):
        obj.apply_attribute(name, value)
"""

import logging
import math
from typing import Any, Dict, Mapping, Optional

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QColor, QFont, QPainter
from PyQt6.QtWidgets import QGraphicsDropShadowEffect, QLabel, QWidget

from pyqt_objedit.forms.attribute_schema import AnchorSide, FONT_STRING, schema_for
from pyqt_objedit.forms.value_resolver import Present, resolve

logger = logging.getLogger(__name__)

_ALIGNMENT = {
    AnchorSide.TOPLEFT: Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft,
    AnchorSide.LEFT: Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft,
    AnchorSide.BOTTOMLEFT: Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignLeft,
    AnchorSide.BOTTOM: Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignHCenter,
    AnchorSide.BOTTOMRIGHT: Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignRight,
    AnchorSide.RIGHT: Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignRight,
    AnchorSide.TOPRIGHT: Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignRight,
    AnchorSide.TOP: Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignHCenter,
    AnchorSide.CENTER: Qt.AlignmentFlag.AlignCenter,
    AnchorSide.INSIDE_LEFT: Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft,
    AnchorSide.INSIDE_RIGHT: Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignRight,
    AnchorSide.INSIDE_TOP: Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignHCenter,
    AnchorSide.INSIDE_BOTTOM: Qt.AlignmentFlag.AlignBottom | Qt.AlignmentFlag.AlignHCenter,
}

# anchor sub-key carried by each anchor attribute
_ANCHOR_PARTS = {"anchor": "side", "anchoroffsetx": "x", "anchoroffsety": "y"}


class StyledTextLabel(QLabel):
    """QLabel whose look is driven by FontString attributes."""

    def __init__(self, text: str = "", parent: Optional[QWidget] = None):
        super().__init__(text, parent)
        self.attributes: Dict[str, Any] = {
            "text": text,
            "color": "white",
            "alpha": 1.0,
            "shadow": False,
            "shadowcolor": "black",
            "shadowoffsetx": 1,
            "shadowoffsety": -1,
            "outline": "NONE",
            "monochrome": False,
            "rotation": 0.0,
        }
        self.anchor: Dict[str, Any] = {"side": int(AnchorSide.TOPLEFT), "x": 0, "y": 0}
        self._refresh()

    def get_object_type(self) -> str:
        return FONT_STRING

    def apply_attribute(self, name: str, value: Any) -> None:
        """
        Apply one FontString attribute.

        Raises:
            KeyError: If ``name`` is not a FontString attribute
        """
        if name in _ANCHOR_PARTS:
            self.anchor[_ANCHOR_PARTS[name]] = value
        elif name in ("size", "font") or name in self.attributes:
            self.attributes[name] = value
        else:
            raise KeyError(f"Unknown FontString attribute '{name}'")
        logger.debug(f"Applied {name} = {value!r} to {self.objectName() or 'label'}")
        self._refresh()

    def apply_settings(self, settings_table: Mapping, key_map: Optional[Mapping]) -> None:
        """Apply every attribute that resolves from ``settings_table``."""
        for descriptor in schema_for(FONT_STRING):
            resolution = resolve(descriptor, settings_table, key_map)
            if isinstance(resolution, Present):
                self.apply_attribute(descriptor.name, resolution.value)

    def _refresh(self) -> None:
        attrs = self.attributes
        self.setText(str(attrs["text"]))

        font = QFont(self.font())
        if attrs.get("font"):
            font.setFamily(str(attrs["font"]))
        if attrs.get("size"):
            font.setPointSizeF(float(attrs["size"]))
        monochrome = attrs["monochrome"] or attrs["outline"] == "MONOCHROME"
        font.setStyleStrategy(
            QFont.StyleStrategy.NoAntialias if monochrome else QFont.StyleStrategy.PreferDefault
        )
        font.setBold(attrs["outline"] == "THICKOUTLINE")
        self.setFont(font)

        color = QColor(attrs["color"])
        color.setAlphaF(max(0.0, min(1.0, float(attrs["alpha"]))))
        self.setStyleSheet(
            f"color: rgba({color.red()}, {color.green()}, {color.blue()}, {color.alpha()});"
        )

        if attrs["shadow"]:
            effect = QGraphicsDropShadowEffect(self)
            effect.setBlurRadius(0)
            effect.setColor(QColor(attrs["shadowcolor"]))
            # settings use y-up offsets
            effect.setOffset(QPointF(float(attrs["shadowoffsetx"]), -float(attrs["shadowoffsety"])))
            self.setGraphicsEffect(effect)
        else:
            self.setGraphicsEffect(None)

        side = AnchorSide(int(self.anchor["side"]))
        self.setAlignment(_ALIGNMENT[side])
        x, y = int(self.anchor["x"]), int(self.anchor["y"])
        self.setContentsMargins(max(x, 0), max(-y, 0), max(-x, 0), max(y, 0))
        self.update()

    def paintEvent(self, event):
        rotation = float(self.attributes["rotation"] or 0.0)
        if not rotation:
            super().paintEvent(event)
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
        painter.setFont(self.font())
        color = QColor(self.attributes["color"])
        color.setAlphaF(max(0.0, min(1.0, float(self.attributes["alpha"]))))
        painter.setPen(color)
        center = self.rect().center()
        painter.translate(center.x(), center.y())
        # counter-clockwise radians
        painter.rotate(-math.degrees(rotation))
        rect = self.rect().translated(-center.x(), -center.y())
        painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, self.text())
        painter.end()
