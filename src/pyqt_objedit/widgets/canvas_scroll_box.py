"""
Scrollable canvas hosting an editor's options frame.
"""
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QScrollArea, QWidget


class CanvasScrollBox(QScrollArea):
    """
    Scroll area whose content widget is a caller-supplied frame.

    Only vertical scrolling is enabled; the content frame tracks the
    viewport width.
    """

    def __init__(self, parent: Optional[QWidget], content: QWidget, name: str = ""):
        super().__init__(parent)
        if name:
            self.setObjectName(name)
        self.setWidgetResizable(True)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.setWidget(content)

    def get_content(self) -> QWidget:
        return self.widget()

    def scroll_to_top(self) -> None:
        self.verticalScrollBar().setValue(0)
