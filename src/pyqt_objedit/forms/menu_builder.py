"""
Volatile option menu builder.

Turns a MenuDescription into labeled widgets inside a container. The build
is volatile: widgets from a previous build in the same container are
removed first, so the same container can be rebuilt any number of times.
"""

import logging
from typing import List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QGridLayout, QLabel, QWidget

from pyqt_objedit.theming import StyleTemplates
from .attribute_schema import WidgetKind
from .layout_constants import CURRENT_LAYOUT
from .menu_assembler import MenuDescription
from .ui_utils import format_field_id, format_field_label
from .widget_factory import WidgetFactory

logger = logging.getLogger(__name__)


def template_for(kind: WidgetKind, templates: StyleTemplates) -> str:
    """
    Pick the option template for a widget kind.

    Raises:
        TypeError: If no template family covers ``kind``
    """
    if kind.is_dropdown:
        return templates.dropdown
    if kind is WidgetKind.TEXT_ENTRY:
        return templates.text
    if kind is WidgetKind.RANGE:
        return templates.slider
    if kind is WidgetKind.TOGGLE:
        return templates.switch
    raise TypeError(f"No option template for widget kind {kind!r}")


def clear_menu(container: QWidget) -> QGridLayout:
    """
    Remove every widget a previous build left in ``container``.

    Returns:
        The container's (now empty) grid layout, created if missing

    Raises:
        TypeError: If the container already has a non-grid layout
    """
    layout = container.layout()
    if layout is None:
        layout = QGridLayout(container)
        layout.setContentsMargins(*CURRENT_LAYOUT.menu_margins)
        layout.setVerticalSpacing(CURRENT_LAYOUT.row_spacing)
        layout.setHorizontalSpacing(CURRENT_LAYOUT.column_spacing)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        return layout

    if not isinstance(layout, QGridLayout):
        raise TypeError(
            f"Menu container '{container.objectName()}' has a {type(layout).__name__}; "
            f"expected QGridLayout"
        )

    while layout.count():
        item = layout.takeAt(0)
        widget = item.widget()
        if widget is not None:
            widget.hide()
            widget.setParent(None)
            widget.deleteLater()
    for row in range(layout.rowCount()):
        layout.setRowStretch(row, 0)
        layout.setRowMinimumHeight(row, 0)
    return layout


def build_menu_volatile(container: QWidget, menu: MenuDescription, templates: StyleTemplates,
                        factory: Optional[WidgetFactory] = None) -> List[QWidget]:
    """
    Build labeled option widgets for ``menu`` inside ``container``.

    Each widget shows its field's value and calls the field's ``set`` on
    user changes.

    Args:
        container: Widget to populate (its layout becomes a QGridLayout)
        menu: Fields and layout hints
        templates: Option templates, one per widget family
        factory: Widget factory (a default one if None)

    Returns:
        The control widgets, in field order
    """
    factory = factory or WidgetFactory()
    layout = clear_menu(container)
    container.setMaximumHeight(menu.max_height)
    container.setStyleSheet(templates.button)

    controls = []
    row = 0
    for field in menu:
        label = QLabel(format_field_label(field.label, menu.use_colon))
        widget = factory.create_widget(field, menu.switch_is_checkbox)
        widget.setObjectName(format_field_id(container.objectName(), field.name))
        widget.setStyleSheet(template_for(field.widget, templates))
        widget.connect_change_signal(field.set)

        if menu.align_as_pairs:
            label.setFixedWidth(menu.label_column_width)
            layout.addWidget(label, row, 0)
            layout.addWidget(widget, row, 1)
            layout.setRowMinimumHeight(row, CURRENT_LAYOUT.row_min_height)
            row += 1
        else:
            layout.addWidget(label, row, 0, 1, 2)
            layout.addWidget(widget, row + 1, 0, 1, 2)
            row += 2
        controls.append(widget)

    layout.setColumnStretch(1, 1)
    layout.setRowStretch(row, 1)
    logger.debug(f"Built {len(controls)} option widgets in '{container.objectName()}'")
    return controls
