"""
Object editor: scrollable options panel bound to one object at a time.

The editor is a two-state controller. It is Idle until ``edit_object`` is
called, then Editing one object. Calling ``edit_object`` again replaces
the session wholesale: the previous session is deactivated, so fields
built under it no longer reach any callback.

Each (re)build runs schema -> resolver -> binder -> assembler and hands the
MenuDescription to the volatile menu builder, which populates the options
frame hosted in the canvas scroll box.
"""

import logging
import random
from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, List, Optional, Tuple, Union

from PyQt6.QtWidgets import QFrame, QVBoxLayout, QWidget

from pyqt_objedit.forms.attribute_schema import schema_for
from pyqt_objedit.forms.layout_constants import CURRENT_LAYOUT
from pyqt_objedit.forms.menu_assembler import MenuDescription, assemble, build_field_specs
from pyqt_objedit.forms.menu_builder import build_menu_volatile
from pyqt_objedit.forms.widget_factory import WidgetFactory
from pyqt_objedit.protocols import EditorConfig, EditorOptions, get_editor_config, is_editable_object
from pyqt_objedit.theming import StyleSheetGenerator
from pyqt_objedit.widgets import CanvasScrollBox
from .editing_session import ChangeCallback, EditingSession
from .exceptions import EditorPreconditionError

logger = logging.getLogger(__name__)


class ObjectEditor(QFrame):
    """
    Frame holding a canvas scroll box whose content is the options frame.

    Attributes:
        options: Size options the editor was created with
        config: Menu layout configuration
    """

    def __init__(self, parent: Optional[QWidget] = None, name: Optional[str] = None,
                 options: Union[EditorOptions, Dict[str, Any], None] = None,
                 config: Optional[EditorConfig] = None):
        super().__init__(parent)
        name = name or f"ObjectEditor{random.randint(100000, 10000000)}"
        self.setObjectName(name)

        self.options = options if isinstance(options, EditorOptions) else EditorOptions.from_dict(options)
        self.config = config or get_editor_config()
        self.resize(self.options.width, self.options.height)

        self._session: Optional[EditingSession] = None
        self._menu: Optional[MenuDescription] = None
        self._option_widgets: List[QWidget] = []
        self._widget_factory = WidgetFactory(self.config)

        style_gen = StyleSheetGenerator(self.config.color_scheme)
        self._templates = style_gen.generate_option_templates()
        self.setStyleSheet(style_gen.generate_editor_style())

        # options frame is the parent of every widget the menu builder creates
        self.options_frame = QWidget()
        self.options_frame.setObjectName(f"{name}OptionsFrame")
        self.canvas_scroll_box = CanvasScrollBox(self, self.options_frame, f"{name}CanvasScrollBox")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(*CURRENT_LAYOUT.frame_margins)
        layout.addWidget(self.canvas_scroll_box)

    # ==================== ACCESSORS ====================

    def get_editing_object(self) -> Any:
        return self._session.editing_object if self._session else None

    def get_editing_profile(self) -> Tuple[Optional[MutableMapping], Optional[Mapping]]:
        """Settings table and key map of the current session."""
        if self._session is None:
            return None, None
        return self._session.settings_table, self._session.key_map

    def get_on_edit_callback(self) -> Optional[ChangeCallback]:
        return self._session.on_change if self._session else None

    def get_options_frame(self) -> QWidget:
        return self.options_frame

    def get_canvas_scroll_box(self) -> CanvasScrollBox:
        return self.canvas_scroll_box

    def get_session(self) -> Optional[EditingSession]:
        return self._session

    def get_menu(self) -> Optional[MenuDescription]:
        """Menu of the current session, None while idle."""
        return self._menu

    def get_option_widgets(self) -> List[QWidget]:
        return list(self._option_widgets)

    @property
    def is_editing(self) -> bool:
        return self._session is not None

    # ==================== SESSION ====================

    def edit_object(self, obj: Any, settings_table: MutableMapping,
                    key_map: Optional[Mapping] = None,
                    on_change: Optional[ChangeCallback] = None) -> MenuDescription:
        """
        Start editing ``obj``, replacing any current session, and build its menu.

        Args:
            obj: Object exposing get_object_type()
            settings_table: Caller-owned settings; edits are written into it
            key_map: Attribute name -> settings key; unmapped attributes are skipped
            on_change: Called as (obj, attribute_name, new_value, settings_table, key)
                after every write

        Returns:
            The built menu

        Raises:
            EditorPreconditionError: If any argument is invalid. The current
                session, if any, is left untouched.
        """
        if not is_editable_object(obj):
            raise EditorPreconditionError(
                f"edit_object(obj) expects an object with get_object_type(), got {type(obj).__name__}"
            )
        if not isinstance(settings_table, MutableMapping):
            raise EditorPreconditionError(
                f"edit_object(settings_table) expects a mutable mapping, got {type(settings_table).__name__}"
            )
        if key_map is not None and not isinstance(key_map, Mapping):
            raise EditorPreconditionError(
                f"edit_object(key_map) expects a mapping, got {type(key_map).__name__}"
            )
        if on_change is not None and not callable(on_change):
            raise EditorPreconditionError(
                f"edit_object(on_change) expects a callable, got {type(on_change).__name__}"
            )

        previous = self._session
        self._session = EditingSession(
            editing_object=obj,
            settings_table=settings_table,
            key_map=key_map if key_map is not None else {},
            on_change=on_change,
        )
        if previous is not None:
            previous.deactivate()

        logger.info(
            f"{self.objectName()}: editing {self._session.object_type} "
            f"with {len(self._session.key_map)} mapped keys"
        )
        return self.rebuild_menu()

    def rebuild_menu(self) -> MenuDescription:
        """
        Re-derive the field list for the current session and render it.

        Nothing is rendered (and the options frame is left as is) while idle
        or when the object type has no registered schema.

        Returns:
            The menu that was rendered, or an empty menu
        """
        session = self._session
        if session is None:
            return assemble((), self.config)

        if not schema_for(session.object_type):
            logger.debug(f"{self.objectName()}: no schema for '{session.object_type}', nothing to build")
            self._menu = assemble((), self.config)
            return self._menu

        menu = assemble(build_field_specs(session), self.config)
        self._option_widgets = build_menu_volatile(
            self.options_frame, menu, self._templates, self._widget_factory
        )
        self._menu = menu
        logger.info(f"{self.objectName()}: built menu with {len(menu)} fields")
        return menu


def create_editor(parent: Optional[QWidget] = None, name: Optional[str] = None,
                  options: Union[EditorOptions, Dict[str, Any], None] = None) -> ObjectEditor:
    """
    Create an object editor.

    Args:
        parent: Parent widget
        name: Object name of the editor frame (random if None)
        options: {"width": 400, "height": 600} or EditorOptions

    Raises:
        ValueError: If ``options`` has unknown keys
    """
    return ObjectEditor(parent, name, options)
