"""
Menu assembly: field specs -> layout-ready menu description.

``build_field_specs`` runs schema -> resolver -> binder for a session and
``assemble`` annotates the resulting list with layout hints. Neither
touches Qt.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from pyqt_objedit.protocols.editor_config import EditorConfig, get_editor_config
from .attribute_schema import schema_for
from .field_binder import FieldSpec, bind
from .value_resolver import Present, resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MenuDescription:
    """Ordered field specs plus the layout hints the renderer needs."""
    fields: Tuple[FieldSpec, ...]
    align_as_pairs: bool = True
    label_column_width: int = 150
    max_height: int = 5000
    use_colon: bool = True
    switch_is_checkbox: bool = True

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self):
        return iter(self.fields)


def build_field_specs(session) -> List[FieldSpec]:
    """
    Resolve and bind every schema attribute of the session's object.

    Attributes that resolve to Unmapped or Excluded are skipped.

    Args:
        session: EditingSession to build fields for

    Returns:
        FieldSpecs in schema order; empty if the object type has no schema
    """
    specs = []
    for descriptor in schema_for(session.object_type):
        resolution = resolve(descriptor, session.settings_table, session.key_map)
        if isinstance(resolution, Present):
            specs.append(bind(descriptor, resolution.key, resolution.value, session))
    return specs


def assemble(field_specs: Iterable[FieldSpec],
             config: Optional[EditorConfig] = None) -> MenuDescription:
    """
    Package field specs into a MenuDescription.

    Args:
        field_specs: Fields in display order
        config: Layout configuration (global config if None)
    """
    config = config or get_editor_config()
    return MenuDescription(
        fields=tuple(field_specs),
        align_as_pairs=config.align_as_pairs,
        label_column_width=config.label_column_width,
        max_height=config.max_panel_height,
        use_colon=config.use_colon,
        switch_is_checkbox=config.switch_is_checkbox,
    )
