"""Tests for menu assembly."""

from pyqt_objedit.editor.editing_session import EditingSession
from pyqt_objedit.forms.menu_assembler import assemble, build_field_specs
from pyqt_objedit.protocols.editor_config import EditorConfig


FULL_KEY_MAP = {
    "text": "text", "size": "text_size", "font": "text_font", "color": "text_color",
    "alpha": "text_alpha", "shadow": "text_shadow", "shadowcolor": "shadow_color",
    "shadowoffsetx": "shadow_x", "shadowoffsety": "shadow_y", "outline": "text_outline",
    "monochrome": "mono", "anchor": "anchor", "anchoroffsetx": "anchor",
    "anchoroffsety": "anchor", "rotation": "rotation",
}


def test_only_defaulted_attributes_with_empty_settings(font_string):
    session = EditingSession(font_string, {}, FULL_KEY_MAP)
    names = [f.name for f in build_field_specs(session)]
    assert names == ["text", "anchor", "anchoroffsetx", "anchoroffsety"]


def test_full_settings_keep_schema_order(font_string):
    settings = {
        "text": "Hi", "text_size": 10, "text_font": "Sans", "text_color": "white",
        "text_alpha": 1, "text_shadow": False, "shadow_color": "black", "shadow_x": 1,
        "shadow_y": -1, "text_outline": "NONE", "mono": False,
        "anchor": {"side": 2, "x": 0, "y": 0}, "rotation": 0,
    }
    specs = build_field_specs(EditingSession(font_string, settings, FULL_KEY_MAP))
    assert [f.name for f in specs] == list(FULL_KEY_MAP)
    by_name = {f.name: f.get() for f in specs}
    assert by_name["shadow"] is False
    assert by_name["rotation"] == 0
    assert by_name["anchor"] == 2


def test_unknown_type_builds_nothing():
    class Texture:
        def get_object_type(self):
            return "Texture"

    session = EditingSession(Texture(), {"text": "x"}, {"text": "text"})
    assert build_field_specs(session) == []


def test_partial_key_map_skips_unmapped(font_string):
    session = EditingSession(font_string, {"text_size": 12}, {"size": "text_size"})
    specs = build_field_specs(session)
    assert [(f.name, f.get()) for f in specs] == [("size", 12)]


def test_build_is_idempotent(font_string):
    settings = {"text_size": 12, "text": "abc"}
    session = EditingSession(font_string, settings, FULL_KEY_MAP)
    first = build_field_specs(session)
    second = build_field_specs(session)
    assert first == second
    assert [(f.label, f.get()) for f in first] == [(f.label, f.get()) for f in second]


def test_assemble_layout_hints(font_string):
    specs = build_field_specs(EditingSession(font_string, {"text_size": 12}, {"size": "text_size"}))
    menu = assemble(specs)

    assert len(menu) == 1
    assert menu.align_as_pairs is True
    assert menu.label_column_width == 150
    assert menu.max_height == 5000
    assert list(menu) == specs


def test_assemble_uses_given_config():
    config = EditorConfig(align_as_pairs=False, label_column_width=90, use_colon=False)
    menu = assemble([], config)
    assert len(menu) == 0
    assert menu.align_as_pairs is False
    assert menu.label_column_width == 90
    assert menu.use_colon is False
