"""Tests for the object editor controller."""

import pytest

from conftest import FakeObject


KEY_MAP = {
    "text": "text", "size": "text_size", "shadow": "text_shadow",
    "anchor": "anchor", "anchoroffsetx": "anchor", "anchoroffsety": "anchor",
}


@pytest.fixture
def editor(qapp):
    from pyqt_objedit import create_editor

    widget = create_editor(name="TestEditor")
    yield widget
    widget.deleteLater()


def test_create_editor_defaults(qapp):
    from pyqt_objedit import create_editor

    editor = create_editor()
    assert editor.objectName().startswith("ObjectEditor")
    assert editor.options.width == 400
    assert editor.options.height == 600
    assert editor.get_options_frame().objectName() == f"{editor.objectName()}OptionsFrame"
    assert editor.get_canvas_scroll_box().objectName() == f"{editor.objectName()}CanvasScrollBox"
    assert editor.get_canvas_scroll_box().get_content() is editor.get_options_frame()
    assert not editor.is_editing


def test_create_editor_options(qapp):
    from pyqt_objedit import create_editor

    editor = create_editor(name="Sized", options={"width": 300})
    assert editor.options.width == 300
    assert editor.options.height == 600


def test_create_editor_rejects_unknown_options(qapp):
    from pyqt_objedit import create_editor

    with pytest.raises(ValueError, match="depth"):
        create_editor(options={"depth": 3})


def test_idle_rebuild_renders_nothing(editor):
    menu = editor.rebuild_menu()
    assert len(menu) == 0
    assert editor.get_options_frame().layout() is None


def test_edit_object_sets_session(editor, font_string, recorder):
    settings = {"text_size": 24}
    editor.edit_object(font_string, settings, KEY_MAP, recorder)

    assert editor.get_editing_object() is font_string
    table, key_map = editor.get_editing_profile()
    assert table is settings
    assert key_map is KEY_MAP
    assert editor.get_on_edit_callback() is recorder


def test_edit_object_builds_menu(editor, font_string):
    menu = editor.edit_object(font_string, {"text_size": 24}, KEY_MAP)

    assert [f.name for f in menu] == ["text", "size", "anchor", "anchoroffsetx", "anchoroffsety"]
    assert len(editor.get_option_widgets()) == 5
    assert editor.get_menu() is menu


def test_size_appears_after_external_update(editor, font_string):
    settings = {}
    key_map = {"size": "text_size"}

    menu = editor.edit_object(font_string, settings, key_map)
    assert len(menu) == 0

    settings["text_size"] = 24
    menu = editor.rebuild_menu()
    assert len(menu) == 1
    assert menu.fields[0].get() == 24


def test_rebuild_is_idempotent(editor, font_string):
    editor.edit_object(font_string, {"text_size": 24, "text_shadow": False}, KEY_MAP)
    first = editor.rebuild_menu()
    second = editor.rebuild_menu()

    assert first.fields == second.fields
    assert len(editor.get_option_widgets()) == len(second)


def test_rebuild_replaces_widgets(editor, font_string):
    from PyQt6.QtWidgets import QLabel

    editor.edit_object(font_string, {"text_size": 24}, KEY_MAP)
    editor.rebuild_menu()

    labels = [w for w in editor.get_options_frame().findChildren(QLabel)
              if w.parent() is editor.get_options_frame()]
    assert len(labels) == 5
    assert labels[0].text() == "Text:"


def test_unknown_type_leaves_frame_untouched(editor, font_string):
    editor.edit_object(font_string, {"text_size": 24}, KEY_MAP)
    widgets_before = editor.get_option_widgets()

    menu = editor.edit_object(FakeObject("Texture"), {"text_size": 24}, KEY_MAP)

    assert len(menu) == 0
    assert editor.get_option_widgets() == widgets_before


def test_widget_change_writes_and_notifies(editor, font_string, recorder):
    settings = {"text_size": 24}
    editor.edit_object(font_string, settings, {"size": "text_size"}, recorder)

    slider = editor.get_option_widgets()[0]
    assert slider.get_value() == 24
    slider.slider.setValue(30)

    assert settings["text_size"] == 30
    assert recorder.calls == [(font_string, "size", 30, settings, "text_size")]


def test_field_set_calls_callback_once(editor, font_string, recorder):
    settings = {}
    menu = editor.edit_object(font_string, settings, {"anchoroffsety": "anchor"}, recorder)

    menu.fields[0].set(5)

    assert settings == {"anchor": {"side": 1, "x": 0, "y": 5}}
    assert len(recorder.calls) == 1
    assert recorder.calls[0] == (font_string, "anchoroffsety", 5, settings, "anchor")


def test_new_session_detaches_old_callback(editor, font_string, recorder):
    old_settings = {"text_size": 24}
    old_menu = editor.edit_object(font_string, old_settings, {"size": "text_size"}, recorder)

    new_calls = []
    editor.edit_object(FakeObject(), {"text_size": 10}, {"size": "text_size"},
                       lambda *args: new_calls.append(args))

    old_menu.fields[0].set(99)

    assert recorder.calls == []
    assert new_calls == []
    assert not old_menu.fields[0].session.active


@pytest.mark.parametrize("obj", [None, object(), "FontString"])
def test_edit_object_rejects_non_editable_objects(editor, obj):
    from pyqt_objedit import EditorPreconditionError

    with pytest.raises(EditorPreconditionError):
        editor.edit_object(obj, {}, {})


@pytest.mark.parametrize("settings", [None, [], ("a", 1)])
def test_edit_object_rejects_non_mapping_settings(editor, font_string, settings):
    from pyqt_objedit import EditorPreconditionError

    with pytest.raises(EditorPreconditionError, match="settings_table"):
        editor.edit_object(font_string, settings, {})


def test_failed_precondition_keeps_previous_session(editor, font_string, recorder):
    from pyqt_objedit import EditorPreconditionError

    settings = {"text_size": 24}
    editor.edit_object(font_string, settings, KEY_MAP, recorder)

    with pytest.raises(EditorPreconditionError):
        editor.edit_object(font_string, settings, KEY_MAP, on_change="not callable")

    assert editor.get_on_edit_callback() is recorder
    assert editor.get_session().active


def test_precondition_error_is_type_error():
    from pyqt_objedit import EditorPreconditionError

    assert issubclass(EditorPreconditionError, TypeError)


def test_missing_key_map_builds_nothing(editor, font_string):
    menu = editor.edit_object(font_string, {"text_size": 24})
    assert len(menu) == 0
    assert editor.get_editing_profile()[1] == {}


def test_malformed_range_value_shrinks_menu(editor, font_string):
    settings = {"text": "hi", "text_size": "big"}
    menu = editor.edit_object(font_string, settings, {"text": "text", "size": "text_size"})

    assert [f.name for f in menu] == ["text"]
    assert len(editor.get_option_widgets()) == 1
    assert settings["text_size"] == "big"


def test_unknown_type_resets_current_menu(editor, font_string):
    editor.edit_object(font_string, {"text_size": 24}, KEY_MAP)

    menu = editor.edit_object(FakeObject("Texture"), {"text_size": 24}, KEY_MAP)

    assert editor.get_menu() is menu
    assert len(editor.get_menu()) == 0
