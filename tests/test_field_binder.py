"""Tests for field binding and editing sessions."""

import pytest

from pyqt_objedit.editor.editing_session import EditingSession
from pyqt_objedit.forms.attribute_schema import AttributeDescriptor, WidgetKind
from pyqt_objedit.forms.field_binder import BindingPath, bind


SIZE = AttributeDescriptor("size", "Size", WidgetKind.RANGE, min_value=5, max_value=120, step=1)
ANCHOR_DEFAULT = {"side": 1, "x": 0, "y": 0}
ANCHOR_X = AttributeDescriptor("anchoroffsetx", "Anchor X Offset", WidgetKind.RANGE,
                               default=ANCHOR_DEFAULT, min_value=-20, max_value=20, sub_key="x")


def test_bind_copies_descriptor_metadata(font_string):
    session = EditingSession(font_string, {"text_size": 24}, {"size": "text_size"})
    field = bind(SIZE, "text_size", 24, session)

    assert field.name == "size"
    assert field.label == "Size"
    assert field.widget is WidgetKind.RANGE
    assert field.path == BindingPath("text_size", None)
    assert (field.min_value, field.max_value, field.step) == (5, 120, 1)
    assert field.get() == 24


def test_get_is_a_snapshot(font_string):
    settings = {"text_size": 24}
    field = bind(SIZE, "text_size", 24, EditingSession(font_string, settings))
    settings["text_size"] = 30
    assert field.get() == 24


def test_set_writes_flat_key_and_notifies(font_string, recorder):
    settings = {"text_size": 24}
    session = EditingSession(font_string, settings, {"size": "text_size"}, recorder)
    field = bind(SIZE, "text_size", 24, session)

    field.set(36)

    assert settings["text_size"] == 36
    assert recorder.calls == [(font_string, "size", 36, settings, "text_size")]
    assert recorder.calls[0][3] is settings


def test_set_writes_sub_key(font_string, recorder):
    settings = {"anchor": {"side": 3, "x": 0, "y": 0}}
    field = bind(ANCHOR_X, "anchor", 0, EditingSession(font_string, settings, on_change=recorder))

    field.set(7)

    assert settings["anchor"] == {"side": 3, "x": 7, "y": 0}
    assert recorder.calls == [(font_string, "anchoroffsetx", 7, settings, "anchor")]


def test_sub_key_write_without_container_copies_default(font_string):
    settings = {}
    field = bind(ANCHOR_X, "anchor", 0, EditingSession(font_string, settings))

    field.set(-4)

    assert settings["anchor"] == {"side": 1, "x": -4, "y": 0}
    assert settings["anchor"] is not ANCHOR_DEFAULT
    assert ANCHOR_DEFAULT == {"side": 1, "x": 0, "y": 0}


def test_no_bounds_validation(font_string):
    settings = {"text_size": 24}
    field = bind(SIZE, "text_size", 24, EditingSession(font_string, settings))
    field.set(500)
    assert settings["text_size"] == 500


def test_set_without_callback(font_string):
    settings = {"text_size": 24}
    field = bind(SIZE, "text_size", 24, EditingSession(font_string, settings))
    field.set(12)
    assert settings["text_size"] == 12


def test_deactivated_session_never_notifies(font_string, recorder):
    settings = {"text_size": 24}
    session = EditingSession(font_string, settings, on_change=recorder)
    field = bind(SIZE, "text_size", 24, session)

    session.deactivate()
    field.set(48)

    assert recorder.calls == []
    assert settings["text_size"] == 48


def test_binding_path_read():
    table = {"anchor": {"side": 5}, "size": 0}
    assert BindingPath("anchor", "side").read(table) == 5
    assert BindingPath("size").read(table) == 0
    assert BindingPath("missing", "side").read(table) is None


def test_unbound_field_set_fails_loud():
    from pyqt_objedit.forms.field_binder import FieldSpec

    field = FieldSpec("size", "Size", WidgetKind.RANGE, BindingPath("text_size"), 24)
    with pytest.raises(RuntimeError):
        field.set(1)
