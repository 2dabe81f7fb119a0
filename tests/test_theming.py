"""Tests for theming system."""


def test_color_scheme_creation():
    """Test ColorScheme instantiation."""
    from pyqt_objedit.theming import ColorScheme

    scheme = ColorScheme()
    assert scheme.to_hex((255, 0, 16)) == "#ff0010"
    assert scheme.to_hex(scheme.window_bg) == "#2b2b2b"


def test_color_dict_covers_every_field():
    from pyqt_objedit.theming import ColorScheme

    colors = ColorScheme().get_color_dict()
    assert colors["panel_bg"] == (30, 30, 30)
    assert all(len(rgb) == 3 for rgb in colors.values())


def test_light_theme_differs_from_dark():
    from pyqt_objedit.theming import ColorScheme

    dark = ColorScheme.create_dark_theme()
    light = ColorScheme.create_light_theme()
    assert dark == ColorScheme()
    assert light.window_bg != dark.window_bg
    assert light.text_primary == (0, 0, 0)


def test_to_qcolor(qapp):
    from pyqt_objedit.theming import ColorScheme

    color = ColorScheme().to_qcolor((10, 20, 30))
    assert (color.red(), color.green(), color.blue()) == (10, 20, 30)


def test_option_templates_target_widget_families():
    """Each template styles the widget family it is applied to."""
    from pyqt_objedit.theming import StyleSheetGenerator

    templates = StyleSheetGenerator().generate_option_templates()
    assert "QLineEdit" in templates.text
    assert "QComboBox" in templates.dropdown
    assert "QCheckBox" in templates.switch
    assert "QSlider" in templates.slider
    assert "QPushButton" in templates.button


def test_templates_follow_color_scheme():
    from pyqt_objedit.theming import ColorScheme, StyleSheetGenerator

    light = ColorScheme.create_light_theme()
    generator = StyleSheetGenerator(light)
    assert light.to_hex(light.input_bg) in generator.generate_text_template()

    generator.update_color_scheme(ColorScheme())
    assert "#404040" in generator.generate_text_template()


def test_editor_style_selects_editor_frame():
    from pyqt_objedit.theming import StyleSheetGenerator

    style = StyleSheetGenerator().generate_editor_style()
    assert "ObjectEditor {" in style
    assert "QScrollArea" in style
