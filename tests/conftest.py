"""pytest configuration and fixtures for pyqt-objedit tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


class FakeObject:
    """Minimal editable object."""

    def __init__(self, object_type="FontString"):
        self.object_type = object_type

    def get_object_type(self):
        return self.object_type


@pytest.fixture
def font_string():
    return FakeObject("FontString")


@pytest.fixture
def recorder():
    """Change callback that records its calls."""
    calls = []

    def callback(obj, name, value, settings_table, key):
        calls.append((obj, name, value, settings_table, key))

    callback.calls = calls
    return callback
