"""
Shared fixtures. Qt runs on the offscreen platform so the tests work
without a display.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


class Recorder:
    """Data listener that remembers every notification."""

    def __init__(self):
        self.calls = []

    def data_added(self, source, events):
        self.calls.append(("added", source, tuple(events)))

    def data_updated(self, source, events):
        self.calls.append(("updated", source, tuple(events)))

    def data_removed(self, source, events):
        self.calls.append(("removed", source, tuple(events)))

    def kinds(self):
        return [kind for kind, _, _ in self.calls]


@pytest.fixture
def recorder():
    return Recorder()
