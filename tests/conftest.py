from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


class FakeEngine:
    """Records animations and reports whatever presented value a test sets."""

    def __init__(self) -> None:
        self.added = []
        self.removed = []
        self.running = {}
        self.presented = None

    def add(self, key, animation) -> None:
        self.added.append((key, animation))
        self.running[key] = animation

    def remove(self, key) -> None:
        self.removed.append(key)
        self.running.pop(key, None)

    def presented_value(self):
        return self.presented


@pytest.fixture
def fake_engine():
    return FakeEngine()
