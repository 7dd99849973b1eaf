"""Shared pytest fixtures for packcalc tests."""

from __future__ import annotations

import os

# Must be set before the first QApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from packcalc.app.state import FormStore


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """One QApplication for the whole test session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def store(qapp: QApplication) -> FormStore:
    return FormStore()


class SignalRecorder:
    """Collects every emission of a Qt signal."""

    def __init__(self, signal) -> None:
        self.values: list = []
        signal.connect(self._record)

    def _record(self, value) -> None:
        self.values.append(value)
