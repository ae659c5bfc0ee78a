"""
Pytest configuration and shared fixtures for ColorPicker tests.

None of these fixtures touch tkinter, so the suite runs without a display.
"""

import pytest

from colorpicker.color_model import ColorModel
from colorpicker.exporter import ColorExporter


class FakeSaveDialog:
    """Stands in for the native save panel: records the suggested name, returns a fixed answer."""

    def __init__(self, answer):
        self.answer = answer
        self.asked = []

    def ask_path(self, suggested_name):
        self.asked.append(suggested_name)
        return self.answer


@pytest.fixture
def model():
    """A fresh picker model at the default gray."""
    return ColorModel()


@pytest.fixture(scope="module")
def exporter():
    """A shared exporter; loading the label font once keeps the suite fast."""
    return ColorExporter()


@pytest.fixture
def save_dialog():
    """
    Factory for fake save dialogs.

    Returns:
        Callable taking the path (or None/'' for cancel) the dialog should return
    """
    return FakeSaveDialog
