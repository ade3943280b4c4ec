import pytest

from desktopcalc.model.engine import ExpressionEngine


class RecordingDisplay:
    """Display double that records every render request in order."""
    def __init__(self):
        self.calls = []
        self.top = ""
        self.bottom = ""
        self.point_enabled = True

    def render_top_line(self, text):
        self.calls.append(("top", text))
        self.top = text

    def render_bottom_line(self, text):
        self.calls.append(("bottom", text))
        self.bottom = text

    def set_decimal_point_available(self, enabled):
        self.calls.append(("point", enabled))
        self.point_enabled = enabled


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def engine(display):
    eng = ExpressionEngine()
    eng.attach_display(display)
    display.calls.clear()
    return eng
