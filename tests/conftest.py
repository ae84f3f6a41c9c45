import os

# pygame must never open a real window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest


class RecordingSurface:
    """Drawing surface that records the commands issued by the renderer."""
    def __init__(self):
        self.circles = []
        self.lines = []

    def fill_circle(self, center, radius, color):
        self.circles.append((tuple(center), radius, color))

    def draw_line(self, p0, p1, color, width):
        self.lines.append((tuple(p0), tuple(p1), color, width))

    def lines_between(self, a, b):
        a, b = tuple(a), tuple(b)
        return [line for line in self.lines if {line[0], line[1]} == {a, b}]


@pytest.fixture
def surface():
    return RecordingSurface()
