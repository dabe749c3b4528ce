import pytest

from evosim.canvas import Canvas
from evosim.vector import Vector2D
from evosim.world import World


class RecordingCanvas(Canvas):
    """Keeps every draw call so tests can check what got rendered."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def fill_circle(self, center, radius, color):
        self.calls.append(("fill_circle", center, radius, color))

    def stroke_circle(self, center, radius):
        self.calls.append(("stroke_circle", center, radius))

    def line(self, start, end):
        self.calls.append(("line", start, end))


@pytest.fixture
def world():
    return World(200, 100, seed=1234)


@pytest.fixture
def recording_world():
    return World(200, 100, seed=1234, canvas=RecordingCanvas())


@pytest.fixture
def make_predator():
    from evosim.predator import Predator

    def _make(x=100, y=50, radius=5, energy=1000, sense=20, speed=3, color="#000000"):
        return Predator(Vector2D(x, y), radius, energy, sense, speed, color)

    return _make
