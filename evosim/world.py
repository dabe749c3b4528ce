# world.py

import os
import random

from evosim.canvas import Canvas
from evosim.config import CANVAS_WIDTH, CANVAS_HEIGHT
from evosim.utils import point_line_distance
from evosim.vector import Vector2D


class World:
    """
    Everything an organism needs to know about its surroundings for one tick:
    the fixed viewport, the shared random source and the canvas to draw into.
    """

    def __init__(self, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, seed=None, canvas=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas must have a positive size, got {width}x{height}")
        self.width = width
        self.height = height
        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self.seed = seed
        self.random = random.Random(seed)
        self.canvas = canvas if canvas is not None else Canvas()
        self.next_id = 0

    def new_id(self):
        agent_id = self.next_id
        self.next_id += 1
        return agent_id

    def clamp(self, position, radius):
        x = min(max(position.x, radius), self.width - radius)
        y = min(max(position.y, radius), self.height - radius)
        return Vector2D(x, y)

    def offscreen(self):
        # far enough out that nothing targets or shows it again
        return Vector2D(-self.width, -self.height)

    def contains(self, position):
        return 0 <= position.x <= self.width and 0 <= position.y <= self.height

    def distance_to_edge(self, position, x=None, y=None):
        """Distance to the vertical line at x, or the horizontal line at y."""
        if x is not None:
            return point_line_distance(position, 1, 0, -x)
        if y is not None:
            return point_line_distance(position, 0, 1, -y)
        raise ValueError("distance_to_edge needs an x or a y line")
