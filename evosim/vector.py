import math


class ZeroVectorError(ValueError):
    """Raised when a zero-length vector has no direction to normalise to."""


class Vector2D:
    """2D position/velocity value. Every operation returns a new vector."""

    __slots__ = ("x", "y")

    def __init__(self, x=0.0, y=0.0):
        self.x = x
        self.y = y

    def add(self, other):
        return Vector2D(self.x + other.x, self.y + other.y)

    def subtract(self, other):
        return Vector2D(self.x - other.x, self.y - other.y)

    def multiply(self, scalar):
        return Vector2D(self.x * scalar, self.y * scalar)

    def divide(self, scalar):
        if scalar == 0:
            raise ZeroDivisionError("Division by zero")
        return Vector2D(self.x / scalar, self.y / scalar)

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def magnitude(self):
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self):
        mag = self.magnitude()
        if mag == 0:
            raise ZeroVectorError("Cannot normalize a zero vector")
        return self.divide(mag)

    def distance(self, other):
        return math.hypot(self.x - other.x, self.y - other.y)

    def equals(self, other):
        return self.x == other.x and self.y == other.y

    def clone(self):
        return Vector2D(self.x, self.y)

    def is_zero(self):
        return self.x == 0 and self.y == 0

    @staticmethod
    def from_angle(theta):
        return Vector2D(math.cos(theta), math.sin(theta))

    @staticmethod
    def from_array(arr):
        x, y = arr
        return Vector2D(x, y)

    def to_array(self):
        return [self.x, self.y]

    # -----------------------------------------------------------
    # operator sugar
    # -----------------------------------------------------------
    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, scalar):
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return self.divide(scalar)

    def __eq__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        return hash((self.x, self.y))

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self):
        return f"({self.x}, {self.y})"

    def __repr__(self):
        return f"Vector2D({self.x!r}, {self.y!r})"
