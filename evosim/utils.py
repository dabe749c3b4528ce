import math
import re

from evosim.vector import Vector2D

_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


class InvalidColorFormat(ValueError):
    """Raised when a colour string is not #RRGGBB hex."""


# ───────────────────────── colours ────────────────────────────────────
def hex_to_rgb(color):
    m = _HEX_RE.match(color) if isinstance(color, str) else None
    if m is None:
        raise InvalidColorFormat(f"Not a #RRGGBB colour: {color!r}")
    return tuple(int(part, 16) for part in m.groups())


def rgb_to_hex(r, g, b):
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise InvalidColorFormat(f"Channel out of range: {channel}")
    return f"#{r:02x}{g:02x}{b:02x}"


# ───────────────────────── placement ──────────────────────────────────
def random_position(rng, width, height, radius):
    # whole-pixel spot in [radius, dim)
    return Vector2D(
        math.floor(rng.random() * (width - radius) + radius),
        math.floor(rng.random() * (height - radius) + radius),
    )


def random_edge_position(rng, width, height, radius):
    """Random point hugging one of the four canvas edges."""
    x = math.floor(rng.random() * (width - 2 * radius) + radius)
    y = math.floor(rng.random() * (height - 2 * radius) + radius)
    if rng.random() < 0.5:
        # top / bottom
        return Vector2D(x, radius) if rng.random() < 0.5 else Vector2D(x, height - radius)
    # left / right
    return Vector2D(radius, y) if rng.random() < 0.5 else Vector2D(width - radius, y)


# ───────────────────────── geometry ───────────────────────────────────
def point_line_distance(point, a, b, c):
    """Distance from point to the line a*x + b*y + c = 0."""
    return abs(a * point.x + b * point.y + c) / math.sqrt(a * a + b * b)
