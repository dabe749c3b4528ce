import math

from evosim.config import PREY_EATEN_CAP
from evosim.vector import Vector2D

# ───────────────────────── helpers ────────────────────────────────────
def edge_lines(agent, world):
    """
    The four boundary lines in the order they are checked: left, right, top,
    bottom. Each entry is (name, x, y) with one of x / y set. Left and top sit
    one radius in from the canvas border, right and bottom on the border.
    """
    return [
        ("left", agent.radius, None),
        ("right", world.width, None),
        ("top", None, agent.radius),
        ("bottom", None, world.height),
    ]


def toward_edge(name):
    return {
        "left": Vector2D(-1, 0),
        "right": Vector2D(1, 0),
        "top": Vector2D(0, -1),
        "bottom": Vector2D(0, 1),
    }[name]


def away_from_edge(name, rng):
    # random jitter along the edge, random push off it
    if name == "left":
        return Vector2D(rng.random(), rng.random() * 2 - 1)
    if name == "right":
        return Vector2D(-rng.random(), rng.random() * 2 - 1)
    if name == "top":
        return Vector2D(rng.random() * 2 - 1, rng.random())
    return Vector2D(rng.random() * 2 - 1, -rng.random())


def sensed_edge(agent, world):
    """First edge (in check order) within sense range, or None."""
    for name, x, y in edge_lines(agent, world):
        d = world.distance_to_edge(agent.position, x=x, y=y)
        if d <= agent.sense_distance:
            return name, d
    return None


# ───────────────────── scripted-predator policy ─────────────────────────
def predator_ai(agent, prey, world):
    """
    Pick this tick's move for a predator. Returns (action, direction) where
    direction is None when the predator should stay put.
    """
    # 1. chase whatever prey is in range, unless already full
    if (prey is not None
            and agent.dist(prey) <= agent.sense_distance
            and agent.prey_eaten < PREY_EATEN_CAP):
        return ("chase", prey.position.subtract(agent.position))

    # 2. edges: fed predators head out, hungry ones turn back in
    edge = sensed_edge(agent, world)
    if edge is not None:
        name, d = edge
        if agent.prey_eaten > 0:
            if d <= agent.radius:
                return ("escape", None)
            return ("seek_edge", toward_edge(name))
        return ("avoid_edge", away_from_edge(name, world.random))

    # 3. nothing around, wander
    return ("wander", Vector2D.from_angle(world.random.random() * 2 * math.pi))
