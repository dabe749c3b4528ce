import pytest

from evosim.population import PredatorPopulation, PreyPopulation
from evosim.prey import Prey
from evosim.vector import Vector2D


def prey_at(*points):
    return PreyPopulation([Prey(Vector2D(x, y), agent_id=i) for i, (x, y) in enumerate(points)])


# ───────────────────────── spawning ─────────────────────────
def test_predators_spawn_on_edges(world):
    pop = PredatorPopulation.spawn(20, world)

    assert len(pop) == pop.size == 20
    assert pop.generation == 0
    for p in pop:
        assert (p.position.x in (5, world.width - 5)
                or p.position.y in (5, world.height - 5))
        assert (p.energy, p.sense_distance, p.speed) == (1000, 20, 3)
    assert len({p.agent_id for p in pop}) == 20


def test_prey_spawn_inside_canvas(world):
    prey = PreyPopulation.spawn(30, world)
    assert len(prey) == 30
    for q in prey:
        assert world.contains(q.position)
        assert q.color == "#23BA4C"


# ───────────────────────── nearest prey ─────────────────────────
def test_nearest_prey_first_wins_tie(make_predator):
    p = make_predator(x=100, y=50)
    prey = prey_at((130, 50), (90, 50), (110, 50))
    assert PredatorPopulation.nearest_prey(p, prey) is prey.organisms[1]


def test_nearest_prey_none_when_no_prey(make_predator):
    assert PredatorPopulation.nearest_prey(make_predator(), PreyPopulation([])) is None


def test_update_without_prey_still_moves(world, make_predator):
    p = make_predator()
    pop = PredatorPopulation([p])
    pop.update(PreyPopulation([]), world)
    assert p.position != Vector2D(100, 50)
    assert not pop.all_dead


# ───────────────────────── update ─────────────────────────
def test_update_reports_catches_and_draws(recording_world, make_predator):
    p = make_predator(x=100, y=50)
    p.agent_id = 7
    pop = PredatorPopulation([p])
    prey = prey_at((103, 50), (150, 50))

    events = pop.update(prey, recording_world)

    assert prey.organisms[0].is_dead
    assert any("Predator#7 caught Prey#0" in e for e in events)
    assert [c[0] for c in recording_world.canvas.calls] == ["fill_circle", "stroke_circle", "line"]


def test_all_dead_only_when_every_predator_is(world, make_predator):
    pop = PredatorPopulation([make_predator(energy=1), make_predator(energy=1)])
    events = pop.update(prey_at((10, 10)), world)
    assert pop.all_dead
    assert sum("starved" in e for e in events) == 2

    mixed = PredatorPopulation([make_predator(energy=1), make_predator()])
    mixed.update(prey_at((10, 10)), world)
    assert not mixed.all_dead


def test_prey_all_dead(recording_world):
    prey = prey_at((10, 10), (20, 20))
    assert not prey.update(recording_world)
    assert len(recording_world.canvas.calls) == 2

    for q in prey:
        q.kill(recording_world)
    assert prey.update(recording_world)
    assert prey.alive() == []


# ───────────────────────── natural selection ─────────────────────────
def _survivor(make_predator, eaten, survivor=True):
    p = make_predator(x=5, y=50)
    p.prey_eaten = eaten
    p.is_survivor = survivor
    p.energy = 1
    return p


def test_natural_selection_clones_and_mutates(world, make_predator):
    once = _survivor(make_predator, 1)
    twice = _survivor(make_predator, 2)
    fed_but_stuck = _survivor(make_predator, 3, survivor=False)
    starved = _survivor(make_predator, 0, survivor=False)
    pop = PredatorPopulation([once, twice, fed_but_stuck, starved], generation=4)

    nxt = pop.natural_selection(world, mutation_rate=1.0)

    assert nxt is not pop
    assert len(nxt) == nxt.size == 3
    assert nxt.generation == 5
    a, b, mutant = nxt.organisms
    for child in (a, b):
        assert (child.sense_distance, child.speed, child.color) == (20, 3, "#000000")
        assert child.energy == 1000
        assert child.prey_eaten == 0
    assert (mutant.sense_distance == pytest.approx(22)) != (mutant.speed == pytest.approx(3.3))
    assert mutant.color != "#000000"


def test_natural_selection_default_rate_keeps_count(world, make_predator):
    pop = PredatorPopulation([_survivor(make_predator, 1), _survivor(make_predator, 2)])
    assert len(pop.natural_selection(world)) == 3


def test_natural_selection_can_go_extinct(world, make_predator):
    pop = PredatorPopulation([_survivor(make_predator, 0, survivor=False)])
    nxt = pop.natural_selection(world)
    assert nxt.size == 0
    assert nxt.generation == 1


def test_escape_event_names_predator_and_spot(world, make_predator):
    p = make_predator(x=8, y=50)
    p.agent_id = 3
    p.prey_eaten = 1
    pop = PredatorPopulation([p])

    events = pop.update(PreyPopulation([]), world)

    assert events == ["Predator#3 at (8, 50) escaped"]
