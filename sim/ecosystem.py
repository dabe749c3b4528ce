import statistics

from evosim.config import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    LOG_LINES,
    MUTATION_RATE,
    PREDATOR_POPULATION_SIZE,
    PREY_POPULATION_SIZE,
)
from evosim.population import PredatorPopulation, PreyPopulation
from evosim.world import World


class Ecosystem:
    """
    The simulation loop. A host calls step() once per frame (or as fast as it
    likes when headless); each step is one tick for every predator and prey,
    plus natural selection whenever the day is over.
    """

    def __init__(self, render=False, width=CANVAS_WIDTH, height=CANVAS_HEIGHT,
                 predator_count=PREDATOR_POPULATION_SIZE, prey_count=PREY_POPULATION_SIZE,
                 seed=None, canvas=None, mutation_rate=MUTATION_RATE):
        self.render_enabled = render
        self.width = width
        self.height = height
        self.predator_count = predator_count
        self.prey_count = prey_count
        self.mutation_rate = mutation_rate
        if render and canvas is None:
            from renderer import PygameCanvas
            canvas = PygameCanvas(width, height)
        self.canvas = canvas
        self._generation_hooks = []
        self.reset(seed)

    def reset(self, seed=None):
        self.world = World(self.width, self.height, seed=seed, canvas=self.canvas)
        self.predators = PredatorPopulation.spawn(self.predator_count, self.world)
        self.prey = PreyPopulation.spawn(self.prey_count, self.world)

        self.t = 0                  # ticks since start
        self.day_t = 0              # ticks in the current generation
        self.extinct = len(self.predators) == 0
        self.history = []
        self.action_log = ""
        self._log(f"Generation 0: {len(self.predators)} predators, {len(self.prey)} prey")
        self._report(self._start_record())
        return self.state()

    # ───────────────────────── reporting ─────────────────────────
    def on_generation(self, hook):
        """Register hook(record) for every finished generation (and the start)."""
        self._generation_hooks.append(hook)
        hook(self._start_record())

    def _report(self, record):
        for hook in self._generation_hooks:
            hook(record)

    def _start_record(self):
        return dict(generation=self.predators.generation,
                    population=len(self.predators),
                    prey=len(self.prey))

    # ───────────────────────── tick ──────────────────────────────
    def step(self):
        """
        Advance one tick. Returns (state, generation_ended, info).
        Once predators are extinct nothing moves any more.
        """
        if self.extinct:
            if self.render_enabled:
                self._render()
            return self.state(), False, self._info([], False)

        self.t += 1
        self.day_t += 1
        self.world.canvas.clear()

        events = self.predators.update(self.prey, self.world)
        self.prey.update(self.world)
        for line in events:
            self._log(line)

        ended = self.predators.all_dead or self.prey.all_dead
        if ended:
            self._end_generation()

        if self.render_enabled:
            self._render()
        return self.state(), ended, self._info(events, ended)

    def _end_generation(self):
        finished = self.predators
        record = self.generation_record(finished)

        self.predators = finished.natural_selection(self.world, self.mutation_rate)
        self.prey = PreyPopulation.spawn(len(self.prey), self.world,
                                         generation=self.predators.generation)
        record["offspring"] = len(self.predators)
        self.history.append(record)

        self._log(f"*** Generation {finished.generation} over: "
                  f"{record['survivors']}/{record['population']} survived, "
                  f"{record['offspring']} in generation {self.predators.generation} ***")
        self.day_t = 0
        if len(self.predators) == 0:
            self.extinct = True
            self._log("*** Predators extinct ***")
        self._report(record)

    def generation_record(self, population):
        predators = population.organisms
        speeds = [p.speed for p in predators]
        senses = [p.sense_distance for p in predators]
        return dict(
            generation=population.generation,
            population=len(predators),
            survivors=len(population.survivors()),
            kills=sum(p.prey_eaten for p in predators),
            mean_speed=statistics.fmean(speeds) if speeds else 0.0,
            mean_sense=statistics.fmean(senses) if senses else 0.0,
            ticks=self.day_t,
        )

    # ───────────────────────── state for host ────────────────────
    @property
    def generation(self):
        return self.predators.generation

    def state(self):
        return dict(
            tick=self.t,
            generation=self.predators.generation,
            extinct=self.extinct,
            predators=[
                dict(id=p.agent_id, x=p.position.x, y=p.position.y, radius=p.radius,
                     color=p.color, vx=p.velocity.x, vy=p.velocity.y,
                     energy=p.energy, sense=p.sense_distance, speed=p.speed,
                     eaten=p.prey_eaten, dead=p.is_dead, survivor=p.is_survivor)
                for p in self.predators
            ],
            prey=[
                dict(id=q.agent_id, x=q.position.x, y=q.position.y,
                     radius=q.radius, color=q.color, dead=q.is_dead,
                     visible=self.world.contains(q.position))
                for q in self.prey
            ],
        )

    def _info(self, events, ended):
        return dict(
            tick=self.t,
            generation=self.predators.generation,
            population=len(self.predators),
            prey_alive=len(self.prey.alive()),
            events=events,
            generation_ended=ended,
            extinct=self.extinct,
        )

    def _render(self):
        from renderer import draw
        draw(self)

    def _log(self, msg):
        lines = (self.action_log + f"[{self.t}] {msg}\n").splitlines(keepends=True)
        self.action_log = "".join(lines[-LOG_LINES:])
