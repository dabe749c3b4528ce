from evosim.config import (
    MUTATION_RATE,
    PREDATOR_ENERGY,
    PREDATOR_RADIUS,
    PREDATOR_SENSE_DISTANCE,
    PREDATOR_SPEED,
    PREY_RADIUS,
)
from evosim.predator import Predator
from evosim.prey import Prey
from evosim.utils import random_edge_position, random_position


class Population:
    def __init__(self, organisms=None, generation=0):
        self.organisms = list(organisms) if organisms is not None else []
        self.size = len(self.organisms)
        self.all_dead = False
        self.generation = generation

    def __len__(self):
        return len(self.organisms)

    def __iter__(self):
        return iter(self.organisms)

    def alive(self):
        return [o for o in self.organisms if not o.is_dead]

    def check_all_dead(self):
        self.all_dead = all(o.is_dead for o in self.organisms)
        return self.all_dead


class PredatorPopulation(Population):
    @classmethod
    def spawn(cls, size, world, radius=PREDATOR_RADIUS, energy=PREDATOR_ENERGY,
              sense_distance=PREDATOR_SENSE_DISTANCE, speed=PREDATOR_SPEED):
        organisms = [
            Predator(random_edge_position(world.random, world.width, world.height, radius),
                     radius, energy, sense_distance, speed, agent_id=world.new_id())
            for _ in range(size)
        ]
        return cls(organisms)

    @staticmethod
    def nearest_prey(predator, prey_population):
        """Closest prey by straight scan; first one wins a tie. None if no prey."""
        nearest, min_dist = None, None
        for prey in prey_population:
            d = predator.dist(prey)
            if min_dist is None or d < min_dist:
                nearest, min_dist = prey, d
        return nearest

    def update(self, prey_population, world):
        """Run one tick for every predator and draw it. Returns log lines."""
        events = []
        for predator in self.organisms:
            was_dead = predator.is_dead
            target = self.nearest_prey(predator, prey_population)
            eaten_before = predator.prey_eaten
            action = predator.update(target, world)
            predator.draw(world.canvas)

            if predator.prey_eaten > eaten_before:
                events.append(f"Predator#{predator.agent_id} caught Prey#{target.agent_id}"
                              f" ({predator.prey_eaten} eaten)")
            if action == "escape":
                events.append(f"{predator} escaped")
            elif action == "dead" and not was_dead:
                fate = "survived the day" if predator.is_survivor else "starved"
                events.append(f"Predator#{predator.agent_id} {fate}")
        self.check_all_dead()
        return events

    def natural_selection(self, world, mutation_rate=MUTATION_RATE):
        """
        Survivors that ate once come back unchanged; survivors that ate more
        come back twice, the second copy mutated. Everyone else is gone.
        Returns the next generation as a new population.
        """
        offspring = []
        for predator in self.organisms:
            if not predator.is_survivor:
                continue
            if predator.prey_eaten == 1:
                offspring.append(predator.clone(world.new_id()))
            elif predator.prey_eaten > 1:
                offspring.append(predator.clone(world.new_id()))
                child = predator.clone(world.new_id())
                child.mutate(world.random, mutation_rate)
                offspring.append(child)
        return PredatorPopulation(offspring, generation=self.generation + 1)

    def survivors(self):
        return [p for p in self.organisms if p.is_survivor]


class PreyPopulation(Population):
    @classmethod
    def spawn(cls, size, world, radius=PREY_RADIUS, generation=0):
        organisms = [
            Prey(random_position(world.random, world.width, world.height, radius),
                 radius, agent_id=world.new_id())
            for _ in range(size)
        ]
        return cls(organisms, generation=generation)

    def update(self, world):
        for prey in self.organisms:
            prey.draw(world.canvas)
        return self.check_all_dead()
