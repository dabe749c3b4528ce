from evosim.agentBase import Organism
from evosim.config import (
    BASELINE_SPEED,
    CAPTURE_MARGIN,
    COLOR_SHIFT,
    COLOR_SHIFT_LIMIT,
    MUTATION_FACTOR,
    PREDATOR_COLOR,
    SENSE_COST_BASE,
    SENSE_COST_SCALE,
    SPEED_COST_BASE,
    SPEED_COST_SCALE,
)
from evosim.utils import hex_to_rgb, rgb_to_hex
from evosim.vector import Vector2D


class Predator(Organism):
    def __init__(self, position, radius, energy, sense_distance, speed,
                 color=PREDATOR_COLOR, agent_id=None):
        super().__init__(position, radius, color, agent_id)
        if sense_distance <= 0:
            raise ValueError(f"sense_distance must be positive, got {sense_distance}")
        if speed <= 0:
            raise ValueError(f"speed must be positive, got {speed}")
        self.velocity = Vector2D(0, 0)
        self.energy = energy
        self.max_energy = energy
        self.sense_distance = sense_distance
        self.speed = speed
        self.prey_eaten = 0
        self.is_survivor = False

    # -----------------------------------------------------------
    # scripted decisions
    # -----------------------------------------------------------
    def decide_action(self, prey, world):
        from evosim.ai_logic import predator_ai
        return predator_ai(self, prey, world)

    def update(self, prey, world):
        """
        One tick of behaviour against the nearest prey (or None when there is
        no prey left). Returns what the predator did: "dead", "rest", or one
        of the predator_ai actions.
        """
        if self.is_dead:
            return "dead"
        if self.energy <= 1:
            self.is_dead = True
            return "dead"

        # survivors sit on their edge until they run out of energy
        if self.is_survivor:
            self.update_energy()
            return "rest"

        if prey is not None and not prey.is_dead and self.dist(prey) <= self.radius + CAPTURE_MARGIN:
            prey.kill(world)
            self.prey_eaten += 1

        action, direction = self.decide_action(prey, world)
        if action == "escape":
            self.is_survivor = True
        elif direction is not None:
            self.move(direction, world)

        self.update_energy()
        return action

    def move(self, direction, world):
        heading = self.velocity.add(direction)
        if heading.is_zero():
            # direction cancels the current heading, keep going as before
            heading = self.velocity
        if not heading.is_zero():
            self.velocity = heading.normalize().multiply(self.speed)
        self.position = world.clamp(self.position.add(self.velocity), self.radius)

    def update_energy(self):
        self.energy -= self.energy_cost()

    def energy_cost(self):
        sense_cost = SENSE_COST_SCALE * self.radius + SENSE_COST_BASE
        speed_cost = SPEED_COST_SCALE * (self.speed - BASELINE_SPEED) ** 2 + SPEED_COST_BASE
        return sense_cost + speed_cost

    # -----------------------------------------------------------
    # drawing
    # -----------------------------------------------------------
    def draw(self, canvas):
        super().draw(canvas)
        canvas.stroke_circle(self.position, self.sense_distance)
        tip = self.position.add(self.velocity.multiply(self.radius / 2))
        canvas.line(self.position, tip)

    # -----------------------------------------------------------
    # reproduction
    # -----------------------------------------------------------
    def clone(self, agent_id=None):
        return Predator(self.position.clone(), self.radius, self.max_energy,
                        self.sense_distance, self.speed, self.color, agent_id)

    def mutate(self, rng, mutation_rate):
        """
        With probability mutation_rate upgrade either sense distance or speed
        by 10% and tint the colour (blue for sense, red for speed) so the
        lineage shows on screen. Returns the trait that changed, or None.
        """
        if rng.random() >= mutation_rate:
            return None
        r, g, b = hex_to_rgb(self.color)
        if rng.random() < 0.5:
            self.sense_distance *= MUTATION_FACTOR
            if b <= COLOR_SHIFT_LIMIT:
                b += COLOR_SHIFT
            trait = "sense"
        else:
            self.speed *= MUTATION_FACTOR
            if r <= COLOR_SHIFT_LIMIT:
                r += COLOR_SHIFT
            trait = "speed"
        self.color = rgb_to_hex(r, g, b)
        return trait
