from evosim.agentBase import Organism
from evosim.config import PREY_COLOR, PREY_RADIUS


class Prey(Organism):
    # prey never act, predators move them off the canvas when caught
    def __init__(self, position, radius=PREY_RADIUS, agent_id=None):
        super().__init__(position, radius, PREY_COLOR, agent_id)

    def kill(self, world):
        self.is_dead = True
        self.position = world.offscreen()
