class Organism:
    def __init__(self, position, radius, color, agent_id=None):
        if radius <= 0:
            raise ValueError(f"radius must be positive, got {radius}")
        self.position = position
        self.radius = radius
        self.color = color
        self.is_dead = False
        self.agent_id = agent_id

    def draw(self, canvas):
        canvas.fill_circle(self.position, self.radius, self.color)

    def dist(self, other):
        return self.position.distance(other.position)

    def __str__(self):
        return f"{self.__class__.__name__}#{self.agent_id} at {self.position}"
