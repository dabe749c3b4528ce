class Canvas:
    """
    Rendering sink the simulation draws into once per organism per tick.
    This base class draws nothing, which is what headless runs and tests use;
    renderer.PygameCanvas puts the same calls on screen.
    """

    def clear(self):
        pass

    def fill_circle(self, center, radius, color):
        pass

    def stroke_circle(self, center, radius):
        pass

    def line(self, start, end):
        pass
