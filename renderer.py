# renderer.py
import pygame

from evosim.canvas import Canvas
from evosim.config import INFO_HEIGHT, SIDE_PANEL_WIDTH

# Colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
STROKE_COLOR = (0, 0, 0)
INFO_BAR_COLOR = (230, 230, 230)
TEXT_COLOR = (0, 0, 0)
SIDE_PANEL_TEXT_COLOR = (255, 255, 255)  # White text for side panel


class PygameCanvas(Canvas):
    """
    Draws the simulation with pygame. The arena takes the top-left
    width x height of the window; an info bar sits below it and the action
    log panel to the right. Pass a surface to draw off-screen instead of
    opening a window.
    """

    def __init__(self, width, height, surface=None):
        self.width = width
        self.height = height
        if not pygame.get_init():
            pygame.init()
        pygame.font.init()
        self.font = pygame.font.SysFont("Arial", 24)
        self.small_font = pygame.font.SysFont("Arial", 16)
        if surface is None:
            surface = pygame.display.set_mode(
                (int(width + SIDE_PANEL_WIDTH), int(height + INFO_HEIGHT)))
            pygame.display.set_caption("Predators & Prey")
        self.screen = surface
        self.arena = pygame.Rect(0, 0, int(width), int(height))

    def clear(self):
        self.screen.fill(BLACK)
        pygame.draw.rect(self.screen, WHITE, self.arena)

    def fill_circle(self, center, radius, color):
        pygame.draw.circle(self.screen, pygame.Color(color), (center.x, center.y), radius)

    def stroke_circle(self, center, radius):
        pygame.draw.circle(self.screen, STROKE_COLOR, (center.x, center.y), radius, width=1)

    def line(self, start, end):
        pygame.draw.line(self.screen, STROKE_COLOR, (start.x, start.y), (end.x, end.y))


def ActionDraw(canvas, action_log_str):
    """
    Independently draws the provided text in the side panel.
    You can call this function with any string (newlines allowed) to display custom text.
    """
    panel_x = canvas.arena.width  # Side panel begins right after the arena
    panel_rect = pygame.Rect(panel_x, 0, SIDE_PANEL_WIDTH, canvas.arena.height + INFO_HEIGHT)
    pygame.draw.rect(canvas.screen, BLACK, panel_rect)

    if not action_log_str or action_log_str.strip() == "":
        action_log_str = "No actions logged."

    y_offset = 10
    for line in action_log_str.splitlines():
        text_surface = canvas.small_font.render(line, True, SIDE_PANEL_TEXT_COLOR)
        canvas.screen.blit(text_surface, (panel_x + 5, y_offset))
        y_offset += text_surface.get_height() + 4


def draw_info(canvas, generation, predator_count, prey_count, turn):
    bar = pygame.Rect(0, canvas.arena.height, canvas.arena.width, INFO_HEIGHT)
    pygame.draw.rect(canvas.screen, INFO_BAR_COLOR, bar)
    info = f"Generation: {generation}   Predators: {predator_count}   Prey: {prey_count}   Tick: {turn}"
    info_surface = canvas.font.render(info, True, TEXT_COLOR)
    canvas.screen.blit(info_surface, (10, canvas.arena.height + 15))


def draw(eco, flip=True):
    """
    Finish a frame the ecosystem already drew its organisms into:
     - the info bar below the arena (generation and population counters)
     - the side panel with the action log
    """
    canvas = eco.world.canvas
    if not isinstance(canvas, PygameCanvas):
        return
    draw_info(canvas, eco.generation, len(eco.predators), len(eco.prey.alive()), eco.t)
    if canvas.screen is pygame.display.get_surface():
        ActionDraw(canvas, eco.action_log)
    if flip and canvas.screen is pygame.display.get_surface():
        pygame.display.flip()
