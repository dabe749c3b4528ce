# conditions for sim
CANVAS_WIDTH = 600
CANVAS_HEIGHT = 600
FPS = 60
FRAME_DELAY_MS = 0          # extra pause per frame in the demo, 0 = run at FPS

# -------------------- Predator params -----------------------
PREDATOR_POPULATION_SIZE = 5
PREDATOR_RADIUS = 5
PREDATOR_ENERGY = 1000
PREDATOR_SENSE_DISTANCE = PREDATOR_RADIUS * 4
PREDATOR_SPEED = 3
PREDATOR_COLOR = "#000000"

CAPTURE_MARGIN = 0.5        # prey counts as caught within radius + this
PREY_EATEN_CAP = 2          # stop chasing and head for an edge after this many

# -------------------- Energy costs -----------------------
# cost per tick = (SENSE_COST_SCALE * radius + SENSE_COST_BASE)
#               + (SPEED_COST_SCALE * (speed - BASELINE_SPEED)^2 + SPEED_COST_BASE)
SENSE_COST_SCALE = 0.25
SENSE_COST_BASE = 0.25
SPEED_COST_SCALE = 0.5
SPEED_COST_BASE = 1
BASELINE_SPEED = 3

# -------------------- Mutation -----------------------
MUTATION_RATE = 0.1
MUTATION_FACTOR = 1.1       # trait multiplier for an upgrade
COLOR_SHIFT = 32            # channel bump that tints a mutated lineage
COLOR_SHIFT_LIMIT = 255 - COLOR_SHIFT

# -------------------- Prey params -----------------------
PREY_POPULATION_SIZE = 30
PREY_RADIUS = 5
PREY_COLOR = "#23BA4C"

# -------------------- Stats / showcase -----------------------
STATS_PATH = "run_stats.json"
DEFAULT_RUNS = 20
DEFAULT_GENERATIONS = 30

# Rendering settings (for the renderer)
INFO_HEIGHT = 60
SIDE_PANEL_WIDTH = 360
LOG_LINES = 30              # how many action log lines the side panel keeps
