#plan:
#1. run a batch of seeded simulations headless and cache every generation's stats
#2. average them per generation (population, speed, sense, kills, survivors)
#3. plot the results as graphs
#4. show the results as slides via pygame:
    #slide 1: title
    #slide 2: graphs next to a live simulation
import json
import os

import numpy as np
import plotly.express as px
import pygame

from collector import RESULTS_PATH, collect_stats
from evosim.config import CANVAS_HEIGHT, CANVAS_WIDTH, DEFAULT_GENERATIONS, DEFAULT_RUNS, INFO_HEIGHT
from renderer import PygameCanvas, draw
from sim.ecosystem import Ecosystem

SIM_STEPS_PER_FRAME = 4

# ────────────────────────────
#  Data & metrics
# ────────────────────────────
def load_runs(path=RESULTS_PATH):
    with open(path, "r", encoding="utf-8") as fp:
        return json.load(fp)


def metrics(runs):
    """
    Per-generation means over all runs. Runs that went extinct early simply
    stop contributing, `alive_runs` says how many runs reached each generation.
    """
    depth = max((len(r["history"]) for r in runs), default=0)
    keys = ("population", "survivors", "kills", "mean_speed", "mean_sense", "ticks")
    table = {k: np.full((len(runs), depth), np.nan) for k in keys}
    for i, run in enumerate(runs):
        for g, rec in enumerate(run["history"]):
            for k in keys:
                table[k][i, g] = rec[k]

    out = dict(generation=list(range(depth)))
    for k in keys:
        col = table[k]
        seen = ~np.isnan(col).all(axis=0)
        means = np.zeros(depth)
        if seen.any():
            means[seen] = np.nanmean(col[:, seen], axis=0)
        out[k] = means.tolist()
    out["alive_runs"] = (~np.isnan(table["population"])).sum(axis=0).tolist()
    out["extinct"] = sum(bool(r["extinct"]) for r in runs)
    out["runs"] = len(runs)
    return out

# ────────────────────────────
#  Plot generation
# ────────────────────────────

GRAPH_W, GRAPH_H = 1600, 1200
LAYOUT = dict(
    font=dict(size=36),
    title_font_size=52,
    margin=dict(l=80, r=80, t=160, b=80),
)
MARGIN = 15

CHARTS = [
    ("population", "Predators per generation", "population.png"),
    ("mean_speed", "Mean speed", "speed.png"),
    ("mean_sense", "Mean sense distance", "sense.png"),
    ("kills", "Prey eaten per generation", "kills.png"),
]


def plot_metrics(m, out_dir="showcase_outputs"):
    os.makedirs(out_dir, exist_ok=True)
    paths = []

    for key, title, fname in CHARTS:
        if not m["generation"]:
            break
        fig = px.line(x=m["generation"], y=m[key], title=title,
                      labels={"x": "generation", "y": key})
        fig.update_layout(**LAYOUT)
        p = os.path.join(out_dir, fname)
        fig.write_image(p, width=GRAPH_W, height=GRAPH_H)
        paths.append(p)

    # bar - how many runs made it to each generation
    if m["generation"]:
        fig = px.bar(x=m["generation"], y=m["alive_runs"],
                     title=f"Runs still alive ({m['extinct']}/{m['runs']} went extinct)")
        fig.update_layout(**LAYOUT)
        p = os.path.join(out_dir, "alive_runs.png")
        fig.write_image(p, width=GRAPH_W, height=GRAPH_H)
        paths.append(p)

    return paths

# ────────────────────────────
#  Pygame helpers
# ────────────────────────────

def scale_fit(surf, max_w, max_h):
    w, h = surf.get_size()
    s = min(max_w / w, max_h / h, 1)
    return pygame.transform.smoothscale(surf, (int(w * s), int(h * s)))


def load_surfs(paths, cw, ch):
    return [scale_fit(pygame.image.load(p), cw, ch) for p in paths]

# ────────────────────────────
#  Showcase
# ────────────────────────────
def run_showcase(runs=DEFAULT_RUNS, generations=DEFAULT_GENERATIONS, seed=0):
    # ── 1 make sure cached runs exist ─────────────
    if not os.path.exists(RESULTS_PATH):
        print(f"[showcase] {RESULTS_PATH} missing → generating {runs} runs …")
        collect_stats(runs, generations)

    raw = load_runs()
    print(f"[showcase] loaded {len(raw)} cached runs")

    # ── 2  metrics & graphs  ────────────────
    m = metrics(raw)
    graph_fp = plot_metrics(m)

    # ── 3 window & layout stuff ─────────────────
    pygame.init()
    screen = pygame.display.set_mode((0, 0))
    W, H = screen.get_size()

    COLS, ROWS = 2, 2
    left_w = int(W * 0.6) - MARGIN * 2
    left_h = H - MARGIN * 2
    cell_w = (left_w - (COLS - 1) * MARGIN) // COLS
    cell_h = (left_h - (ROWS - 1) * MARGIN) // ROWS
    g_surfs = load_surfs(graph_fp[:COLS * ROWS], cell_w, cell_h)

    # live sim drawn off-screen, then scaled into the right-hand pane
    sim_surf = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT + INFO_HEIGHT))
    eco = Ecosystem(render=False, seed=seed,
                    canvas=PygameCanvas(CANVAS_WIDTH, CANVAS_HEIGHT, surface=sim_surf))
    pane_w, pane_h = W - left_w - MARGIN * 3, H - MARGIN * 2

    # ── 4 slide-show loop ───────────────────────────────────
    slide = 1
    font = pygame.font.SysFont(None, 80)
    clock = pygame.time.Clock()

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT or (ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE):
                running = False
            if ev.type == pygame.KEYDOWN and ev.key in (pygame.K_SPACE, pygame.K_RETURN):
                slide = slide % 2 + 1

        screen.fill((0, 0, 0))

        if slide == 1:
            for i, txt in enumerate(
                ["Predators & Prey", f"{m['runs']} runs, {len(m['generation'])} generations",
                 "SPACE for results"]
            ):
                surf = font.render(txt, True, (255, 255, 255))
                rect = surf.get_rect(center=(W // 2, H // 2 - 120 + i * 120))
                screen.blit(surf, rect)
        else:
            # graph grid
            for idx, surf in enumerate(g_surfs):
                r, c = divmod(idx, COLS)
                x = MARGIN + c * (cell_w + MARGIN)
                y = MARGIN + r * (cell_h + MARGIN)
                screen.blit(surf, (x, y))

            # simulation pane, restart if the predators die out
            for _ in range(SIM_STEPS_PER_FRAME):
                if eco.extinct:
                    eco.reset()
                eco.step()
            draw(eco, flip=False)
            screen.blit(scale_fit(sim_surf, pane_w, pane_h), (left_w + MARGIN * 2, MARGIN))

        pygame.display.flip()
        clock.tick(30)

    pygame.quit()
