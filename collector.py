import json
import time

from evosim.config import DEFAULT_GENERATIONS, DEFAULT_RUNS, STATS_PATH
from sim.ecosystem import Ecosystem

RESULTS_PATH = STATS_PATH  # path for cached runs

# ───────────────────────── generation runner ──────────────────────

def run_generations(eco: Ecosystem, generations: int) -> list:
    """Step until `generations` more generations have finished or predators die out."""
    target = len(eco.history) + generations
    while len(eco.history) < target and not eco.extinct:
        eco.step()
    return eco.history


def run_once(seed: int, generations: int = DEFAULT_GENERATIONS, **eco_kwargs) -> dict:
    eco = Ecosystem(render=False, seed=seed, **eco_kwargs)
    history = run_generations(eco, generations)
    return dict(
        seed=seed,
        generations=len(history),
        ticks=eco.t,
        extinct=eco.extinct,
        final_population=len(eco.predators),
        history=history,
    )

# ───────────────────────── batch collector ─────────────────────

def collect_stats(runs: int = DEFAULT_RUNS, generations: int = DEFAULT_GENERATIONS,
                  seed_base: int | None = None, path: str = RESULTS_PATH, **eco_kwargs):
    # Run `runs` simulations and write raw per-generation stats to path.
    base_seed = seed_base if seed_base is not None else int(time.time())
    stats_list = []
    for i in range(runs):
        stats = run_once(base_seed + i, generations, **eco_kwargs)
        stats_list.append(stats)
        print(f"[collector] run {i + 1}/{runs}: {stats['generations']} generations, "
              f"{stats['final_population']} predators left"
              + (" (extinct)" if stats["extinct"] else ""))

    with open(path, "w", encoding="utf-8") as fp:
        json.dump(stats_list, fp, indent=2)
    print(f"[collector] Saved {len(stats_list)} runs → {path}")
    return path

# ───────────────────────── CLI entry ───────────────────────────
if __name__ == "__main__":
    import sys

    runs = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_RUNS
    generations = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_GENERATIONS
    collect_stats(runs, generations)
