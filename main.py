# main.py

import sys
import time

import pygame

from collector import collect_stats, run_generations
from evosim.config import DEFAULT_GENERATIONS, DEFAULT_RUNS, FPS, FRAME_DELAY_MS
from showcase import run_showcase
from sim.ecosystem import Ecosystem

# ═══════════ utilities funcs ════════════════════════════════════════════════
def ask(txt, default="y"):
    tag = "[Y/n]" if default.lower() == "y" else "[y/N]"
    ans = input(f"{txt} {tag} ").strip().lower()
    return (ans == "" and default == "y") or ans.startswith("y")


def ask_int(txt, default):
    raw = input(f"{txt} [default: {default}] ").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        print(f" not a number, using {default}")
        return default


def print_generation(record):
    if "survivors" not in record:
        print(f"[ecosystem] generation {record['generation']}: "
              f"{record['population']} predators, {record['prey']} prey")
        return
    print(f"[ecosystem] generation {record['generation']:3d}  "
          f"predators {record['population']:2d}  survivors {record['survivors']:2d}  "
          f"kills {record['kills']:3d}  speed {record['mean_speed']:.2f}  "
          f"sense {record['mean_sense']:.2f}  -> {record['offspring']} next")


# ═════════ simulation demo ════════════════════════════
def demo(seed=None, frame_delay_ms=FRAME_DELAY_MS):
    eco = Ecosystem(render=True, seed=seed)
    eco.on_generation(print_generation)
    clock = pygame.time.Clock()
    print(f"\n[ecosystem] seed {eco.world.seed} — SPACE pause, --> single step, ESC quit")

    paused = False
    while True:
        advance = not paused
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT or (ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE):
                pygame.quit()
                return eco
            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_SPACE:
                paused = not paused
            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_RIGHT and paused:
                advance = True

        if advance:
            eco.step()
        if frame_delay_ms:
            time.sleep(frame_delay_ms / 1000)
        clock.tick(FPS)


# ═════════ headless run ════════════════════════════
def headless(generations, seed=None):
    eco = Ecosystem(render=False, seed=seed)
    eco.on_generation(print_generation)
    run_generations(eco, generations)
    if eco.extinct:
        print(f"[ecosystem] predators went extinct after generation {eco.generation - 1}")
    return eco


# ═════════════════ menu ════════════════════════════════════════════════
if __name__ == "__main__":
    print("=== Predators & Prey ===")
    print(" 1 simulation demo\n 2 headless run\n 3 collect stats\n 4 showcase")
    choice = input("Enter 1-4 [1] ").strip() or "1"

    if choice == "2":
        n = ask_int("Generations to run", DEFAULT_GENERATIONS)
        seed = ask_int("Seed (0 = random)", 0) or None
        headless(n, seed)
    elif choice == "3":
        runs = ask_int("Runs to collect", DEFAULT_RUNS)
        n = ask_int("Generations per run", DEFAULT_GENERATIONS)
        collect_stats(runs, n)
    elif choice == "4":
        print("Showcase mode: collecting and displaying results...")
        run_showcase(runs=DEFAULT_RUNS, generations=DEFAULT_GENERATIONS)
        sys.exit(0)

    if ask("Run simulation?", "y"):
        seed = ask_int("Seed (0 = random)", 0) or None
        demo(seed)
