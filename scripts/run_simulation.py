#!/usr/bin/env python3
"""Headless run of the forest fire model with nobody fighting the fire."""

import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import FireModel, Host, TickScheduler
from forest_fire.constants import FIRE_TICK_INTERVAL


def main():
    """Run generations until the forest is saved or gone."""
    # Simulation parameters
    SIZE = 30
    SEED = 42
    MAX_GENERATIONS = 200

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    host = Host()
    scheduler = TickScheduler()
    model = FireModel(size=SIZE, host=host, scheduler=scheduler, seed=SEED)

    print("--- INITIAL STATE ---")
    print(model.grid.render_text())

    for i in range(MAX_GENERATIONS):
        scheduler.advance(FIRE_TICK_INTERVAL)
        print(f"\n--- GENERATION {i + 1} ---")
        print(model.grid.render_text())

        if model.ended:
            break

    print(f"\n{host.status_text}")


if __name__ == "__main__":
    main()
