"""
Initial population placement.

Scatters fish, then sharks, over the grid using a RandomPlacement drawn
from the simulation's shared generator, so no two creatures share a cell.
"""

import numpy as np
from typing import TYPE_CHECKING

from .creature import Fish, Shark
from .data_types import SimulationConfig
from .rng import RandomPlacement

if TYPE_CHECKING:
    from .world import World


def spawn_population(
    world: 'World',
    fish_count: int,
    shark_count: int,
    config: SimulationConfig,
    rng: np.random.Generator
) -> dict:
    """
    Place the initial fish and sharks on an empty world.

    Fish are placed first, then sharks. Every creature starts at age 0 with
    last_acted_tick 0; sharks start with health equal to the starve limit.

    Args:
        world: World with all cells empty
        fish_count: Number of fish to place
        shark_count: Number of sharks to place
        config: Simulation rules (starting shark health)
        rng: Shared simulation generator

    Returns:
        Dict with keys 'fish' and 'sharks': counts actually placed
    """
    sequence = RandomPlacement(world.size, rng)

    placed_fish = 0
    for _ in range(fish_count):
        if sequence.remaining() == 0:
            print("[WARN] No more cells left on map to place FISH")
            break
        world.place(sequence.next(), Fish())
        placed_fish += 1

    placed_sharks = 0
    for _ in range(shark_count):
        if sequence.remaining() == 0:
            print("[WARN] No more cells left on map to place SHARK")
            break
        world.place(sequence.next(), Shark(health=config.shark_starve_limit))
        placed_sharks += 1

    return {'fish': placed_fish, 'sharks': placed_sharks}
