"""
Wa-Tor simulation facade.

Main simulation class consumed by renderers and front-ends: builds the
world from parameters or a scenario file, owns the shared random generator
and the update engine, and exposes snapshots, tick stats and summaries.
"""

import numpy as np
from pathlib import Path
from typing import List, Optional

from .data_types import SimulationConfig
from .engine import UpdateEngine, UpdateResult
from .loader import load_scenario
from .rng import make_rng
from .world import World
from .constants import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_FISH_COUNT, DEFAULT_SHARK_COUNT,
    DEFAULT_FISH_SPAWN_PERIOD, DEFAULT_SHARK_SPAWN_PERIOD, DEFAULT_SHARK_STARVE_LIMIT,
    TICK_SUMMARY_INTERVAL
)


class WatorSimulation:
    """
    Main simulation class for the Wa-Tor sea.

    Construction validates the configuration and scatters the initial
    population; each update() advances exactly one tick.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        fish_count: int = DEFAULT_FISH_COUNT,
        shark_count: int = DEFAULT_SHARK_COUNT,
        fish_spawn_period: int = DEFAULT_FISH_SPAWN_PERIOD,
        shark_spawn_period: int = DEFAULT_SHARK_SPAWN_PERIOD,
        shark_starve_limit: int = DEFAULT_SHARK_STARVE_LIMIT,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the world.

        Args:
            width: Cells per row
            height: Rows
            fish_count: Initial fish
            shark_count: Initial sharks
            fish_spawn_period: Fish breeding period (ticks)
            shark_spawn_period: Shark breeding period (ticks)
            shark_starve_limit: Starting shark health (ticks without food)
            seed: Seed for the shared generator (ignored when rng is given)
            rng: Pre-built generator to inject, e.g. from tests

        Raises:
            ConfigError: Overcrowded grid, unsustainable shark health or
                invalid parameters. No partial world is kept.
        """
        self.config = SimulationConfig(
            fish_spawn_period=fish_spawn_period,
            shark_spawn_period=shark_spawn_period,
            shark_starve_limit=shark_starve_limit
        )
        self.seed = seed
        self.rng: np.random.Generator = rng if rng is not None else make_rng(seed)

        self.world: World = World.create(
            width, height, fish_count, shark_count, self.config, self.rng
        )
        self.engine = UpdateEngine(self.world, self.rng)

        population = self.world.population()
        print(f"[OK] Simulation initialized: {width}x{height} sea, "
              f"{population['fish']} fish, {population['sharks']} sharks, seed={seed}")

    @classmethod
    def from_scenario(
        cls,
        file_path: Path,
        schema_dir: Optional[Path] = None,
        seed: Optional[int] = None
    ) -> 'WatorSimulation':
        """
        Build a simulation from a YAML scenario file.

        Args:
            file_path: Scenario YAML
            schema_dir: Optional directory holding scenario.schema.json
            seed: Overrides the scenario's seed when given

        Raises:
            DataLoadError: Missing, unparsable or invalid scenario file
            ConfigError: Scenario describes an invalid world
        """
        print(f"Loading scenario {file_path}...")
        scenario = load_scenario(file_path, schema_dir)
        rules = scenario.rules

        return cls(
            width=scenario.grid.width,
            height=scenario.grid.height,
            fish_count=scenario.population.fish,
            shark_count=scenario.population.sharks,
            fish_spawn_period=rules.fish_spawn_period,
            shark_spawn_period=rules.shark_spawn_period,
            shark_starve_limit=rules.shark_starve_limit,
            seed=seed if seed is not None else scenario.grid.seed
        )

    @property
    def tick(self) -> int:
        """Current tick counter (read-only)"""
        return self.world.tick

    def update(self) -> UpdateResult:
        """Advance the simulation by one tick"""
        return self.engine.update()

    def run(self, ticks: int, verbose: bool = False) -> List[UpdateResult]:
        """
        Advance several ticks.

        Args:
            ticks: Number of updates to run
            verbose: Print a tick summary every TICK_SUMMARY_INTERVAL ticks

        Returns:
            One UpdateResult per tick, in order
        """
        results = []
        for _ in range(ticks):
            results.append(self.engine.update())
            if verbose and self.tick % TICK_SUMMARY_INTERVAL == 0:
                self.print_tick_summary()
        return results

    def state(self) -> np.ndarray:
        """CellState snapshot, one entry per cell"""
        return self.world.state()

    def population(self) -> dict:
        return self.world.population()

    def debug_print(self):
        """Print the grid as text (diagnostic only)"""
        self.world.debug_print()

    def get_tick_stats(self) -> dict:
        return self.engine.get_tick_stats()

    def get_snapshot(self) -> dict:
        """
        Get complete simulation state snapshot.

        Returns:
            Dict with tick_count, population, world and timing
        """
        return {
            'tick_count': self.tick,
            'population': self.population(),
            'world': self.world.to_dict(),
            'timing': self.get_tick_stats()
        }

    def print_tick_summary(self):
        """Print tick summary to console (lightweight monitoring)"""
        stats = self.get_tick_stats()
        population = self.population()
        print(f"Tick {stats['tick_count']:5d} | "
              f"Avg: {stats['avg_tick_time_ms']:6.3f} ms | "
              f"Last: {stats['last_tick_time_ms']:6.3f} ms | "
              f"Fish: {population['fish']} | "
              f"Sharks: {population['sharks']}")
