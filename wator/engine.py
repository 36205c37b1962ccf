"""
Wa-Tor update engine.

Advances a World by exactly one tick per update() call, mutating the grid in
place and returning the previous/current snapshots plus the change log.

TURN ORDER CONTRACT (Critical Invariant):

Cells are visited in index order 0..size. A creature acts at most once per
tick: before acting it is stamped with the current tick, and any cell whose
occupant already carries that stamp is skipped. This covers creatures that
moved forward into a not-yet-visited cell and newborns, which are stamped at
birth.

Movement priority:
- Fish move to a uniformly chosen empty neighbor.
- Sharks move to a uniformly chosen neighbor holding a fish if any exists,
  otherwise to a uniformly chosen empty neighbor.
- A creature with no candidate stays put and cannot breed this tick, since
  there is no vacated cell for the offspring.
"""

import os
import time
import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .changelog import ChangeLog
from .creature import Fish, Shark, is_breeding_age
from .data_types import Action, CellState
from .rng import pick_position
from .world import World
from .constants import DEBUG_INVARIANTS_ENV, TICK_TIME_WINDOW


@dataclass
class UpdateResult:
    """
    Outcome of one tick.

    Attributes:
        previous: CellState snapshot before the tick
        current: CellState snapshot after the tick
        change_log: Deltas recorded during the tick, in processing order
    """
    previous: np.ndarray
    current: np.ndarray
    change_log: ChangeLog


def _distinct(cells: Sequence[int]) -> List[int]:
    # Neighbors coincide on 1- and 2-wide grids; keep first occurrences
    seen = set()
    result = []
    for cell in cells:
        if cell not in seen:
            seen.add(cell)
            result.append(cell)
    return result


class UpdateEngine:
    """
    Applies movement, feeding, starvation and reproduction to every
    creature once per tick.

    The engine holds the simulation's single random generator; pass a
    seeded one for reproducible runs.
    """

    def __init__(self, world: World, rng: np.random.Generator):
        """
        Args:
            world: World to advance (owned by the engine during update())
            rng: Shared simulation generator
        """
        self.world = world
        self.rng = rng

        # Performance metrics
        self._tick_times: List[float] = []
        self._tick_time_sum: float = 0.0
        self._tick_time_window: int = TICK_TIME_WINDOW

    def update(self) -> UpdateResult:
        """
        Advance the world by one tick.

        Never fails: an empty or fully dead grid still advances the tick
        and returns an empty change log.

        Returns:
            UpdateResult with previous/current snapshots and the change log
        """
        start_time = time.perf_counter()
        world = self.world

        previous = world.state()
        world.tick += 1
        change_log = ChangeLog()

        for i in range(world.size):
            creature = world.cells[i]
            if creature is None:
                continue

            # Already moved here earlier this tick, or born this tick
            if creature.last_acted_tick == world.tick:
                continue

            creature.last_acted_tick = world.tick

            if isinstance(creature, Fish):
                new_pos = self._fish_turn(i, creature, change_log)
            else:
                new_pos = self._shark_turn(i, creature, change_log)
                if new_pos is None:
                    continue

            creature.age += 1

        current = world.state()

        elapsed = time.perf_counter() - start_time
        self._record_tick_time(elapsed)

        # Debug invariant check (zero perf impact when env var not set)
        if os.getenv(DEBUG_INVARIANTS_ENV) == '1':
            self._check_invariants(len(previous))

        return UpdateResult(previous=previous, current=current, change_log=change_log)

    # ------------------------------------------------------------------
    # Per-species turns
    # ------------------------------------------------------------------

    def _fish_turn(self, i: int, fish: Fish, change_log: ChangeLog) -> int:
        """
        Move a fish to a random empty neighbor and breed if due.

        Returns:
            The fish's new cell
        """
        world = self.world
        open_cells = [n for n in _distinct(world.adjacent(i)) if world.cells[n] is None]
        new_pos = pick_position(self.rng, i, open_cells)

        change_log.record(CellState.FISH, i, new_pos, world.direction(i, new_pos))

        if new_pos != i:
            self._move(i, new_pos)
            if is_breeding_age(fish, world.config.fish_spawn_period):
                world.place(i, Fish(last_acted_tick=world.tick))
                change_log.record(CellState.FISH, i, i, Action.BIRTH)

        return new_pos

    def _shark_turn(self, i: int, shark: Shark, change_log: ChangeLog) -> Optional[int]:
        """
        Starve, hunt or wander, then breed if due.

        Returns:
            The shark's new cell, or None if it starved
        """
        world = self.world

        shark.health -= 1
        if shark.health == 0:
            world.remove(i)
            change_log.record(CellState.SHARK, i, i, Action.DEATH)
            return None

        neighbors = _distinct(world.adjacent(i))
        prey = [n for n in neighbors if isinstance(world.cells[n], Fish)]
        if prey:
            candidates = prey
        else:
            candidates = [n for n in neighbors if world.cells[n] is None]
        new_pos = pick_position(self.rng, i, candidates)

        change_log.record(CellState.SHARK, i, new_pos, world.direction(i, new_pos))

        if isinstance(world.cells[new_pos], Fish):
            world.remove(new_pos)
            # +1 offsets the decrement already taken this tick
            shark.health = world.config.shark_starve_limit + 1
            change_log.record(CellState.SHARK, i, new_pos, Action.ATE)

        if new_pos != i:
            self._move(i, new_pos)
            if is_breeding_age(shark, world.config.shark_spawn_period):
                world.place(i, Shark(
                    health=world.config.shark_starve_limit,
                    last_acted_tick=world.tick
                ))
                change_log.record(CellState.SHARK, i, i, Action.BIRTH)

        return new_pos

    def _move(self, origin: int, destination: int):
        """Swap the mover into its (now empty) destination cell"""
        assert self.world.cells[destination] is None, \
            f"Destination cell {destination} is occupied"
        self.world.swap(origin, destination)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def _check_invariants(self, expected_size: int):
        world = self.world
        assert world.size == expected_size, \
            f"Cell count changed: {expected_size} -> {world.size}"
        for pos, creature in enumerate(world.cells):
            if creature is not None:
                assert creature.last_acted_tick == world.tick, \
                    f"Creature at {pos} last acted on tick {creature.last_acted_tick}, world is at {world.tick}"

    def get_tick_stats(self) -> dict:
        """
        Get current tick timing statistics.

        Returns:
            Dict with tick_count, avg_tick_time_ms, last_tick_time_ms
        """
        if not self._tick_times:
            return {
                'tick_count': self.world.tick,
                'avg_tick_time_ms': 0.0,
                'last_tick_time_ms': 0.0
            }

        avg_time = self._tick_time_sum / len(self._tick_times)
        last_time = self._tick_times[-1]

        return {
            'tick_count': self.world.tick,
            'avg_tick_time_ms': avg_time * 1000.0,
            'last_tick_time_ms': last_time * 1000.0
        }

    def _record_tick_time(self, elapsed: float):
        """
        Record tick timing for rolling average.

        Args:
            elapsed: Tick time in seconds
        """
        self._tick_times.append(elapsed)
        self._tick_time_sum += elapsed

        # Maintain rolling window
        if len(self._tick_times) > self._tick_time_window:
            removed = self._tick_times.pop(0)
            self._tick_time_sum -= removed
