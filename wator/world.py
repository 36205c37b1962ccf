"""
World grid for the Wa-Tor simulation.

The World owns the flat list of cells, the grid dimensions, the rules and
the tick counter. It validates configuration at creation time; once
created, only the update engine mutates it.
"""

import numpy as np
from typing import Dict, List, Optional, Tuple

from .creature import Creature, Fish, Shark, creature_from_dict
from .data_types import Action, CellState, SimulationConfig
from .constants import GLYPH_EMPTY, GLYPH_FISH, GLYPH_SHARK
from .spawning import spawn_population
from . import grid


class ConfigError(Exception):
    """Raised when a world cannot be created from the given configuration"""
    pass


class OvercrowdedError(ConfigError):
    """More creatures requested than the grid has cells"""
    pass


class UnsustainableHealthError(ConfigError):
    """Shark starve limit exceeds the shark spawn period"""
    pass


class InvalidParameterError(ConfigError):
    """Non-positive dimension, period or starve limit, or negative count"""
    pass


def validate_parameters(width: int, height: int, config: SimulationConfig):
    """
    Check dimensions and rules that would make the grid or the engine
    meaningless (empty grid, modulo by zero, immortal sharks).

    Raises:
        InvalidParameterError: On the first offending value
    """
    if width < 1 or height < 1:
        raise InvalidParameterError(f"Grid must be at least 1x1, got {width}x{height}")
    if config.fish_spawn_period < 1:
        raise InvalidParameterError(f"fish_spawn_period must be >= 1, got {config.fish_spawn_period}")
    if config.shark_spawn_period < 1:
        raise InvalidParameterError(f"shark_spawn_period must be >= 1, got {config.shark_spawn_period}")
    if config.shark_starve_limit < 1:
        raise InvalidParameterError(f"shark_starve_limit must be >= 1, got {config.shark_starve_limit}")


class World:
    """
    Toroidal sea of width x height cells, stored row-major.

    Each cell is None (empty) or holds exactly one Fish or Shark.
    """

    def __init__(self, width: int, height: int, config: SimulationConfig):
        """
        Allocate an empty world. Prefer World.create() or World.empty(),
        which validate the configuration first.

        Args:
            width: Cells per row
            height: Rows
            config: Simulation rules
        """
        self.width = width
        self.height = height
        self.config = config
        self.tick: int = 0
        self.cells: List[Optional[Creature]] = [None] * (width * height)

    @classmethod
    def empty(cls, width: int, height: int, config: SimulationConfig) -> 'World':
        """
        Create a validated world with no creatures.

        Raises:
            InvalidParameterError: Bad dimensions or rules
        """
        validate_parameters(width, height, config)
        return cls(width, height, config)

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        fish_count: int,
        shark_count: int,
        config: SimulationConfig,
        rng: np.random.Generator
    ) -> 'World':
        """
        Create a world and scatter the initial population at random.

        Args:
            width: Cells per row
            height: Rows
            fish_count: Initial fish
            shark_count: Initial sharks
            config: Simulation rules
            rng: Shared simulation generator

        Returns:
            Populated World

        Raises:
            InvalidParameterError: Bad dimensions, rules or negative counts
            OvercrowdedError: fish_count + shark_count > width * height
            UnsustainableHealthError: shark_starve_limit > shark_spawn_period
        """
        validate_parameters(width, height, config)
        if fish_count < 0 or shark_count < 0:
            raise InvalidParameterError(
                f"Creature counts must be >= 0, got fish={fish_count} sharks={shark_count}"
            )

        if fish_count + shark_count > width * height:
            raise OvercrowdedError(
                f"Too many creatures to fit on map: {fish_count + shark_count} "
                f"creatures for {width * height} cells"
            )

        # Sharks that breed faster than they starve never decline
        if config.shark_starve_limit > config.shark_spawn_period:
            raise UnsustainableHealthError(
                f"shark_starve_limit ({config.shark_starve_limit}) must not exceed "
                f"shark_spawn_period ({config.shark_spawn_period})"
            )

        world = cls(width, height, config)
        spawn_population(world, fish_count, shark_count, config, rng)
        return world

    @property
    def size(self) -> int:
        return len(self.cells)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def creature_at(self, pos: int) -> Optional[Creature]:
        return self.cells[pos]

    def place(self, pos: int, creature: Creature):
        """
        Put a creature in an empty cell.

        Raises:
            ValueError: If the cell is already occupied
        """
        if self.cells[pos] is not None:
            raise ValueError(f"Cell {pos} is already occupied")
        self.cells[pos] = creature

    def remove(self, pos: int) -> Optional[Creature]:
        """Empty a cell and return what was in it"""
        creature = self.cells[pos]
        self.cells[pos] = None
        return creature

    def swap(self, a: int, b: int):
        self.cells[a], self.cells[b] = self.cells[b], self.cells[a]

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def adjacent(self, pos: int) -> Tuple[int, int, int, int]:
        """Return (north, south, west, east) neighbors of pos"""
        return grid.adjacent(pos, self.width, self.height)

    def direction(self, start: int, end: int) -> Action:
        return grid.direction(start, end, self.width, self.height)

    def coordinate(self, pos: int) -> Tuple[int, int]:
        return grid.coordinate(pos, self.width)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def state(self) -> np.ndarray:
        """
        Classify every cell.

        Returns:
            (width*height,) int8 array of CellState values, in cell order
        """
        snapshot = np.zeros(self.size, dtype=np.int8)
        for i, creature in enumerate(self.cells):
            if isinstance(creature, Fish):
                snapshot[i] = CellState.FISH
            elif isinstance(creature, Shark):
                snapshot[i] = CellState.SHARK
        return snapshot

    def population(self) -> Dict[str, int]:
        fish = sum(1 for c in self.cells if isinstance(c, Fish))
        sharks = sum(1 for c in self.cells if isinstance(c, Shark))
        return {'fish': fish, 'sharks': sharks}

    def render_text(self) -> str:
        """One line per row: F fish, S shark, * empty"""
        rows = [[] for _ in range(self.height)]
        for pos, creature in enumerate(self.cells):
            row, _ = self.coordinate(pos)
            if isinstance(creature, Fish):
                rows[row].append(GLYPH_FISH)
            elif isinstance(creature, Shark):
                rows[row].append(GLYPH_SHARK)
            else:
                rows[row].append(GLYPH_EMPTY)
        return "\n".join("".join(glyphs) for glyphs in rows)

    def debug_print(self):
        """Print the textual grid dump (diagnostic only)"""
        print()
        print(self.render_text())

    def to_dict(self) -> dict:
        """
        Serialize world to JSON-compatible dict.

        Returns:
            Dict with dimensions, tick, rules and occupied cells
        """
        return {
            'width': self.width,
            'height': self.height,
            'tick': self.tick,
            'config': self.config.to_dict(),
            'cells': {
                pos: creature.to_dict()
                for pos, creature in enumerate(self.cells)
                if creature is not None
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'World':
        """
        Rebuild a world from to_dict() output.

        Cell keys may be ints or strings (as after a JSON round trip).

        Raises:
            InvalidParameterError: Bad dimensions or rules
            ValueError: Unknown creature kind or two creatures in one cell
        """
        world = cls.empty(data['width'], data['height'], SimulationConfig(**data['config']))
        world.tick = data.get('tick', 0)
        for pos, creature_data in data.get('cells', {}).items():
            world.place(int(pos), creature_from_dict(creature_data))
        return world
