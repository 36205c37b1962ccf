"""
Data types mirroring YAML scenario structures, plus the enums shared by
the grid, the engine and the change log.

The config dataclasses are populated by loader.py from YAML files.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from enum import IntEnum


# ============================================================================
# Cell and Action Codes
# ============================================================================

class CellState(IntEnum):
    """What a snapshot reports for a cell"""
    NONE = 0
    FISH = 1
    SHARK = 2


class Action(IntEnum):
    """
    Change log action codes.

    Values are stable so renderers can key animations on them.
    NO_ACTION and MOVE are reserved; the engine never emits them.
    """
    NO_ACTION = 0
    MOVE = 1
    MOVE_NONE = 2
    MOVE_NORTH = 3
    MOVE_SOUTH = 4
    MOVE_EAST = 5
    MOVE_WEST = 6
    DEATH = 7
    BIRTH = 8
    ATE = 9


# Direction order matches the tuple returned by grid.adjacent()
NEIGHBOR_ACTIONS = (Action.MOVE_NORTH, Action.MOVE_SOUTH, Action.MOVE_WEST, Action.MOVE_EAST)

MOVE_ACTIONS = frozenset(NEIGHBOR_ACTIONS) | {Action.MOVE_NONE}


# ============================================================================
# Rules
# ============================================================================

@dataclass(frozen=True)
class SimulationConfig:
    """
    Breeding and starvation rules, fixed for the life of a world.

    Attributes:
        fish_spawn_period: A fish breeds when it moves at an age that is a
            positive multiple of this period
        shark_spawn_period: Same rule for sharks
        shark_starve_limit: Starting shark health; ticks a shark survives
            without eating
    """
    fish_spawn_period: int
    shark_spawn_period: int
    shark_starve_limit: int

    def to_dict(self) -> Dict[str, int]:
        return {
            'fish_spawn_period': self.fish_spawn_period,
            'shark_spawn_period': self.shark_spawn_period,
            'shark_starve_limit': self.shark_starve_limit,
        }


# ============================================================================
# Scenario Definition
# ============================================================================

@dataclass
class GridConfig:
    """Grid dimensions and optional seed"""
    width: int
    height: int
    seed: Optional[int] = None


@dataclass
class PopulationConfig:
    """Initial population"""
    fish: int = 0
    sharks: int = 0


@dataclass
class Scenario:
    """Complete scenario definition"""
    scenario_id: str
    name: str
    grid: GridConfig
    population: PopulationConfig
    rules: SimulationConfig
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'scenario_id': self.scenario_id,
            'name': self.name,
            'grid': {
                'width': self.grid.width,
                'height': self.grid.height,
                'seed': self.grid.seed,
            },
            'population': {
                'fish': self.population.fish,
                'sharks': self.population.sharks,
            },
            'rules': self.rules.to_dict(),
            'description': self.description,
        }
