"""
Creature runtime representation.

Two variants live in grid cells: Fish and Shark. They share age and
last_acted_tick; only sharks carry health. Turn logic dispatches on the
variant type (see engine.py), creatures themselves hold no behavior beyond
their breeding clock.

A creature has no id: its identity is the cell it occupies.
"""

from dataclasses import dataclass
from typing import Union

from .data_types import CellState


@dataclass
class Fish:
    """
    Prey. Moves to a random empty neighbor cell each tick.

    Attributes:
        age: Ticks this fish has acted and survived
        last_acted_tick: Tick during which the fish was last processed
    """
    age: int = 0
    last_acted_tick: int = 0

    kind = CellState.FISH

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.name,
            'age': self.age,
            'last_acted_tick': self.last_acted_tick,
        }


@dataclass
class Shark:
    """
    Predator. Prefers a neighboring fish over an empty cell and starves
    when health reaches zero.

    Attributes:
        health: Ticks left before starvation
        age: Ticks this shark has acted and survived
        last_acted_tick: Tick during which the shark was last processed
    """
    health: int
    age: int = 0
    last_acted_tick: int = 0

    kind = CellState.SHARK

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.name,
            'age': self.age,
            'last_acted_tick': self.last_acted_tick,
            'health': self.health,
        }


Creature = Union[Fish, Shark]


def is_breeding_age(creature: Creature, period: int) -> bool:
    """
    Check whether a creature's age is a positive multiple of its spawn period.

    Args:
        creature: Fish or Shark
        period: Spawn period for the creature's species

    Returns:
        True if the creature breeds when it moves this tick
    """
    return creature.age > 0 and creature.age % period == 0


def creature_from_dict(data: dict) -> Creature:
    """
    Deserialize a creature from dict.

    Args:
        data: Dict produced by Fish.to_dict() or Shark.to_dict()

    Returns:
        Fish or Shark instance
    """
    kind = data['kind']
    if kind == CellState.FISH.name:
        return Fish(age=data.get('age', 0), last_acted_tick=data.get('last_acted_tick', 0))
    if kind == CellState.SHARK.name:
        return Shark(
            health=data['health'],
            age=data.get('age', 0),
            last_acted_tick=data.get('last_acted_tick', 0)
        )
    raise ValueError(f"Unknown creature kind: {kind}")
