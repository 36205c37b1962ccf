"""
Deterministic RNG utilities for the Wa-Tor simulation.

A single numpy.random.Generator(PCG64) is created per simulation and shared
by initial placement and the update engine. Seeds can be derived from
hierarchical components with SHA256 so scenario runs are reproducible.
"""

import hashlib
import numpy as np
from typing import Any, List, Optional, Sequence


class SequenceExhaustedError(Exception):
    """Raised when a RandomPlacement is drawn past its size"""
    pass


def make_seed(*components: Any) -> int:
    """
    Generate deterministic 64-bit seed from hierarchical components.

    Uses SHA256 to hash components into stable seed value.

    Args:
        *components: Seed components (scenario seed, scenario_id, run index, etc.)

    Returns:
        64-bit integer seed for numpy RNG

    Example:
        run_seed = make_seed(scenario.grid.seed, scenario.scenario_id, run_index)
    """
    # Join all components with colon separator
    hash_input = ":".join(str(c) for c in components)

    # SHA256 hash and extract 64-bit integer
    hash_bytes = hashlib.sha256(hash_input.encode('utf-8')).digest()
    seed = int.from_bytes(hash_bytes[:8], byteorder='big')

    return seed


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the simulation's random generator.

    Args:
        seed: Integer seed, or None to draw fresh OS entropy

    Returns:
        numpy Generator backed by PCG64
    """
    return np.random.Generator(np.random.PCG64(seed))


def pick_position(rng: np.random.Generator, current: int, candidates: Sequence[int]) -> int:
    """
    Pick one candidate cell uniformly at random.

    Args:
        rng: Shared simulation generator
        current: Cell to stay on when there are no candidates
        candidates: Legal destination cells

    Returns:
        Chosen cell index, or current if candidates is empty
    """
    if len(candidates) == 0:
        return current
    return int(candidates[int(rng.integers(len(candidates)))])


class RandomPlacement:
    """
    Uniformly shuffled permutation of the cell indices [0, size).

    Each index is handed out at most once, so creatures placed from the
    same sequence never collide.
    """

    def __init__(self, size: int, rng: np.random.Generator):
        """
        Args:
            size: Number of cells in the grid
            rng: Shared simulation generator
        """
        self._sequence: List[int] = [int(i) for i in rng.permutation(size)]
        self._cursor = 0

    def next(self) -> int:
        """
        Take the next cell index from the sequence.

        Raises:
            SequenceExhaustedError: If every index has already been drawn
        """
        if self._cursor >= len(self._sequence):
            raise SequenceExhaustedError(
                f"All {len(self._sequence)} cell indices have been drawn"
            )
        index = self._sequence[self._cursor]
        self._cursor += 1
        return index

    def remaining(self) -> int:
        """Number of indices not yet drawn"""
        return len(self._sequence) - self._cursor

    def __len__(self) -> int:
        return self.remaining()
