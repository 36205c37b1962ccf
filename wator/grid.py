"""
Toroidal grid arithmetic.

The sea is stored row-major as a flat list of width*height cells. These
helpers have no simulation state: they map between flat indices, rows and
columns, and neighbors, wrapping on both axes.
"""

from typing import Tuple

from .data_types import Action, NEIGHBOR_ACTIONS


def coordinate(pos: int, width: int) -> Tuple[int, int]:
    """
    Convert a flat cell index to (row, col).

    Args:
        pos: Cell index
        width: Cells per row

    Returns:
        Tuple of (row, col)
    """
    return pos // width, pos % width


def index(row: int, col: int, width: int, height: int) -> int:
    """
    Convert (row, col) to a flat cell index, wrapping out-of-range values.

    Args:
        row: Row (any integer, wrapped into [0, height))
        col: Column (any integer, wrapped into [0, width))
        width: Cells per row
        height: Rows

    Returns:
        Cell index
    """
    return (row % height) * width + (col % width)


def adjacent(pos: int, width: int, height: int) -> Tuple[int, int, int, int]:
    """
    Return the four neighbors of a cell on the torus.

    North/south wrap across the whole grid; east/west wrap within the row.

    Args:
        pos: Cell index
        width: Cells per row
        height: Rows

    Returns:
        Tuple of (north, south, west, east) cell indices
    """
    total = width * height

    north = pos - width
    if north < 0:
        north += total

    south = pos + width
    if south >= total:
        south -= total

    # Crossing the right edge wraps to the start of the same row
    east = pos + 1
    if east % width == 0:
        east -= width

    # Crossing the left edge wraps to the end of the same row
    west = pos - 1
    if pos % width == 0:
        west += width

    return north, south, west, east


def direction(start: int, end: int, width: int, height: int) -> Action:
    """
    Classify a one-step move.

    Neighbors are checked in (north, south, west, east) order, so on grids
    narrow enough for two neighbors to coincide the earlier one wins.

    Args:
        start: Origin cell
        end: Destination cell
        width: Cells per row
        height: Rows

    Returns:
        MOVE_NONE if start == end, else the matching MOVE_* action

    Raises:
        ValueError: If end is not adjacent to start
    """
    if start == end:
        return Action.MOVE_NONE

    for neighbor, action in zip(adjacent(start, width, height), NEIGHBOR_ACTIONS):
        if neighbor == end:
            return action

    raise ValueError(f"Cell {end} is not adjacent to cell {start} on a {width}x{height} grid")
