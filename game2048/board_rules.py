"""Stateless 2048 helpers over raw value grids, for hosts that keep their own state.

Grids are indexed ``[row][col]`` with row 0 at the bottom and 0 for empty cells.
"""

from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .model import Model
from .side import DIRECTION_NAMES, Side
from .tile import Tile

FOUR_PROBABILITY = 0.1


def simulate_tilt(
    grid: Sequence[Sequence[int]], direction: Union[Side, str]
) -> Tuple[np.ndarray, bool, int]:
    """Tilt a copy of ``grid``; returns the new grid, whether it changed and the score gained."""
    side = Side.parse(direction)
    model = Model.from_values(grid)
    changed = model.tilt(side)
    return model.values(), changed, model.score


def valid_moves(grid: Sequence[Sequence[int]]) -> List[str]:
    allowed: List[str] = []
    for name in DIRECTION_NAMES:
        _, changed, _ = simulate_tilt(grid, name)
        if changed:
            allowed.append(name)
    return allowed


def add_random_tile(model: Model, rng: Optional[np.random.Generator] = None) -> Optional[Tile]:
    """Drop a 2 (or, one time in ten, a 4) on a random empty cell of ``model``.

    Returns the placed tile, or None when the board is full.
    """
    if rng is None:
        rng = np.random.default_rng()
    empty = np.argwhere(model.values() == 0)
    if len(empty) == 0:
        return None
    row, col = empty[rng.integers(len(empty))].tolist()
    value = 4 if rng.random() < FOUR_PROBABILITY else 2
    tile = Tile(value, col, row)
    model.add_tile(tile)
    return tile


__all__ = ["DIRECTION_NAMES", "add_random_tile", "simulate_tilt", "valid_moves"]
