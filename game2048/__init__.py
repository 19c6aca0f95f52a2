"""Tilt and merge rules for the 2048 sliding-tile puzzle."""

__version__ = "0.1.0"

from .board import Board, BoardView
from .board_rules import add_random_tile, simulate_tilt, valid_moves
from .model import (
    Model,
    at_least_one_move_exists,
    check_game_over,
    empty_space_exists,
    max_tile_exists,
)
from .side import DIRECTION_NAMES, Side
from .tile import Tile
