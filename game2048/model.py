"""State of one 2048 game: board, score, high-water score and the over flag."""

import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from .board import Board
from .config import resolve_max_piece, resolve_size, status_trailer
from .side import Side
from .tile import Tile

logger = logging.getLogger(__name__)


def empty_space_exists(board: Board) -> bool:
    """True if at least one cell holds no tile."""
    return bool(np.any(board.values() == 0))


def max_tile_exists(board: Board, max_piece: Optional[int] = None) -> bool:
    """True if some tile has reached the winning value."""
    if max_piece is None:
        max_piece = resolve_max_piece()
    return bool(np.any(board.values() == max_piece))


def at_least_one_move_exists(board: Board) -> bool:
    """True if there is an empty cell or two orthogonal neighbours share a value.

    Only right and upward neighbours are compared, which covers every pair once.
    """
    if empty_space_exists(board):
        return True
    values = board.values()
    right = values[:, :-1] == values[:, 1:]
    up = values[:-1, :] == values[1:, :]
    return bool(np.any(right) or np.any(up))


def check_game_over(board: Board, max_piece: Optional[int] = None) -> bool:
    return max_tile_exists(board, max_piece) or not at_least_one_move_exists(board)


class Model:
    """A 2048 game.

    The board is tilted toward a ``Side``; equal neighbours along the tilt
    merge once per tilt and add the merged value to the score. The game is
    over as soon as a winning tile appears or no tilt can change the board.
    """

    def __init__(self, size: Optional[int] = None, max_piece: Optional[int] = None) -> None:
        self._board = Board(resolve_size() if size is None else size)
        self._max_piece = resolve_max_piece() if max_piece is None else max_piece
        self._score = 0
        self._max_score = 0
        self._game_over = False

    @classmethod
    def from_values(
        cls,
        values: Sequence[Sequence[int]],
        score: int = 0,
        max_score: int = 0,
        game_over: bool = False,
        max_piece: Optional[int] = None,
    ) -> "Model":
        """Preloaded game; ``values[row][col]`` with row 0 at the bottom and 0 for empty."""
        board = Board.from_values(values)
        model = cls(board.size, max_piece)
        model._board = board
        model._score = score
        model._max_score = max_score
        model._game_over = game_over
        return model

    @property
    def board(self) -> Board:
        return self._board

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def score(self) -> int:
        return self._score

    @property
    def max_score(self) -> int:
        return self._max_score

    @property
    def max_piece(self) -> int:
        return self._max_piece

    def tile(self, col: int, row: int) -> Optional[Tile]:
        return self._board.tile(col, row)

    def values(self) -> np.ndarray:
        return self._board.values()

    def game_over(self) -> bool:
        """Whether the game has ended. Updates the max score when it has."""
        self._check_game_over()
        if self._game_over:
            self._max_score = max(self._score, self._max_score)
        return self._game_over

    def clear(self) -> None:
        self._score = 0
        self._game_over = False
        self._board.clear()

    def add_tile(self, tile: Tile) -> None:
        self._board.add_tile(tile)
        self._check_game_over()

    def tilt(self, side: Union[Side, str]) -> bool:
        """Tilt the board toward ``side``. Returns True if any tile moved.

        Tiles nearest the target edge settle first. Within a column a row that
        already absorbed a merge this tilt cannot take another, so three equal
        tiles merge only the leading pair.
        """
        view = self._board.view(Side.parse(side))
        size = view.size
        changed = False
        gained = 0

        for col in range(size):
            merged: List[bool] = [False] * size
            for row in range(size - 2, -1, -1):
                tile = view.tile(col, row)
                if tile is None:
                    continue
                dest = row
                while dest < size - 1:
                    above = view.tile(col, dest + 1)
                    if above is None:
                        dest += 1
                    elif above.value == tile.value and not merged[dest + 1]:
                        dest += 1
                        merged[dest] = True
                        gained += 2 * tile.value
                        break
                    else:
                        break
                if dest != row:
                    view.move(col, dest, tile)
                    changed = True

        self._score += gained
        logger.debug("tilt %s changed=%s gained=%d score=%d", view.side.name, changed, gained, self._score)
        self._check_game_over()
        return changed

    def _check_game_over(self) -> None:
        was_over = self._game_over
        self._game_over = check_game_over(self._board, self._max_piece)
        if self._game_over and not was_over:
            logger.debug("game over at score %d", self._score)

    def copy(self) -> "Model":
        clone = Model(self.size, self._max_piece)
        clone._board = self._board.copy()
        clone._score = self._score
        clone._max_score = self._max_score
        clone._game_over = self._game_over
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (
            self._board == other._board
            and self._score == other._score
            and self._max_score == other._max_score
            and self._game_over == other._game_over
        )

    def __hash__(self) -> int:
        return hash((self._board.values().tobytes(), self._score, self._max_score, self._game_over))

    def __str__(self) -> str:
        lines = ["", "["]
        for row in range(self.size - 1, -1, -1):
            cells = []
            for col in range(self.size):
                tile = self.tile(col, row)
                cells.append("|    " if tile is None else f"|{tile.value:4d}")
            lines.append("".join(cells) + "|")
        over = check_game_over(self._board, self._max_piece)
        lines.append(f"] {self._score} {status_trailer(self._max_score, over)} ")
        return "\n".join(lines) + "\n"


__all__ = [
    "Model",
    "at_least_one_move_exists",
    "check_game_over",
    "empty_space_exists",
    "max_tile_exists",
]
