"""Square grid of tiles addressed by (column, row), (0, 0) at the bottom-left."""

import logging
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from .side import Side
from .tile import Tile, is_tile_value

logger = logging.getLogger(__name__)


class Board:
    """Fixed-size storage for tiles.

    Values live in an integer array indexed ``[row, col]`` with row 0 at the
    bottom; ``0`` marks an empty cell. Tiles handed out by reads are built on
    the fly and carry the coordinates they were read at.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, received {size}")
        self._values = np.zeros((size, size), dtype=np.int64)

    @classmethod
    def from_values(cls, values: Sequence[Sequence[int]]) -> "Board":
        """Build a board from ``values[row][col]`` (row 0 bottom, 0 = empty)."""
        arr = np.array(values, dtype=np.int64)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1] or arr.shape[0] == 0:
            raise ValueError(f"Expected a square grid, received shape {arr.shape}")
        for value in arr[arr != 0].tolist():
            if not is_tile_value(value):
                raise ValueError(f"Tile values must be positive powers of two, received {value}")
        board = cls(arr.shape[0])
        board._values = arr
        return board

    @property
    def size(self) -> int:
        return self._values.shape[0]

    def _check(self, col: int, row: int) -> None:
        size = self.size
        if not (0 <= col < size and 0 <= row < size):
            raise IndexError(f"({col}, {row}) is outside a {size}x{size} board")

    def tile(self, col: int, row: int) -> Optional[Tile]:
        self._check(col, row)
        value = int(self._values[row, col])
        if value == 0:
            return None
        return Tile(value, col, row)

    def add_tile(self, tile: Tile) -> None:
        """Place ``tile`` at its own coordinates. The cell must be empty."""
        self._check(tile.column, tile.row)
        if not is_tile_value(tile.value):
            raise ValueError(f"Tile values must be positive powers of two, received {tile.value}")
        if self._values[tile.row, tile.column] != 0:
            raise ValueError(f"Cell ({tile.column}, {tile.row}) is already occupied")
        self._values[tile.row, tile.column] = tile.value

    def move(self, col: int, row: int, tile: Tile) -> bool:
        """Relocate ``tile`` to (col, row), merging into an equal tile found there.

        Returns True when the move was a merge.
        """
        self._check(col, row)
        self._check(tile.column, tile.row)
        if (col, row) == (tile.column, tile.row):
            return False
        existing = int(self._values[row, col])
        if existing and existing != tile.value:
            raise ValueError(
                f"Cannot merge {tile.value} at ({tile.column}, {tile.row}) "
                f"into {existing} at ({col}, {row})"
            )
        placed = tile.at(col, row)
        if existing:
            placed = placed.doubled()
        self._values[tile.row, tile.column] = 0
        self._values[row, col] = placed.value
        return bool(existing)

    def view(self, side: Side) -> "BoardView":
        """Perspective in which increasing row points toward ``side``."""
        return BoardView(self, side)

    def clear(self) -> None:
        self._values.fill(0)

    def values(self) -> np.ndarray:
        return self._values.copy()

    def copy(self) -> "Board":
        board = Board(self.size)
        board._values = self._values.copy()
        return board

    def __iter__(self) -> Iterator[Tile]:
        rows, cols = np.nonzero(self._values)
        for row, col in zip(rows.tolist(), cols.tolist()):
            yield Tile(int(self._values[row, col]), col, row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(size={self.size}, values={self._values[::-1].tolist()})"


class BoardView:
    """Reads and writes a Board through the coordinate remap of one side."""

    def __init__(self, board: Board, side: Side) -> None:
        self.board = board
        self.side = side

    @property
    def size(self) -> int:
        return self.board.size

    def _physical(self, col: int, row: int) -> Tuple[int, int]:
        self.board._check(col, row)
        return self.side.physical(col, row, self.size)

    def tile(self, col: int, row: int) -> Optional[Tile]:
        pcol, prow = self._physical(col, row)
        found = self.board.tile(pcol, prow)
        if found is None:
            return None
        return found.at(col, row)

    def move(self, col: int, row: int, tile: Tile) -> bool:
        pcol, prow = self._physical(col, row)
        src_col, src_row = self._physical(tile.column, tile.row)
        merged = self.board.move(pcol, prow, tile.at(src_col, src_row))
        if merged:
            logger.debug("merged %d into (%d, %d) facing %s", tile.value, pcol, prow, self.side.name)
        return merged


__all__ = ["Board", "BoardView"]
