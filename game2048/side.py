"""Compass directions and the logical-to-physical coordinate remap."""

from enum import Enum
from typing import Sequence, Tuple, Union

DIRECTION_NAMES: Sequence[str] = ("UP", "RIGHT", "DOWN", "LEFT")


class Side(Enum):
    """Direction of a tilt.

    Each side defines a perspective in which "toward increasing row" points
    at that side of the physical board, so one slide-north routine serves
    all four directions.
    """

    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

    def physical(self, col: int, row: int, size: int) -> Tuple[int, int]:
        """Map logical (col, row) under this perspective to physical (col, row)."""
        last = size - 1
        if self is Side.NORTH:
            return col, row
        if self is Side.EAST:
            return row, last - col
        if self is Side.SOUTH:
            return last - col, last - row
        return last - row, col

    @property
    def direction_name(self) -> str:
        return _SIDE_TO_NAME[self]

    @classmethod
    def parse(cls, value: Union["Side", str]) -> "Side":
        if isinstance(value, Side):
            return value
        key = str(value).strip().upper()
        if key in _NAME_TO_SIDE:
            return _NAME_TO_SIDE[key]
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown direction: {value}") from None


_NAME_TO_SIDE = {
    "UP": Side.NORTH,
    "RIGHT": Side.EAST,
    "DOWN": Side.SOUTH,
    "LEFT": Side.WEST,
}
_SIDE_TO_NAME = {side: name for name, side in _NAME_TO_SIDE.items()}


__all__ = ["DIRECTION_NAMES", "Side"]
