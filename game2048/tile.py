from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Tile:
    """A numbered piece sitting at (column, row)."""

    value: int
    column: int
    row: int

    def at(self, column: int, row: int) -> "Tile":
        return replace(self, column=column, row=row)

    def doubled(self) -> "Tile":
        return replace(self, value=self.value * 2)


def is_tile_value(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


__all__ = ["Tile", "is_tile_value"]
