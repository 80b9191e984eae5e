"""The playing field: cells surrounded by walls."""

from __future__ import annotations

from collections.abc import Iterable

from snakegrid.model import CellType, Dim, Position
from snakegrid.randomizer import PositionRandomizer, PositionRandomizerBase

_SYMBOLS = {
    CellType.EMPTY: "0",
    CellType.WALL: "*",
    CellType.SNAKE: "+",
    CellType.FOOD: "F",
}


class Grid:
    """A grid of cells with a one-cell wall border around the playing area."""

    def __init__(self, dim: Dim, randomizer: PositionRandomizerBase | None = None) -> None:
        self._dim = Dim(dim.width + 2, dim.height + 2)
        self._randomizer = randomizer if randomizer is not None else PositionRandomizer()
        self._cells = [CellType.EMPTY] * (self._dim.width * self._dim.height)
        self._indices: dict[CellType, list[int]] = {
            CellType.SNAKE: [],
            CellType.WALL: [],
            CellType.FOOD: [],
        }
        self._init_walls()

    @property
    def dim(self) -> Dim:
        """Grid dimensions including walls (width + 2, height + 2)."""
        return self._dim

    @staticmethod
    def center(width: int, height: int) -> Position:
        """Centre cell of a playing area of the given size, in wall-inclusive coordinates."""
        return Position(width // 2 + 1, height // 2 + 1)

    def _init_walls(self) -> None:
        width, height = self._dim.width, self._dim.height
        for y in range(height):
            for x in range(width):
                if x in (0, width - 1) or y in (0, height - 1):
                    self._set(Position(x, y), CellType.WALL)

    def _index(self, position: Position) -> int:
        if not (0 <= position.x < self._dim.width and 0 <= position.y < self._dim.height):
            raise IndexError(f"position {position} is outside the grid {self._dim}")
        return position.x + position.y * self._dim.width

    def _set(self, position: Position, cell_type: CellType) -> None:
        index = self._index(position)
        self._cells[index] = cell_type
        self._indices[cell_type].append(index)

    def _free(self, cell_type: CellType) -> None:
        if cell_type not in self._indices:
            raise ValueError(f"cells of type {cell_type.name} cannot be placed")
        for index in self._indices[cell_type]:
            self._cells[index] = CellType.EMPTY
        self._indices[cell_type].clear()

    def update_links(self, links: Iterable[Position], cell_type: CellType) -> None:
        """Clear all cells of ``cell_type`` and mark every position in ``links``."""
        self._free(cell_type)
        for position in links:
            self._set(position, cell_type)

    def update_position(self, position: Position, cell_type: CellType) -> None:
        """Clear all cells of ``cell_type`` and mark ``position``."""
        self._free(cell_type)
        self._set(position, cell_type)

    def hit_test(self, position: Position, cell_type: CellType) -> bool:
        """Return True when the cell at ``position`` holds ``cell_type``."""
        return self._cells[self._index(position)] is cell_type

    def random_empty_position(self) -> Position | None:
        """Return an empty position chosen by the randomizer, or None if the grid is full."""
        return self._randomizer.generate_position(self._dim, tuple(self._cells))

    def debug_lines(self) -> list[str]:
        """Render the grid one text row per line."""
        width = self._dim.width
        rows = (self._cells[start:start + width] for start in range(0, len(self._cells), width))
        return ["".join(_SYMBOLS[cell] + " " for cell in row) for row in rows]