"""Strategies for picking an empty cell on the grid."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from snakegrid.model import CellType, Dim, Position


class PositionRandomizerBase(ABC):
    """Picks an empty cell from a flat row-major cell list."""

    @abstractmethod
    def generate_position(self, dim: Dim, cells: Sequence[CellType]) -> Position | None:
        """Return an empty position, or None when the grid has none."""


class PositionRandomizer(PositionRandomizerBase):
    """Starts at a random cell and scans forward, wrapping around, for an empty one."""

    def __init__(self, rng: Any = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def generate_position(self, dim: Dim, cells: Sequence[CellType]) -> Position | None:
        size = dim.width * dim.height
        if size == 0:
            return None
        start = self._rng.randint(0, size - 1)
        order = list(range(start, size)) + list(range(start))
        for index in order:
            if cells[index] is CellType.EMPTY:
                return Position(index % dim.width, index // dim.width)
        return None