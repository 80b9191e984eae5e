"""Value types shared by the game core."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


@dataclass(frozen=True)
class Dim:
    """Grid size as width x height."""

    width: int
    height: int


@dataclass(frozen=True)
class Position:
    """A cell coordinate on the grid."""

    x: int = 0
    y: int = 0

    ZERO: ClassVar[Position]

    def __add__(self, other: object) -> Position:
        if isinstance(other, (Position, Input)):
            return Position(self.x + other.x, self.y + other.y)
        return NotImplemented


Position.ZERO = Position(0, 0)


@dataclass(frozen=True)
class Input:
    """A movement direction, each component in -1, 0 or 1."""

    x: int
    y: int

    DEFAULT: ClassVar[Input]

    def opposite(self, other: Input) -> bool:
        """Return True when ``other`` points the opposite way along a used axis."""
        return (self.x == -other.x and self.x != 0) or (self.y == -other.y and self.y != 0)


Input.DEFAULT = Input(1, 0)


class CellType(Enum):
    EMPTY = 0
    WALL = 1
    SNAKE = 2
    FOOD = 3


class GameplayEvent(Enum):
    GAME_OVER = 0
    GAME_COMPLETED = 1
    FOOD_TAKEN = 2


@dataclass
class SnakeSettings:
    """Initial snake length and head position."""

    default_size: int = 4
    start_position: Position = Position.ZERO


@dataclass
class Settings:
    """Game configuration."""

    grid_dims: Dim = Dim(40, 10)
    snake: SnakeSettings = field(default_factory=SnakeSettings)
    game_speed: float = 1.0