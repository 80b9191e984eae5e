"""Player-selectable game speed and grid size."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from snakegrid.model import Dim

_T = TypeVar("_T")
_E = TypeVar("_E", bound=Enum)


class GameSpeed(Enum):
    WORM = 0
    SNAKE = 1
    PYTHON = 2


class GridSize(Enum):
    SIZE_30x10 = 0
    SIZE_50x15 = 1
    SIZE_80x20 = 2


@dataclass(frozen=True)
class _Option(Generic[_T]):
    name: str
    value: _T


_GAME_SPEEDS: dict[GameSpeed, _Option[float]] = {
    GameSpeed.WORM: _Option("Worm", 0.3),
    GameSpeed.SNAKE: _Option("Snake", 0.1),
    GameSpeed.PYTHON: _Option("Python", 0.05),
}

_GRID_SIZES: dict[GridSize, _Option[Dim]] = {
    GridSize.SIZE_30x10: _Option("30x10", Dim(30, 10)),
    GridSize.SIZE_50x15: _Option("50x15", Dim(50, 15)),
    GridSize.SIZE_80x20: _Option("80x20", Dim(80, 20)),
}


def _find_by_name(options: dict[_E, _Option], name: str, default: _E) -> _E:
    return next((key for key, option in options.items() if option.name == name), default)


class UserSettings:
    """The speed and grid size the player picked, with their display names."""

    def __init__(self) -> None:
        self._speed = _GAME_SPEEDS[GameSpeed.SNAKE]
        self._grid_size = _GRID_SIZES[GridSize.SIZE_50x15]

    def game_speed_options(self) -> list[str]:
        """Display names of all speed options."""
        return [option.name for option in _GAME_SPEEDS.values()]

    def current_game_speed_option(self) -> str:
        return self._speed.name

    def grid_size_options(self) -> list[str]:
        """Display names of all grid size options."""
        return [option.name for option in _GRID_SIZES.values()]

    def current_grid_size_option(self) -> str:
        return self._grid_size.name

    def save(self, game_speed: GameSpeed, grid_size: GridSize) -> None:
        """Make the given speed and grid size current."""
        self._speed = _GAME_SPEEDS[game_speed]
        self._grid_size = _GRID_SIZES[grid_size]

    def game_speed_by_name(self, name: str) -> GameSpeed:
        """The speed with this display name, or SNAKE when there is none."""
        return _find_by_name(_GAME_SPEEDS, name, GameSpeed.SNAKE)

    def grid_size_by_name(self, name: str) -> GridSize:
        """The grid size with this display name, or 50x15 when there is none."""
        return _find_by_name(_GRID_SIZES, name, GridSize.SIZE_50x15)

    @property
    def game_speed(self) -> float:
        """Seconds between snake moves."""
        return self._speed.value

    @property
    def grid_size(self) -> Dim:
        return self._grid_size.value