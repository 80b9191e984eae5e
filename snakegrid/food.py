"""The food item the snake is chasing."""

from __future__ import annotations

from dataclasses import dataclass

from snakegrid.model import Position


@dataclass
class Food:
    """Food placed on a grid cell."""

    position: Position = Position.ZERO