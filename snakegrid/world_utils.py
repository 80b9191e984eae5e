"""Conversions between grid coordinates, world space and display text."""

from __future__ import annotations

import math

from snakegrid.model import Dim, Position

Vector = tuple[float, float, float]

GRID_MARGIN = 2.0


def format_seconds(seconds: float) -> str:
    """Format elapsed time as MM:SS, rounding to the nearest second."""
    total = math.floor(seconds + 0.5)
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


def format_score(score: int) -> str:
    """Format a score with at least two digits."""
    return f"{score:02d}"


def link_position_to_vector(position: Position, cell_size: float, dims: Dim) -> Vector:
    """World location of the centre of a grid cell; grid rows run along the first axis."""
    half = cell_size * 0.5
    return (
        (dims.height - 1 - position.y) * cell_size + half,
        position.x * cell_size + half,
        half,
    )


def _half_fov_tan(fov_degrees: float) -> float:
    return math.tan(math.radians(fov_degrees * 0.5))


def _vertical_fov(horizontal_fov_degrees: float, aspect_hw: float) -> float:
    return math.degrees(2.0 * math.atan(math.tan(math.radians(horizontal_fov_degrees) * 0.5) * aspect_hw))


def camera_location(
    dim: Dim,
    cell_size: float,
    viewport_width: float,
    viewport_height: float,
    fov_degrees: float,
    origin: Vector = (0.0, 0.0, 0.0),
) -> Vector | None:
    """Location of a downward-looking camera that fits the whole grid in the viewport.

    Returns None when the viewport or grid height is zero.
    """
    if viewport_height == 0 or dim.height == 0:
        return None

    world_width = dim.width * cell_size
    world_height = dim.height * cell_size
    viewport_aspect = viewport_width / viewport_height
    grid_aspect = dim.width / dim.height

    if viewport_aspect <= grid_aspect:
        margin_width = (dim.width + GRID_MARGIN) * cell_size
        z = margin_width / _half_fov_tan(fov_degrees)
    else:
        vfov = _vertical_fov(fov_degrees, 1.0 / viewport_aspect)
        margin_height = (dim.height + GRID_MARGIN) * cell_size
        z = margin_height / _half_fov_tan(vfov)

    return (
        origin[0] + 0.5 * world_height,
        origin[1] + 0.5 * world_width,
        origin[2] + 0.5 * z,
    )