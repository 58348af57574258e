"""Seed marker overlay."""

from typing import Sequence

from .buffer import PixelBuffer
from .seeds import Point

MARKER_COLOR = 0x000000


def draw_markers(seeds: Sequence[Point], buffer: PixelBuffer, radius: int,
                 color: int = MARKER_COLOR) -> None:
    """
    Paint a ``radius x radius`` square at every seed, over the partition.

    The square starts at the seed and extends towards +x and +y. Seeds from
    :func:`~pixel_voronoi.core.seeds.generate_seeds` always leave room for it;
    a seed that does not is a caller bug and raises instead of being clipped.

    Args:
        seeds: Seed set
        buffer: Frame, already partitioned
        radius: Marker side length in pixels
        color: Packed marker color
    """
    grid = buffer.grid
    for seed in seeds:
        if (seed.x < 0 or seed.y < 0
                or seed.x + radius > buffer.width or seed.y + radius > buffer.height):
            raise ValueError(
                f"Marker at ({seed.x}, {seed.y}) with radius {radius} "
                f"exceeds {buffer.width}x{buffer.height} buffer"
            )
        grid[seed.y:seed.y + radius, seed.x:seed.x + radius] = color
