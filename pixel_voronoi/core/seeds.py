"""Random seed placement for the partition."""

from typing import List, NamedTuple, Optional

import numpy as np
import structlog

from ..config.settings import ConfigurationError
from ..utils.random import get_rng
from .palette import Palette

logger = structlog.get_logger()

MARKER_RADIUS = 5
MIN_SEEDS = 1
MAX_SEEDS = 100


class Point(NamedTuple):
    """A seed: pixel position plus the packed color of the cell it owns."""
    x: int
    y: int
    color: int


def check_placement_range(width: int, height: int, radius: int) -> None:
    """Raise ConfigurationError if no position keeps a marker inside the image."""
    if width <= 2 * radius or height <= 2 * radius:
        raise ConfigurationError(
            f"Image {width}x{height} is too small for marker radius {radius}: "
            f"both dimensions must exceed {2 * radius}"
        )


def generate_seeds(n: int, width: int, height: int, radius: int,
                   palette: Palette, rng: Optional[np.random.Generator] = None) -> List[Point]:
    """
    Place ``n`` seeds uniformly at random, away from the image edges.

    Coordinates are drawn from ``[radius, width - radius)`` and
    ``[radius, height - radius)``, x then y for each seed in turn.
    Coincident seeds are allowed. Seed ``i`` gets ``palette[i % len(palette)]``.

    Args:
        n: Number of seeds
        width: Image width in pixels
        height: Image height in pixels
        radius: Edge margin, equal to the marker size
        palette: Seed colors
        rng: Random source; the shared generator when omitted

    Returns:
        Seed set in generation order
    """
    check_placement_range(width, height, radius)
    if n < 0:
        raise ConfigurationError(f"Seed count must not be negative, got {n}")
    if rng is None:
        rng = get_rng()

    seeds = []
    for i in range(n):
        x = int(rng.integers(radius, width - radius))
        y = int(rng.integers(radius, height - radius))
        seeds.append(Point(x, y, palette.color_at(i)))

    logger.debug("Seeds generated", count=n, width=width, height=height)
    return seeds
