"""
Nearest-seed pixel classification.

Every pixel is assigned to the seed with the lowest distance score. The scan
is deliberately brute force, ``O(width * height * n)`` with no spatial
pruning: cheap enough for up to 100 seeds at window resolutions, but a
recompute at the upper end can take longer than one frame.

Ties go to the lowest seed index: a later seed replaces the current best only
when its score is strictly smaller.
"""

import time
from typing import Sequence

import numpy as np
import structlog

from .buffer import PixelBuffer
from .metrics import DistanceMetric
from .seeds import Point

logger = structlog.get_logger()

NO_OWNER = -1


def nearest_seed(seeds: Sequence[Point], metric: DistanceMetric, x: int, y: int) -> int:
    """
    Index of the seed closest to pixel ``(x, y)``.

    Scalar form of the scan performed by :func:`assign_owners`.

    Args:
        seeds: Non-empty seed set
        metric: Distance metric
        x, y: Pixel coordinates

    Returns:
        Index of the first seed reaching the minimum score
    """
    if not seeds:
        raise ValueError("Cannot classify a pixel against an empty seed set")

    closest_index = 0
    closest_score = None
    for index, seed in enumerate(seeds):
        score = metric.distance(seed.x, seed.y, x, y)
        if closest_score is None or score < closest_score:
            closest_index = index
            closest_score = score
    return closest_index


def assign_owners(seeds: Sequence[Point], metric: DistanceMetric,
                  width: int, height: int) -> np.ndarray:
    """
    Compute the owning seed index of every pixel.

    Rows are scanned one at a time (pixels outer, seeds inner), each row
    vectorized over x with preallocated scratch arrays.

    Args:
        seeds: Seed set, in priority order
        metric: Distance metric
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        int32 array of shape (height, width); NO_OWNER everywhere when
        ``seeds`` is empty
    """
    owners = np.full((height, width), NO_OWNER, dtype=np.int32)
    if not seeds:
        return owners

    xs = np.arange(width, dtype=np.int64)
    best = np.empty(width, dtype=np.int64)
    closer = np.empty(width, dtype=bool)

    for y in range(height):
        row = owners[y]
        for index, seed in enumerate(seeds):
            score = metric.distance(seed.x, seed.y, xs, y)
            if index == 0:
                best[:] = score
                row[:] = 0
                continue
            np.less(score, best, out=closer)
            np.copyto(best, score, where=closer)
            row[closer] = index

    return owners


def partition(seeds: Sequence[Point], metric: DistanceMetric, buffer: PixelBuffer) -> np.ndarray:
    """
    Color every pixel of ``buffer`` with the color of its nearest seed.

    The whole buffer is overwritten. With an empty seed set nothing is
    written, so callers pre-fill a background color.

    Args:
        seeds: Seed set, in priority order
        metric: Distance metric
        buffer: Frame to repaint

    Returns:
        Owner index array from :func:`assign_owners`
    """
    start = time.perf_counter()
    owners = assign_owners(seeds, metric, buffer.width, buffer.height)

    if seeds:
        colors = np.fromiter((seed.color for seed in seeds), dtype=np.uint32, count=len(seeds))
        buffer.grid[...] = colors[owners]

    logger.debug("Partition computed",
                 seeds=len(seeds), metric=metric.value,
                 elapsed_ms=round((time.perf_counter() - start) * 1000, 2))
    return owners


def cell_areas(owners: np.ndarray, n: int) -> np.ndarray:
    """
    Count the pixels owned by each seed.

    A seed coinciding with an earlier one owns nothing and gets 0.

    Args:
        owners: Owner index array from :func:`assign_owners`
        n: Number of seeds

    Returns:
        int64 array of length ``n``
    """
    owned = owners[owners != NO_OWNER]
    return np.bincount(owned.ravel(), minlength=n)[:n]

