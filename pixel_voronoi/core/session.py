"""
Interactive session state.

A :class:`VoronoiSession` owns the parameters, the current seed set and the
frame buffer. Every command handler is one synchronous transition: the
parameters, the seeds and the repainted buffer change together, so the
presentation layer never sees a frame that disagrees with the parameters.
"""

import time
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

import numpy as np
import structlog

from ..config.settings import ConfigurationError
from ..utils.random import get_rng
from .buffer import BACKGROUND_COLOR, PixelBuffer
from .markers import draw_markers
from .metrics import DistanceMetric
from .palette import Palette
from .partition import cell_areas, partition
from .seeds import MARKER_RADIUS, MAX_SEEDS, MIN_SEEDS, Point, check_placement_range, generate_seeds

logger = structlog.get_logger()


class Command(Enum):
    """Logical interactive commands."""

    INCREASE_SEEDS = "increase_seeds"
    DECREASE_SEEDS = "decrease_seeds"
    REGENERATE = "regenerate"
    SELECT_EUCLIDEAN = "select_euclidean"
    SELECT_MANHATTAN = "select_manhattan"
    SNAPSHOT = "snapshot"
    EXIT = "exit"


@dataclass
class Params:
    """Current partition parameters."""

    width: int
    height: int
    n: int = 10
    radius: int = MARKER_RADIUS
    metric: DistanceMetric = DistanceMetric.EUCLIDEAN

    def validate(self) -> None:
        """Raise ConfigurationError unless a first recompute can succeed."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.radius <= 0:
            raise ConfigurationError(f"Marker radius must be positive, got {self.radius}")
        check_placement_range(self.width, self.height, self.radius)
        if not MIN_SEEDS <= self.n <= MAX_SEEDS:
            raise ConfigurationError(
                f"Seed count must be between {MIN_SEEDS} and {MAX_SEEDS}, got {self.n}"
            )
        try:
            self.metric = DistanceMetric.parse(self.metric)
        except ValueError as e:
            raise ConfigurationError(str(e)) from None


class VoronoiSession:
    """
    Parameters, seeds and frame buffer of one interactive run.

    Construction validates the parameters and performs the initial recompute,
    so ``buffer`` is presentable immediately.
    """

    def __init__(self, params: Params, palette: Palette,
                 rng: Optional[np.random.Generator] = None,
                 frame_budget_ms: Optional[float] = None,
                 snapshot_dir: Union[str, Path] = "."):
        params.validate()
        self.params = params
        self.palette = palette
        self.rng = rng if rng is not None else get_rng()
        self.frame_budget_ms = frame_budget_ms
        self.snapshot_dir = Path(snapshot_dir)

        self.buffer = PixelBuffer(params.width, params.height)
        self.seeds: List[Point] = []
        self.owners: Optional[np.ndarray] = None
        self.generation = 0
        self.revision = 0
        self.running = True

        logger.info("Session started",
                    width=params.width, height=params.height,
                    seeds=params.n, metric=params.metric.value, palette_size=len(palette))
        self._recompute(reseed=True)

    def _recompute(self, reseed: bool) -> None:
        """Optionally reseed, then repaint the whole buffer: partition, then markers."""
        start = time.perf_counter()
        p = self.params

        if reseed:
            self.seeds = generate_seeds(p.n, p.width, p.height, p.radius, self.palette, self.rng)
            self.generation += 1

        self.buffer.fill(BACKGROUND_COLOR)
        self.owners = partition(self.seeds, p.metric, self.buffer)
        draw_markers(self.seeds, self.buffer, p.radius)
        self.revision += 1

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("Recomputed",
                    seeds=len(self.seeds), metric=p.metric.value,
                    reseeded=reseed, generation=self.generation,
                    elapsed_ms=round(elapsed_ms, 2))
        if self.frame_budget_ms is not None and elapsed_ms > self.frame_budget_ms:
            logger.warning("Recompute exceeded frame budget",
                           elapsed_ms=round(elapsed_ms, 2),
                           budget_ms=round(self.frame_budget_ms, 2),
                           pixels=p.width * p.height, seeds=len(self.seeds))

    def increase_seed_count(self) -> bool:
        """Add one seed and reseed; no-op at the upper bound. Returns True if ``n`` changed."""
        if self.params.n >= MAX_SEEDS:
            logger.debug("Seed count already at maximum", n=self.params.n)
            return False
        self.params.n += 1
        self._recompute(reseed=True)
        return True

    def decrease_seed_count(self) -> bool:
        """Remove one seed and reseed; no-op at the lower bound. Returns True if ``n`` changed."""
        if self.params.n <= MIN_SEEDS:
            logger.debug("Seed count already at minimum", n=self.params.n)
            return False
        self.params.n -= 1
        self._recompute(reseed=True)
        return True

    def regenerate(self) -> None:
        """Draw a fresh seed set of the current size and repaint."""
        self._recompute(reseed=True)

    def set_metric(self, metric: Union[DistanceMetric, str]) -> None:
        """Switch the distance metric and repaint the existing seeds."""
        self.params.metric = DistanceMetric.parse(metric)
        self._recompute(reseed=False)

    def request_exit(self) -> None:
        logger.info("Exit requested")
        self.running = False

    def snapshot(self, directory: Optional[Union[str, Path]] = None) -> Path:
        """Write the current frame to a timestamped PNG and return its path."""
        from ..app.export import save_png

        directory = Path(directory) if directory is not None else self.snapshot_dir
        stamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
        path = directory / f"voronoi-{self.params.metric.value}-{self.params.n}-{stamp}.png"
        return save_png(self.buffer, path)

    def cell_areas(self) -> np.ndarray:
        """Pixel count per seed in the current frame, markers included in their cells."""
        return cell_areas(self.owners, len(self.seeds))

    def handle(self, command: Command) -> None:
        """Apply one logical command."""
        if command is Command.INCREASE_SEEDS:
            self.increase_seed_count()
        elif command is Command.DECREASE_SEEDS:
            self.decrease_seed_count()
        elif command is Command.REGENERATE:
            self.regenerate()
        elif command is Command.SELECT_EUCLIDEAN:
            self.set_metric(DistanceMetric.EUCLIDEAN)
        elif command is Command.SELECT_MANHATTAN:
            self.set_metric(DistanceMetric.MANHATTAN)
        elif command is Command.SNAPSHOT:
            self.snapshot()
        elif command is Command.EXIT:
            self.request_exit()
        else:
            raise ValueError(f"Unknown command: {command}")
