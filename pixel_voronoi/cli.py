"""
Command line entry point.

Use '[' and ']' to switch the distance function, '+' and '-' to change how
many seeds are drawn, 'r' to reseed, 's' to save a PNG and Escape to quit.
"""

import argparse
import sys
from typing import List, Optional

import structlog
from pydantic import ValidationError

from .config.palettes import get_palette, list_palettes
from .config.settings import ConfigurationError, Settings, check_log_level
from .core.metrics import DistanceMetric
from .core.palette import Palette
from .core.seeds import MARKER_RADIUS
from .core.session import Params, VoronoiSession
from .logging_config import configure_logging
from .utils.random import get_rng, set_random_seed

logger = structlog.get_logger()


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixel-voronoi",
        description=(
            "Display Voronoi diagrams. Use '[' and ']' to change the distance "
            "function, '+' and '-' to change how many seeds are drawn, 'r' to reseed."
        ),
    )
    parser.add_argument("-n", type=int, default=settings.seeds, help="Number of seeds")
    parser.add_argument("--width", type=int, default=settings.width, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=settings.height, help="Image height in pixels")
    parser.add_argument(
        "-d", "--distance", default=settings.metric,
        help="Which distance function to use (euclidean, manhattan)",
    )
    parser.add_argument(
        "--palette", default=settings.palette,
        help=f"Seed palette ({', '.join(list_palettes())})",
    )
    parser.add_argument("--rng-seed", type=int, default=settings.rng_seed,
                        help="Seed the random source for reproducible layouts")
    parser.add_argument("--fps", type=int, default=settings.fps, help="Frame rate limit")
    parser.add_argument("--render", metavar="PATH",
                        help="Render one frame to a PNG and exit without opening a window")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def build_session(args: argparse.Namespace, settings: Settings) -> VoronoiSession:
    """Validate the startup configuration and create the session (first recompute included)."""
    try:
        metric = DistanceMetric.parse(args.distance)
    except ValueError as e:
        raise ConfigurationError(str(e)) from None
    try:
        hex_colors = get_palette(args.palette)
    except KeyError as e:
        raise ConfigurationError(e.args[0]) from None

    if args.fps <= 0:
        raise ConfigurationError(f"Frame rate must be positive, got {args.fps}")

    palette = Palette.from_hex(hex_colors)
    params = Params(width=args.width, height=args.height, n=args.n,
                    radius=MARKER_RADIUS, metric=metric)
    params.validate()

    set_random_seed(args.rng_seed)
    return VoronoiSession(params, palette, rng=get_rng(),
                          frame_budget_ms=1000.0 / args.fps,
                          snapshot_dir=settings.snapshot_dir)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings()
    except ValidationError as e:
        configure_logging()
        logger.error("Invalid configuration", error=str(e))
        sys.exit(2)

    args = build_parser(settings).parse_args(argv)
    try:
        log_level = check_log_level(args.log_level)
    except ConfigurationError as e:
        configure_logging()
        logger.error("Invalid configuration", error=str(e))
        sys.exit(2)
    configure_logging(log_level, settings.log_format)

    try:
        session = build_session(args, settings)
    except ConfigurationError as e:
        logger.error("Invalid configuration", error=str(e))
        sys.exit(2)

    if args.render:
        from .app.export import save_png

        save_png(session.buffer, args.render)
        return 0

    import pygame

    from .app.window import run

    try:
        run(session, fps=args.fps, title=settings.window_title)
    except pygame.error as e:
        logger.error("Presentation surface failed", error=str(e))
        sys.exit(1)
    except OSError as e:
        logger.error("Snapshot failed", error=str(e), snapshot_dir=str(session.snapshot_dir))
        sys.exit(1)
    return 0
