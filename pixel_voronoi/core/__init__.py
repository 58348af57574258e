"""
Core partition functionality.
"""

from .buffer import BACKGROUND_COLOR, PixelBuffer
from .markers import MARKER_COLOR, draw_markers
from .metrics import DistanceMetric
from .palette import Palette, decode_hex, unpack_rgb
from .partition import NO_OWNER, assign_owners, cell_areas, nearest_seed, partition
from .seeds import MARKER_RADIUS, MAX_SEEDS, MIN_SEEDS, Point, generate_seeds
from .session import Command, Params, VoronoiSession

__all__ = ['BACKGROUND_COLOR', 'PixelBuffer', 'MARKER_COLOR', 'draw_markers',
           'DistanceMetric', 'Palette', 'decode_hex', 'unpack_rgb',
           'NO_OWNER', 'assign_owners', 'cell_areas', 'nearest_seed', 'partition',
           'MARKER_RADIUS', 'MAX_SEEDS', 'MIN_SEEDS', 'Point', 'generate_seeds',
           'Command', 'Params', 'VoronoiSession']
