"""Seed color palettes and packed-RGB helpers."""

import string
from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np
import structlog

from ..config.settings import ConfigurationError

logger = structlog.get_logger()


def decode_hex(hex_color: str) -> int:
    """Decode an ``rrggbb`` string (optional leading ``#``) into a packed RGB int."""
    value = hex_color.strip().lstrip("#")
    if len(value) != 6 or any(c not in string.hexdigits for c in value):
        raise ConfigurationError(f"Malformed palette entry: {hex_color!r}")
    return int(value, 16)


def unpack_rgb(colors: np.ndarray) -> np.ndarray:
    """Split packed ``0xRRGGBB`` values into a trailing uint8 RGB axis."""
    colors = np.asarray(colors, dtype=np.uint32)
    rgb = np.empty(colors.shape + (3,), dtype=np.uint8)
    rgb[..., 0] = (colors >> 16) & 0xFF
    rgb[..., 1] = (colors >> 8) & 0xFF
    rgb[..., 2] = colors & 0xFF
    return rgb


@dataclass(frozen=True)
class Palette:
    """Fixed, ordered, cyclically indexed sequence of packed RGB colors."""

    entries: Tuple[int, ...]

    def __post_init__(self):
        if not self.entries:
            raise ConfigurationError("Palette must contain at least one color")

    @classmethod
    def from_hex(cls, hex_colors: Iterable[str]) -> "Palette":
        entries = tuple(decode_hex(h) for h in hex_colors)
        palette = cls(entries)
        logger.debug("Palette loaded", colors=len(entries))
        return palette

    def colors(self) -> Tuple[int, ...]:
        return self.entries

    def color_at(self, index: int) -> int:
        """Color for the seed at ``index``, wrapping around the palette."""
        return self.entries[index % len(self.entries)]

    def __len__(self) -> int:
        return len(self.entries)
