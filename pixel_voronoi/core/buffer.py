"""Flat packed-RGB frame buffer."""

from dataclasses import dataclass, field

import numpy as np

from .palette import unpack_rgb

BACKGROUND_COLOR = 0xFFFFFF


@dataclass
class PixelBuffer:
    """
    Row-major frame of ``width * height`` packed ``0xRRGGBB`` pixels.

    ``pixels[y * width + x]`` is the color at ``(x, y)``. ``grid`` is a
    ``(height, width)`` view onto the same memory.
    """
    width: int
    height: int
    pixels: np.ndarray = field(default=None)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Buffer dimensions must be positive, got {self.width}x{self.height}")
        if self.pixels is None:
            self.pixels = np.full(self.width * self.height, BACKGROUND_COLOR, dtype=np.uint32)
        elif self.pixels.shape != (self.width * self.height,):
            raise ValueError(
                f"Expected {self.width * self.height} pixels, got array of shape {self.pixels.shape}"
            )

    @property
    def grid(self) -> np.ndarray:
        return self.pixels.reshape(self.height, self.width)

    def fill(self, color: int) -> None:
        self.pixels.fill(color)

    def get(self, x: int, y: int) -> int:
        return int(self.pixels[y * self.width + x])

    def to_rgb(self) -> np.ndarray:
        """``(height, width, 3)`` uint8 copy for image output."""
        return unpack_rgb(self.grid)
