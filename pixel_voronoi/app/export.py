"""PNG export of rendered frames."""

from pathlib import Path
from typing import Union

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import structlog

from ..core.buffer import PixelBuffer

logger = structlog.get_logger()


def save_png(buffer: PixelBuffer, path: Union[str, Path]) -> Path:
    """
    Write ``buffer`` to ``path`` as an RGB PNG at 1 pixel per pixel.

    Missing parent directories are created.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.imsave(path, buffer.to_rgb(), format="png")
    logger.info("Frame saved", path=str(path), width=buffer.width, height=buffer.height)
    return path
