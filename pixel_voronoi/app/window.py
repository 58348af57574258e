"""
pygame presentation surface and frame loop.

The loop is single threaded: each frame drains pending events, applies their
commands synchronously, blits the buffer and waits for the frame limiter. A
recompute triggered by a key runs to completion inside that frame.
"""

import pygame
import structlog

from ..core.buffer import PixelBuffer
from ..core.session import VoronoiSession
from .keymap import command_for_event

logger = structlog.get_logger()


class PygameSurface:
    """Window showing a PixelBuffer at 1:1 scale."""

    def __init__(self, width: int, height: int, title: str):
        pygame.init()
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self._shown_revision = None
        logger.info("Window opened", width=width, height=height, title=title)

    def present(self, buffer: PixelBuffer, revision: int) -> None:
        # surfarray indexes (x, y)
        if revision != self._shown_revision:
            pygame.surfarray.blit_array(self.screen, buffer.to_rgb().swapaxes(0, 1))
            self._shown_revision = revision
        pygame.display.flip()

    def close(self) -> None:
        pygame.quit()
        logger.info("Window closed")


def run(session: VoronoiSession, fps: int = 60, title: str = "Voronoi diagram") -> None:
    """
    Run the interactive loop until the session is asked to exit.

    pygame errors are not caught here; a surface that cannot be opened or
    updated ends the run.
    """
    surface = PygameSurface(session.params.width, session.params.height, title)
    clock = pygame.time.Clock()
    try:
        while session.running:
            for event in pygame.event.get():
                command = command_for_event(event)
                if command is not None:
                    logger.debug("Command received", command=command.value)
                    session.handle(command)
            if not session.running:
                break
            surface.present(session.buffer, session.revision)
            clock.tick(fps)
    finally:
        surface.close()
