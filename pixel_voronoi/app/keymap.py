"""Mapping of pygame input events to logical session commands."""

from typing import Dict, Optional

import pygame

from ..core.session import Command

KEY_COMMANDS: Dict[int, Command] = {
    pygame.K_KP_PLUS: Command.INCREASE_SEEDS,
    pygame.K_PLUS: Command.INCREASE_SEEDS,
    pygame.K_EQUALS: Command.INCREASE_SEEDS,
    pygame.K_KP_MINUS: Command.DECREASE_SEEDS,
    pygame.K_MINUS: Command.DECREASE_SEEDS,
    pygame.K_r: Command.REGENERATE,
    pygame.K_LEFTBRACKET: Command.SELECT_EUCLIDEAN,
    pygame.K_RIGHTBRACKET: Command.SELECT_MANHATTAN,
    pygame.K_s: Command.SNAPSHOT,
    pygame.K_ESCAPE: Command.EXIT,
}


def command_for_event(event) -> Optional[Command]:
    """Translate one pygame event; None for events with no command."""
    if event.type == pygame.QUIT:
        return Command.EXIT
    if event.type == pygame.KEYDOWN:
        return KEY_COMMANDS.get(event.key)
    return None
