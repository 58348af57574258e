"""
Configuration modules for the partition renderer.
"""

from .palettes import get_palette, list_palettes, PALETTES
from .settings import ConfigurationError, Settings

__all__ = ['get_palette', 'list_palettes', 'PALETTES', 'ConfigurationError', 'Settings']
