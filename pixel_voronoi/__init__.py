"""Interactive discrete Voronoi partition renderer."""

__version__ = "0.1.0"
