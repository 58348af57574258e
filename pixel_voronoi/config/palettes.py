"""
Compiled-in seed palettes.

Each palette is an ordered list of hex strings, decoded once at startup
by :meth:`pixel_voronoi.core.palette.Palette.from_hex`.
"""

from typing import Dict, List

PALETTES: Dict[str, List[str]] = {
    "default": [
        "57ab5a", "eac55f", "f69d50", "f47068", "b083f0", "6cb6ff",
        "648c84", "24205c", "eda63d", "f2a19d", "890b3b", "87ad2f",
        "afc6f2", "cbd1c6", "001231", "0079b4", "b7b8a3", "e2affe",
    ],
    "earth": [
        "6b4f3a", "a67c52", "d9b382", "8c9a5b", "4f6d3a", "c2b280",
        "7d8471", "b5651d", "3e5641", "e1c699",
    ],
    "grayscale": [
        "202020", "404040", "606060", "808080", "a0a0a0", "c0c0c0", "e0e0e0",
    ],
}


def get_palette(name: str) -> List[str]:
    """Get the hex color list of a named palette."""
    if name not in PALETTES:
        raise KeyError(f"Unknown palette: {name}. Available: {', '.join(list_palettes())}")
    return list(PALETTES[name])


def list_palettes() -> List[str]:
    """List available palette names."""
    return sorted(PALETTES.keys())
