#!/usr/bin/env python3
"""
Simple demo script comparing the two distance metrics on one seed set.
"""

import numpy as np
from pixel_voronoi.config import get_palette
from pixel_voronoi.core import DistanceMetric, Palette, Params, VoronoiSession
from pixel_voronoi.app.export import save_png


def main():
    """Render one seed set under both metrics and report how the cells change."""
    print("Pixel Voronoi Partition Demo")
    print("=" * 40)

    width, height, n = 320, 240, 12
    palette = Palette.from_hex(get_palette("default"))
    params = Params(width=width, height=height, n=n)

    print(f"\nPartitioning {width}x{height} pixels among {n} seeds...")
    session = VoronoiSession(params, palette, rng=np.random.default_rng(2024))

    results = {}
    for metric in DistanceMetric:
        session.set_metric(metric)
        results[metric] = session.owners.copy()
        areas = session.cell_areas()

        print(f"\n{metric.value.upper()}:")
        print("-" * 30)
        print(f"  Largest cell: seed {int(np.argmax(areas))} ({int(areas.max())} px)")
        print(f"  Smallest cell: seed {int(np.argmin(areas))} ({int(areas.min())} px)")
        print(f"  Mean cell area: {areas.mean():.1f} px")

        path = save_png(session.buffer, f"voronoi_{metric.value}.png")
        print(f"  Saved {path}")

    changed = np.sum(results[DistanceMetric.EUCLIDEAN] != results[DistanceMetric.MANHATTAN])
    print(f"\nPixels that change owner between metrics: {changed} "
          f"({changed / (width * height) * 100:.1f}%)")


if __name__ == "__main__":
    main()
