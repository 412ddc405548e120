#!/usr/bin/env python3
"""
Simple demo script showing terrace sculpting on a hexagonal key lattice.
"""

from py_terrace.core import Terrain, heights_array, height_summary, is_terraced
from py_terrace.utils.log_config import configure_logging

# Doubled-width offsets from a hexagon centre to its six corners
CORNERS = [(-2, 0), (-1, -2), (1, -2), (2, 0), (1, 2), (-1, 2)]


def hexagon_edges(center):
    """Edges of one hexagon: centre to each corner plus the outer ring."""
    cx, cy = center
    corners = [(cx + dx, cy + dy) for dx, dy in CORNERS]
    edges = [(center, corner) for corner in corners]
    edges += [(corners[i], corners[(i + 1) % 6]) for i in range(6)]
    return edges


def main():
    """Demonstrate terrace sculpting."""
    configure_logging("INFO", "console")

    print("Py-Terrace Sculpting Demo")
    print("=" * 40)

    terrain = Terrain(height_step=1)
    centers = [(0, 0), (3, 2), (-3, 2), (3, -2), (-3, -2), (6, 0), (-6, 0)]
    for center in centers:
        for first, second in hexagon_edges(center):
            # Shared corners are deduplicated by key; shared sides become parallel edges
            terrain.add_connected_nodes(first, second)

    print(f"\nBuilt lattice with {len(terrain)} nodes")

    print("\nRaising the centre four steps...")
    terrain.adjust_height((0, 0), 4)
    print("Lowering the far west centre two steps...")
    terrain.adjust_height((-6, 0), -2)

    heights = heights_array(terrain, centers)
    for center, height in zip(centers, heights):
        print(f"  {center}: {height}")

    summary = height_summary(terrain)
    print(f"\nMin height: {summary['min']}")
    print(f"Max height: {summary['max']}")
    print(f"Mean height: {summary['mean']:.2f}")
    print(f"Terraced: {is_terraced(terrain)}")


if __name__ == "__main__":
    main()
