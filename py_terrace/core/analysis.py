"""Terrain slope and height statistics."""

from typing import Any, Dict, List, Tuple

import numpy as np

from .node_store import K
from .terrain import Terrain


def slope_violations(terrain: Terrain) -> List[Tuple[K, K, int]]:
    """
    Find edges whose height difference exceeds the height step.

    Each undirected pair is reported once, however many parallel edges join
    it, as ``(lower_index_key, higher_index_key, abs_difference)``.
    """
    store = terrain.store
    violations = []
    seen = set()

    for index, node in enumerate(store.nodes):
        if node is None:
            continue
        for neighbor in node.neighbors:
            if neighbor <= index or (index, neighbor) in seen:
                continue
            seen.add((index, neighbor))
            difference = abs(node.height - store.nodes[neighbor].height)
            if difference > terrain.height_step:
                violations.append((store.key_at(index), store.key_at(neighbor), difference))

    return violations


def is_terraced(terrain: Terrain) -> bool:
    """True when no edge differs by more than one height step."""
    return not slope_violations(terrain)


def height_summary(terrain: Terrain) -> Dict[str, Any]:
    """Min, max and mean height plus node count. Empty terrains report zeros."""
    heights = np.array([node.height for node in terrain.store.nodes if node is not None], dtype=np.int64)

    if heights.size == 0:
        return {"nodes": 0, "min": 0, "max": 0, "mean": 0.0}

    return {
        "nodes": int(heights.size),
        "min": int(heights.min()),
        "max": int(heights.max()),
        "mean": float(heights.mean()),
    }
