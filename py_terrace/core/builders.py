"""
Bulk construction and export of terrains.

These helpers wrap ``Terrain.add_connected_nodes`` for graphs that already
exist as edge lists or per-cell neighbour lists, and move heights in and out
as NumPy arrays.
"""

from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import structlog

from ..config import TerrainOptions
from .exceptions import InvalidHeight, NodeNotFound
from .node_store import K
from .terrain import Terrain

logger = structlog.get_logger()


def _new_terrain(options: Optional[TerrainOptions]) -> Terrain:
    options = TerrainOptions.resolve(options)
    return Terrain(options.height_step, options.max_propagation_steps)


def terrain_from_edges(edges: Iterable[Tuple[K, K]], options: Optional[TerrainOptions] = None) -> Terrain:
    """
    Build a terrain from ``(a, b)`` key pairs.

    Every pair becomes one edge, so a pair listed twice becomes two parallel
    edges.

    Args:
        edges: Iterable of key pairs
        options: Height step and cascade limit, defaults to configured settings

    Returns:
        New Terrain with every mentioned key at height 0
    """
    terrain = _new_terrain(options)
    count = 0
    for first, second in edges:
        terrain.add_connected_nodes(first, second)
        count += 1

    logger.info("Built terrain from edges", nodes=len(terrain), edges=count)
    return terrain


def terrain_from_neighbor_lists(
    neighbors: Sequence[Sequence[int]], options: Optional[TerrainOptions] = None
) -> Terrain:
    """
    Build a terrain from per-cell neighbour lists.

    ``neighbors[i]`` lists the cells adjacent to cell ``i``, the layout Voronoi
    cell graphs use. Keys are cell indices. Isolated cells are still created,
    and each undirected pair is connected once even though both cells list it.

    Args:
        neighbors: Neighbour list per cell
        options: Height step and cascade limit, defaults to configured settings

    Returns:
        New Terrain whose arena indices match the cell indices
    """
    terrain = _new_terrain(options)

    # Create every cell first so arena index == cell index
    for cell in range(len(neighbors)):
        terrain.add_node(cell)

    count = 0
    for cell, cell_neighbors in enumerate(neighbors):
        # Repeated entries in one list still give a single edge
        for neighbor in sorted(set(int(n) for n in cell_neighbors)):
            if neighbor > cell:
                terrain.add_connected_nodes(cell, neighbor)
                count += 1
            elif neighbor < cell and cell not in neighbors[neighbor]:
                # One-sided entry: the lower cell did not list us, connect now
                terrain.add_connected_nodes(cell, neighbor)
                count += 1

    logger.info("Built terrain from neighbor lists", nodes=len(terrain), edges=count)
    return terrain


def heights_array(terrain: Terrain, keys: Optional[Iterable[K]] = None) -> np.ndarray:
    """
    Collect heights into an ``int64`` array.

    Args:
        terrain: Source terrain
        keys: Keys in output order, defaults to every key in insertion order

    Returns:
        Array of heights

    Raises:
        NodeNotFound: If a requested key has no node
    """
    if keys is None:
        keys = list(terrain.keys())

    heights: List[int] = []
    for key in keys:
        height = terrain.get_height_of_node(key)
        if height is None:
            raise NodeNotFound(key)
        heights.append(height)

    return np.array(heights, dtype=np.int64)


def set_heights(terrain: Terrain, heights: Mapping[K, int]) -> None:
    """
    Overwrite raw heights without cascading.

    Used to load a previously sculpted field. The caller is responsible for
    the loaded field already being terraced; ``analysis.slope_violations``
    reports any edge that is not.

    Raises:
        NodeNotFound: If a key has no node
        InvalidHeight: If a height is not a multiple of ``height_step``

    Nothing is written when either error is raised.
    """
    indices = []
    for key, height in heights.items():
        index = terrain.get_index_of_node(key)
        if index is None:
            raise NodeNotFound(key)
        height = int(height)
        if height % terrain.height_step != 0:
            raise InvalidHeight(key, height, terrain.height_step)
        indices.append((index, height))

    for index, height in indices:
        terrain.store.nodes[index].height = height
