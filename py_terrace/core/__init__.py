"""
Core terrain sculpting functionality.
"""

from .exceptions import TerrainError, NodeNotFound, PropagationLimitExceeded, InvalidHeightStep, InvalidHeight
from .node_store import Node, NodeStore
from .terrain import Terrain
from .builders import terrain_from_edges, terrain_from_neighbor_lists, heights_array, set_heights
from .analysis import slope_violations, is_terraced, height_summary
from .synchronized import SynchronizedTerrain

__all__ = ['TerrainError', 'NodeNotFound', 'PropagationLimitExceeded', 'InvalidHeightStep', 'InvalidHeight',
           'Node', 'NodeStore', 'Terrain',
           'terrain_from_edges', 'terrain_from_neighbor_lists', 'heights_array', 'set_heights',
           'slope_violations', 'is_terraced', 'height_summary',
           'SynchronizedTerrain']
