"""
Lock-protected access to a shared terrain.

Every call holds one re-entrant lock, so readers never see a cascade half
applied. Use ``locked()`` to run several calls as one unit.
"""

import threading
from contextlib import contextmanager
from typing import Generic, List, Optional

from .node_store import K
from .terrain import Terrain


class SynchronizedTerrain(Generic[K]):
    """Thread-safe facade over a ``Terrain``."""

    def __init__(self, terrain: Terrain):
        self._terrain = terrain
        self._lock = threading.RLock()

    @contextmanager
    def locked(self):
        """Hold the lock and yield the wrapped terrain."""
        with self._lock:
            yield self._terrain

    @property
    def height_step(self) -> int:
        return self._terrain.height_step

    def __len__(self) -> int:
        with self._lock:
            return len(self._terrain)

    def add_node(self, key: K) -> bool:
        with self._lock:
            return self._terrain.add_node(key)

    def remove_node(self, key: K) -> bool:
        with self._lock:
            return self._terrain.remove_node(key)

    def add_connected_nodes(self, first: K, second: K) -> None:
        with self._lock:
            self._terrain.add_connected_nodes(first, second)

    def increase_height(self, key: K) -> None:
        with self._lock:
            self._terrain.increase_height(key)

    def decrease_height(self, key: K) -> None:
        with self._lock:
            self._terrain.decrease_height(key)

    def adjust_height(self, key: K, steps: int) -> None:
        with self._lock:
            self._terrain.adjust_height(key, steps)

    def get_height_of_node(self, key: K) -> Optional[int]:
        with self._lock:
            return self._terrain.get_height_of_node(key)

    def get_index_of_node(self, key: K) -> Optional[int]:
        with self._lock:
            return self._terrain.get_index_of_node(key)

    def neighbors_of(self, key: K) -> Optional[List[K]]:
        with self._lock:
            return self._terrain.neighbors_of(key)
