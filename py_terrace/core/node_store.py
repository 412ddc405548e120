"""
Node storage for terrain graphs.

Nodes live in an arena (a list indexed by slot) and are addressed by a
caller-supplied hashable key through ``key_index``. Neighbour lists hold arena
indices, never node objects.

Removed nodes leave an empty slot behind. Slots are never reused, so an index
handed out once keeps pointing at the same node (or at nothing) for the life
of the store.
"""

from dataclasses import dataclass, field
from typing import Dict, Generic, Hashable, Iterator, List, Optional, TypeVar

import structlog

logger = structlog.get_logger()

K = TypeVar("K", bound=Hashable)


@dataclass
class Node:
    """A graph vertex: height plus indices of adjacent nodes."""

    height: int = 0
    neighbors: List[int] = field(default_factory=list)


class NodeStore(Generic[K]):
    """Arena of nodes with key deduplication."""

    def __init__(self):
        self.nodes: List[Optional[Node]] = []
        self.key_index: Dict[K, int] = {}
        # slot -> key, so neighbour indices can be reported as keys
        self._slot_keys: List[Optional[K]] = []

    def __len__(self) -> int:
        return len(self.key_index)

    def __contains__(self, key) -> bool:
        return key in self.key_index

    def keys(self) -> Iterator[K]:
        """Iterate live keys in insertion order."""
        return iter(self.key_index)

    def add_node(self, key: K) -> bool:
        """
        Add a zero-height node for ``key`` unless one already exists.

        Returns:
            True if a node was created, False if the key was already present
        """
        if key in self.key_index:
            return False

        self.nodes.append(Node())
        self._slot_keys.append(key)
        self.key_index[key] = len(self.nodes) - 1
        return True

    def remove_node(self, key: K) -> bool:
        """
        Remove the node for ``key`` and every edge touching it.

        The slot is left empty so other indices stay valid.

        Returns:
            True if a node was removed, False if the key was unknown
        """
        index = self.key_index.pop(key, None)
        if index is None:
            return False

        node = self.nodes[index]
        for neighbor in set(node.neighbors):
            if neighbor == index:
                continue
            other = self.nodes[neighbor]
            other.neighbors = [n for n in other.neighbors if n != index]

        self.nodes[index] = None
        self._slot_keys[index] = None
        logger.debug("Removed terrain node", key=key, index=index, edges=len(node.neighbors))
        return True

    def add_connected_nodes(self, first: K, second: K) -> None:
        """
        Connect two nodes, creating either one if missing.

        Each call appends one edge; repeating it for the same pair produces
        parallel edges.
        """
        self.add_node(first)
        self.add_node(second)

        first_index = self.key_index[first]
        second_index = self.key_index[second]
        self.nodes[first_index].neighbors.append(second_index)
        self.nodes[second_index].neighbors.append(first_index)

    def get_index_of_node(self, key: K) -> Optional[int]:
        return self.key_index.get(key)

    def get_height_of_node(self, key: K) -> Optional[int]:
        index = self.key_index.get(key)
        if index is None:
            return None
        return self.nodes[index].height

    def neighbors_of(self, key: K) -> Optional[List[K]]:
        """Neighbour keys in edge order, parallel edges repeated. None if unknown."""
        index = self.key_index.get(key)
        if index is None:
            return None
        return [self._slot_keys[n] for n in self.nodes[index].neighbors]

    def key_at(self, index: int) -> Optional[K]:
        """Key stored in arena slot ``index``, None for an empty or unknown slot."""
        if 0 <= index < len(self._slot_keys):
            return self._slot_keys[index]
        return None
