"""
Terraced terrain over an arbitrary key-indexed graph.

``Terrain`` is what adapters hold: it owns a ``NodeStore`` and runs the
propagation cascade whenever a node is raised or lowered. Heights are kept
in multiples of ``height_step`` and, after every height-changing call, no
edge touched by the cascade differs by more than one step in the direction
of the change.

A ``Terrain`` is not thread-safe. Wrap it in ``SynchronizedTerrain`` to share
it between threads.
"""

from contextlib import contextmanager
from typing import Dict, Generic, Iterator, List, Optional

import structlog

from ..config import settings
from . import propagation
from .exceptions import InvalidHeightStep, NodeNotFound
from .node_store import K, NodeStore

logger = structlog.get_logger()


class Terrain(Generic[K]):
    """
    Height field over a graph of nodes addressed by hashable keys.

    Example:
        terrain = Terrain(height_step=1)
        terrain.add_connected_nodes((0, 0), (2, 0))
        terrain.increase_height((0, 0))
        terrain.increase_height((0, 0))
        terrain.get_height_of_node((2, 0))  # 1
    """

    def __init__(self, height_step: Optional[int] = None, max_propagation_steps: Optional[int] = None):
        """
        Args:
            height_step: Positive integer height quantum, defaults to ``settings.height_step``
            max_propagation_steps: Worklist pops allowed per cascade,
                defaults to ``settings.max_propagation_steps``

        Raises:
            InvalidHeightStep: If ``height_step`` is not a positive integer
            ValueError: If ``max_propagation_steps`` is not a positive integer
        """
        if height_step is None:
            height_step = settings.height_step
        if isinstance(height_step, bool) or not isinstance(height_step, int) or height_step <= 0:
            raise InvalidHeightStep(f"height_step must be a positive integer, got {height_step!r}")

        if max_propagation_steps is None:
            max_propagation_steps = settings.max_propagation_steps
        if (
            isinstance(max_propagation_steps, bool)
            or not isinstance(max_propagation_steps, int)
            or max_propagation_steps <= 0
        ):
            raise ValueError(f"max_propagation_steps must be a positive integer, got {max_propagation_steps!r}")

        self.height_step = height_step
        self.max_propagation_steps = max_propagation_steps
        self.store: NodeStore[K] = NodeStore()

    def __repr__(self) -> str:
        return f"Terrain(height_step={self.height_step}, nodes={len(self.store)})"

    def __len__(self) -> int:
        return len(self.store)

    def __contains__(self, key) -> bool:
        return key in self.store

    def keys(self) -> Iterator[K]:
        return self.store.keys()

    # Node store operations

    def add_node(self, key: K) -> bool:
        """Add a zero-height node. Returns False if ``key`` already exists."""
        return self.store.add_node(key)

    def remove_node(self, key: K) -> bool:
        """Remove a node and its edges. Returns False if ``key`` is unknown."""
        return self.store.remove_node(key)

    def add_connected_nodes(self, first: K, second: K) -> None:
        """Connect two nodes, creating missing ones. Repeated calls add parallel edges."""
        self.store.add_connected_nodes(first, second)

    def get_index_of_node(self, key: K) -> Optional[int]:
        return self.store.get_index_of_node(key)

    def get_height_of_node(self, key: K) -> Optional[int]:
        return self.store.get_height_of_node(key)

    def neighbors_of(self, key: K) -> Optional[List[K]]:
        return self.store.neighbors_of(key)

    # Height operations

    def increase_height(self, key: K) -> None:
        """
        Raise ``key`` by one height step, pulling lagging neighbours up.

        Raises:
            NodeNotFound: If ``key`` has no node
            PropagationLimitExceeded: If the cascade hit the step limit (heights unchanged)
        """
        self.adjust_height(key, 1)

    def decrease_height(self, key: K) -> None:
        """
        Lower ``key`` by one height step, pulling overhanging neighbours down.

        Raises:
            NodeNotFound: If ``key`` has no node
            PropagationLimitExceeded: If the cascade hit the step limit (heights unchanged)
        """
        self.adjust_height(key, -1)

    def adjust_height(self, key: K, steps: int) -> None:
        """
        Move ``key`` by ``steps`` height steps (negative lowers), cascading after each.

        All steps form one transaction: if any cascade fails, every height is
        restored to its value before the call.

        Raises:
            NodeNotFound: If ``key`` has no node
            PropagationLimitExceeded: If a cascade hit the step limit
        """
        index = self._require_index(key)
        if steps == 0:
            return

        operation = propagation.increase if steps > 0 else propagation.decrease
        with self._transaction() as journal:
            total = 0
            for _ in range(abs(steps)):
                total += operation(
                    self.store.nodes, index, self.height_step, self.max_propagation_steps, journal, key
                )

        logger.debug(
            "Cascade finished",
            key=key,
            steps=steps,
            height=self.store.nodes[index].height,
            changed=len(journal),
            pops=total,
        )

    def _require_index(self, key: K) -> int:
        index = self.store.get_index_of_node(key)
        if index is None:
            raise NodeNotFound(key)
        return index

    @contextmanager
    def _transaction(self):
        """Yield a height journal; restore every journalled height if the block raises."""
        journal: Dict[int, int] = {}
        try:
            yield journal
        except BaseException as e:
            propagation.rollback(self.store.nodes, journal)
            logger.error("Cascade aborted", error=str(e), restored=len(journal))
            raise
