"""
Height propagation across a terrain graph.

A single node is moved by one height step, then every neighbour that now sits
more than one step away on the far side of the change is pulled along. The
walk uses an explicit worklist of arena indices:

1. Pop an index whose height just changed
2. For each neighbour lagging by more than one step, move it to exactly one
   step from the popped node and push it
3. Repeat until the worklist is empty

Moving a lagging neighbour straight to ``height -/+ height_step`` reaches the
same heights as raising it one step at a time and cascading after each step.
A corrected neighbour never passes the node that moved it, so with integer
heights the walk always terminates; ``max_steps`` caps it anyway.

Every overwritten height is recorded in ``journal`` (index -> height before
the first write) so the caller can undo an aborted cascade.
"""

from typing import Dict, Hashable, List, Optional

from .exceptions import PropagationLimitExceeded
from .node_store import Node

RAISE = 1
LOWER = -1


def _set_height(nodes: List[Optional[Node]], index: int, height: int, journal: Dict[int, int]) -> None:
    node = nodes[index]
    if index not in journal:
        journal[index] = node.height
    node.height = height


def cascade(
    nodes: List[Optional[Node]],
    start: int,
    height_step: int,
    direction: int,
    max_steps: int,
    journal: Dict[int, int],
    key: Hashable = None,
) -> int:
    """
    Move ``nodes[start]`` one step in ``direction`` and restore the slope limit.

    Args:
        nodes: Node arena, mutated in place
        start: Arena index of the node being moved
        height_step: Height quantum, also the largest tolerated edge difference
        direction: ``RAISE`` or ``LOWER``
        max_steps: Maximum worklist pops before giving up
        journal: Receives the original height of every written node
        key: Key of ``start``, only used for error reporting

    Returns:
        Number of worklist pops performed

    Raises:
        PropagationLimitExceeded: If the worklist did not drain within ``max_steps``
    """
    delta = direction * height_step
    _set_height(nodes, start, nodes[start].height + delta, journal)

    queue = [start]
    steps = 0

    while queue:
        steps += 1
        if steps > max_steps:
            raise PropagationLimitExceeded(key, max_steps)

        index = queue.pop()
        height = nodes[index].height
        target = height - delta

        for neighbor in nodes[index].neighbors:
            if neighbor == index:
                continue
            neighbor_height = nodes[neighbor].height
            if direction == RAISE:
                lagging = neighbor_height + height_step < height
            else:
                lagging = neighbor_height - height_step > height
            if lagging:
                _set_height(nodes, neighbor, target, journal)
                queue.append(neighbor)

    return steps


def increase(
    nodes: List[Optional[Node]],
    start: int,
    height_step: int,
    max_steps: int,
    journal: Dict[int, int],
    key: Hashable = None,
) -> int:
    """Raise ``nodes[start]`` by one step and cascade upwards."""
    return cascade(nodes, start, height_step, RAISE, max_steps, journal, key)


def decrease(
    nodes: List[Optional[Node]],
    start: int,
    height_step: int,
    max_steps: int,
    journal: Dict[int, int],
    key: Hashable = None,
) -> int:
    """Lower ``nodes[start]`` by one step and cascade downwards."""
    return cascade(nodes, start, height_step, LOWER, max_steps, journal, key)


def rollback(nodes: List[Optional[Node]], journal: Dict[int, int]) -> None:
    """Restore every height recorded in ``journal``."""
    for index, height in journal.items():
        nodes[index].height = height
