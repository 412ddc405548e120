"""Exceptions raised by the terrain core."""

from typing import Hashable


class TerrainError(Exception):
    """Base class for terrain errors."""


class NodeNotFound(TerrainError, KeyError):
    """A height-changing operation referenced a key with no node."""

    def __init__(self, key: Hashable):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"No terrain node for key {self.key!r}"


class PropagationLimitExceeded(TerrainError, RuntimeError):
    """A cascade needed more worklist steps than allowed; heights were rolled back."""

    def __init__(self, key: Hashable, steps: int):
        super().__init__(key, steps)
        self.key = key
        self.steps = steps

    def __str__(self) -> str:
        return f"Cascade from {self.key!r} aborted after {self.steps} steps"


class InvalidHeightStep(TerrainError, ValueError):
    """Height step was not a positive integer."""


class InvalidHeight(TerrainError, ValueError):
    """A height was not a multiple of the terrain's height step."""

    def __init__(self, key: Hashable, height: int, height_step: int):
        super().__init__(key, height, height_step)
        self.key = key
        self.height = height
        self.height_step = height_step

    def __str__(self) -> str:
        return f"Height {self.height} for {self.key!r} is not a multiple of {self.height_step}"
