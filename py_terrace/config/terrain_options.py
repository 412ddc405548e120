"""
Per-terrain options.

Process-wide defaults come from ``Settings``; ``TerrainOptions`` lets a caller
override them for a single terrain, mostly when building one in bulk.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .config import settings


class TerrainOptions(BaseModel):
    """Options for a single terrain instance."""

    height_step: int = Field(
        default_factory=lambda: settings.height_step,
        gt=0,
        description="Height quantum, also the largest tolerated difference across an edge",
    )
    max_propagation_steps: int = Field(
        default_factory=lambda: settings.max_propagation_steps,
        gt=0,
        description="Worklist pops allowed per cascade",
    )

    @classmethod
    def resolve(cls, options: Optional["TerrainOptions"]) -> "TerrainOptions":
        """Return ``options`` or the configured defaults."""
        return options if options is not None else cls()
