"""
Configuration for terrain sculpting.
"""

from .config import Settings, settings
from .terrain_options import TerrainOptions

__all__ = ['Settings', 'settings', 'TerrainOptions']
