"""
Render adapters for Prefab Shapes.

The Blender adapter is available only where bpy can be imported.
"""

from .base import RenderableHandle, RenderAdapter
from .memory import InMemoryAdapter

try:
    from .blender import BlenderAdapter
    BLENDER_AVAILABLE = True
except ImportError:
    BLENDER_AVAILABLE = False

__all__ = [
    'RenderableHandle',
    'RenderAdapter',
    'InMemoryAdapter',
    'BLENDER_AVAILABLE',
]

if BLENDER_AVAILABLE:
    __all__.append('BlenderAdapter')
