"""Host-side world model: views, surfaces and their notification feeds."""

from fixed_viewport.world.entities import Surface, View, validate_aspect_ratio
from fixed_viewport.world.store import World

__all__ = ["Surface", "View", "World", "validate_aspect_ratio"]
