"""Window-layer adapters."""

from fixed_viewport.window.rendercanvas_surface import (
    RenderCanvasSurface,
    create_rendercanvas_surface,
)

__all__ = ["RenderCanvasSurface", "create_rendercanvas_surface"]
