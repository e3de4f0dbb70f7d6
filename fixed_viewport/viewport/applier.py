"""Writes fitted viewports onto views."""

from __future__ import annotations

import logging

from fixed_viewport.viewport.fit import fit_viewport
from fixed_viewport.world.entities import Surface, View

_LOG = logging.getLogger("fixed_viewport.sync")


def apply_viewport(view: View, surface: Surface, *, trace: bool = False) -> bool:
    """Fit ``view`` into ``surface`` and store the result; False when the surface has no area."""
    if not surface.has_drawable_area():
        _LOG.debug(
            "viewport_skipped reason=empty_surface view=%s surface=%s size=%dx%d",
            view.view_id,
            surface.surface_id,
            surface.physical_width,
            surface.physical_height,
        )
        return False
    rect = fit_viewport(surface.physical_width, surface.physical_height, view.aspect_ratio)
    view.viewport = rect
    if trace:
        _LOG.info(
            "viewport_applied view=%s surface=%s rect=%s",
            view.view_id,
            surface.surface_id,
            rect.as_tuple(),
            extra={
                "view": view.view_id,
                "surface": surface.surface_id,
                "rect": rect.as_tuple(),
            },
        )
    return True
