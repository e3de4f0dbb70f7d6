"""Resolution of sync signals into (view, surface) recomputation pairs."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from fixed_viewport.api.viewport import (
    CameraChanged,
    PrimaryResolution,
    PrimarySurface,
    SurfaceChanged,
    SurfaceRef,
    SyncSignal,
)
from fixed_viewport.world.entities import Surface, View
from fixed_viewport.world.store import World

_LOG = logging.getLogger("fixed_viewport.sync")

SkipReason = Literal[
    "missing_view",
    "missing_surface",
    "no_primary",
    "ambiguous_primary",
    "non_surface_target",
]

ResolvedPair = tuple[View, Surface]


@dataclass(slots=True)
class Resolution:
    """Pairs produced by a signal batch plus why signals were dropped."""

    pairs: list[ResolvedPair] = field(default_factory=list)
    skipped: Counter[str] = field(default_factory=Counter)


def resolve_primary_surface(world: World) -> PrimaryResolution[Surface]:
    """Scan for the unique primary surface, stopping at the second match."""
    match: Surface | None = None
    for surface in world.surfaces():
        if not surface.primary:
            continue
        if match is not None:
            return PrimaryResolution(status="ambiguous")
        match = surface
    if match is None:
        return PrimaryResolution(status="not_found")
    return PrimaryResolution(status="found", surface=match)


def resolve_view_surface(world: World, view: View) -> tuple[Surface | None, SkipReason | None]:
    """Return the surface a view renders to, or the reason it has none."""
    target = view.target
    if isinstance(target, PrimarySurface):
        primary = resolve_primary_surface(world)
        if primary.status == "ambiguous":
            return None, "ambiguous_primary"
        if primary.status == "not_found":
            return None, "no_primary"
        return primary.surface, None
    if isinstance(target, SurfaceRef):
        surface = world.surface(target.surface_id)
        if surface is None:
            return None, "missing_surface"
        return surface, None
    # ImageTarget and any other non-window target
    return None, "non_surface_target"


def resolve_signal(world: World, signal: SyncSignal) -> tuple[tuple[ResolvedPair, ...], SkipReason | None]:
    """Resolve one signal against the current world state."""
    if isinstance(signal, CameraChanged):
        view = world.view(signal.view_id)
        if view is None:
            return (), "missing_view"
        surface, reason = resolve_view_surface(world, view)
        if surface is None:
            return (), reason
        return ((view, surface),), None

    surface = world.surface(signal.surface_id)
    if surface is None:
        return (), "missing_surface"
    primary: PrimaryResolution[Surface] | None = None
    pairs: list[ResolvedPair] = []
    for view in world.views():
        target = view.target
        if isinstance(target, SurfaceRef):
            if target.surface_id == surface.surface_id:
                pairs.append((view, surface))
            continue
        if isinstance(target, PrimarySurface) and surface.primary:
            if primary is None:
                primary = resolve_primary_surface(world)
            if primary.found and primary.surface is surface:
                pairs.append((view, surface))
    return tuple(pairs), None


def resolve_signals(world: World, signals: Iterable[SyncSignal]) -> Resolution:
    """Resolve a batch in emission order; one bad signal never blocks the rest."""
    resolution = Resolution()
    for signal in signals:
        pairs, reason = resolve_signal(world, signal)
        if reason is not None:
            resolution.skipped[reason] += 1
            described = _describe(signal)
            _LOG.debug(
                "signal_skipped reason=%s signal=%s",
                reason,
                described,
                extra={"reason": reason, "signal": described},
            )
            continue
        resolution.pairs.extend(pairs)
    return resolution


def _describe(signal: SyncSignal) -> str:
    if isinstance(signal, SurfaceChanged):
        return f"surface:{signal.surface_id}"
    return f"camera:{signal.view_id}"
