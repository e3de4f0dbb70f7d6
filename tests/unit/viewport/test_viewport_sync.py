from __future__ import annotations

from fixed_viewport.api.context import create_runtime_context
from fixed_viewport.api.viewport import (
    CameraChanged,
    ImageTarget,
    PrimarySurface,
    SurfaceChanged,
    SurfaceRef,
    ViewportRect,
)
from fixed_viewport.viewport.applier import apply_viewport
from fixed_viewport.viewport.signals import SyncSignalQueue
from fixed_viewport.viewport.sync import SyncReport, ViewportSyncSystem
from fixed_viewport.world.store import World


def test_new_view_is_fitted_on_first_tick(harness) -> None:
    harness.world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    view = harness.world.spawn_view("cam", aspect_ratio=1.0)

    harness.tick()

    assert view.viewport == ViewportRect(0, 0, 800, 800)


def test_aspect_ratio_edit_propagates_on_next_tick(harness) -> None:
    harness.world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    view = harness.world.spawn_view("cam", aspect_ratio=1.0)
    harness.tick()

    view.aspect_ratio = 2.0
    assert view.viewport == ViewportRect(0, 0, 800, 800)
    harness.tick()

    assert view.viewport == ViewportRect(0, 200, 800, 400)


def test_second_tick_without_changes_writes_nothing(harness) -> None:
    harness.world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    view = harness.world.spawn_view("cam", aspect_ratio=1.0)
    harness.tick()
    sentinel = ViewportRect(1, 2, 3, 4)
    view.viewport = sentinel

    harness.tick()

    assert harness.plugin.sync.last_report == SyncReport()
    assert view.viewport is sentinel


def test_multiple_ratio_edits_between_ticks_collapse_into_one_signal(harness) -> None:
    harness.world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    view = harness.world.spawn_view("cam", aspect_ratio=1.0)
    harness.tick()

    view.aspect_ratio = 3.0
    view.aspect_ratio = 0.5
    view.aspect_ratio = 2.0
    harness.tick()

    report = harness.plugin.sync.last_report
    assert report.signals == 1
    assert report.writes == 1
    assert view.viewport == ViewportRect(0, 200, 800, 400)


def test_redundant_surface_signals_match_single_signal(harness) -> None:
    harness.world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    view = harness.world.spawn_view("cam", aspect_ratio=2.0)
    harness.tick()

    harness.world.resize_surface("main", 1000, 1000)
    harness.world.resize_surface("main", 1000, 1000)
    harness.tick()

    report = harness.plugin.sync.last_report
    assert report.signals == 2
    assert report.writes == 2
    assert view.viewport == ViewportRect(0, 250, 1000, 500)


def test_redundant_signals_in_one_pass_give_same_rect_as_one() -> None:
    rects = []
    for repeats in (1, 2):
        world = World()
        world.spawn_surface("main", physical_width=1000, physical_height=1000, primary=True)
        view = world.spawn_view("cam", aspect_ratio=2.0)
        queue = SyncSignalQueue()
        for _ in range(repeats):
            queue.emit(SurfaceChanged("main"))
        ViewportSyncSystem(queue).run(create_runtime_context(world))
        rects.append(view.viewport)

    assert rects[0] == rects[1] == ViewportRect(0, 250, 1000, 500)


def test_ambiguous_primary_leaves_viewport_unchanged(harness) -> None:
    harness.world.spawn_surface("a", physical_width=800, physical_height=800, primary=True)
    harness.world.spawn_surface("b", physical_width=1024, physical_height=768, primary=True)
    view = harness.world.spawn_view("cam", aspect_ratio=1.0, target=PrimarySurface())

    harness.tick()

    assert view.viewport is None
    assert harness.plugin.sync.last_report.skipped == {"ambiguous_primary": 1}


def test_surface_resize_fans_out_to_three_views(harness) -> None:
    harness.world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    harness.world.spawn_surface("aux", physical_width=640, physical_height=480)
    first = harness.world.spawn_view("first", aspect_ratio=1.0, target=SurfaceRef("main"))
    second = harness.world.spawn_view("second", aspect_ratio=2.0, target=SurfaceRef("main"))
    third = harness.world.spawn_view("third", aspect_ratio=0.5, target=PrimarySurface())
    other = harness.world.spawn_view("other", aspect_ratio=1.0, target=SurfaceRef("aux"))
    harness.tick()
    other_rect = other.viewport

    harness.world.resize_surface("main", 1600, 800)
    harness.tick()

    report = harness.plugin.sync.last_report
    assert report.signals == 1
    assert report.pairs == 3
    assert first.viewport == ViewportRect(400, 0, 800, 800)
    assert second.viewport == ViewportRect(0, 0, 1600, 800)
    assert third.viewport == ViewportRect(600, 0, 400, 800)
    assert other.viewport is other_rect


def test_scale_factor_change_triggers_refit(harness) -> None:
    harness.world.spawn_surface("main", physical_width=800, physical_height=600, primary=True)
    view = harness.world.spawn_view("cam", aspect_ratio=1.0)
    harness.tick()
    assert view.viewport == ViewportRect(100, 0, 600, 600)

    harness.world.set_scale_factor("main", 2.0, rescale=True)
    harness.tick()

    assert harness.plugin.sync.last_report.signals == 1
    assert view.viewport == ViewportRect(200, 0, 1200, 1200)


def test_zero_sized_surface_is_skipped(harness) -> None:
    harness.world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    view = harness.world.spawn_view("cam", aspect_ratio=1.0)
    harness.tick()

    harness.world.resize_surface("main", 0, 600)
    harness.tick()

    report = harness.plugin.sync.last_report
    assert report.writes == 0
    assert report.skipped == {"empty_surface": 1}
    assert view.viewport == ViewportRect(0, 0, 800, 800)


def test_bad_signal_does_not_block_others(harness) -> None:
    harness.world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    image_view = harness.world.spawn_view("image", aspect_ratio=1.0, target=ImageTarget("rt"))
    lost_view = harness.world.spawn_view("lost", aspect_ratio=1.0, target=SurfaceRef("gone"))
    view = harness.world.spawn_view("cam", aspect_ratio=2.0)

    harness.tick()

    assert image_view.viewport is None
    assert lost_view.viewport is None
    assert view.viewport == ViewportRect(0, 200, 800, 400)
    assert harness.plugin.sync.last_report.skipped == {
        "non_surface_target": 1,
        "missing_surface": 1,
    }


def test_sync_without_signals_is_a_noop(harness) -> None:
    harness.tick()
    harness.tick()

    assert harness.plugin.sync.last_report == SyncReport()
    assert len(harness.plugin.signals) == 0


def test_signal_queue_is_empty_after_every_tick(harness) -> None:
    harness.world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    harness.world.spawn_view("cam", aspect_ratio=1.0)
    harness.world.resize_surface("main", 900, 900)

    harness.tick()

    assert len(harness.plugin.signals) == 0


def test_sync_system_drops_signal_for_despawned_view(world) -> None:
    world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    queue = SyncSignalQueue()
    queue.emit(CameraChanged("ghost"))

    report = ViewportSyncSystem(queue).run(create_runtime_context(world))

    assert report == SyncReport(signals=1, pairs=0, writes=0, skipped={"missing_view": 1})


def test_apply_viewport_does_not_bump_view_revision(world) -> None:
    surface = world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    view = world.spawn_view("cam", aspect_ratio=1.0)

    assert apply_viewport(view, surface) is True
    assert view.revision == 0
    assert view.viewport == ViewportRect(0, 0, 800, 800)


def test_apply_viewport_trace_logs_write(world, caplog) -> None:
    surface = world.spawn_surface("main", physical_width=800, physical_height=800, primary=True)
    view = world.spawn_view("cam", aspect_ratio=2.0)

    with caplog.at_level("INFO", logger="fixed_viewport.sync"):
        apply_viewport(view, surface, trace=True)

    assert "viewport_applied view=cam surface=main rect=(0, 200, 800, 400)" in caplog.text
    record = caplog.records[-1]
    assert (record.view, record.surface, record.rect) == ("cam", "main", (0, 200, 800, 400))
