"""Tests for export triggers: double-tap detection, keys, single-flight runs."""

import numpy as np
import pytest

from raster_plotter.trigger import (
    DOUBLE_TAP_WINDOW_S,
    DoubleTapDetector,
    ExportTrigger,
    TapState,
    make_export_callback,
)
from raster_plotter.utils.validators import RasterTraceV1


class FakeClock:
    def __init__(self, t=100.0):
        self.t = t

    def __call__(self):
        return self.t


@pytest.fixture
def clock():
    return FakeClock()


# ============================================================================
# DOUBLE TAP DETECTOR
# ============================================================================

def test_default_window():
    assert DOUBLE_TAP_WINDOW_S == 0.3


def test_double_tap_within_window(clock):
    det = DoubleTapDetector(clock=clock)

    assert det.tap(100.0) is False
    assert det.state is TapState.AWAITING_SECOND_TAP
    assert det.tap(100.2) is True
    assert det.state is TapState.IDLE


def test_late_second_tap_restarts(clock):
    det = DoubleTapDetector(clock=clock)

    det.tap(100.0)
    assert det.tap(100.5) is False
    assert det.state is TapState.AWAITING_SECOND_TAP
    assert det.tap(100.6) is True


def test_gap_equal_to_window_is_not_double(clock):
    det = DoubleTapDetector(window_s=0.5, clock=clock)
    det.tap(100.0)
    assert det.tap(100.5) is False


def test_zero_gap_is_not_double(clock):
    det = DoubleTapDetector(clock=clock)
    det.tap(100.0)
    assert det.tap(100.0) is False


def test_third_tap_starts_fresh(clock):
    det = DoubleTapDetector(clock=clock)

    assert det.tap(100.0) is False
    assert det.tap(100.1) is True
    assert det.tap(100.2) is False
    assert det.tap(100.3) is True


def test_pending_tap_times_out(clock):
    det = DoubleTapDetector(clock=clock)
    det.tap()
    assert det.state is TapState.AWAITING_SECOND_TAP

    clock.t += 0.31

    assert det.state is TapState.IDLE


def test_tap_reads_clock_when_no_timestamp(clock):
    det = DoubleTapDetector(clock=clock)
    det.tap()
    clock.t += 0.1
    assert det.tap() is True


def test_window_must_be_positive():
    with pytest.raises(ValueError):
        DoubleTapDetector(window_s=0)


# ============================================================================
# EXPORT TRIGGER
# ============================================================================

@pytest.fixture
def calls():
    return []


@pytest.fixture
def trigger(calls, clock):
    def export():
        calls.append("export")
        return len(calls)
    return ExportTrigger(export, clock=clock)


@pytest.mark.parametrize("key", ["s", "S"])
def test_export_keys(trigger, calls, key):
    assert trigger.on_key(key) is True
    assert calls == ["export"]
    assert trigger.last_result == 1


@pytest.mark.parametrize("key", ["a", "Enter", "ss", ""])
def test_other_keys_ignored(trigger, calls, key):
    assert trigger.on_key(key) is False
    assert calls == []


def test_double_click(trigger, calls):
    trigger.on_double_click()
    trigger.on_double_click()
    assert calls == ["export", "export"]


def test_double_tap_exports_once(trigger, calls):
    assert trigger.on_tap(1.0) is False
    assert calls == []
    assert trigger.on_tap(1.1) is True
    assert calls == ["export"]


def test_single_taps_far_apart_do_not_export(trigger, calls):
    trigger.on_tap(1.0)
    trigger.on_tap(2.0)
    trigger.on_tap(3.0)
    assert calls == []


def test_reentrant_trigger_dropped(clock):
    calls = []
    holder = {}

    def export():
        calls.append("outer")
        assert holder["trigger"].busy
        holder["trigger"].on_key("s")
        return "done"

    trig = ExportTrigger(export, clock=clock)
    holder["trigger"] = trig

    trig.on_key("s")

    assert calls == ["outer"]
    assert trig.last_result == "done"
    assert not trig.busy


def test_failure_releases_busy_flag(clock):
    def boom():
        raise RuntimeError("disk full")

    trig = ExportTrigger(boom, clock=clock)

    with pytest.raises(RuntimeError, match="disk full"):
        trig.request()

    assert not trig.busy


def test_scheduler_defers_run(calls, clock):
    queued = []

    def export():
        calls.append("export")

    trig = ExportTrigger(export, scheduler=queued.append, clock=clock)
    trig.on_key("s")

    assert calls == []
    assert len(queued) == 1

    queued.pop()()

    assert calls == ["export"]


def test_second_request_while_queued_runs_after_first(calls, clock):
    queued = []
    trig = ExportTrigger(lambda: calls.append("export"), scheduler=queued.append, clock=clock)

    trig.request()
    trig.request()
    for job in queued:
        job()

    assert calls == ["export", "export"]


# ============================================================================
# CAPTURE → PIPELINE → EXPORT CALLBACK
# ============================================================================

def test_make_export_callback_writes_svg(tmp_path, make_rgba):
    grid = np.zeros((4, 4), dtype=bool)
    grid[1, :] = True
    frame = make_rgba(grid)
    cfg = RasterTraceV1(export={"out_dir": str(tmp_path), "filename": "frame.svg"})

    trig = ExportTrigger(make_export_callback(lambda: frame, cfg))
    trig.on_key("s")

    out = tmp_path / "frame.svg"
    assert trig.last_result == out
    text = out.read_text()
    assert text.startswith("<svg ")
    assert '<path d="M 0 1 L 1 1 L 2 1 L 3 1"' in text
