"""Export triggers: double-click, double-tap and the ``s`` key.

Front-ends forward raw input events here; the trigger decides when an export
should run and makes sure only one runs at a time.

Double-tap detection is an explicit two-state machine::

    IDLE --tap--> AWAITING_SECOND_TAP --tap within window--> IDLE (+ export)
                          |
                          +--window elapses / late tap--> IDLE / AWAITING (restart)

Runs are serialised with a busy flag: a trigger that arrives while an export
is still in flight is dropped with a warning rather than queued, because the
second run would capture the same frame anyway.

Deferral (e.g. to the next animation frame) is the front-end's business and is
injected as ``scheduler``; by default the export runs immediately on the
calling thread.
"""

from __future__ import annotations

import logging
import threading
import time
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Tuple

from .export import export_with_config
from .pipeline.runner import run_pipeline
from .utils import validators

logger = logging.getLogger(__name__)

DOUBLE_TAP_WINDOW_S = 0.3
EXPORT_KEYS = frozenset({"s", "S"})


class TapState(Enum):
    """Double-tap detector state."""

    IDLE = "idle"
    AWAITING_SECOND_TAP = "awaiting_second_tap"


class DoubleTapDetector:
    """Recognise two taps closer together than ``window_s``.

    Parameters
    ----------
    window_s : float
        Maximum gap between the taps of a double tap (seconds).
    clock : Callable[[], float]
        Monotonic time source; injectable for tests.
    """

    def __init__(
        self,
        window_s: float = DOUBLE_TAP_WINDOW_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if window_s <= 0:
            raise ValueError(f"window_s must be positive, got {window_s}")
        self._window_s = window_s
        self._clock = clock
        self._state = TapState.IDLE
        self._first_tap: float | None = None

    @property
    def state(self) -> TapState:
        """Current state; a pending first tap times out back to IDLE."""
        if self._state is TapState.AWAITING_SECOND_TAP and self._first_tap is not None:
            if self._clock() - self._first_tap >= self._window_s:
                self._reset()
        return self._state

    def _reset(self) -> None:
        self._state = TapState.IDLE
        self._first_tap = None

    def tap(self, now: float | None = None) -> bool:
        """Register a tap; return True when it completes a double tap.

        Parameters
        ----------
        now : float, optional
            Tap timestamp (seconds, same clock as ``clock``); read from the
            clock when omitted.
        """
        now = self._clock() if now is None else now

        if self._state is TapState.AWAITING_SECOND_TAP and self._first_tap is not None:
            gap = now - self._first_tap
            if 0 < gap < self._window_s:
                self._reset()
                return True

        # Late or first tap: it becomes the new first tap
        self._state = TapState.AWAITING_SECOND_TAP
        self._first_tap = now
        return False


class ExportTrigger:
    """Route input events to a single-flight export callback.

    Parameters
    ----------
    export_fn : Callable[[], Any]
        Runs one export; its return value is kept in ``last_result``.
    scheduler : Callable[[Callable[[], None]], None], optional
        Defers a unit of work (e.g. to the next frame). Immediate when None.
    double_tap_window_s : float
        Double-tap window in seconds, default 0.3.
    clock : Callable[[], float]
        Time source for the double-tap detector.
    """

    def __init__(
        self,
        export_fn: Callable[[], Any],
        *,
        scheduler: Optional[Callable[[Callable[[], None]], None]] = None,
        double_tap_window_s: float = DOUBLE_TAP_WINDOW_S,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._export_fn = export_fn
        self._scheduler = scheduler
        self._busy = threading.Lock()
        self.taps = DoubleTapDetector(double_tap_window_s, clock)
        self.last_result: Any = None

    @property
    def busy(self) -> bool:
        """True while an export is running."""
        return self._busy.locked()

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------

    def on_key(self, key: str) -> bool:
        """Handle a key press; ``s``/``S`` requests an export."""
        if key in EXPORT_KEYS:
            logger.info(f"Key {key!r} pressed, exporting SVG")
            self.request()
            return True
        return False

    def on_double_click(self) -> None:
        """Handle a desktop double-click."""
        logger.info("Double-click, exporting SVG")
        self.request()

    def on_tap(self, now: float | None = None) -> bool:
        """Handle a touch tap; the second tap of a double tap requests an export."""
        if self.taps.tap(now):
            logger.info("Double tap, exporting SVG")
            self.request()
            return True
        return False

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def request(self) -> None:
        """Schedule one export run."""
        if self._scheduler is None:
            self._run()
        else:
            self._scheduler(self._run)

    def _run(self) -> bool:
        """Run the export unless one is already in flight."""
        if not self._busy.acquire(blocking=False):
            logger.warning("Export already in progress; trigger ignored")
            return False
        try:
            self.last_result = self._export_fn()
            return True
        except Exception:
            logger.exception("SVG export failed")
            raise
        finally:
            self._busy.release()


def make_export_callback(
    capture_fn: Callable[[], Tuple[Any, int, int]],
    cfg: validators.RasterTraceV1,
) -> Callable[[], Path]:
    """Build an export callback: capture → pipeline → export sink.

    Parameters
    ----------
    capture_fn : Callable[[], (pixels, width, height)]
        Grabs the current frame as an RGBA buffer.
    cfg : RasterTraceV1
        Validated config (threshold, colour, export target).

    Returns
    -------
    Callable[[], Path]
        Callback returning the path of the written SVG.
    """
    def export() -> Path:
        pixels, width, height = capture_fn()
        result = run_pipeline(pixels, width, height, cfg)
        return export_with_config(result.svg, cfg.export)

    return export
