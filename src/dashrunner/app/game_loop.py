from __future__ import annotations

import logging
import time
import tkinter as tk
from collections.abc import Callable

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Drives a frame-based simulation from tkinter's event loop.

    Wall-clock time is accumulated and converted into whole simulation
    frames, so step_fn always advances exactly one fixed frame.
    """

    def __init__(
        self,
        *,
        root: tk.Tk,
        step_fn: Callable[[], None],
        render_fn: Callable[[], None],
        fps: int = 60,
        max_catch_up: int = 5,
    ) -> None:
        self._root = root
        self._step_fn = step_fn
        self._render_fn = render_fn
        self._frame_s = 1.0 / max(1, fps)
        self._target_ms = max(1, int(1000 / max(1, fps)))
        self._max_catch_up = max_catch_up

        self._running = False
        self._after_id: str | None = None
        self._last_t = 0.0
        self._accum = 0.0

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._last_t = time.monotonic()
        self._accum = 0.0
        self._schedule_next()

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed; ignore during shutdown.
                pass
            finally:
                self._after_id = None

    def advance(self, dt: float) -> int:
        """Feed dt seconds into the accumulator and run the frames it covers.

        Returns the number of frames stepped. Backlog beyond max_catch_up
        frames is dropped rather than replayed.
        """
        # Clamp to avoid a burst of frames after pauses/minimize.
        self._accum += min(dt, 0.1)

        steps = 0
        while self._accum >= self._frame_s and steps < self._max_catch_up:
            self._step_fn()
            self._accum -= self._frame_s
            steps += 1
        if steps == self._max_catch_up:
            self._accum = 0.0
        return steps

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._target_ms, self._tick)

    def _tick(self) -> None:
        if not self._running:
            return

        now = time.monotonic()
        dt = now - self._last_t
        self._last_t = now

        try:
            self.advance(dt)
            self._render_fn()
        except Exception:
            logger.exception("Game loop failed; stopping")
            self.stop()
            raise

        self._schedule_next()
