from __future__ import annotations

import contextlib
import time
import tkinter as tk
from collections.abc import Callable

from jumperjonsey.app.frame_clock import FrameClock
from jumperjonsey.infra.log import get_logger

log = get_logger(__name__)


class GameLoop:
    """Drives one update + render per frame off tkinter's ``after`` timer.

    ``dt`` comes from a ``FrameClock`` over ``time.monotonic``: 0.0 on the
    first frame after ``start`` and unclamped afterwards.
    """

    def __init__(
        self,
        *,
        root: tk.Tk,
        update_fn: Callable[[float], None],
        render_fn: Callable[[], None],
        fps: int = 60,
    ) -> None:
        self._root = root
        self._update = update_fn
        self._render = render_fn
        self._frame_ms = max(1, 1000 // max(1, fps))

        self._clock = FrameClock()
        self._pending: str | None = None
        self.running = False

    def start(self) -> None:
        if self.running:
            return
        self.running = True
        self._clock.reset()
        self._pending = self._root.after(self._frame_ms, self._frame)

    def stop(self) -> None:
        self.running = False
        pending, self._pending = self._pending, None
        if pending is None:
            return
        # after_cancel raises once the window is destroyed.
        with contextlib.suppress(tk.TclError):
            self._root.after_cancel(pending)

    def _frame(self) -> None:
        self._pending = None
        if not self.running:
            return

        try:
            self._update(self._clock.tick(time.monotonic()))
            self._render()
        except Exception:
            log.exception("frame failed; stopping game loop")
            self.stop()
            raise

        self._pending = self._root.after(self._frame_ms, self._frame)
