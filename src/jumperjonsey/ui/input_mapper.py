from __future__ import annotations

import tkinter as tk
from collections import deque

from jumperjonsey.domain.input_events import InputEvent, JumpRequested, PointerDown, ViewportResized


class TkInputMapper:
    """Queues tkinter events as domain input events until the next frame drains them."""

    def __init__(self, root: tk.Tk, canvas: tk.Canvas) -> None:
        self._queue: deque[InputEvent] = deque()
        self._jump_down = False

        root.bind("<KeyPress-space>", self._on_jump_down)
        root.bind("<KeyRelease-space>", self._on_jump_up)
        root.bind("<KeyPress-Up>", self._on_jump_down)
        root.bind("<KeyRelease-Up>", self._on_jump_up)
        canvas.bind("<Button-1>", self._on_click)
        canvas.bind("<Configure>", self._on_configure)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_jump_down(self, _evt: tk.Event) -> None:
        # Ignore key auto-repeat: one event per physical press.
        if not self._jump_down:
            self._queue.append(JumpRequested())
        self._jump_down = True

    def _on_jump_up(self, _evt: tk.Event) -> None:
        self._jump_down = False

    def _on_click(self, evt: tk.Event) -> None:
        self._queue.append(PointerDown(x=evt.x, y=evt.y))

    def _on_configure(self, evt: tk.Event) -> None:
        self._queue.append(ViewportResized(width=evt.width, height=evt.height))

    def drain(self) -> list[InputEvent]:
        events = list(self._queue)
        self._queue.clear()
        return events
