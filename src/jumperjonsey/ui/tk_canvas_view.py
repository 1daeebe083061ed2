from __future__ import annotations

import tkinter as tk

from jumperjonsey import config
from jumperjonsey.ui.draw_sink import Align

_ANCHORS = {"left": "w", "center": "center", "right": "e"}


class TkCanvasView:
    """``DrawSink`` backed by a tkinter canvas. Redraws everything each frame."""

    def __init__(self, root: tk.Misc, *, width: int, height: int) -> None:
        self.canvas = tk.Canvas(
            root, width=width, height=height, highlightthickness=0, background=config.BACKGROUND_COLOR,
        )
        self.canvas.pack(fill="both", expand=True)

    def clear(self) -> None:
        self.canvas.delete("all")

    def rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self.canvas.create_rectangle(x, y, x + w, y + h, outline="", fill=color)

    def image(self, x: float, y: float, w: float, h: float) -> None:
        # No sprite assets are loaded; draw the player as a solid block.
        self.canvas.create_rectangle(x, y, x + w, y + h, outline="", fill=config.PLAYER_COLOR)

    def text(
        self,
        text: str,
        x: float,
        y: float,
        size: float,
        align: Align = "left",
        color: str = config.TEXT_COLOR,
    ) -> None:
        self.canvas.create_text(
            x, y, text=text, anchor=_ANCHORS[align], fill=color,
            font=("TkDefaultFont", -max(1, int(size))),  # negative = pixels
        )
