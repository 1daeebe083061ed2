from __future__ import annotations
from typing import Literal, Protocol

Align = Literal["left", "center", "right"]


class DrawSink(Protocol):
    """Minimal drawing surface the renderer targets."""

    def clear(self) -> None:
        ...

    def rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        ...

    def image(self, x: float, y: float, w: float, h: float) -> None:
        # The player sprite, scaled into the given box.
        ...

    def text(self, text: str, x: float, y: float, size: float, align: Align = "left", color: str = ...) -> None:
        ...
