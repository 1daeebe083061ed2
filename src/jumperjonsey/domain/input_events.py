from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JumpRequested:
    """Space / Up was pressed (edge, not held)."""


@dataclass(frozen=True)
class PointerDown:
    x: float
    y: float


@dataclass(frozen=True)
class ViewportResized:
    width: float
    height: float


InputEvent = JumpRequested | PointerDown | ViewportResized
