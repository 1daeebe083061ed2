from __future__ import annotations

from dataclasses import dataclass

from jumperjonsey.domain.exceptions import InvalidViewport


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidViewport(f"viewport must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def overlaps(self, other: Rect) -> bool:
        # Strict on every edge: touching rectangles do not collide.
        return (self.x < other.right and self.right > other.x
                and self.y < other.bottom and self.bottom > other.y)

    def contains(self, px: float, py: float) -> bool:
        # Inclusive on every edge (button hit-testing).
        return self.x <= px <= self.right and self.y <= py <= self.bottom
