from __future__ import annotations


class FrameClock:
    """Turns host timestamps (seconds) into per-frame ``dt``.

    The first tick after construction or ``reset`` yields 0.0 so the first
    frame never integrates across an unknown interval. Later values are
    passed through untouched: no clamping, so a long stall produces one
    large step.
    """

    def __init__(self) -> None:
        self._last: float | None = None

    def tick(self, now: float) -> float:
        last = self._last
        self._last = now
        if last is None:
            return 0.0
        return now - last

    def reset(self) -> None:
        self._last = None
