"""Shared fixtures. Nothing here (or in the tests) imports tkinter."""
import random

import pytest

from jumperjonsey.domain.geometry import Viewport
from jumperjonsey.domain.player import derive_player


class ConstRandom:
    """RandomSource that always returns the same value."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


class FakeSink:
    """DrawSink that records every call."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def image(self, x, y, w, h):
        self.calls.append(("image", x, y, w, h))

    def text(self, text, x, y, size, align="left", color=None):
        self.calls.append(("text", text, x, y, size, align))

    @property
    def texts(self):
        return [c[1] for c in self.calls if c[0] == "text"]

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def viewport():
    return Viewport(1000, 500)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def player(viewport):
    return derive_player(viewport)


@pytest.fixture
def sink():
    return FakeSink()
