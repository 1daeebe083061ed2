"""Screen layouts: where every clickable button sits for a viewport.

``build_layout`` is a pure function of the viewport; the presentation layer
rebuilds the snapshot on resize and uses it both to draw buttons and to
hit-test clicks.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from jumperjonsey import config
from jumperjonsey.domain.game_state import GameMode
from jumperjonsey.domain.geometry import Rect, Viewport


class ButtonAction(Enum):
    LEVELS = "levels"
    INFINITE = "infinite"
    BACK = "back"
    PLAY_LEVEL = "play_level"
    RETRY = "retry"
    RETURN_TO_MENU = "return_to_menu"
    SELECT_LEVEL = "select_level"


@dataclass(frozen=True)
class Button:
    action: ButtonAction
    rect: Rect
    label: str
    level: int | None = None   # set for PLAY_LEVEL only


@dataclass(frozen=True)
class Layout:
    viewport: Viewport
    menu: tuple[Button, ...]
    back: Button
    levels: Mapping[int, Button]   # 1..MAX_LEVEL, ascending
    game_over: tuple[Button, ...]
    level_complete: tuple[Button, ...]

    def buttons_for(self, mode: GameMode) -> tuple[Button, ...]:
        if mode is GameMode.MENU:
            return self.menu
        if mode is GameMode.LEVEL_SELECT:
            return (self.back, *self.levels.values())
        if mode is GameMode.GAME_OVER:
            return self.game_over
        if mode is GameMode.LEVEL_COMPLETE:
            return self.level_complete
        return ()

    def button_at(self, mode: GameMode, x: float, y: float) -> Button | None:
        for b in self.buttons_for(mode):
            if b.rect.contains(x, y):
                return b
        return None


def build_layout(viewport: Viewport) -> Layout:
    w, h = viewport.width, viewport.height

    # Main menu: two buttons side by side just below centre
    bw, bh = w * 0.175, h * 0.09
    row_y = h / 2 + h * 0.067
    menu = (
        Button(ButtonAction.LEVELS, Rect(w / 2 - w * 0.1875, row_y, bw, bh), "Levels"),
        Button(ButtonAction.INFINITE, Rect(w / 2 + w * 0.0125, row_y, bw, bh), "Infinite"),
    )

    back = Button(ButtonAction.BACK, Rect(w * 0.0625, h * 0.11, w * 0.125, h * 0.067), "Back")

    # Level grid
    cols = config.LEVEL_GRID_COLUMNS
    cell_w, cell_h = w * 0.0625, h * 0.067
    pad_x, pad_y = w * 0.01875, h * 0.033
    grid_w = cols * cell_w + (cols - 1) * pad_x
    start_x = (w - grid_w) / 2
    start_y = h * 0.222
    levels: dict[int, Button] = {}
    for n in range(1, config.MAX_LEVEL + 1):
        col = (n - 1) % cols
        row = (n - 1) // cols
        rect = Rect(start_x + col * (cell_w + pad_x), start_y + row * (cell_h + pad_y), cell_w, cell_h)
        levels[n] = Button(ButtonAction.PLAY_LEVEL, rect, str(n), level=n)

    # End-of-run screens share one row of two wider buttons
    ew = w * 0.22
    end_y = h / 2 + h * 0.1
    left = Rect(w / 2 - ew - w * 0.015, end_y, ew, bh)
    right = Rect(w / 2 + w * 0.015, end_y, ew, bh)
    game_over = (
        Button(ButtonAction.RETRY, left, "Retry"),
        Button(ButtonAction.RETURN_TO_MENU, right, "Return to Menu"),
    )
    level_complete = (
        Button(ButtonAction.SELECT_LEVEL, left, "Select Level"),
        Button(ButtonAction.RETURN_TO_MENU, right, "Return to Menu"),
    )

    return Layout(
        viewport=viewport,
        menu=menu,
        back=back,
        levels=MappingProxyType(levels),
        game_over=game_over,
        level_complete=level_complete,
    )
