from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from jumperjonsey.domain.geometry import Viewport
from jumperjonsey.domain.obstacles import Obstacle
from jumperjonsey.domain.player import Player, derive_player


class GameMode(Enum):
    MENU = "menu"
    LEVEL_SELECT = "level_select"
    LEVEL = "level"
    INFINITE = "infinite"
    GAME_OVER = "game_over"
    LEVEL_COMPLETE = "level_complete"

    @property
    def is_playing(self) -> bool:
        return self in (GameMode.LEVEL, GameMode.INFINITE)


@dataclass(frozen=True)
class GameState:
    viewport: Viewport
    player: Player

    # Current course, in screen coords (moved left each tick)
    obstacles: tuple[Obstacle, ...]

    mode: GameMode
    # Mode of the last run that ended in a crash; drives Retry
    previous_mode: GameMode | None

    current_level: int         # 1..MAX_LEVEL; only ever incremented by completing a level
    score: float               # accrues in INFINITE only


def new_game_state(viewport: Viewport) -> GameState:
    return GameState(
        viewport=viewport,
        player=derive_player(viewport),
        obstacles=(),
        mode=GameMode.MENU,
        previous_mode=None,
        current_level=1,
        score=0.0,
    )
