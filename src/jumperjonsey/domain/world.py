from __future__ import annotations

import math
from dataclasses import dataclass, replace

from jumperjonsey import config
from jumperjonsey.domain import physics
from jumperjonsey.domain.game_state import GameMode, GameState
from jumperjonsey.domain.obstacles import Obstacle, extend_obstacles
from jumperjonsey.domain.player import Player, hitbox, reset_player
from jumperjonsey.domain.rng import RandomSource
from jumperjonsey.infra.log import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class TickResult:
    collided: bool = False
    level_completed: bool = False


def scroll_speed(mode: GameMode, score: float) -> float:
    if mode is GameMode.INFINITE:
        return config.INFINITE_SPEED + math.floor(score / config.INFINITE_SPEEDUP_SCORE) * config.INFINITE_SPEEDUP
    return config.LEVEL_SPEED


def scroll_obstacles(
    obstacles: tuple[Obstacle, ...],
    player: Player,
    mode: GameMode,
    score: float,
    dt: float,
) -> tuple[tuple[Obstacle, ...], TickResult]:
    """Move every obstacle left and test it against the player's hitbox.

    Stops at the first hit: obstacles after it keep their old x this tick.
    In LEVEL mode the run is complete once the trailing obstacle has fully
    left the screen.
    """
    dx = scroll_speed(mode, score) * dt
    box = hitbox(player)
    last = len(obstacles) - 1

    moved: list[Obstacle] = []
    completed = False
    for i, o in enumerate(obstacles):
        o = replace(o, x=o.x - dx)
        moved.append(o)
        if box.overlaps(o.rect):
            moved.extend(obstacles[i + 1:])
            return tuple(moved), TickResult(collided=True)
        if mode is GameMode.LEVEL and i == last and o.x < -o.width:
            completed = True

    return tuple(moved), TickResult(level_completed=completed)


class World:
    def __init__(self, rng: RandomSource) -> None:
        self.rng = rng

    def step(self, state: GameState, dt: float) -> GameState:
        """Advance one frame. Only LEVEL and INFINITE simulate anything."""
        if not state.mode.is_playing:
            return state

        player = physics.step(state.player, dt)
        obstacles, result = scroll_obstacles(state.obstacles, player, state.mode, state.score, dt)

        if result.collided:
            log.info(
                "crashed in %s (level=%d score=%.0f)",
                state.mode.name, state.current_level, state.score,
            )
            return replace(
                state,
                player=replace(player, vy=0.0, on_ground=True),
                obstacles=obstacles,
                mode=GameMode.GAME_OVER,
                previous_mode=state.mode,
            )

        if result.level_completed:
            log.info("level %d complete", state.current_level)
            return replace(
                state,
                player=reset_player(player),
                obstacles=(),
                mode=GameMode.LEVEL_COMPLETE,
                current_level=state.current_level + 1,
            )

        score = state.score
        if state.mode is GameMode.INFINITE:
            score += config.SCORE_RATE * dt
            obstacles = extend_obstacles(
                self.rng, obstacles, score=score, player=player, viewport=state.viewport,
            )

        return replace(state, player=player, obstacles=obstacles, score=score)
