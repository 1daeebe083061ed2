"""Procedural obstacle placement.

Obstacles are laid out left to right: each one starts a randomised gap past
the previous one's right edge, so x positions are non-decreasing in sequence
order. All sizes are relative to the player so the course scales with the
viewport.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from jumperjonsey import config
from jumperjonsey.domain.geometry import Rect, Viewport
from jumperjonsey.domain.player import Player
from jumperjonsey.domain.rng import RandomSource, chance, uniform
from jumperjonsey.infra.log import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class Obstacle:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


def difficulty_for(*, infinite: bool, score: float, level: int) -> float:
    if infinite:
        return 1.0 + math.floor(score / config.INFINITE_DIFFICULTY_SCORE) * config.INFINITE_DIFFICULTY_STEP
    return 1.0 + (level - 1) * config.LEVEL_DIFFICULTY_STEP


def level_length(level: int) -> float:
    return config.LEVEL_LENGTH_BASE + level * config.LEVEL_LENGTH_PER_LEVEL


def start_x(viewport: Viewport) -> float:
    return viewport.width * config.START_X_FRACTION


def place_obstacles(
    rng: RandomSource,
    *,
    cursor: float,
    until: float,
    difficulty: float,
    player: Player,
) -> tuple[Obstacle, ...]:
    """Place obstacles from ``cursor`` until the cursor reaches ``until``."""
    min_gap = max(player.width * config.MIN_GAP_PLAYER_MULT, config.MIN_GAP_FLOOR)
    max_w = player.width * config.MAX_WIDTH_PLAYER_MULT
    base_h = player.height * config.BASE_HEIGHT_PLAYER_MULT
    tall_h = player.height * config.TALL_PLAYER_MULT + difficulty * config.TALL_PER_DIFFICULTY

    placed: list[Obstacle] = []
    while cursor < until:
        gap = max(
            min_gap,
            config.GAP_BASE - difficulty * config.GAP_PER_DIFFICULTY + uniform(rng, 0.0, config.GAP_JITTER),
        )
        cursor += gap

        width = min(
            max_w,
            base_h * config.WIDTH_BASE_MULT + difficulty * config.WIDTH_PER_DIFFICULTY
            + uniform(rng, 0.0, config.WIDTH_JITTER),
        )
        if chance(rng, config.TALL_CHANCE):
            height = tall_h + difficulty * config.TALL_EXTRA_PER_DIFFICULTY
        else:
            height = base_h

        placed.append(Obstacle(x=cursor, y=player.ground_y - height, width=width, height=height))
        cursor += width

    return tuple(placed)


def generate_obstacles(
    rng: RandomSource,
    *,
    infinite: bool,
    score: float,
    level: int,
    player: Player,
    viewport: Viewport,
) -> tuple[Obstacle, ...]:
    """Build the course for a fresh run.

    Level courses are finite: ``level_length(level)`` pixels past the start.
    Infinite courses get an initial stretch a few screens long and are grown
    by ``extend_obstacles`` as they scroll.
    """
    difficulty = difficulty_for(infinite=infinite, score=score, level=level)
    begin = start_x(viewport)
    if infinite:
        span = viewport.width * config.INFINITE_LOOKAHEAD_SCREENS
    else:
        span = level_length(level)

    obstacles = place_obstacles(rng, cursor=begin, until=begin + span, difficulty=difficulty, player=player)
    log.debug(
        "generated %d obstacles (infinite=%s level=%d difficulty=%.2f span=%.0f)",
        len(obstacles), infinite, level, difficulty, span,
    )
    return obstacles


def extend_obstacles(
    rng: RandomSource,
    obstacles: tuple[Obstacle, ...],
    *,
    score: float,
    player: Player,
    viewport: Viewport,
) -> tuple[Obstacle, ...]:
    """Grow an infinite course once its trailing edge comes near the screen.

    New obstacles never start left of the screen's right edge, even when a
    long frame has left the trailing edge far behind the player.
    """
    edge = obstacles[-1].right if obstacles else start_x(viewport)
    if edge >= viewport.width * config.INFINITE_REFILL_SCREENS:
        return obstacles

    cursor = max(edge, viewport.width)
    difficulty = difficulty_for(infinite=True, score=score, level=0)
    more = place_obstacles(
        rng,
        cursor=cursor,
        until=cursor + viewport.width * config.INFINITE_LOOKAHEAD_SCREENS,
        difficulty=difficulty,
        player=player,
    )
    log.debug("extended infinite course by %d obstacles (difficulty=%.2f)", len(more), difficulty)
    return obstacles + more


def rescale_obstacles(
    obstacles: tuple[Obstacle, ...],
    old: Viewport,
    new: Viewport,
    *,
    ground_y: float,
) -> tuple[Obstacle, ...]:
    """Map a course onto a resized viewport, keeping each obstacle on the ground."""
    sx = new.width / old.width
    sy = new.height / old.height
    return tuple(
        Obstacle(x=o.x * sx, y=ground_y - o.height * sy, width=o.width * sy, height=o.height * sy)
        for o in obstacles
    )
