from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from jumperjonsey import config
from jumperjonsey.domain.geometry import Rect, Viewport


@dataclass(frozen=True)
class HitboxScale:
    """Collision rectangle inset from the sprite, as fractions of its size."""
    offset_x: float = config.HITBOX_OFFSET_X
    offset_y: float = config.HITBOX_OFFSET_Y
    width: float = config.HITBOX_WIDTH_SCALE
    height: float = config.HITBOX_HEIGHT_SCALE


@dataclass(frozen=True)
class Player:
    x: float
    y: float
    vy: float
    size: float                # square sprite: width == height == size
    on_ground: bool

    # Physics constants, all derived from the viewport height
    gravity: float             # added to vy once per tick while airborne
    jump_velocity: float       # negative: up
    terminal_velocity: float
    ground_y: float            # y of the ground line (viewport height - ground height)

    hitbox_scale: HitboxScale = field(default_factory=HitboxScale)

    @property
    def width(self) -> float:
        return self.size

    @property
    def height(self) -> float:
        return self.size

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.size, self.size)


def ground_height(viewport: Viewport) -> float:
    return viewport.height * config.GROUND_FRACTION


def rest_y(ground_y: float, size: float) -> float:
    """Largest y for which ``y + size`` does not pass ``ground_y``."""
    y = ground_y - size
    # ground_y - size can round so that y + size ends one ulp past the ground line.
    while y + size > ground_y:
        y = math.nextafter(y, -math.inf)
    return y


def derive_player(viewport: Viewport) -> Player:
    """Build a grounded player sized and tuned for ``viewport``."""
    h = viewport.height
    size = h * config.PLAYER_SIZE_FRACTION
    ground_y = h - ground_height(viewport)
    return Player(
        x=viewport.width * config.PLAYER_X_FRACTION,
        y=rest_y(ground_y, size),
        vy=0.0,
        size=size,
        on_ground=True,
        gravity=h * config.GRAVITY_FRACTION,
        jump_velocity=-h * config.JUMP_FRACTION,
        terminal_velocity=h * config.TERMINAL_VELOCITY_FRACTION,
        ground_y=ground_y,
    )


def reset_player(player: Player) -> Player:
    """Put the player back on the ground at rest, keeping its geometry."""
    return replace(player, y=rest_y(player.ground_y, player.size), vy=0.0, on_ground=True)


def hitbox(player: Player) -> Rect:
    # Recomputed on every call; never cache across moves.
    s = player.hitbox_scale
    return Rect(
        x=player.x + player.size * s.offset_x,
        y=player.y + player.size * s.offset_y,
        w=player.size * s.width,
        h=player.size * s.height,
    )
