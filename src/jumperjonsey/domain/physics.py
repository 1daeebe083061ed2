"""Vertical player physics.

Gravity is a fixed per-tick increment rather than being scaled by ``dt``,
while obstacle scrolling and score accrual are time based. Jump arcs
therefore depend on frame count, not wall time.
"""
from __future__ import annotations

from dataclasses import replace

from jumperjonsey.domain.player import Player, rest_y


def step(player: Player, dt: float) -> Player:
    # dt is accepted for symmetry with the scroller but vertical motion is per tick.
    vy = player.vy
    y = player.y
    on_ground = player.on_ground

    if not on_ground:
        vy += player.gravity
        if vy > player.terminal_velocity:
            vy = player.terminal_velocity
        y += vy

    # Ground
    if y + player.size > player.ground_y:
        y = rest_y(player.ground_y, player.size)
        vy = 0.0
        on_ground = True

    # Ceiling
    if y < 0.0:
        y = 0.0
        if vy < 0.0:
            vy = 0.0

    return replace(player, y=y, vy=vy, on_ground=on_ground)


def jump(player: Player) -> Player:
    """Launch the player upward. No-op while airborne (no air jumps)."""
    if not player.on_ground:
        return player
    return replace(player, vy=player.jump_velocity, on_ground=False)
