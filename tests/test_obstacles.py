import random

import pytest

from jumperjonsey import config
from jumperjonsey.domain.geometry import Viewport
from jumperjonsey.domain.obstacles import (
    Obstacle,
    difficulty_for,
    extend_obstacles,
    generate_obstacles,
    level_length,
    rescale_obstacles,
    start_x,
)
from jumperjonsey.domain.player import derive_player

from conftest import ConstRandom


@pytest.mark.parametrize("level, expected", [(1, 1.0), (2, 1.15), (11, 2.5), (50, 8.35)])
def test_level_difficulty(level, expected):
    assert difficulty_for(infinite=False, score=0, level=level) == pytest.approx(expected)


@pytest.mark.parametrize("score, expected", [(0, 1.0), (499.9, 1.0), (500, 1.2), (1250, 1.4)])
def test_infinite_difficulty(score, expected):
    assert difficulty_for(infinite=True, score=score, level=0) == pytest.approx(expected)


def test_difficulty_is_non_decreasing():
    levels = [difficulty_for(infinite=False, score=0, level=n) for n in range(1, config.MAX_LEVEL + 1)]
    assert levels == sorted(levels)
    scores = [difficulty_for(infinite=True, score=s, level=0) for s in range(0, 10_000, 500)]
    assert all(b > a for a, b in zip(scores, scores[1:]))


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("level", [1, 7, 25, 50])
def test_level_course_is_monotonic_and_grounded(viewport, player, seed, level):
    obstacles = generate_obstacles(
        random.Random(seed), infinite=False, score=0, level=level, player=player, viewport=viewport,
    )
    assert obstacles
    xs = [o.x for o in obstacles]
    assert xs == sorted(xs)
    for o in obstacles:
        assert o.y + o.height == pytest.approx(player.ground_y)
        assert o.width <= player.width * config.MAX_WIDTH_PLAYER_MULT + 1e-9


@pytest.mark.parametrize("seed", range(5))
def test_gaps_never_shrink_below_minimum(viewport, player, seed):
    obstacles = generate_obstacles(
        random.Random(seed), infinite=False, score=0, level=50, player=player, viewport=viewport,
    )
    min_gap = max(player.width * 1.6, 40)
    assert obstacles[0].x >= start_x(viewport) + min_gap - 1e-9
    for a, b in zip(obstacles, obstacles[1:]):
        assert b.x - a.right >= min_gap - 1e-9


def test_level_course_covers_level_length(viewport, player, rng):
    obstacles = generate_obstacles(rng, infinite=False, score=0, level=3, player=player, viewport=viewport)
    end = start_x(viewport) + level_length(3)
    assert obstacles[-1].right >= end
    if len(obstacles) > 1:
        assert obstacles[-2].right < end


def test_every_level_has_an_obstacle_on_a_wide_screen(rng):
    wide = Viewport(4000, 500)
    obstacles = generate_obstacles(
        rng, infinite=False, score=0, level=1, player=derive_player(wide), viewport=wide,
    )
    assert len(obstacles) >= 1


def test_placement_formulas_with_fixed_randomness(viewport, player):
    # random() == 0.0: no jitter, and every obstacle rolls "tall".
    obstacles = generate_obstacles(
        ConstRandom(0.0), infinite=False, score=0, level=1, player=player, viewport=viewport,
    )
    first = obstacles[0]
    assert first.x == pytest.approx(600 + 360)                # start + (420 - 60)
    assert first.width == pytest.approx(40 * 1.05 * 0.6 + 8)   # under the 96 px cap
    assert first.height == pytest.approx(40 * 2.0 + 4 + 6)
    assert obstacles[1].x == pytest.approx(first.right + 360)


def test_short_obstacles_use_base_height(viewport, player):
    obstacles = generate_obstacles(
        ConstRandom(0.99), infinite=False, score=0, level=1, player=player, viewport=viewport,
    )
    for o in obstacles:
        assert o.height == pytest.approx(40 * 1.05)


def test_width_is_capped(viewport, player):
    obstacles = generate_obstacles(
        ConstRandom(0.99), infinite=False, score=0, level=50, player=player, viewport=viewport,
    )
    assert all(o.width == pytest.approx(player.width * 2.4) for o in obstacles)


def test_infinite_course_starts_with_a_lookahead(viewport, player, rng):
    obstacles = generate_obstacles(rng, infinite=True, score=0, level=1, player=player, viewport=viewport)
    assert obstacles[-1].right >= start_x(viewport) + viewport.width * config.INFINITE_LOOKAHEAD_SCREENS


def test_extend_leaves_distant_course_alone(viewport, player, rng):
    far = (Obstacle(x=5000.0, y=450.0, width=30.0, height=40.0),)
    assert extend_obstacles(rng, far, score=0, player=player, viewport=viewport) is far


def test_extend_continues_after_trailing_edge(viewport, player, rng):
    near = (
        Obstacle(x=-300.0, y=450.0, width=30.0, height=40.0),
        Obstacle(x=800.0, y=450.0, width=30.0, height=40.0),
    )
    grown = extend_obstacles(rng, near, score=0, player=player, viewport=viewport)
    assert grown[:2] == near
    assert len(grown) > 2
    assert grown[2].x > near[-1].right
    xs = [o.x for o in grown]
    assert xs == sorted(xs)


def test_extend_uses_current_score_for_difficulty(viewport, player):
    near = (Obstacle(x=0.0, y=450.0, width=30.0, height=40.0),)
    easy = extend_obstacles(ConstRandom(0.0), near, score=0, player=player, viewport=viewport)
    hard = extend_obstacles(ConstRandom(0.0), near, score=2000, player=player, viewport=viewport)
    # Higher difficulty: smaller gap, wider obstacle
    assert hard[1].x - near[0].right < easy[1].x - near[0].right
    assert hard[1].width > easy[1].width


def test_extend_never_places_behind_the_screen_edge(viewport, player, rng):
    # Trailing edge left far off-screen by a long frame.
    behind = (Obstacle(x=-30_000.0, y=450.0, width=30.0, height=40.0),)
    grown = extend_obstacles(rng, behind, score=0, player=player, viewport=viewport)
    added = grown[1:]
    assert added
    assert all(o.x >= viewport.width for o in added)
    assert grown[-1].right >= viewport.width * config.INFINITE_REFILL_SCREENS


def test_extend_an_empty_course_starts_off_screen(viewport, player, rng):
    grown = extend_obstacles(rng, (), score=0, player=player, viewport=viewport)
    assert grown
    assert grown[0].x >= viewport.width


def test_rescale_keeps_obstacles_on_the_new_ground(viewport):
    course = (
        Obstacle(x=300.0, y=450.0, width=20.0, height=40.0),
        Obstacle(x=700.0, y=400.0, width=30.0, height=90.0),
    )
    bigger = Viewport(1500, 1000)
    scaled = rescale_obstacles(course, viewport, bigger, ground_y=980.0)
    assert [o.x for o in scaled] == pytest.approx([450.0, 1050.0])
    assert [o.height for o in scaled] == pytest.approx([80.0, 180.0])
    assert all(o.y + o.height == pytest.approx(980.0) for o in scaled)
