from __future__ import annotations

from jumperjonsey import config
from jumperjonsey.domain.game_state import GameMode, GameState
from jumperjonsey.ui.draw_sink import DrawSink
from jumperjonsey.ui.layout import Button, Layout


def render_frame(sink: DrawSink, state: GameState, layout: Layout) -> None:
    vp = state.viewport
    ground_y = state.player.ground_y

    sink.clear()
    sink.rect(0, ground_y, vp.width, vp.height - ground_y, config.GROUND_COLOR)

    mode = state.mode
    if mode is GameMode.MENU:
        _draw_menu(sink, state, layout)
    elif mode is GameMode.LEVEL_SELECT:
        _draw_level_select(sink, state, layout)
    elif mode is GameMode.LEVEL:
        _draw_run(sink, state)
        sink.text(f"Level: {state.current_level}", vp.width * 0.0125, vp.height * 0.067, _font(state, 0.044))
    elif mode is GameMode.INFINITE:
        _draw_run(sink, state)
        sink.text(
            f"Score: {state.score:.0f}", vp.width - vp.width * 0.0125, vp.height * 0.067,
            _font(state, 0.044), align="right",
        )
    elif mode is GameMode.GAME_OVER:
        _draw_run(sink, state)
        _draw_game_over(sink, state, layout)
    elif mode is GameMode.LEVEL_COMPLETE:
        _draw_level_complete(sink, state, layout)


def _font(state: GameState, fraction: float) -> float:
    return state.viewport.height * fraction


def _draw_button(sink: DrawSink, state: GameState, b: Button, color: str = config.BUTTON_COLOR) -> None:
    r = b.rect
    sink.rect(r.x, r.y, r.w, r.h, color)
    sink.text(b.label, r.x + r.w / 2, r.y + r.h / 2, _font(state, 0.044), align="center",
              color=config.BUTTON_TEXT_COLOR)


def _draw_title(sink: DrawSink, state: GameState, text: str, y: float, fraction: float) -> None:
    sink.text(text, state.viewport.width / 2, y, _font(state, fraction), align="center")


def _draw_menu(sink: DrawSink, state: GameState, layout: Layout) -> None:
    vp = state.viewport
    _draw_title(sink, state, config.TITLE, vp.height / 2 - vp.height * 0.11, 0.133)
    for b in layout.menu:
        _draw_button(sink, state, b)


def _draw_level_select(sink: DrawSink, state: GameState, layout: Layout) -> None:
    _draw_title(sink, state, "Select a Level", state.viewport.height * 0.11, 0.067)
    _draw_button(sink, state, layout.back)
    for n, b in layout.levels.items():
        color = config.BUTTON_COLOR if n <= config.HIGHLIGHTED_LEVELS else config.LOCKED_BUTTON_COLOR
        _draw_button(sink, state, b, color)


def _draw_run(sink: DrawSink, state: GameState) -> None:
    w = state.viewport.width
    for o in state.obstacles:
        # Off-screen obstacles stay in the course but aren't drawn.
        if o.right < 0 or o.x > w:
            continue
        sink.rect(o.x, o.y, o.width, o.height, config.OBSTACLE_COLOR)
    p = state.player
    sink.image(p.x, p.y, p.width, p.height)


def _draw_game_over(sink: DrawSink, state: GameState, layout: Layout) -> None:
    vp = state.viewport
    _draw_title(sink, state, "Game Over!", vp.height / 2 - vp.height * 0.15, 0.1)
    if state.previous_mode is GameMode.INFINITE:
        detail = f"Score: {state.score:.0f}"
    else:
        detail = f"Level {state.current_level}"
    _draw_title(sink, state, detail, vp.height / 2 - vp.height * 0.03, 0.053)
    for b in layout.game_over:
        _draw_button(sink, state, b)


def _draw_level_complete(sink: DrawSink, state: GameState, layout: Layout) -> None:
    vp = state.viewport
    # current_level has already moved on to the next level
    _draw_title(sink, state, f"Level {state.current_level - 1} Complete!", vp.height / 2 - vp.height * 0.1, 0.089)
    for b in layout.level_complete:
        _draw_button(sink, state, b)
