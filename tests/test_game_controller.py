from dataclasses import replace

import pytest

from jumperjonsey.app.game_controller import GameController
from jumperjonsey.app.game_session import GameSession
from jumperjonsey.domain.game_state import GameMode
from jumperjonsey.domain.geometry import Viewport
from jumperjonsey.domain.input_events import JumpRequested, PointerDown, ViewportResized
from jumperjonsey.ui.layout import ButtonAction


@pytest.fixture
def controller(viewport, rng):
    return GameController(GameSession(viewport, rng))


def _click(controller, button):
    r = button.rect
    controller.handle(PointerDown(r.x + r.w / 2, r.y + r.h / 2))


def _menu_button(controller, action):
    return next(b for b in controller.layout.menu if b.action is action)


def test_click_through_to_a_level(controller):
    _click(controller, _menu_button(controller, ButtonAction.LEVELS))
    assert controller.session.mode is GameMode.LEVEL_SELECT

    _click(controller, controller.layout.levels[7])
    assert controller.session.mode is GameMode.LEVEL
    assert controller.session.state.current_level == 7


def test_click_infinite(controller):
    _click(controller, _menu_button(controller, ButtonAction.INFINITE))
    assert controller.session.mode is GameMode.INFINITE


def test_back_button(controller):
    _click(controller, _menu_button(controller, ButtonAction.LEVELS))
    _click(controller, controller.layout.back)
    assert controller.session.mode is GameMode.MENU


def test_click_outside_buttons_is_ignored(controller):
    before = controller.session.state
    controller.handle(PointerDown(2, 2))
    assert controller.session.state is before


def test_jump_event(controller):
    _click(controller, _menu_button(controller, ButtonAction.INFINITE))
    controller.handle(JumpRequested())
    assert not controller.session.state.player.on_ground


def test_retry_after_crash(controller):
    session = controller.session
    _click(controller, _menu_button(controller, ButtonAction.LEVELS))
    _click(controller, controller.layout.levels[7])
    session.state = replace(session.state, mode=GameMode.GAME_OVER, previous_mode=GameMode.LEVEL)

    _click(controller, controller.layout.game_over[0])
    assert session.mode is GameMode.LEVEL
    assert session.state.current_level == 7


def test_level_complete_buttons(controller):
    session = controller.session
    session.state = replace(session.state, mode=GameMode.LEVEL_COMPLETE, current_level=3)
    _click(controller, controller.layout.level_complete[0])
    assert session.mode is GameMode.LEVEL_SELECT

    session.state = replace(session.state, mode=GameMode.LEVEL_COMPLETE)
    _click(controller, controller.layout.level_complete[1])
    assert session.mode is GameMode.MENU


def test_resize_rebuilds_layout(controller):
    controller.handle(ViewportResized(1600, 900))
    assert controller.layout.viewport == Viewport(1600, 900)
    assert controller.session.state.viewport == Viewport(1600, 900)


@pytest.mark.parametrize("w, h", [(0, 0), (1, 1), (800, 0)])
def test_degenerate_resize_is_ignored(controller, viewport, w, h):
    layout = controller.layout
    controller.handle(ViewportResized(w, h))
    assert controller.layout is layout
    assert controller.session.state.viewport == viewport
