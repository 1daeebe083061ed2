from __future__ import annotations

from jumperjonsey.app.game_session import GameSession
from jumperjonsey.domain.geometry import Viewport
from jumperjonsey.domain.input_events import InputEvent, JumpRequested, PointerDown, ViewportResized
from jumperjonsey.ui.layout import Button, ButtonAction, Layout, build_layout


class GameController:
    """Routes input events to the session, hit-testing clicks against the layout."""

    def __init__(self, session: GameSession) -> None:
        self.session = session
        self.layout: Layout = build_layout(session.state.viewport)

    def handle(self, event: InputEvent) -> None:
        if isinstance(event, JumpRequested):
            self.session.jump()
        elif isinstance(event, PointerDown):
            self.click(event.x, event.y)
        elif isinstance(event, ViewportResized):
            self.resize(event.width, event.height)

    def click(self, x: float, y: float) -> None:
        button = self.layout.button_at(self.session.mode, x, y)
        if button is None:
            return
        self._press(button)

    def resize(self, width: float, height: float) -> None:
        # Minimised windows report 0 or 1 px; keep the last real size.
        if width <= 1 or height <= 1:
            return
        viewport = Viewport(width, height)
        if viewport == self.layout.viewport:
            return
        self.session.resize(viewport)
        self.layout = build_layout(viewport)

    def _press(self, button: Button) -> None:
        s = self.session
        action = button.action
        if action is ButtonAction.LEVELS or action is ButtonAction.SELECT_LEVEL:
            s.open_level_select()
        elif action is ButtonAction.INFINITE:
            s.start_infinite()
        elif action is ButtonAction.BACK:
            s.back_to_menu()
        elif action is ButtonAction.PLAY_LEVEL:
            s.select_level(button.level)
        elif action is ButtonAction.RETRY:
            s.retry()
        elif action is ButtonAction.RETURN_TO_MENU:
            s.return_to_menu()
