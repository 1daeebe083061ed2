from __future__ import annotations

import random
import tkinter as tk

from jumperjonsey import config
from jumperjonsey.app.game_controller import GameController
from jumperjonsey.app.game_loop import GameLoop
from jumperjonsey.app.game_session import GameSession
from jumperjonsey.domain.geometry import Viewport
from jumperjonsey.infra.log import get_logger
from jumperjonsey.ui.input_mapper import TkInputMapper
from jumperjonsey.ui.renderer import render_frame
from jumperjonsey.ui.tk_canvas_view import TkCanvasView

log = get_logger(__name__)


class GameApp:
    def __init__(
        self,
        *,
        width: int = config.DEFAULT_WIDTH,
        height: int = config.DEFAULT_HEIGHT,
        fps: int = config.FPS,
        seed: int | None = config.SEED,
    ) -> None:
        self.root = tk.Tk()
        self.root.title(config.TITLE)

        self.view = TkCanvasView(self.root, width=width, height=height)
        self.input = TkInputMapper(self.root, self.view.canvas)

        self.session = GameSession(Viewport(width, height), random.Random(seed))
        self.controller = GameController(self.session)

        self.loop = GameLoop(
            root=self.root,
            render_fn=self._render,
            update_fn=self._update,
            fps=fps,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        log.info("started %dx%d fps=%d seed=%s", width, height, fps, seed)

    def run(self) -> None:
        self.loop.start()
        self.root.mainloop()

    def _update(self, dt: float) -> None:
        # Input is applied in full before the frame simulates.
        for event in self.input.drain():
            self.controller.handle(event)
        self.session.update(dt)

    def _render(self) -> None:
        render_frame(self.view, self.session.state, self.controller.layout)

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()
