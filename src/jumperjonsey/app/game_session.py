from __future__ import annotations

from dataclasses import replace

from jumperjonsey import config
from jumperjonsey.domain import physics
from jumperjonsey.domain.exceptions import LevelOutOfRange
from jumperjonsey.domain.game_state import GameMode, GameState, new_game_state
from jumperjonsey.domain.geometry import Viewport
from jumperjonsey.domain.obstacles import Obstacle, generate_obstacles, rescale_obstacles
from jumperjonsey.domain.player import derive_player, reset_player
from jumperjonsey.domain.rng import RandomSource
from jumperjonsey.domain.world import World
from jumperjonsey.infra.log import get_logger

log = get_logger(__name__)


class GameSession:
    """Menu / run state machine.

    Input-driven transitions live here; per-frame simulation (and the
    crash / level-complete transitions it triggers) is delegated to
    ``World``. Actions that don't apply to the current mode are ignored.
    """

    def __init__(self, viewport: Viewport, rng: RandomSource) -> None:
        self.rng = rng
        self.world = World(rng)
        self.state: GameState = new_game_state(viewport)

    @property
    def mode(self) -> GameMode:
        return self.state.mode

    # ---------- Menu ----------

    def open_level_select(self) -> None:
        if self.mode not in (GameMode.MENU, GameMode.LEVEL_COMPLETE):
            return
        self._set(replace(self.state, mode=GameMode.LEVEL_SELECT))

    def back_to_menu(self) -> None:
        if self.mode is not GameMode.LEVEL_SELECT:
            return
        self._set(replace(self.state, mode=GameMode.MENU))

    def start_infinite(self) -> None:
        if self.mode is not GameMode.MENU:
            return
        self._start_run(GameMode.INFINITE, score=0.0)

    def select_level(self, level: int) -> None:
        if not 1 <= level <= config.MAX_LEVEL:
            raise LevelOutOfRange(f"level must be in 1..{config.MAX_LEVEL}, got {level}")
        if self.mode is not GameMode.LEVEL_SELECT:
            return
        self._start_run(GameMode.LEVEL, level=level)

    # ---------- After a run ----------

    def retry(self) -> None:
        if self.mode is not GameMode.GAME_OVER:
            return
        if self.state.previous_mode is GameMode.INFINITE:
            self._start_run(GameMode.INFINITE, score=0.0)
        else:
            self._start_run(GameMode.LEVEL)

    def return_to_menu(self) -> None:
        if self.mode is GameMode.GAME_OVER:
            player = reset_player(self.state.player)
        elif self.mode is GameMode.LEVEL_COMPLETE:
            player = self.state.player
        else:
            return
        self._set(replace(self.state, mode=GameMode.MENU, player=player, score=0.0))

    # ---------- Play ----------

    def jump(self) -> None:
        if not self.mode.is_playing:
            return
        self.state = replace(self.state, player=physics.jump(self.state.player))

    def update(self, dt: float) -> None:
        before = self.mode
        self.state = self.world.step(self.state, dt)
        if self.mode is not before:
            log.info("%s -> %s", before.name, self.mode.name)

    def resize(self, viewport: Viewport) -> None:
        """Re-derive every size-dependent value for a new viewport.

        During LEVEL or INFINITE the run restarts from the beginning of a
        freshly generated course (score kept). Outside play, any course left
        over from the last run is scaled onto the new viewport; on the
        GAME_OVER screen the player keeps its (scaled) height above the ground.
        """
        old = self.state
        if viewport == old.viewport:
            return
        player = derive_player(viewport)
        state = replace(old, viewport=viewport, player=player)
        if state.mode.is_playing:
            log.info("resize to %gx%g; restarting %s run", viewport.width, viewport.height, state.mode.name)
            self.state = replace(state, obstacles=self._generate(state))
            return

        log.info("resize to %gx%g", viewport.width, viewport.height)
        if state.mode is GameMode.GAME_OVER:
            altitude = max(0.0, old.player.ground_y - (old.player.y + old.player.size))
            lift = altitude * viewport.height / old.viewport.height
            player = replace(player, y=max(0.0, player.y - lift))
        self.state = replace(
            state,
            player=player,
            obstacles=rescale_obstacles(old.obstacles, old.viewport, viewport, ground_y=player.ground_y),
        )

    # ---------- Internals ----------

    def _start_run(self, mode: GameMode, *, level: int | None = None, score: float | None = None) -> None:
        state = replace(
            self.state,
            mode=mode,
            player=reset_player(self.state.player),
            current_level=self.state.current_level if level is None else level,
            score=self.state.score if score is None else score,
        )
        self._set(replace(state, obstacles=self._generate(state)))

    def _generate(self, state: GameState) -> tuple[Obstacle, ...]:
        return generate_obstacles(
            self.rng,
            infinite=state.mode is GameMode.INFINITE,
            score=state.score,
            level=state.current_level,
            player=state.player,
            viewport=state.viewport,
        )

    def _set(self, state: GameState) -> None:
        log.info("%s -> %s", self.state.mode.name, state.mode.name)
        self.state = state
