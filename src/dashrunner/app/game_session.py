from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Protocol

from dashrunner.domain.effects import burst
from dashrunner.domain.exceptions import PlayerDied
from dashrunner.domain.game_state import GameState
from dashrunner.domain.input_state import InputState
from dashrunner.domain.world import World, new_run, resize

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "gameover"
    PAUSED = "paused"  # reserved; nothing transitions here yet


class HighScoreRepository(Protocol):
    def load_high_score(self) -> int:
        ...

    def save_high_score(self, score: int) -> None:
        ...


class GameSession:
    """
    Owns the phase machine, the current world and the best score.

    Input collaborators call request_start/request_jump/set_crouch at any
    time; the intents are consumed by the next tick().
    """

    def __init__(self, world: World, store: HighScoreRepository, *, width: float, height: float) -> None:
        self.world = world
        self.store = store
        self.phase = GamePhase.MENU
        self.state: GameState = new_run(width, height, world.config)
        self.high_score = store.load_high_score()

        self._jump_requested = False
        self._crouch_held = False

    @property
    def playing(self) -> bool:
        return self.phase is GamePhase.PLAYING

    # ---------- Intents ----------

    def request_start(self) -> None:
        if self.phase not in (GamePhase.MENU, GamePhase.GAME_OVER):
            return
        self.state = new_run(self.state.width, self.state.height, self.world.config)
        self._jump_requested = False
        self._crouch_held = False
        self.phase = GamePhase.PLAYING
        logger.info("Run started (high score %d)", self.high_score)

    def request_jump(self) -> None:
        if self.playing:
            self._jump_requested = True

    def set_crouch(self, held: bool) -> None:
        if held and not self.playing:
            return
        self._crouch_held = held

    # ---------- Frame ----------

    def tick(self) -> None:
        if not self.playing:
            return

        inp = InputState(jump_pressed=self._jump_requested, crouch_held=self._crouch_held)
        self._jump_requested = False
        try:
            self.state = self.world.step(self.state, inp)
        except PlayerDied as e:
            self._game_over(e.state)

    def resize(self, width: float, height: float) -> None:
        self.state = resize(self.state, width, height, self.world.config)

    def _game_over(self, final: GameState) -> None:
        cfg = self.world.config
        p = final.player
        explosion = final.particles
        for _ in range(cfg.explosion_bursts):
            explosion = explosion + burst(
                p.x + 35, p.y + 35, cfg.explosion_color, self.world.rng, count=cfg.particles_per_burst
            )
        self.state = replace(final, particles=explosion)
        self.phase = GamePhase.GAME_OVER
        logger.info("Game over: score %d, level %d", final.score, final.level)

        if final.score > self.high_score:
            self.high_score = final.score
            logger.info("New high score: %d", final.score)
            self.store.save_high_score(final.score)
