from __future__ import annotations

import logging
import random
import tkinter as tk

from dashrunner.app.game_loop import GameLoop
from dashrunner.app.game_session import GameSession
from dashrunner.domain.config import GameConfig
from dashrunner.domain.world import World
from dashrunner.infra.exceptions import HighScoreDecodeError
from dashrunner.infra.high_score_store import HighScoreStore
from dashrunner.ui.input_mapper import TkInputMapper
from dashrunner.ui.tk_canvas_view import TkCanvasView

logger = logging.getLogger(__name__)

WIDTH = 960
HEIGHT = 540
FPS = 60


class _StartFromZero:
    """Wraps the store so a corrupt file reads as 0 instead of aborting startup."""

    def __init__(self, store: HighScoreStore) -> None:
        self._store = store

    def load_high_score(self) -> int:
        try:
            return self._store.load_high_score()
        except HighScoreDecodeError as e:
            logger.warning("Ignoring unreadable high score: %s", e)
            return 0

    def save_high_score(self, score: int) -> None:
        self._store.save_high_score(score)


class GameApp:
    def __init__(self, *, config: GameConfig | None = None, seed: int | None = None) -> None:
        self.root = tk.Tk()
        self.root.title("Dash Runner")

        self.rng = random.Random(seed)
        self.world = World(config or GameConfig(), self.rng)
        self.session = GameSession(
            self.world,
            _StartFromZero(HighScoreStore()),
            width=WIDTH,
            height=HEIGHT,
        )

        # --- Play view (canvas) ---
        self.view = TkCanvasView(self.root, width=WIDTH, height=HEIGHT)
        self.view.on_resize(self.session.resize)
        self.input = TkInputMapper(self.root, self.view.canvas, self.session)

        # Loop
        self.loop = GameLoop(
            root=self.root,
            step_fn=self.session.tick,
            render_fn=self._render,
            fps=FPS,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        self.loop.start()
        self.root.mainloop()

    def _render(self) -> None:
        self.view.render(self.session)

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    GameApp().run()


if __name__ == "__main__":
    main()
