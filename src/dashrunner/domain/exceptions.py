from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dashrunner.domain.game_state import GameState


class PlayerDied(Exception):
    """Raised by the domain when the player hits an obstacle and the run ends.

    Carries the world as it stood at the end of the fatal frame so the
    session can freeze it for the game-over screen.
    """

    def __init__(self, state: GameState) -> None:
        super().__init__("player hit an obstacle")
        self.state = state
