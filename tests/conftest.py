from __future__ import annotations

import pytest

from dashrunner.domain.config import GameConfig
from dashrunner.domain.world import new_run


class ScriptedRandom:
    """RandomSource that replays fixed draws, then an optional default."""

    def __init__(self, values=(), *, default: float | None = None) -> None:
        self._values = list(values)
        self._default = default
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if self._values:
            return self._values.pop(0)
        if self._default is None:
            raise AssertionError("scripted random source exhausted")
        return self._default


class MemoryStore:
    def __init__(self, high_score: int = 0) -> None:
        self.high_score = high_score
        self.saved: list[int] = []

    def load_high_score(self) -> int:
        return self.high_score

    def save_high_score(self, score: int) -> None:
        self.saved.append(score)
        self.high_score = score


@pytest.fixture
def cfg() -> GameConfig:
    return GameConfig()


@pytest.fixture
def quiet_cfg() -> GameConfig:
    # Nothing ever spawns
    return GameConfig(obstacle_spawn_rate=0.0, cloud_spawn_rate=0.0, star_spawn_rate=0.0)


@pytest.fixture
def fresh(cfg):
    return new_run(960, 540, cfg)
