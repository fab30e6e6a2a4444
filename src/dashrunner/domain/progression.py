from __future__ import annotations

import math
from dataclasses import dataclass

from dashrunner.domain.config import GameConfig

POINTS_PER_LEVEL = 500


@dataclass(frozen=True)
class Progress:
    level: int
    speed: float
    score: int
    leveled_up: bool


def level_for_score(score: int) -> int:
    return score // POINTS_PER_LEVEL + 1


def level_speed_multiplier(level: int) -> float:
    # 70% of nominal speed at level 1, +25% per level
    return 0.7 + (level - 1) * 0.25


def level_spawn_multiplier(level: int) -> float:
    # 50% of nominal spawn rate at level 1, +35% per level
    return 0.5 + (level - 1) * 0.35


def min_obstacle_spacing(level: int) -> float:
    return max(150.0, 500.0 - (level - 1) * 30.0)


def base_speed(frame_count: int, cfg: GameConfig) -> float:
    return min(cfg.base_speed + frame_count * cfg.speed_increase_rate, cfg.max_speed)


def current_speed(level: int, frame_count: int, cfg: GameConfig) -> float:
    # Level progression may push past the nominal cap, up to twice it.
    return min(base_speed(frame_count, cfg) * level_speed_multiplier(level), cfg.max_speed * 2)


def score_increment(speed: float) -> int:
    return max(1, math.floor(speed * 0.2))


def advance(score: int, previous_level: int, frame_count: int, cfg: GameConfig) -> Progress:
    """Run one frame of progression.

    The level is derived from the score accumulated so far, the speed from
    that level and the elapsed frames, and only then is this frame's score
    added.
    """
    level = level_for_score(score)
    speed = current_speed(level, frame_count, cfg)
    return Progress(
        level=level,
        speed=speed,
        score=score + score_increment(speed),
        leveled_up=level > previous_level,
    )
