from __future__ import annotations
from dataclasses import dataclass
from dashrunner.domain.entities import (
    Decoration,
    GroundSegment,
    LevelUpOverlay,
    Obstacle,
    Particle,
    Player,
)


@dataclass(frozen=True)
class GameState:
    # Viewport
    width: float
    height: float
    ground_y: float

    player: Player

    # Progression
    score: int
    level: int
    speed: float
    frame_count: int

    # Per-run collections, oldest first
    obstacles: tuple[Obstacle, ...]
    clouds: tuple[Decoration, ...]
    stars: tuple[Decoration, ...]
    particles: tuple[Particle, ...]
    ground: tuple[GroundSegment, ...]

    # x of the most recent (rightmost) obstacle, None when there are none
    last_obstacle_x: float | None

    level_up: LevelUpOverlay | None

    @property
    def is_night(self) -> bool:
        # Day/night cycle of 4000 frames, second half is night
        return (self.frame_count % 4000) / 4000 >= 0.5
