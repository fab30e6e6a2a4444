from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    # Physics (per frame)
    gravity: float = 0.8
    jump_velocity: float = -18.0

    # Speed curve
    base_speed: float = 5.0
    speed_increase_rate: float = 0.001  # added to base speed every frame
    max_speed: float = 15.0

    # Spawning (per-frame probabilities before scaling)
    obstacle_spawn_rate: float = 0.008
    cloud_spawn_rate: float = 0.003
    star_spawn_rate: float = 0.001
    night_start_frame: int = 2000

    # Player
    player_x: float = 80.0
    player_width: float = 85.0
    player_height: float = 110.0
    crouch_height: float = 65.0

    # Ground tiling
    ground_segment_width: float = 50.0

    # Effects
    particles_per_burst: int = 15
    explosion_bursts: int = 30
    celebration_particles: int = 30
    level_up_duration: int = 60  # frames

    jump_color: str = "#4ade80"
    land_color: str = "#22c55e"
    explosion_color: str = "#ef4444"
    celebration_color: str = "#FFD700"
