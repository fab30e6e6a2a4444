from __future__ import annotations

import math
from dataclasses import dataclass

from dashrunner.domain.config import GameConfig
from dashrunner.domain.entities import (
    ClusterMember,
    Decoration,
    DecorationKind,
    Obstacle,
    ObstacleKind,
)
from dashrunner.domain.game_state import GameState
from dashrunner.domain.progression import level_spawn_multiplier, min_obstacle_spacing
from dashrunner.domain.rng import RandomSource, pick_index

_OBSTACLE_KINDS = (ObstacleKind.SPIKE, ObstacleKind.CLUSTER, ObstacleKind.FLYING)


@dataclass(frozen=True)
class SpawnResult:
    obstacles: tuple[Obstacle, ...]
    clouds: tuple[Decoration, ...]
    stars: tuple[Decoration, ...]
    last_obstacle_x: float | None


def make_spike(x: float, ground_y: float, rng: RandomSource) -> Obstacle:
    return Obstacle(
        kind=ObstacleKind.SPIKE,
        x=x,
        y=ground_y,
        width=35.0,
        height=85.0,
        style=pick_index(rng, 3),
    )


def make_cluster(x: float, ground_y: float, rng: RandomSource) -> Obstacle:
    members = tuple(ClusterMember(offset=i * 40.0, height=60.0 + rng.random() * 45.0) for i in range(2))
    return Obstacle(
        kind=ObstacleKind.CLUSTER,
        x=x,
        y=ground_y,
        width=80.0,
        height=105.0,
        members=members,
    )


def make_flyer(x: float, ground_y: float, rng: RandomSource) -> Obstacle:
    # 100-180px above the ground: inside the player's jump arc
    return Obstacle(
        kind=ObstacleKind.FLYING,
        x=x,
        y=ground_y - 100.0 - rng.random() * 80.0,
        width=40.0,
        height=25.0,
    )


_FACTORIES = {
    ObstacleKind.SPIKE: make_spike,
    ObstacleKind.CLUSTER: make_cluster,
    ObstacleKind.FLYING: make_flyer,
}


def make_obstacle(kind: ObstacleKind, x: float, ground_y: float, rng: RandomSource) -> Obstacle:
    return _FACTORIES[kind](x, ground_y, rng)


def make_cloud(x: float, rng: RandomSource) -> Decoration:
    return Decoration(
        kind=DecorationKind.CLOUD,
        x=x,
        y=30.0 + rng.random() * 100.0,
        width=60.0 + rng.random() * 40.0,
        height=30.0,
        drift=0.5 + rng.random() * 0.5,
        opacity=0.3 + rng.random() * 0.3,
    )


def make_star(x: float, rng: RandomSource) -> Decoration:
    return Decoration(
        kind=DecorationKind.STAR,
        x=x,
        y=20.0 + rng.random() * 150.0,
        width=4.0,
        height=4.0,
        phase=rng.random() * math.pi * 2,
    )


def spacing_allows_spawn(state: GameState, level: int) -> bool:
    if state.last_obstacle_x is None:
        return True
    return state.width - state.last_obstacle_x >= min_obstacle_spacing(level)


def spawn(state: GameState, level: int, speed: float, cfg: GameConfig, rng: RandomSource) -> SpawnResult:
    obstacles = state.obstacles
    clouds = state.clouds
    stars = state.stars
    last_x = state.last_obstacle_x

    # Obstacles: more likely at higher speed and level, never closer than the
    # level's minimum spacing to the previous one.
    obstacle_prob = cfg.obstacle_spawn_rate * speed * level_spawn_multiplier(level)
    if rng.random() < obstacle_prob and spacing_allows_spawn(state, level):
        kind = _OBSTACLE_KINDS[pick_index(rng, len(_OBSTACLE_KINDS))]
        obstacle = make_obstacle(kind, state.width, state.ground_y, rng)
        obstacles = obstacles + (obstacle,)
        last_x = obstacle.x

    if rng.random() < cfg.cloud_spawn_rate:
        clouds = clouds + (make_cloud(state.width, rng),)

    # Stars only once night has fallen
    if state.frame_count > cfg.night_start_frame and rng.random() < cfg.star_spawn_rate:
        stars = stars + (make_star(state.width, rng),)

    return SpawnResult(obstacles=obstacles, clouds=clouds, stars=stars, last_obstacle_x=last_x)
