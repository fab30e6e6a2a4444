from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from dashrunner.domain.entities import Obstacle, ObstacleKind, Player


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


def rects_overlap(a: Rect, b: Rect) -> bool:
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def player_hitbox(p: Player) -> Rect:
    # p.y is the feet line; the body extends upward by p.height
    return Rect(x=p.x + 12, y=p.y - p.height + 15, width=p.width - 24, height=p.height - 30)


def _spike_hitbox(o: Obstacle, ground_y: float) -> Rect:
    return Rect(x=o.x + 8, y=ground_y - o.height + 8, width=o.width - 16, height=o.height - 16)


def _cluster_hitbox(o: Obstacle, ground_y: float) -> Rect:
    tallest = max((m.height for m in o.members), default=o.height)
    return Rect(x=o.x + 8, y=ground_y - tallest + 8, width=o.width - 16, height=tallest - 16)


def _flyer_hitbox(o: Obstacle, ground_y: float) -> Rect:
    return Rect(x=o.x + 8, y=o.y + 5, width=o.width - 16, height=o.height - 10)


_HITBOXES: dict[ObstacleKind, Callable[[Obstacle, float], Rect]] = {
    ObstacleKind.SPIKE: _spike_hitbox,
    ObstacleKind.CLUSTER: _cluster_hitbox,
    ObstacleKind.FLYING: _flyer_hitbox,
}


def obstacle_hitbox(o: Obstacle, ground_y: float) -> Rect:
    return _HITBOXES[o.kind](o, ground_y)


def collides(p: Player, o: Obstacle, ground_y: float) -> bool:
    return rects_overlap(player_hitbox(p), obstacle_hitbox(o, ground_y))


def first_collision(p: Player, obstacles: Iterable[Obstacle], ground_y: float) -> Obstacle | None:
    for o in obstacles:
        if collides(p, o, ground_y):
            return o
    return None
