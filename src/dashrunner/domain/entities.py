from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum


@dataclass(frozen=True)
class Player:
    x: float
    y: float          # feet; the sprite extends upward from here
    vy: float
    width: float
    height: float
    jumping: bool
    crouching: bool


class ObstacleKind(Enum):
    SPIKE = "spike"
    CLUSTER = "cluster"
    FLYING = "flying"


@dataclass(frozen=True)
class ClusterMember:
    offset: float  # x offset inside the cluster
    height: float


@dataclass(frozen=True)
class Obstacle:
    kind: ObstacleKind
    x: float
    y: float  # ground line for ground obstacles, top edge for flying ones
    width: float
    height: float

    # Variant fields
    style: int = 0                                 # spike silhouette, 0..2
    members: tuple[ClusterMember, ...] = ()        # cluster only
    wing_phase: float = 0.0                        # flying only

    @property
    def right(self) -> float:
        return self.x + self.width


# Horizontal speed of each variant relative to the scroll speed.
_SCROLL_FACTOR = {
    ObstacleKind.SPIKE: 1.0,
    ObstacleKind.CLUSTER: 1.0,
    ObstacleKind.FLYING: 1.2,
}

_WING_STEP = 0.3


def advance_obstacle(o: Obstacle, speed: float) -> Obstacle:
    x = o.x - speed * _SCROLL_FACTOR[o.kind]
    if o.kind is ObstacleKind.FLYING:
        return replace(o, x=x, wing_phase=o.wing_phase + _WING_STEP)
    return replace(o, x=x)


class DecorationKind(Enum):
    CLOUD = "cloud"
    STAR = "star"


@dataclass(frozen=True)
class Decoration:
    kind: DecorationKind
    x: float
    y: float
    width: float
    height: float
    drift: float = 1.0    # fraction of scroll speed
    opacity: float = 1.0
    phase: float = 0.0    # star twinkle phase

    @property
    def twinkle(self) -> float:
        """Current star brightness in [0, 1]."""
        return 0.5 + math.sin(self.phase) * 0.5


_STAR_DRIFT = 0.3
_TWINKLE_STEP = 0.1


def advance_decoration(d: Decoration, speed: float) -> Decoration:
    if d.kind is DecorationKind.STAR:
        return replace(d, x=d.x - speed * _STAR_DRIFT, phase=d.phase + _TWINKLE_STEP)
    return replace(d, x=d.x - speed * d.drift)


@dataclass(frozen=True)
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    max_life: float
    size: float
    color: str

    @property
    def alpha(self) -> float:
        return max(0.0, self.life / self.max_life)

    @property
    def radius(self) -> float:
        # Shrinks with remaining life
        return self.size * self.alpha

    @property
    def alive(self) -> bool:
        return self.life > 0


_PARTICLE_GRAVITY = 0.2


def advance_particle(p: Particle) -> Particle:
    return Particle(
        x=p.x + p.vx,
        y=p.y + p.vy,
        vx=p.vx,
        vy=p.vy + _PARTICLE_GRAVITY,
        life=p.life - 1,
        max_life=p.max_life,
        size=p.size,
        color=p.color,
    )


@dataclass(frozen=True)
class GroundSegment:
    x: float


_FLASH_FRAMES = 18  # 0.3s at 60 fps


@dataclass(frozen=True)
class LevelUpOverlay:
    level: int
    frame: int
    duration: int

    @property
    def alpha(self) -> float:
        return 1.0 - self.frame / self.duration

    @property
    def finished(self) -> bool:
        return self.frame >= self.duration

    @property
    def flashing(self) -> bool:
        return self.frame < _FLASH_FRAMES
