from __future__ import annotations

from dashrunner.domain.entities import Particle
from dashrunner.domain.rng import RandomSource, spread


def burst(x: float, y: float, color: str, rng: RandomSource, *, count: int = 15) -> tuple[Particle, ...]:
    out: list[Particle] = []
    for _ in range(count):
        vx = spread(rng, 4.0)
        vy = spread(rng, 4.0)
        size = 3.0 + rng.random() * 3.0
        out.append(Particle(x=x, y=y, vx=vx, vy=vy, life=30.0, max_life=30.0, size=size, color=color))
    return tuple(out)


def celebration(x: float, y: float, color: str, rng: RandomSource, *, count: int = 30) -> tuple[Particle, ...]:
    """Faster, longer-lived particles fired from the screen centre on level up."""
    out: list[Particle] = []
    for _ in range(count):
        size = 3.0 + rng.random() * 3.0
        vx = spread(rng, 10.0)
        vy = spread(rng, 10.0)
        life = 30.0 + rng.random() * 20.0
        out.append(Particle(x=x, y=y, vx=vx, vy=vy, life=life, max_life=life, size=size, color=color))
    return tuple(out)
