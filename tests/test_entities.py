import math

import pytest

from dashrunner.domain.entities import (
    Decoration,
    DecorationKind,
    LevelUpOverlay,
    Particle,
    advance_decoration,
    advance_particle,
)


def test_particle_falls_and_shrinks():
    p = Particle(x=0, y=0, vx=1, vy=-2, life=30, max_life=30, size=4, color="#ffffff")
    p = advance_particle(p)
    assert (p.x, p.y) == (1, -2)
    assert p.vy == pytest.approx(-1.8)
    assert p.life == 29
    assert p.radius == pytest.approx(4 * 29 / 30)

    for _ in range(29):
        p = advance_particle(p)
    assert not p.alive
    assert p.radius == 0


def test_cloud_drifts_with_its_own_factor():
    cloud = Decoration(kind=DecorationKind.CLOUD, x=500, y=50, width=80, height=30, drift=0.5, opacity=0.4)
    assert advance_decoration(cloud, 10).x == 495


def test_star_twinkles():
    star = Decoration(kind=DecorationKind.STAR, x=500, y=50, width=4, height=4, phase=math.pi / 2 - 0.1)
    star = advance_decoration(star, 10)
    assert star.x == pytest.approx(497)
    assert star.twinkle == pytest.approx(1.0)


def test_overlay_fades_out():
    overlay = LevelUpOverlay(level=3, frame=15, duration=60)
    assert overlay.alpha == pytest.approx(0.75)
    assert not overlay.finished
    assert LevelUpOverlay(level=3, frame=60, duration=60).finished


def test_overlay_flashes_only_at_the_start():
    assert LevelUpOverlay(level=2, frame=1, duration=60).flashing
    assert LevelUpOverlay(level=2, frame=17, duration=60).flashing
    assert not LevelUpOverlay(level=2, frame=18, duration=60).flashing
