import random
from dataclasses import replace

import pytest

from conftest import MemoryStore
from dashrunner.app.game_session import GamePhase, GameSession
from dashrunner.domain.entities import Obstacle, ObstacleKind
from dashrunner.domain.world import World, new_run


def _session(cfg, high_score=0):
    store = MemoryStore(high_score)
    return GameSession(World(cfg, random.Random(11)), store, width=960, height=540), store


def _crash_next_frame(session):
    p = session.state.player
    spike = Obstacle(kind=ObstacleKind.SPIKE, x=p.x + 20, y=session.state.ground_y, width=35, height=85)
    session.state = replace(session.state, obstacles=(spike,), last_obstacle_x=spike.x)


def test_starts_in_menu_with_stored_high_score(quiet_cfg):
    session, _ = _session(quiet_cfg, high_score=42)
    assert session.phase is GamePhase.MENU
    assert session.high_score == 42

    before = session.state
    session.tick()
    assert session.state is before


def test_start_twice_gives_the_same_zeroed_state(quiet_cfg):
    session, _ = _session(quiet_cfg)
    session.request_start()
    first = session.state
    session.request_start()
    assert session.phase is GamePhase.PLAYING
    assert session.state == first == new_run(960, 540, quiet_cfg)


def test_restart_after_game_over_clears_the_run(quiet_cfg):
    session, _ = _session(quiet_cfg)
    session.request_start()
    for _ in range(5):
        session.tick()
    _crash_next_frame(session)
    session.tick()
    assert session.phase is GamePhase.GAME_OVER

    session.request_start()
    assert session.phase is GamePhase.PLAYING
    assert session.state == new_run(960, 540, quiet_cfg)
    session.request_start()
    assert session.state == new_run(960, 540, quiet_cfg)


def test_intents_only_count_while_playing(quiet_cfg):
    session, _ = _session(quiet_cfg)
    session.request_jump()
    session.set_crouch(True)
    session.request_start()
    session.tick()
    assert not session.state.player.jumping
    assert not session.state.player.crouching

    session.request_jump()
    session.tick()
    assert session.state.player.jumping

    # The jump latch is consumed by a single tick
    vy = session.state.player.vy
    session.tick()
    assert session.state.player.vy == pytest.approx(vy + quiet_cfg.gravity)


def test_crouch_follows_the_held_flag(quiet_cfg):
    session, _ = _session(quiet_cfg)
    session.request_start()
    session.set_crouch(True)
    session.tick()
    assert session.state.player.crouching
    session.tick()
    assert session.state.player.crouching
    session.set_crouch(False)
    session.tick()
    assert not session.state.player.crouching


def test_collision_on_frame_ten_ends_the_run(quiet_cfg):
    session, store = _session(quiet_cfg, high_score=5)
    session.request_start()
    for _ in range(9):
        session.tick()
    _crash_next_frame(session)
    session.tick()

    assert session.phase is GamePhase.GAME_OVER
    frozen = session.state
    assert frozen.frame_count == 10
    assert frozen.score == 10
    assert frozen.level == 1
    assert len(frozen.particles) == quiet_cfg.explosion_bursts * quiet_cfg.particles_per_burst

    session.tick()
    session.request_jump()
    session.tick()
    assert session.state is frozen

    assert session.high_score == 10
    assert store.saved == [10]


def test_lower_score_keeps_the_high_score(quiet_cfg):
    session, store = _session(quiet_cfg, high_score=100)
    session.request_start()
    for _ in range(9):
        session.tick()
    _crash_next_frame(session)
    session.tick()

    assert session.phase is GamePhase.GAME_OVER
    assert session.high_score == 100
    assert store.saved == []


def test_paused_phase_does_not_simulate(quiet_cfg):
    session, _ = _session(quiet_cfg)
    session.request_start()
    session.phase = GamePhase.PAUSED
    before = session.state
    session.tick()
    assert session.state is before
    # No resume path: starting is only allowed from the menu or game over
    session.request_start()
    assert session.phase is GamePhase.PAUSED


def test_resize_updates_the_world(quiet_cfg):
    session, _ = _session(quiet_cfg)
    session.resize(1280, 720)
    assert session.state.ground_y == 660
    session.request_start()
    assert session.state.width == 1280
    assert session.state.ground_y == 660


def test_five_hundred_quiet_frames_keep_playing(quiet_cfg):
    session, store = _session(quiet_cfg)
    session.request_start()
    for _ in range(500):
        session.tick()

    s = session.state
    assert session.phase is GamePhase.PLAYING
    assert s.score >= 500
    assert s.level == 1
    assert s.obstacles == () and s.clouds == () and s.stars == ()
    assert s.player.y == s.ground_y and not s.player.jumping
    assert store.saved == []
