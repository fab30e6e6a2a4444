import random
from types import SimpleNamespace

import pytest

pytest.importorskip("tkinter")

from conftest import MemoryStore  # noqa: E402
from dashrunner.app.game_session import GamePhase, GameSession  # noqa: E402
from dashrunner.domain.world import World  # noqa: E402
from dashrunner.ui.input_mapper import DUCK_MS, TkInputMapper  # noqa: E402


class FakeWidget:
    def __init__(self):
        self.handlers = {}
        self.scheduled = []

    def bind(self, sequence, fn):
        self.handlers[sequence] = fn

    def focus_set(self):
        pass

    def after(self, ms, fn):
        self.scheduled.append((ms, fn))


def _evt(x=0, y=0, time=0):
    return SimpleNamespace(x=x, y=y, time=time)


@pytest.fixture
def rig(quiet_cfg):
    session = GameSession(World(quiet_cfg, random.Random(5)), MemoryStore(), width=960, height=540)
    root, canvas = FakeWidget(), FakeWidget()
    TkInputMapper(root, canvas, session)
    return session, root, canvas


def _pointer(canvas, press, release, drag=None):
    canvas.handlers["<ButtonPress-1>"](_evt(*press))
    if drag is not None:
        canvas.handlers["<B1-Motion>"](_evt(*drag))
    canvas.handlers["<ButtonRelease-1>"](_evt(*release))


def test_jump_keys_never_start_a_run(rig):
    session, root, _ = rig
    root.handlers["<KeyPress-space>"](_evt())
    assert session.phase is GamePhase.MENU

    session.request_start()
    session.phase = GamePhase.GAME_OVER
    root.handlers["<KeyPress-Up>"](_evt())
    assert session.phase is GamePhase.GAME_OVER

    root.handlers["<KeyPress-Return>"](_evt())
    assert session.phase is GamePhase.PLAYING


def test_press_that_starts_a_run_does_not_also_jump(rig):
    session, _, canvas = rig
    _pointer(canvas, (100, 100, 0), (100, 100, 50))
    assert session.phase is GamePhase.PLAYING
    session.tick()
    assert not session.state.player.jumping


@pytest.mark.parametrize("release", [(102, 101, 50), (100, 40, 150)])
def test_tap_and_swipe_up_jump(rig, release):
    session, _, canvas = rig
    session.request_start()
    _pointer(canvas, (100, 100, 0), release)
    session.tick()
    assert session.state.player.jumping


def test_drag_down_holds_crouch_until_release(rig):
    session, _, canvas = rig
    session.request_start()
    canvas.handlers["<ButtonPress-1>"](_evt(100, 100, 0))
    canvas.handlers["<B1-Motion>"](_evt(100, 150, 400))
    session.tick()
    assert session.state.player.crouching

    canvas.handlers["<B1-Motion>"](_evt(100, 120, 500))
    session.tick()
    assert not session.state.player.crouching

    canvas.handlers["<B1-Motion>"](_evt(100, 160, 600))
    session.tick()
    assert session.state.player.crouching

    canvas.handlers["<ButtonRelease-1>"](_evt(100, 160, 1000))
    session.tick()
    assert not session.state.player.crouching


def test_swipe_down_ducks_briefly(rig):
    session, root, canvas = rig
    session.request_start()
    _pointer(canvas, (100, 100, 0), (100, 160, 150))
    session.tick()
    assert session.state.player.crouching

    ms, release = root.scheduled[-1]
    assert ms == DUCK_MS
    release()
    session.tick()
    assert not session.state.player.crouching
