from __future__ import annotations

import tkinter as tk
from collections.abc import Callable

from dashrunner.app.game_session import GamePhase, GameSession
from dashrunner.domain.entities import Obstacle, ObstacleKind, Player
from dashrunner.domain.game_state import GameState

_DAY_SKY = "#4FC3F7"
_NIGHT_SKY = "#1A237E"
_TRACK = "#CD853F"
_TRACK_EDGE = "#FFD700"
_PLAYER = "#16a34a"
_SPIKE = "#2d5016"
_FLYER = "#6b7280"
_TRACK_THICKNESS = 45
_STATIC_STARS = 30


def _blend(color: str, background: str, alpha: float) -> str:
    # Canvas items have no alpha channel; fake it against the sky colour.
    alpha = min(1.0, max(0.0, alpha))
    c = [int(color[i:i + 2], 16) for i in (1, 3, 5)]
    b = [int(background[i:i + 2], 16) for i in (1, 3, 5)]
    mixed = [round(bc + (cc - bc) * alpha) for cc, bc in zip(c, b)]
    return "#{:02x}{:02x}{:02x}".format(*mixed)


def static_star_positions(frame_count: int, width: float) -> list[tuple[float, float]]:
    """Fixed night-sky points that creep rightward with elapsed frames."""
    if width <= 0:
        return []
    return [((i * 50 + frame_count * 0.1) % width, 20 + (i * 17) % 150) for i in range(_STATIC_STARS)]


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, width: int, height: int) -> None:
        self._w = width
        self._h = height

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)

    def on_resize(self, cb: Callable[[int, int], None]) -> None:
        def _handler(evt: tk.Event) -> None:
            if evt.width > 1 and evt.height > 1:
                self._w, self._h = evt.width, evt.height
                cb(evt.width, evt.height)

        self.canvas.bind("<Configure>", _handler)

    def render(self, session: GameSession) -> None:
        c = self.canvas
        c.delete("all")

        state = session.state
        sky = _NIGHT_SKY if state.is_night else _DAY_SKY
        c.create_rectangle(0, 0, self._w, state.ground_y, outline="", fill=sky)

        if state.frame_count > session.world.config.night_start_frame:
            for x, y in static_star_positions(state.frame_count, self._w):
                c.create_rectangle(x, y, x + 2, y + 2, outline="", fill="#ffffff")
            for s in state.stars:
                color = _blend("#ffffff", sky, s.twinkle)
                c.create_rectangle(s.x, s.y, s.x + s.width, s.y + s.height, outline="", fill=color)

        for cl in state.clouds:
            color = _blend("#ffffff", sky, cl.opacity)
            c.create_oval(cl.x, cl.y, cl.x + cl.width, cl.y + cl.height, outline="", fill=color)

        self._draw_ground(state)
        for o in state.obstacles:
            self._draw_obstacle(o, state.ground_y)
        self._draw_player(state.player)

        for p in state.particles:
            r = p.radius
            c.create_oval(p.x - r, p.y - r, p.x + r, p.y + r, outline="", fill=_blend(p.color, sky, p.alpha))

        if state.level_up is not None:
            if state.level_up.flashing:
                c.create_rectangle(0, 0, self._w, self._h, outline="", fill="#FFD700", stipple="gray25")
            c.create_text(
                self._w / 2,
                self._h / 2 - 50,
                text=f"LEVEL {state.level_up.level}!",
                fill=_blend("#FFD700", sky, state.level_up.alpha),
                font=("TkDefaultFont", 36, "bold"),
            )

        self._draw_hud(session, state)

    def _draw_ground(self, state: GameState) -> None:
        c = self.canvas
        gy = state.ground_y
        c.create_rectangle(0, gy, self._w, self._h, outline="", fill="#8B4513")
        c.create_rectangle(0, gy, self._w, gy + _TRACK_THICKNESS, outline="", fill=_TRACK)
        c.create_line(0, gy, self._w, gy, fill=_TRACK_EDGE, width=3)
        # Lane dashes ride on the scrolling segments
        for seg in state.ground:
            c.create_line(seg.x, gy + 20, seg.x + 30, gy + 20, fill=_TRACK_EDGE, width=2)

    def _draw_obstacle(self, o: Obstacle, ground_y: float) -> None:
        c = self.canvas
        if o.kind is ObstacleKind.FLYING:
            flap = 6 if int(o.wing_phase) % 2 else -6
            c.create_oval(o.x, o.y, o.x + o.width, o.y + o.height, outline="", fill=_FLYER)
            c.create_line(o.x + 10, o.y + 12, o.x + 20, o.y + 12 + flap, o.x + 30, o.y + 12, fill=_FLYER, width=3)
        elif o.kind is ObstacleKind.CLUSTER:
            for m in o.members:
                x1 = o.x + m.offset
                c.create_rectangle(x1, ground_y - m.height, x1 + 35, ground_y, outline="", fill=_SPIKE)
        else:
            x1, x2 = o.x, o.x + o.width
            c.create_rectangle(x1 + 8, ground_y - o.height, x2 - 8, ground_y, outline="", fill=_SPIKE)
            if o.style in (0, 2):
                c.create_rectangle(x1, ground_y - o.height + 25, x1 + 8, ground_y - o.height + 50, outline="", fill=_SPIKE)
            if o.style in (1, 2):
                c.create_rectangle(x2 - 8, ground_y - o.height + 35, x2, ground_y - o.height + 60, outline="", fill=_SPIKE)

    def _draw_player(self, p: Player) -> None:
        c = self.canvas
        top = p.y - p.height
        c.create_rectangle(p.x + 12, top + 15, p.x + p.width - 12, p.y, outline="", fill=_PLAYER)
        # Eye
        c.create_oval(p.x + p.width - 30, top + 22, p.x + p.width - 20, top + 32, outline="", fill="#ffffff")

    def _draw_hud(self, session: GameSession, state: GameState) -> None:
        c = self.canvas
        cfg = session.world.config
        hud = f"SCORE {state.score:05d}   HI {session.high_score:05d}   LEVEL {state.level:02d}"
        c.create_text(10, 10, anchor="nw", text=hud, fill="#ffffff", font=("TkDefaultFont", 14, "bold"))

        # Speed bar
        pct = min(1.0, state.speed / cfg.max_speed)
        c.create_rectangle(10, 36, 210, 44, outline="#ffffff")
        c.create_rectangle(10, 36, 10 + 200 * pct, 44, outline="", fill="#4ade80")

        if session.phase is GamePhase.MENU:
            self._banner("DASH RUNNER", "Press Enter or click to start")
        elif session.phase is GamePhase.GAME_OVER:
            self._banner(
                "GAME OVER",
                f"Score {state.score:05d}  Level {state.level:02d}  -  press Enter or click to restart",
            )

    def _banner(self, title: str, subtitle: str) -> None:
        c = self.canvas
        c.create_text(self._w / 2, self._h / 2 - 20, text=title, fill="#ffffff", font=("TkDefaultFont", 32, "bold"))
        c.create_text(self._w / 2, self._h / 2 + 20, text=subtitle, fill="#ffffff", font=("TkDefaultFont", 14))
