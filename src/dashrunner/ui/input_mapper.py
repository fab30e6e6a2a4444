from __future__ import annotations
import tkinter as tk
from dashrunner.app.game_session import GameSession
from dashrunner.ui.gestures import Gesture, classify_release, drag_holds_crouch

DUCK_MS = 200


class TkInputMapper:
    """Turns keyboard and pointer events into session intents.

    Jump keys only ever jump; a run is started with Return or a pointer press.
    """

    def __init__(self, root: tk.Tk, canvas: tk.Canvas, session: GameSession) -> None:
        self._root = root
        self._session = session
        self._crouch_down = False

        # Pointer press origin; None when the press started a run
        self._press: tuple[float, float, int] | None = None

        for key in ("<KeyPress-space>", "<KeyPress-Up>"):
            root.bind(key, self._on_jump_key)
        root.bind("<KeyPress-Down>", self._on_crouch_down)
        root.bind("<KeyRelease-Down>", self._on_crouch_up)
        root.bind("<KeyPress-Return>", self._on_start_key)
        canvas.bind("<ButtonPress-1>", self._on_press)
        canvas.bind("<B1-Motion>", self._on_drag)
        canvas.bind("<ButtonRelease-1>", self._on_release)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_jump_key(self, _evt: tk.Event) -> None:
        self._session.request_jump()

    def _on_crouch_down(self, _evt: tk.Event) -> None:
        # Key auto-repeat sends repeated presses; only the first one counts.
        if not self._crouch_down:
            self._crouch_down = True
            self._session.set_crouch(True)

    def _on_crouch_up(self, _evt: tk.Event) -> None:
        self._crouch_down = False
        self._session.set_crouch(False)

    def _on_start_key(self, _evt: tk.Event) -> None:
        self._session.request_start()

    # ---------- Pointer ----------

    def _on_press(self, evt: tk.Event) -> None:
        if not self._session.playing:
            self._press = None
            self._session.request_start()
            return
        self._press = (evt.x, evt.y, evt.time)

    def _on_drag(self, evt: tk.Event) -> None:
        if self._press is None or not self._session.playing:
            return
        self._session.set_crouch(drag_holds_crouch(evt.y - self._press[1]))

    def _on_release(self, evt: tk.Event) -> None:
        press, self._press = self._press, None
        if press is None or not self._session.playing:
            return

        x0, y0, t0 = press
        gesture = classify_release(evt.x - x0, evt.y - y0, evt.time - t0)
        if gesture is Gesture.DUCK:
            self._session.set_crouch(True)
            self._root.after(DUCK_MS, lambda: self._session.set_crouch(self._crouch_down))
            return
        if gesture is Gesture.JUMP:
            self._session.request_jump()
        # A held Down key keeps its crouch
        self._session.set_crouch(self._crouch_down)
