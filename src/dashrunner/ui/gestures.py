from __future__ import annotations

import math
from enum import Enum

SWIPE_MAX_MS = 300
SWIPE_MIN_PX = 30
TAP_MAX_MS = 200
TAP_MAX_PX = 30
DRAG_CROUCH_PX = 40  # downward drag that holds a crouch


class Gesture(Enum):
    NONE = "none"
    JUMP = "jump"
    DUCK = "duck"  # quick downward swipe: a short crouch


def classify_release(dx: float, dy: float, elapsed_ms: float) -> Gesture:
    """Classify a pointer press/release pair; dy grows downward."""
    distance = math.hypot(dx, dy)

    if elapsed_ms < SWIPE_MAX_MS and distance > SWIPE_MIN_PX and abs(dx) < abs(dy):
        if dy < -SWIPE_MIN_PX:
            return Gesture.JUMP
        if dy > SWIPE_MIN_PX:
            return Gesture.DUCK

    if elapsed_ms < TAP_MAX_MS and distance < TAP_MAX_PX:
        return Gesture.JUMP
    return Gesture.NONE


def drag_holds_crouch(dy: float) -> bool:
    return dy > DRAG_CROUCH_PX
