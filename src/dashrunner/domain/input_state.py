from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    jump_pressed: bool = False  # true only on the frame the jump was requested
    crouch_held: bool = False   # level-triggered, true while the crouch key is down
