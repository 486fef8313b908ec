"""Maps keyboard, swipe and click events onto engine commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from snake_sim.engine import Phase
from snake_sim.snake import Direction

if TYPE_CHECKING:
    from snake_sim.engine import GameEngine

TOGGLE_PAUSE = "toggle_pause"
RESTART = "restart"

# Key names are compared lower-cased.
KEY_BINDINGS: dict[str, Direction | str] = {
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
    " ": TOGGLE_PAUSE,
    "enter": RESTART,
}

# Minimum swipe distance in pixels along either axis.
SWIPE_THRESHOLD = 24.0


def swipe_direction(
    dx: float, dy: float, threshold: float = SWIPE_THRESHOLD,
) -> Direction | None:
    """Return the heading of a swipe, or ``None`` if it is too short."""
    if abs(dx) < threshold and abs(dy) < threshold:
        return None
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


class InputController:
    """Translates discrete host events into engine method calls."""

    def __init__(
        self,
        engine: GameEngine,
        swipe_threshold: float = SWIPE_THRESHOLD,
    ) -> None:
        self.engine = engine
        self.swipe_threshold = swipe_threshold

    def handle_key(self, key: str) -> bool:
        """Dispatch a key press. Returns False for unbound keys."""
        action = KEY_BINDINGS.get(key.lower())
        if action is None:
            return False
        if isinstance(action, Direction):
            self.engine.set_heading(action)
        elif action == TOGGLE_PAUSE:
            self.engine.toggle_pause()
        else:
            self.engine.restart()
        return True

    def handle_swipe(self, dx: float, dy: float) -> bool:
        """Dispatch a swipe gesture. Returns False if it was too short."""
        direction = swipe_direction(dx, dy, self.swipe_threshold)
        if direction is None:
            return False
        self.engine.set_heading(direction)
        return True

    def handle_click(self) -> None:
        """A click on the board starts or resumes a game that is waiting."""
        if self.engine.phase in (Phase.IDLE, Phase.PAUSED):
            self.engine.toggle_pause()
