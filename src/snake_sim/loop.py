"""Fixed-timestep loop driver decoupling tick rate from frame rate."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from snake_sim.engine import GameEngine, Phase, Snapshot

logger = logging.getLogger(__name__)

# Lower bound on the effective tick rate, so one tick never spans
# more than half a second.
MIN_STEPS_PER_SECOND = 2.0


class LoopDriver:
    """Turns frame timestamps into zero or more engine ticks.

    Each call to :meth:`frame` adds the elapsed wall-clock time to an
    accumulator and runs :meth:`GameEngine.advance` once per whole step
    duration held in it, then renders exactly once. Timestamps are in
    milliseconds.
    """

    def __init__(
        self,
        engine: GameEngine,
        render: Callable[[Snapshot], None] | None = None,
        steps_per_second: float | None = None,
        start_time: float = 0.0,
    ) -> None:
        self.engine = engine
        self.render = render
        self.steps_per_second = (
            steps_per_second
            if steps_per_second is not None
            else engine.config.steps_per_second
        )
        self.last_time = start_time
        self.accumulator = 0.0
        self.frames = 0

    @property
    def steps_per_second(self) -> float:
        return self._steps_per_second

    @steps_per_second.setter
    def steps_per_second(self, value: float) -> None:
        if value <= 0:
            raise ValueError("steps_per_second must be positive.")
        self._steps_per_second = value

    @property
    def step_duration_ms(self) -> float:
        return 1000.0 / max(MIN_STEPS_PER_SECOND, self._steps_per_second)

    def resync(self, now: float) -> None:
        """Drop any accumulated time and restart timing from *now*."""
        self.last_time = now
        self.accumulator = 0.0

    def frame(self, now: float) -> int:
        """Process one display frame at timestamp *now*.

        Returns the number of ticks executed, which may be zero.
        """
        dt = now - self.last_time
        self.last_time = now
        self.accumulator += dt

        step = self.step_duration_ms
        ticks = 0
        while self.engine.phase == Phase.RUNNING and self.accumulator >= step:
            self.engine.advance()
            self.accumulator -= step
            ticks += 1

        if self.render is not None:
            self.render(self.engine.snapshot())
        self.frames += 1
        return ticks

    async def run(
        self,
        clock: Callable[[], float] = time.monotonic,
        frame_interval: float = 1 / 60,
    ) -> None:
        """Schedule frames forever; stops only when the task is cancelled.

        *clock* returns seconds; frames keep running while paused or after
        the game is over so the display stays current.
        """
        self.resync(clock() * 1000.0)
        try:
            while True:
                await asyncio.sleep(frame_interval)
                self.frame(clock() * 1000.0)
        except asyncio.CancelledError:
            logger.info("Loop cancelled after %d frames.", self.frames)
            raise
