"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Protocol

import numpy as np

from snake_sim.config import GameConfig
from snake_sim.food import FoodPlacer
from snake_sim.grid import CellType, Grid
from snake_sim.snake import Direction, Snake

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    """Lifecycle state of a game."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class ScoreSink(Protocol):
    """Receives every score change, e.g. to persist a high score."""

    def on_score_changed(self, new_score: int) -> None: ...


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game handed to renderers once per frame."""

    snake: tuple[tuple[int, int], ...]
    food: tuple[int, int]
    phase: Phase
    score: int
    direction: Direction
    columns: int
    rows: int
    tick: int

    @property
    def head(self) -> tuple[int, int]:
        return self.snake[0]

    def to_dict(self) -> dict:
        """Return a JSON-serializable dictionary."""
        return {
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food),
            "phase": self.phase.value,
            "score": self.score,
            "direction": list(self.direction.value),
            "columns": self.columns,
            "rows": self.rows,
            "tick": self.tick,
        }


class GameEngine:
    """Single-snake game engine driven one tick at a time.

    The engine owns the grid, snake, food, score and phase. Heading input
    goes through two slots: :meth:`set_direction` only writes the pending
    slot, and :meth:`advance` commits it to the current slot at the start
    of each tick. Reversal checks compare against the current slot, so
    several inputs between two ticks collapse to the last valid one.

    Invalid input and calls in the wrong phase are ignored rather than
    raised; the only failure-like outcome is :attr:`Phase.GAME_OVER`.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        score_sink: ScoreSink | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.score_sink = score_sink
        self.rng = np.random.default_rng(self.config.seed)
        self.grid = Grid(self.config.columns, self.config.rows)
        self.food_placer = FoodPlacer(
            self.grid,
            rng=self.rng,
            retry_limit=self.config.food_retry_limit,
            strategy=self.config.food_placement,
        )
        self.reset()

    # --- read-only state ---

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def score(self) -> int:
        return self._score

    @property
    def food(self) -> tuple[int, int]:
        return self._food

    @property
    def body(self) -> tuple[tuple[int, int], ...]:
        """Return a copy of the snake body, head first."""
        return tuple(self._snake.body)

    @property
    def current_direction(self) -> Direction:
        return self._current_direction

    @property
    def pending_direction(self) -> Direction:
        return self._pending_direction

    @property
    def tick(self) -> int:
        return self._tick

    def snapshot(self) -> Snapshot:
        """Return a read-only snapshot of the current state."""
        return Snapshot(
            snake=self.body,
            food=self._food,
            phase=self._phase,
            score=self._score,
            direction=self._current_direction,
            columns=self.grid.columns,
            rows=self.grid.rows,
            tick=self._tick,
        )

    # --- lifecycle ---

    def reset(self) -> None:
        """Start a fresh game and wait in the idle phase."""
        start_x, start_y = self.config.effective_start
        self._snake = Snake(
            start_x, start_y, Direction.RIGHT, self.config.initial_length,
        )
        self._current_direction = Direction.RIGHT
        self._pending_direction = Direction.RIGHT
        self._tick = 0
        self._phase = Phase.IDLE

        self.grid.clear()
        for x, y in self._snake.body:
            self.grid.set(x, y, CellType.SNAKE)
        self._food = self.food_placer.place(self._snake)

        self._set_score(0)
        logger.info("Game reset; food at %s.", self._food)

    def restart(self) -> None:
        """Host restart command: a fresh game waiting to be started."""
        self.reset()

    def start(self) -> None:
        """Leave the idle phase and begin ticking."""
        if self._phase == Phase.IDLE:
            self._phase = Phase.RUNNING
            logger.info("Game started.")

    def pause(self) -> None:
        if self._phase == Phase.RUNNING:
            self._phase = Phase.PAUSED

    def resume(self) -> None:
        if self._phase == Phase.PAUSED:
            self._phase = Phase.RUNNING

    def toggle_pause(self) -> None:
        """Host pause/play command; ignored once the game is over."""
        if self._phase == Phase.IDLE:
            self.start()
        elif self._phase == Phase.RUNNING:
            self.pause()
        elif self._phase == Phase.PAUSED:
            self.resume()

    # --- input ---

    def set_direction(self, dx: int, dy: int) -> None:
        """Buffer a heading for the next tick.

        Non-unit vectors and the exact reverse of the current heading are
        silently ignored. Accepted in every phase.
        """
        direction = Direction.from_vector(dx, dy)
        if direction is not None:
            self.set_heading(direction)

    def set_heading(self, direction: Direction) -> None:
        """Buffer a :class:`Direction`, ignoring reversals."""
        if self._current_direction.is_opposite(direction):
            return
        self._pending_direction = direction

    # --- simulation ---

    def advance(self) -> None:
        """Advance the game by one tick; a no-op unless running."""
        if self._phase != Phase.RUNNING:
            return

        self._current_direction = self._pending_direction
        new_x, new_y = self._snake.next_head(self._current_direction)

        if not self.grid.in_bounds(new_x, new_y):
            self._end_game("wall")
            return

        # The tail still counts as occupied even though it may move away.
        if self.grid.get(new_x, new_y) == CellType.SNAKE:
            self._end_game("self")
            return

        new_head = (new_x, new_y)
        self._snake.push_head(new_head)
        self.grid.set(new_x, new_y, CellType.SNAKE)
        self._tick += 1

        if new_head == self._food:
            self._set_score(self._score + 1)
            self._food = self.food_placer.place(self._snake)
        else:
            tail_x, tail_y = self._snake.drop_tail()
            if (tail_x, tail_y) == self._food:
                self.grid.set(tail_x, tail_y, CellType.FOOD)
            else:
                self.grid.set(tail_x, tail_y, CellType.EMPTY)

    def _set_score(self, score: int) -> None:
        self._score = score
        if self.score_sink is not None:
            self.score_sink.on_score_changed(score)

    def _end_game(self, cause: str) -> None:
        self._phase = Phase.GAME_OVER
        logger.info(
            "Game over (%s collision) at tick %d with score %d.",
            cause, self._tick, self._score,
        )
