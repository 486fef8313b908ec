"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snake_sim.grid import CellType

if TYPE_CHECKING:
    from snake_sim.grid import Grid
    from snake_sim.snake import Snake

logger = logging.getLogger(__name__)


class FoodPlacer:
    """Chooses food cells on the grid.

    The ``"sample"`` strategy draws uniformly random cells until one is free
    of the snake, giving up after ``retry_limit`` draws and keeping the last
    draw even if it is occupied. The ``"exhaustive"`` strategy picks
    uniformly among the free cells instead.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        retry_limit: int = 500,
        strategy: str = "sample",
    ) -> None:
        if retry_limit < 1:
            raise ValueError("retry_limit must be at least 1.")
        if strategy not in ("sample", "exhaustive"):
            raise ValueError(f"Unknown food placement strategy: {strategy!r}.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.retry_limit = retry_limit
        self.strategy = strategy

    def place(self, snake: Snake) -> tuple[int, int]:
        """Pick a food cell for the current snake body and paint it."""
        if self.strategy == "exhaustive":
            cell = self._pick_free_cell()
        else:
            cell = self._sample(snake)

        if self.grid.get(*cell) == CellType.EMPTY:
            self.grid.set(cell[0], cell[1], CellType.FOOD)
        return cell

    def _random_cell(self) -> tuple[int, int]:
        x = int(self.rng.integers(self.grid.columns))
        y = int(self.rng.integers(self.grid.rows))
        return x, y

    def _sample(self, snake: Snake) -> tuple[int, int]:
        cell = self._random_cell()
        attempts = 1
        while snake.occupies(*cell):
            if attempts >= self.retry_limit:
                logger.warning(
                    "No free food cell after %d attempts; using occupied %s.",
                    attempts, cell,
                )
                break
            cell = self._random_cell()
            attempts += 1
        return cell

    def _pick_free_cell(self) -> tuple[int, int]:
        free = self.grid.empty_cells()
        if not free:
            logger.warning("No free cells left; placing food on the snake.")
            return self._random_cell()
        return free[int(self.rng.integers(len(free)))]
