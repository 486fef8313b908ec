"""Game configuration set once at engine construction."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

FOOD_PLACEMENT_STRATEGIES = ("sample", "exhaustive")

_INT_FIELDS = (
    "columns", "rows", "initial_length", "food_retry_limit",
    "start_x", "start_y", "seed",
)
_OPTIONAL_FIELDS = ("start_x", "start_y", "seed")


@dataclass(frozen=True)
class GameConfig:
    """Grid size, starting snake and pacing for a single game.

    Supports JSON serialization so a setup can be shared between runs.
    """

    columns: int = 28
    rows: int = 20
    initial_length: int = 4
    steps_per_second: float = 10.0

    # Head start cell; ``None`` picks one third across, half way down.
    start_x: int | None = None
    start_y: int | None = None

    # Food placement
    food_retry_limit: int = 500
    food_placement: str = "sample"

    seed: int | None = None

    def __post_init__(self) -> None:
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if value is None and name in _OPTIONAL_FIELDS:
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}.")
        if (
            not isinstance(self.steps_per_second, (int, float))
            or isinstance(self.steps_per_second, bool)
        ):
            raise ValueError("steps_per_second must be a number.")

        if self.columns < 1 or self.rows < 1:
            raise ValueError("columns and rows must be at least 1.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if self.steps_per_second <= 0:
            raise ValueError("steps_per_second must be positive.")
        if self.food_retry_limit < 1:
            raise ValueError("food_retry_limit must be at least 1.")
        if self.food_placement not in FOOD_PLACEMENT_STRATEGIES:
            raise ValueError(
                f"food_placement must be one of {FOOD_PLACEMENT_STRATEGIES}.",
            )

        x, y = self.effective_start
        if not (0 <= x < self.columns and 0 <= y < self.rows):
            raise ValueError("Start cell lies outside the grid.")
        # The body trails to the left of the head.
        if x - (self.initial_length - 1) < 0:
            raise ValueError(
                "initial_length does not fit left of the start cell.",
            )

    @property
    def effective_start(self) -> tuple[int, int]:
        """Return the head start cell as ``(x, y)``."""
        x = self.columns // 3 if self.start_x is None else self.start_x
        y = self.rows // 2 if self.start_y is None else self.start_y
        return x, y

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
