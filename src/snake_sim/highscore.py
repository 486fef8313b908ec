"""High score tracking as an engine score sink."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class HighScoreTracker:
    """Keeps the best score seen so far, optionally persisted to a file.

    The file holds a single integer. A missing or unreadable file counts
    as a best score of zero.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self.best = self._load()
        self.current = 0

    def _load(self) -> int:
        if self.path is None:
            return 0
        try:
            text = self.path.read_text(encoding="utf-8")
            return max(0, int(text.strip() or "0"))
        except (OSError, ValueError):
            return 0

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(str(self.best), encoding="utf-8")

    def on_score_changed(self, new_score: int) -> None:
        """Record a score change, persisting any new maximum."""
        self.current = new_score
        if new_score > self.best:
            self.best = new_score
            self._save()
            logger.info("New high score: %d", new_score)
