"""Plain-text renderer for game snapshots."""

from __future__ import annotations

import sys
from typing import TextIO

from snake_sim.engine import Snapshot

HEAD = "@"
BODY = "o"
FOOD = "*"
EMPTY = "."


def render_text(snapshot: Snapshot) -> str:
    """Draw a snapshot as rows of characters plus a status line."""
    rows = [[EMPTY] * snapshot.columns for _ in range(snapshot.rows)]
    fx, fy = snapshot.food
    rows[fy][fx] = FOOD
    for i, (x, y) in enumerate(snapshot.snake):
        rows[y][x] = HEAD if i == 0 else BODY
    lines = ["".join(row) for row in rows]
    lines.append(f"score={snapshot.score} phase={snapshot.phase.value}")
    return "\n".join(lines)


class TextRenderer:
    """Writes one text frame per call to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.frames = 0

    def __call__(self, snapshot: Snapshot) -> None:
        self.stream.write(render_text(snapshot) + "\n\n")
        self.frames += 1
