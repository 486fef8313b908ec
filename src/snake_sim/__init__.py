"""Snake Sim — fixed-timestep snake simulation engine."""

from snake_sim.config import GameConfig
from snake_sim.controls import InputController
from snake_sim.engine import GameEngine, Phase, ScoreSink, Snapshot
from snake_sim.food import FoodPlacer
from snake_sim.grid import CellType, Grid
from snake_sim.highscore import HighScoreTracker
from snake_sim.loop import LoopDriver
from snake_sim.render import TextRenderer, render_text
from snake_sim.snake import Direction, Snake

__all__ = [
    "CellType",
    "Direction",
    "FoodPlacer",
    "GameConfig",
    "GameEngine",
    "Grid",
    "HighScoreTracker",
    "InputController",
    "LoopDriver",
    "Phase",
    "ScoreSink",
    "Snake",
    "Snapshot",
    "TextRenderer",
    "render_text",
]
