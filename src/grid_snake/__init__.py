"""Grid Snake — core game engine."""

from grid_snake.config import GameConfig
from grid_snake.engine import Frame, GameLoop, GameState, StatusUpdate
from grid_snake.food import Food
from grid_snake.grid import CELL_SIZE, GRID_SIZE, Grid, GridPosition
from grid_snake.score_store import FileScoreStore, InMemoryScoreStore, ScoreStore
from grid_snake.snake import Direction, Snake

__all__ = [
    "CELL_SIZE",
    "Direction",
    "FileScoreStore",
    "Food",
    "Frame",
    "GRID_SIZE",
    "GameConfig",
    "GameLoop",
    "GameState",
    "Grid",
    "GridPosition",
    "InMemoryScoreStore",
    "ScoreStore",
    "Snake",
    "StatusUpdate",
]
