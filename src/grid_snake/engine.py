"""Fixed-step game loop composing grid, snake, food and score logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from grid_snake.config import GameConfig
from grid_snake.food import Food
from grid_snake.grid import Grid, GridPosition
from grid_snake.score_store import InMemoryScoreStore, ScoreStore
from grid_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameState(str, enum.Enum):
    """Lifecycle states for a game session."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class StatusUpdate:
    """Score line shown by the renderer, e.g. in the window title."""

    score: int
    high_score: int

    @property
    def text(self) -> str:
        return f"Score: {self.score} High Score: {self.high_score}"


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs to draw one tick."""

    tick: int
    state: GameState
    snake: tuple[GridPosition, ...]
    food: GridPosition
    score: int
    high_score: int
    status: StatusUpdate | None = None

    @property
    def head(self) -> GridPosition:
        return self.snake[0]

    @property
    def body(self) -> tuple[GridPosition, ...]:
        return self.snake[1:]

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def to_dict(self) -> dict:
        """Return the frame as a JSON-serializable dict."""
        return {
            "tick": self.tick,
            "state": self.state.value,
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food),
            "score": self.score,
            "high_score": self.high_score,
            "status": self.status.text if self.status is not None else None,
        }


class GameLoop:
    """Single-snake, tick-based game session.

    The loop owns the grid, snake and food and talks to a
    :class:`~grid_snake.score_store.ScoreStore` for the high score. Each
    call to :meth:`tick` advances the simulation by exactly one cell and
    returns the resulting :class:`Frame`; wall-clock pacing is left to
    the caller.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: ScoreStore | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.store = store if store is not None else InMemoryScoreStore()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.grid = Grid(self.config.grid_size, self.config.cell_size)
        self.snake = Snake(*self.config.start)
        self.food = Food()
        self._place_food()

        self.high_score = self.store.load()
        self.ticks = 0
        self._game_over = False
        self._last_frame = self._make_frame(status=self.status())
        logger.info("Session started with high score %d.", self.high_score)

    @property
    def state(self) -> GameState:
        if self._game_over:
            return GameState.GAME_OVER
        if self.snake.started:
            return GameState.RUNNING
        return GameState.NOT_STARTED

    @property
    def score(self) -> int:
        return self.snake.score

    @property
    def is_over(self) -> bool:
        return self._game_over

    def status(self) -> StatusUpdate:
        """Return the current score line."""
        return StatusUpdate(self.snake.score, self.high_score)

    def frame(self) -> Frame:
        """Return the most recently emitted frame."""
        return self._last_frame

    def handle_input(self, direction: Direction) -> bool:
        """Forward a directional input to the snake.

        Returns ``True`` if the snake accepted it. Input after game over
        is ignored.
        """
        if self._game_over:
            return False
        return self.snake.set_direction(direction)

    def tick(self) -> Frame:
        """Advance the game by one step and return the new frame."""
        if self._game_over:
            return self._last_frame

        self.ticks += 1
        if self.state is GameState.NOT_STARTED:
            self._last_frame = self._make_frame()
            return self._last_frame

        vacated = self.snake.advance()

        if self.snake.check_collision(self.grid.size):
            self._finish()
            logger.info(
                "Snake died at tick %d with score %d.", self.ticks, self.snake.score,
            )
            self._last_frame = self._make_frame()
            return self._last_frame

        status = None
        if self.snake.head == self.food.position:
            status = self._eat(vacated)

        self._last_frame = self._make_frame(status=status)
        return self._last_frame

    def quit(self) -> Frame:
        """End the session at the player's request."""
        if not self._game_over:
            self._finish()
            logger.info(
                "Session quit at tick %d with score %d.", self.ticks, self.snake.score,
            )
            self._last_frame = self._make_frame()
        return self._last_frame

    def _eat(self, vacated: GridPosition | None) -> StatusUpdate:
        self.snake.score += 1
        self.snake.grow(vacated)
        if self.snake.score > self.high_score:
            self.high_score = self.snake.score
            self.store.save(self.high_score)
        self._place_food()
        return self.status()

    def _place_food(self) -> None:
        occupied = self.snake.segments if self.config.food_avoids_snake else ()
        self.food.relocate(self.grid, self.rng, occupied)

    def _finish(self) -> None:
        """Mark the session over and save the final score."""
        self._game_over = True
        self.store.save(self.snake.score)

    def _make_frame(self, status: StatusUpdate | None = None) -> Frame:
        return Frame(
            tick=self.ticks,
            state=self.state,
            snake=tuple(self.snake.segments),
            food=self.food.position,
            score=self.snake.score,
            high_score=self.high_score,
            status=status,
        )
