"""Blocking fixed-cadence driver for a game session."""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable, Iterable
from typing import Protocol

from grid_snake.engine import Frame, GameLoop, StatusUpdate
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)


class InputSignal(enum.Enum):
    """Player controls: four directions and quit."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"

    @property
    def direction(self) -> Direction:
        """The snake direction for this signal (``NONE`` for quit)."""
        return _SIGNAL_DIRECTIONS.get(self, Direction.NONE)


_SIGNAL_DIRECTIONS: dict[InputSignal, Direction] = {
    InputSignal.UP: Direction.UP,
    InputSignal.DOWN: Direction.DOWN,
    InputSignal.LEFT: Direction.LEFT,
    InputSignal.RIGHT: Direction.RIGHT,
}


class InputSource(Protocol):
    """Non-blocking source of player input."""

    def poll(self) -> Iterable[InputSignal]: ...


class Renderer(Protocol):
    """Draws frames and shows the score line."""

    def show_status(self, status: StatusUpdate) -> None: ...

    def draw(self, frame: Frame) -> None: ...

    def close(self) -> None: ...


def drain_input(loop: GameLoop, source: InputSource) -> bool:
    """Feed every pending signal to *loop*.

    Returns ``False`` if a quit signal was seen; signals after it are
    dropped.
    """
    for signal in source.poll():
        if signal is InputSignal.QUIT:
            return False
        loop.handle_input(signal.direction)
    return True


def run_session(
    loop: GameLoop,
    source: InputSource,
    renderer: Renderer,
    tick_seconds: float,
    sleep: Callable[[float], None] = time.sleep,
) -> Frame:
    """Run *loop* until game over or quit and return the final frame.

    Each iteration polls input, performs one tick, hands the frame to
    the renderer and then blocks for *tick_seconds*. The renderer is
    closed on every exit path.
    """
    if tick_seconds < 0:
        raise ValueError("tick_seconds must be non-negative.")

    try:
        renderer.show_status(loop.status())
        renderer.draw(loop.frame())
        while not loop.is_over:
            if not drain_input(loop, source):
                loop.quit()
                break

            frame = loop.tick()
            if frame.status is not None:
                renderer.show_status(frame.status)
            renderer.draw(frame)
            if frame.game_over:
                break
            sleep(tick_seconds)
    finally:
        renderer.close()

    final = loop.frame()
    logger.info(
        "Session ended after %d ticks: score %d, high score %d.",
        final.tick, final.score, final.high_score,
    )
    return final
