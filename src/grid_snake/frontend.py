"""pygame window, renderer and keyboard input."""

from __future__ import annotations

import logging

import pygame

from grid_snake.engine import Frame, StatusUpdate
from grid_snake.grid import Grid
from grid_snake.runner import InputSignal

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Snake Game"

BACKGROUND = (0, 0, 0)
FOOD_COLOR = (255, 0, 0)
BODY_COLOR = (0, 255, 0)
HEAD_COLOR = (0, 160, 0)

_KEY_SIGNALS: dict[int, InputSignal] = {
    pygame.K_UP: InputSignal.UP,
    pygame.K_DOWN: InputSignal.DOWN,
    pygame.K_LEFT: InputSignal.LEFT,
    pygame.K_RIGHT: InputSignal.RIGHT,
}


class PygameInput:
    """Drains the pygame event queue into input signals."""

    def poll(self) -> list[InputSignal]:
        signals: list[InputSignal] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                signals.append(InputSignal.QUIT)
            elif event.type == pygame.KEYDOWN and event.key in _KEY_SIGNALS:
                signals.append(_KEY_SIGNALS[event.key])
        return signals


class PygameRenderer:
    """Draws frames into a square pygame window.

    Each cell is a filled ``cell_size`` square; the score line goes in
    the window title.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        pygame.init()
        self.screen = pygame.display.set_mode((grid.pixel_size, grid.pixel_size))
        pygame.display.set_caption(WINDOW_TITLE)
        logger.debug("Opened %dx%d window.", grid.pixel_size, grid.pixel_size)

    def show_status(self, status: StatusUpdate) -> None:
        pygame.display.set_caption(f"{WINDOW_TITLE} - {status.text}")

    def draw(self, frame: Frame) -> None:
        self.screen.fill(BACKGROUND)
        pygame.draw.rect(self.screen, FOOD_COLOR, self.grid.to_pixels(frame.food))
        for segment in frame.body:
            pygame.draw.rect(self.screen, BODY_COLOR, self.grid.to_pixels(segment))
        pygame.draw.rect(self.screen, HEAD_COLOR, self.grid.to_pixels(frame.head))
        pygame.display.flip()

    def close(self) -> None:
        pygame.quit()
