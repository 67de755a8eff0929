"""High-score persistence."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_HIGHSCORE_PATH = "highscore.txt"


class ScoreStore(Protocol):
    """Load and save a single non-negative high score."""

    def load(self) -> int: ...

    def save(self, candidate: int) -> None: ...


class FileScoreStore:
    """Stores the high score as a plain integer in a text file.

    A missing, unreadable or corrupt file reads as 0. Write failures are
    logged and otherwise ignored so a running game is never interrupted.
    """

    def __init__(self, path: str | Path = DEFAULT_HIGHSCORE_PATH) -> None:
        self.path = Path(path)

    def load(self) -> int:
        """Return the stored high score, or 0 if there is none."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except OSError:
            logger.warning("Could not read high score from %s.", self.path)
            return 0
        try:
            value = int(text.strip())
        except ValueError:
            logger.warning("Ignoring corrupt high score file %s.", self.path)
            return 0
        return max(value, 0)

    def save(self, candidate: int) -> None:
        """Persist *candidate* if it beats the stored high score."""
        if candidate <= self.load():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(candidate), encoding="utf-8")
        except OSError:
            logger.warning(
                "Failed to save high score %d to %s.", candidate, self.path,
            )
            return
        logger.info("High score %d saved to %s.", candidate, self.path)


class InMemoryScoreStore:
    """Score store without any I/O."""

    def __init__(self, initial: int = 0) -> None:
        self.value = max(initial, 0)

    def load(self) -> int:
        return self.value

    def save(self, candidate: int) -> None:
        if candidate > self.value:
            self.value = candidate
