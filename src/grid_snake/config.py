"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from grid_snake.grid import CELL_SIZE, GRID_SIZE
from grid_snake.score_store import DEFAULT_HIGHSCORE_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Settings for a single game session.

    Defaults reproduce the classic 15×15 board. Supports JSON
    serialization so a session can be replayed with the same seed.
    """

    grid_size: int = GRID_SIZE
    cell_size: int = CELL_SIZE
    tick_ms: int = 170
    start: tuple[int, int] = (7, 7)
    highscore_path: str = DEFAULT_HIGHSCORE_PATH
    seed: int | None = None
    food_avoids_snake: bool = True

    def __post_init__(self) -> None:
        if self.grid_size < 2:
            raise ValueError("grid_size must be at least 2.")
        if self.cell_size < 1:
            raise ValueError("cell_size must be positive.")
        if self.tick_ms < 1:
            raise ValueError("tick_ms must be positive.")
        x, y = self.start
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise ValueError("start must lie on the grid.")

    @property
    def tick_seconds(self) -> float:
        """Delay between ticks in seconds."""
        return self.tick_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        d["start"] = list(self.start)
        return d

    def replace(self, **overrides: object) -> GameConfig:
        """Return a copy with the given fields overridden."""
        d = asdict(self)
        d.update(overrides)
        return self.from_dict(d)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        """Build a config from a plain dict."""
        raw = dict(raw)
        if "start" in raw:
            raw["start"] = tuple(raw["start"])
        return cls(**raw)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
