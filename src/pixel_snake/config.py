"""Session configuration for the snake simulation."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from pixel_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board geometry, pacing, and persistence settings for one session.

    Supports JSON serialization so a session can be reproduced.
    """

    # Board
    width: int = 40
    height: int = 25
    cell_size: int = 10
    start_x: int = 1
    start_y: int = 12
    start_direction: Direction = Direction.RIGHT
    step: int = 1

    # Pacing
    initial_fps: float = 4.0
    fps_increment: float = 0.5
    poll_interval: float = 1 / 60

    # Target placement
    dense_threshold: int = 670
    seed: int | None = None

    # Scores
    score_capacity: int = 5
    score_key: str = "snakeScore"
    restart_delay: float = 1.0

    # Colours
    head_color: str = "#000000"
    target_color: str = "#ff0000"

    def __post_init__(self) -> None:
        if self.width < 2 or self.height < 2:
            raise ValueError("width and height must each be at least 2.")
        if not (0 <= self.start_x < self.width and 0 <= self.start_y < self.height):
            raise ValueError("start cell must lie inside the board.")
        if self.cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        if self.step != 1:
            raise ValueError("step must be 1; the chain moves one cell per tick.")
        if self.initial_fps <= 0:
            raise ValueError("initial_fps must be positive.")
        if self.fps_increment < 0:
            raise ValueError("fps_increment must be >= 0.")
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive.")
        if self.dense_threshold < 0:
            raise ValueError("dense_threshold must be >= 0.")
        if self.score_capacity < 1:
            raise ValueError("score_capacity must be at least 1.")
        if self.restart_delay < 0:
            raise ValueError("restart_delay must be >= 0.")

    @property
    def board_size(self) -> int:
        return self.width * self.height

    def to_dict(self) -> dict:
        """Serialize to a plain dict (enums become their names)."""
        d = asdict(self)
        d["start_direction"] = self.start_direction.name
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        data = dict(raw)
        if "start_direction" in data:
            data["start_direction"] = Direction[data["start_direction"]]
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
