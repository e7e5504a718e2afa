"""Contracts for the collaborators a session talks to.

The core only emits draw, score, and game-over events. Anything that
implements these protocols (a canvas, a terminal, a test recorder) can
be plugged into :class:`~pixel_snake.session.GameSession`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pixel_snake.scores import ScoreRecord
    from pixel_snake.snake import Cell

logger = logging.getLogger(__name__)


class RenderSink(Protocol):
    def clear(self) -> None: ...

    def draw(self, cell: Cell, size: int, color: str) -> None: ...

    def erase(self, cell: Cell, size: int) -> None: ...


class ScoreDisplay(Protocol):
    def show_score(self, score: int) -> None: ...

    def show_top_scores(self, records: Sequence[ScoreRecord]) -> None: ...

    def show_game_over(self) -> None: ...


class NullRenderSink:
    """Discards all drawing calls."""

    def clear(self) -> None:
        pass

    def draw(self, cell: Cell, size: int, color: str) -> None:
        pass

    def erase(self, cell: Cell, size: int) -> None:
        pass


class LogScoreDisplay:
    """Reports score events through the ``logging`` module."""

    def show_score(self, score: int) -> None:
        logger.debug("Score: %d", score)

    def show_top_scores(self, records: Sequence[ScoreRecord]) -> None:
        for rank, record in enumerate(records, start=1):
            logger.info("#%d  %s  %d", rank, record.date, record.score)

    def show_game_over(self) -> None:
        logger.info("Game over.")
