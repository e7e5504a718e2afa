"""Target placement strategies.

Two interchangeable algorithms choose the next target cell. Rejection
sampling draws random cells until one is free; it is expected O(1) while
the board is sparse but degrades as the chain fills the board. Direct
sampling scans the grid for free cells and picks one of them; it costs
O(board size) per placement but always terminates. :class:`TargetPlacer`
switches from the first to the second once the score reaches a threshold.
"""

from __future__ import annotations

import abc
import logging

import numpy as np

from pixel_snake.grid import Grid
from pixel_snake.snake import Cell

logger = logging.getLogger(__name__)

DEFAULT_DENSE_THRESHOLD = 670


class BoardFullError(RuntimeError):
    """Raised when no unoccupied cell is left for a target."""


class PlacementStrategy(abc.ABC):
    """Chooses an unoccupied cell uniformly at random."""

    name: str = "abstract"

    @abc.abstractmethod
    def choose(self, grid: Grid, rng: np.random.Generator) -> Cell:
        """Return a cell that *grid* reports as unoccupied."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RejectionSampling(PlacementStrategy):
    """Draw uniformly over the board and keep the first free cell."""

    name = "rejection"

    def choose(self, grid: Grid, rng: np.random.Generator) -> Cell:
        if grid.is_full():
            raise BoardFullError("No free cell left for the target.")
        attempts = 0
        while True:
            attempts += 1
            cell = Cell(
                int(rng.integers(0, grid.width)),
                int(rng.integers(0, grid.height)),
            )
            if not grid.occupied(cell):
                if attempts > 1:
                    logger.debug("Target found after %d draws.", attempts)
                return cell


class DirectSampling(PlacementStrategy):
    """Scan the board for free cells and pick one of them."""

    name = "direct"

    def choose(self, grid: Grid, rng: np.random.Generator) -> Cell:
        free = np.flatnonzero(~grid.cells)
        if free.size == 0:
            raise BoardFullError("No free cell left for the target.")
        return grid.cell_at(free[rng.integers(0, free.size)])


class TargetPlacer:
    """Selects a placement strategy by score and places targets.

    Uses a seeded NumPy RNG for reproducible placement.
    """

    def __init__(
        self,
        threshold: int = DEFAULT_DENSE_THRESHOLD,
        rng: np.random.Generator | None = None,
        sparse: PlacementStrategy | None = None,
        dense: PlacementStrategy | None = None,
    ) -> None:
        if threshold < 0:
            raise ValueError("threshold must be >= 0.")
        self.threshold = threshold
        self.rng = rng if rng is not None else np.random.default_rng()
        self.sparse = sparse if sparse is not None else RejectionSampling()
        self.dense = dense if dense is not None else DirectSampling()

    def strategy_for(self, score: int) -> PlacementStrategy:
        return self.sparse if score < self.threshold else self.dense

    def place(self, grid: Grid, score: int) -> Cell:
        """Return a new target cell for the current board and score.

        Raises :class:`BoardFullError` when the chain fills the board.
        """
        strategy = self.strategy_for(score)
        cell = strategy.choose(grid, self.rng)
        logger.debug("Placed target at %s using %s sampling.", cell, strategy.name)
        return cell
