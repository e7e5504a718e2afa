"""Tests for target placement strategies."""

import numpy as np
import pytest

from pixel_snake.grid import Grid
from pixel_snake.snake import Cell
from pixel_snake.target import (
    BoardFullError,
    DirectSampling,
    RejectionSampling,
    TargetPlacer,
)


def _random_grid(rng, width=10, height=10, max_density=0.9):
    grid = Grid(width=width, height=height)
    density = rng.uniform(0.0, max_density)
    for i in np.flatnonzero(rng.random(grid.size) < density).tolist():
        grid.set_occupied(grid.cell_at(i), True)
    if grid.is_full():
        grid.set_occupied(Cell(0, 0), False)
    return grid


def _fill(grid, except_cells=()):
    for x in range(grid.width):
        for y in range(grid.height):
            if Cell(x, y) not in except_cells:
                grid.set_occupied(Cell(x, y), True)


@pytest.mark.parametrize("strategy", [RejectionSampling(), DirectSampling()])
class TestStrategies:
    def test_never_returns_occupied_cell(self, strategy):
        rng = np.random.default_rng(1234)
        for _ in range(1000):
            grid = _random_grid(rng)
            cell = strategy.choose(grid, rng)
            assert grid.in_bounds(cell)
            assert not grid.occupied(cell)

    def test_single_free_cell(self, strategy):
        grid = Grid(width=4, height=4)
        _fill(grid, except_cells=(Cell(2, 3),))
        rng = np.random.default_rng(0)
        for _ in range(20):
            assert strategy.choose(grid, rng) == Cell(2, 3)

    def test_full_board_raises(self, strategy):
        grid = Grid(width=3, height=3)
        _fill(grid)
        with pytest.raises(BoardFullError):
            strategy.choose(grid, np.random.default_rng(0))

    def test_reaches_every_free_cell(self, strategy):
        grid = Grid(width=3, height=3)
        free = (Cell(0, 0), Cell(1, 2), Cell(2, 1))
        _fill(grid, except_cells=free)
        rng = np.random.default_rng(7)
        seen = {strategy.choose(grid, rng) for _ in range(200)}
        assert seen == set(free)


class TestTargetPlacer:
    def test_strategy_selected_by_threshold(self):
        placer = TargetPlacer(threshold=670)
        assert isinstance(placer.strategy_for(0), RejectionSampling)
        assert isinstance(placer.strategy_for(669), RejectionSampling)
        assert isinstance(placer.strategy_for(670), DirectSampling)
        assert isinstance(placer.strategy_for(10_000), DirectSampling)

    def test_invalid_threshold(self):
        with pytest.raises(ValueError, match=">= 0"):
            TargetPlacer(threshold=-1)

    def test_place_is_deterministic_for_seed(self):
        grid = Grid(width=10, height=10)
        a = TargetPlacer(rng=np.random.default_rng(42))
        b = TargetPlacer(rng=np.random.default_rng(42))
        assert [a.place(grid, 0) for _ in range(5)] == [b.place(grid, 0) for _ in range(5)]

    def test_place_dense_avoids_chain(self):
        grid = Grid(width=5, height=5)
        _fill(grid, except_cells=(Cell(4, 4), Cell(0, 4)))
        placer = TargetPlacer(threshold=0, rng=np.random.default_rng(3))
        for _ in range(50):
            assert placer.place(grid, 1) in (Cell(4, 4), Cell(0, 4))
