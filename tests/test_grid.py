"""Tests for the Grid module."""

import numpy as np
import pytest

from pixel_snake.grid import Grid
from pixel_snake.snake import Cell


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.width == 40
        assert grid.height == 25
        assert grid.size == 1000

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 2"):
            Grid(width=1, height=4)
        with pytest.raises(ValueError, match="at least 2"):
            Grid(width=4, height=1)

    def test_all_cells_start_empty(self):
        grid = Grid(width=5, height=5)
        assert not np.any(grid.cells)
        assert grid.occupied_count == 0


class TestGridIndexing:
    def test_linearization_is_column_major(self):
        grid = Grid(width=4, height=3)
        assert grid.index(Cell(0, 0)) == 0
        assert grid.index(Cell(0, 2)) == 2
        assert grid.index(Cell(1, 0)) == 3
        assert grid.index(Cell(3, 2)) == 11

    def test_cell_at_inverts_index(self):
        grid = Grid(width=4, height=3)
        for x in range(4):
            for y in range(3):
                assert grid.cell_at(grid.index(Cell(x, y))) == Cell(x, y)


class TestGridOperations:
    def test_set_and_get(self):
        grid = Grid(width=5, height=5)
        grid.set_occupied(Cell(2, 3), True)
        assert grid.occupied(Cell(2, 3))
        assert not grid.occupied(Cell(3, 2))

    def test_count_tracks_changes_only(self):
        grid = Grid(width=5, height=5)
        grid.set_occupied(Cell(1, 1), True)
        grid.set_occupied(Cell(1, 1), True)
        assert grid.occupied_count == 1
        grid.set_occupied(Cell(1, 1), False)
        grid.set_occupied(Cell(1, 1), False)
        assert grid.occupied_count == 0

    def test_clear(self):
        grid = Grid(width=5, height=5)
        grid.set_occupied(Cell(0, 0), True)
        grid.set_occupied(Cell(4, 4), True)
        grid.clear()
        assert not np.any(grid.cells)
        assert grid.occupied_count == 0

    def test_in_bounds(self):
        grid = Grid(width=5, height=4)
        assert grid.in_bounds(Cell(0, 0))
        assert grid.in_bounds(Cell(4, 3))
        assert not grid.in_bounds(Cell(-1, 0))
        assert not grid.in_bounds(Cell(5, 0))
        assert not grid.in_bounds(Cell(0, 4))

    def test_empty_cells(self):
        grid = Grid(width=3, height=3)
        assert len(grid.empty_cells()) == 9
        grid.set_occupied(Cell(0, 0), True)
        grid.set_occupied(Cell(2, 1), True)
        empty = grid.empty_cells()
        assert len(empty) == 7
        assert Cell(0, 0) not in empty
        assert Cell(2, 1) not in empty

    def test_is_full(self):
        grid = Grid(width=2, height=2)
        for x in range(2):
            for y in range(2):
                assert not grid.is_full()
                grid.set_occupied(Cell(x, y), True)
        assert grid.is_full()
        assert grid.empty_cells() == []


class TestGridSerialization:
    def test_to_dict(self):
        grid = Grid(width=4, height=4)
        grid.set_occupied(Cell(1, 2), True)
        d = grid.to_dict()
        assert d["width"] == 4
        assert d["height"] == 4
        assert d["occupied"] == [[1, 2]]
