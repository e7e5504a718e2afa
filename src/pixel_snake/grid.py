"""Occupancy grid for the snake simulation."""

from __future__ import annotations

import numpy as np

from pixel_snake.snake import Cell


class Grid:
    """NumPy-backed occupancy map over the playable board.

    Cells are stored in a flat boolean array keyed by ``x * height + y``
    so lookups and updates are O(1). The grid does no bounds checking;
    callers must only pass cells inside ``[0, width) x [0, height)``.
    """

    def __init__(self, width: int = 40, height: int = 25) -> None:
        if width < 2 or height < 2:
            raise ValueError("Grid dimensions must be at least 2×2.")
        self.width = width
        self.height = height
        self.cells = np.zeros(width * height, dtype=bool)
        self._occupied_count = 0

    @property
    def size(self) -> int:
        return self.cells.size

    @property
    def occupied_count(self) -> int:
        return self._occupied_count

    def index(self, cell: Cell) -> int:
        """Linearize a cell into its flat array index."""
        return cell.x * self.height + cell.y

    def cell_at(self, index: int) -> Cell:
        """Inverse of :meth:`index`."""
        x, y = divmod(int(index), self.height)
        return Cell(x, y)

    def clear(self) -> None:
        """Mark every cell as unoccupied."""
        self.cells[:] = False
        self._occupied_count = 0

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies within the board."""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def occupied(self, cell: Cell) -> bool:
        """Return True if the chain occupies *cell*."""
        return bool(self.cells[self.index(cell)])

    def set_occupied(self, cell: Cell, flag: bool = True) -> None:
        """Set or clear the occupancy flag of *cell*."""
        i = self.index(cell)
        if self.cells[i] != flag:
            self.cells[i] = flag
            self._occupied_count += 1 if flag else -1

    def is_full(self) -> bool:
        return self._occupied_count >= self.size

    def empty_cells(self) -> list[Cell]:
        """Return every unoccupied cell, in flat index order."""
        return [self.cell_at(i) for i in np.flatnonzero(~self.cells).tolist()]

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "occupied": [list(self.cell_at(i)) for i in np.flatnonzero(self.cells).tolist()],
        }
