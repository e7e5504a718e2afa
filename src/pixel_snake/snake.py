"""Cells, directions, and the player chain."""

from __future__ import annotations

import enum
from collections import deque
from typing import NamedTuple


class Cell(NamedTuple):
    """A board coordinate. Compared by value."""

    x: int
    y: int

    def moved(self, direction: Direction, step: int = 1) -> Cell:
        """Return the neighbouring cell one step along *direction*."""
        dx, dy = direction.value
        return Cell(self.x + dx * step, self.y + dy * step)


class Direction(enum.Enum):
    """Cardinal unit velocities as (dx, dy); y grows downwards."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def axis(self) -> str:
        """The axis this direction travels along."""
        return "x" if self.dx else "y"

    @property
    def cross_axis(self) -> str:
        """The axis perpendicular to this direction."""
        return "y" if self.dx else "x"

    @property
    def positive(self) -> bool:
        """True if the direction points towards the high end of its axis."""
        return (self.dx + self.dy) > 0

    def component(self, axis: str) -> int:
        return self.dx if axis == "x" else self.dy


class Snake:
    """The player chain as an ordered deque of cells.

    The head is ``body[0]``; the tail is ``body[-1]``. Contiguity is a
    property of how the engine builds the deque and is never re-checked.
    """

    def __init__(self, start: Cell, direction: Direction = Direction.RIGHT) -> None:
        self.body: deque[Cell] = deque([Cell(*start)])
        self.direction = direction
        self.alive = True

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def neck(self) -> Cell | None:
        """The cell directly behind the head, or ``None`` for a lone head."""
        return self.body[1] if len(self.body) > 1 else None

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    def occupies(self, cell: Cell) -> bool:
        return cell in self.body

    def kill(self) -> None:
        self.alive = False

    def to_dict(self) -> dict:
        """Serialize chain state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name,
            "alive": self.alive,
        }
