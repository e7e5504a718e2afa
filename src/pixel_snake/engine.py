"""Collision and movement engine: advances the chain by one cell."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from pixel_snake.grid import Grid
from pixel_snake.snake import Cell, Direction, Snake

logger = logging.getLogger(__name__)


class DeathCause(enum.Enum):
    """Why a tick ended the chain's life."""

    WALL = "wall"
    SELF = "self"


@dataclass(frozen=True)
class TickResult:
    """Outcome of a single engine step."""

    head: Cell
    died: bool = False
    grew: bool = False
    trail: Cell | None = None
    cause: DeathCause | None = None

    def to_dict(self) -> dict:
        return {
            "head": list(self.head),
            "died": self.died,
            "grew": self.grew,
            "trail": list(self.trail) if self.trail is not None else None,
            "cause": self.cause.value if self.cause is not None else None,
        }


def step(
    snake: Snake,
    direction: Direction,
    grid: Grid,
    target: Cell | None,
) -> TickResult:
    """Advance *snake* one cell along *direction*.

    The new head is pushed and the tail popped before any check runs, so
    the tail cell that is moving out of the way never counts as a
    collision. Checks run wall, then self, then target. Death is reported
    through the result and ``snake.alive``; it is never raised.
    """
    new_head = snake.head.moved(direction)
    snake.body.appendleft(new_head)
    vacated = snake.body.pop()

    # The grid models the interior only; an escaped head is never written.
    if not grid.in_bounds(new_head):
        snake.kill()
        logger.debug("Wall collision at %s.", new_head)
        return TickResult(head=new_head, died=True, cause=DeathCause.WALL)

    # The vacating tail cell is still flagged but no longer part of the body.
    if grid.occupied(new_head) and new_head != vacated:
        snake.kill()
        logger.debug("Self collision at %s.", new_head)
        return TickResult(head=new_head, died=True, cause=DeathCause.SELF)

    grid.set_occupied(new_head, True)

    if target is not None and new_head == target:
        # The vacated tail stays part of the chain and stays occupied.
        snake.body.append(vacated)
        return TickResult(head=new_head, grew=True)

    if vacated != new_head:
        grid.set_occupied(vacated, False)
    return TickResult(head=new_head, trail=vacated)
