"""Game loop controller: owns one session's state and drives its ticks."""

from __future__ import annotations

import enum
import logging

import numpy as np

from pixel_snake.config import GameConfig
from pixel_snake.engine import TickResult, step
from pixel_snake.grid import Grid
from pixel_snake.input_gate import DirectionInbox, InputGate, parse_direction
from pixel_snake.interfaces import LogScoreDisplay, NullRenderSink, RenderSink, ScoreDisplay
from pixel_snake.scores import MemoryScoreStore, ScoreRecord, ScoreStore
from pixel_snake.snake import Cell, Direction, Snake
from pixel_snake.target import BoardFullError, TargetPlacer

logger = logging.getLogger(__name__)


class SessionState(str, enum.Enum):
    """Lifecycle states for a session."""

    STARTING = "starting"
    RUNNING = "running"
    ENDED = "ended"


class GameSession:
    """A single play-through, from first tick to game over.

    The session exclusively owns the chain, grid, target, and score.
    Direction requests are validated on arrival and parked in a
    single-slot inbox; :meth:`tick` applies the latest one before
    moving. A session never revives: restarting means building a new one.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        render: RenderSink | None = None,
        display: ScoreDisplay | None = None,
        store: ScoreStore | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.render = render if render is not None else NullRenderSink()
        self.display = display if display is not None else LogScoreDisplay()
        self.store = store if store is not None else MemoryScoreStore(
            self.config.score_capacity,
        )
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        cfg = self.config
        self.grid = Grid(cfg.width, cfg.height)
        self.snake = Snake(Cell(cfg.start_x, cfg.start_y), cfg.start_direction)
        for seg in self.snake.body:
            self.grid.set_occupied(seg, True)

        self.gate = InputGate(cfg.step)
        self.inbox = DirectionInbox()
        self.placer = TargetPlacer(cfg.dense_threshold, self.rng)

        self.score = 0
        self.fps = cfg.initial_fps
        self.ticks = 0
        self.board_full = False
        self.state = SessionState.STARTING
        self.target: Cell | None = self.placer.place(self.grid, self.score)

    @property
    def alive(self) -> bool:
        return self.snake.alive

    @property
    def velocity(self) -> Direction:
        return self.snake.direction

    @property
    def ended(self) -> bool:
        return self.state == SessionState.ENDED

    def top_scores(self) -> list[ScoreRecord]:
        return self.store.load(self.config.score_key)

    def start(self) -> None:
        """Paint the opening frame and begin accepting ticks."""
        if self.state != SessionState.STARTING:
            return
        self.render.clear()
        self._draw_head_and_target()
        self.display.show_score(self.score)
        self.display.show_top_scores(self.top_scores())
        self.state = SessionState.RUNNING
        logger.info("Session started at %s heading %s.", self.snake.head, self.velocity.name)

    def propose(self, code: object) -> bool:
        """Request a turn. Returns True if the turn was admitted.

        Unrecognised codes and requests after the session ended are
        ignored. Admitted turns take effect at the next tick.
        """
        if self.ended:
            return False
        direction = parse_direction(code)
        if direction is None:
            return False
        current = self.inbox.peek() or self.velocity
        if not self.gate.admits(direction, self.snake, current, self.score):
            return False
        self.inbox.put(direction)
        return True

    def tick(self) -> TickResult | None:
        """Advance the session one step.

        Returns the engine result, or ``None`` when no movement happened
        (the session was already over or ended during this call).
        """
        if self.state == SessionState.STARTING:
            self.start()
        if self.ended:
            return None
        if not self.alive:
            self.end()
            return None

        pending = self.inbox.take()
        if pending is not None:
            self.snake.direction = pending

        result = step(self.snake, self.snake.direction, self.grid, self.target)
        self.ticks += 1

        if result.died:
            logger.info(
                "Chain died (%s) at tick %d with score %d.",
                result.cause.value, self.ticks, self.score,
            )
            return result

        if result.grew:
            self._grow()
        self._draw(result)
        return result

    def _grow(self) -> None:
        self.score += 1
        self.fps += self.config.fps_increment
        self.display.show_score(self.score)
        try:
            self.target = self.placer.place(self.grid, self.score)
        except BoardFullError:
            logger.info("Board full at score %d; ending session.", self.score)
            self.target = None
            self.board_full = True
            self.end()

    def end(self) -> None:
        """Finish the session. Safe to call any number of times.

        Only the first call has effects: the score is persisted, the
        game-over notice is shown if the chain actually died, and the top
        scores are refreshed.
        """
        if self.ended:
            return
        self.state = SessionState.ENDED
        self.store.save(self.score, self.config.score_key)
        logger.info("Session ended with score %d after %d ticks.", self.score, self.ticks)
        if not self.alive:
            self.display.show_game_over()
        self.display.show_top_scores(self.top_scores())

    def _draw(self, result: TickResult) -> None:
        if result.trail is not None:
            self.render.erase(result.trail, self.config.cell_size)
        self._draw_head_and_target()

    def _draw_head_and_target(self) -> None:
        size = self.config.cell_size
        self.render.draw(self.snake.head, size, self.config.head_color)
        if self.target is not None:
            self.render.draw(self.target, size, self.config.target_color)

    def snapshot(self) -> dict:
        """Return the full, serializable session state."""
        return {
            "state": self.state.value,
            "ticks": self.ticks,
            "score": self.score,
            "fps": self.fps,
            "alive": self.alive,
            "board_full": self.board_full,
            "snake": self.snake.to_dict(),
            "target": list(self.target) if self.target is not None else None,
            "grid": self.grid.to_dict(),
        }
