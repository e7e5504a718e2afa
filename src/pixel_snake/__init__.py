"""Pixel Snake — grid snake simulation core."""

from pixel_snake.config import GameConfig
from pixel_snake.engine import DeathCause, TickResult, step
from pixel_snake.grid import Grid
from pixel_snake.input_gate import DirectionInbox, InputGate, parse_direction
from pixel_snake.loop import GameHost, TickClock, run_session
from pixel_snake.scores import JsonScoreStore, MemoryScoreStore, ScoreRecord, insert_score
from pixel_snake.session import GameSession, SessionState
from pixel_snake.snake import Cell, Direction, Snake
from pixel_snake.target import (
    BoardFullError,
    DirectSampling,
    PlacementStrategy,
    RejectionSampling,
    TargetPlacer,
)

__all__ = [
    "BoardFullError",
    "Cell",
    "DeathCause",
    "Direction",
    "DirectSampling",
    "DirectionInbox",
    "GameConfig",
    "GameHost",
    "GameSession",
    "Grid",
    "InputGate",
    "JsonScoreStore",
    "MemoryScoreStore",
    "PlacementStrategy",
    "RejectionSampling",
    "ScoreRecord",
    "SessionState",
    "Snake",
    "TargetPlacer",
    "TickClock",
    "TickResult",
    "insert_score",
    "parse_direction",
    "run_session",
    "step",
]
