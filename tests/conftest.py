"""Shared fixtures: recording collaborators for sessions."""

from __future__ import annotations

import pytest

from pixel_snake.config import GameConfig
from pixel_snake.scores import MemoryScoreStore
from pixel_snake.session import GameSession


class RecordingRender:
    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw(self, cell, size, color):
        self.calls.append(("draw", tuple(cell), size, color))

    def erase(self, cell, size):
        self.calls.append(("erase", tuple(cell), size))


class RecordingDisplay:
    def __init__(self):
        self.scores = []
        self.top_scores = []
        self.game_over = 0

    def show_score(self, score):
        self.scores.append(score)

    def show_top_scores(self, records):
        self.top_scores.append([r.score for r in records])

    def show_game_over(self):
        self.game_over += 1


@pytest.fixture()
def render():
    return RecordingRender()


@pytest.fixture()
def display():
    return RecordingDisplay()


@pytest.fixture()
def store():
    return MemoryScoreStore()


@pytest.fixture()
def make_session(render, display, store):
    def _make(**overrides):
        config = GameConfig(seed=overrides.pop("seed", 0), **overrides)
        return GameSession(config, render=render, display=display, store=store)

    return _make
