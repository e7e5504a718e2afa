"""Tick scheduling and session restarts on an asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from pixel_snake.config import GameConfig
from pixel_snake.session import GameSession

logger = logging.getLogger(__name__)


class TickClock:
    """Decides when the next tick is due at a given frame rate.

    When a poll arrives late, the next interval is anchored to the
    elapsed time modulo the interval, so lateness does not accumulate.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.previous = clock()

    def due(self, fps: float) -> bool:
        """Return True (and re-anchor) if a tick is due at *fps*."""
        now = self._clock()
        elapsed = now - self.previous
        interval = 1.0 / fps
        if elapsed > interval:
            self.previous = now - (elapsed % interval)
            return True
        return False


async def run_session(
    session: GameSession,
    clock: Callable[[], float] = time.monotonic,
    poll_interval: float | None = None,
) -> GameSession:
    """Drive *session* until it ends.

    Polls at frame granularity and ticks whenever the session's current
    frame rate says a tick is due. Ticks never overlap because they run
    on this one coroutine.
    """
    poll = poll_interval if poll_interval is not None else session.config.poll_interval
    ticker = TickClock(clock)
    session.start()
    try:
        while not session.ended:
            if not session.alive:
                session.end()
                break
            if ticker.due(session.fps):
                session.tick()
            await asyncio.sleep(poll)
    except asyncio.CancelledError:
        logger.info("Tick loop cancelled at tick %d.", session.ticks)
    return session


class GameHost:
    """Owns the current session and replaces it on restart.

    *factory* builds a fresh :class:`GameSession` each time; sessions are
    never reused.
    """

    def __init__(
        self,
        factory: Callable[[], GameSession],
        restart_delay: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if restart_delay is not None and restart_delay < 0:
            raise ValueError("restart_delay must be >= 0.")
        self._factory = factory
        self._clock = clock
        self._restart_delay = restart_delay
        self.session: GameSession | None = None
        self._task: asyncio.Task | None = None
        self.generation = 0

    @property
    def restart_delay(self) -> float:
        """Explicit delay if given, else the current session's configured one."""
        if self._restart_delay is not None:
            return self._restart_delay
        if self.session is not None:
            return self.session.config.restart_delay
        return GameConfig().restart_delay

    def start(self) -> GameSession:
        """Build a session and schedule its tick loop."""
        session = self._factory()
        self.session = session
        self.generation += 1
        self._task = asyncio.create_task(run_session(session, self._clock))
        logger.info("Session %d scheduled.", self.generation)
        return session

    def push(self, code: object) -> bool:
        """Forward a direction event to the current session."""
        if self.session is None:
            return False
        return self.session.propose(code)

    async def wait(self) -> GameSession | None:
        """Wait for the current tick loop to finish."""
        if self._task is not None:
            await self._task
        return self.session

    async def stop(self) -> None:
        """End the current session and stop scheduling its ticks."""
        if self.session is not None:
            self.session.end()
        if self._task is not None and not self._task.done():
            self._task.cancel()
            await asyncio.gather(self._task, return_exceptions=True)
        self._task = None

    async def restart(self) -> GameSession:
        """End the current session, wait the display delay, start afresh."""
        await self.stop()
        await asyncio.sleep(self.restart_delay)
        return self.start()
