from __future__ import annotations
import asyncio
import logging
import time
from typing import TYPE_CHECKING, Callable, Dict

from ..schemas import TimerState

if TYPE_CHECKING:
    from .game import GameRound

logger = logging.getLogger(__name__)

SYNC_INTERVAL = 5.0  # seconds
TICK_INTERVAL = 0.1  # seconds

class RoundClock:
    """Countdown for a single round. Time is applied lazily on every read."""

    def __init__(self, now: Callable[[], float] = time.monotonic):
        self._now = now
        self.remaining_ms: int = 0
        self.paused: bool = True
        self.last_ts: float = now()

    def start(self, seconds: int):
        self.remaining_ms = seconds * 1000
        self.paused = False
        self.last_ts = self._now()

    def pause(self):
        self._apply_elapsed()
        self.paused = True

    def resume(self):
        if not self.paused:
            return
        self.paused = False
        self.last_ts = self._now()

    def stop(self):
        self._apply_elapsed()
        self.remaining_ms = 0
        self.paused = True

    def add_time(self, seconds: int):
        self._apply_elapsed()
        self.remaining_ms += seconds * 1000

    def _apply_elapsed(self):
        if self.paused:
            return
        now = self._now()
        elapsed_ms = int((now - self.last_ts) * 1000)
        if elapsed_ms <= 0:
            return
        self.remaining_ms -= elapsed_ms
        self.last_ts = now

    @property
    def time_left(self) -> int:
        self._apply_elapsed()
        return max(0, self.remaining_ms)

    @property
    def expired(self) -> bool:
        return self.time_left <= 0

    def snapshot(self) -> TimerState:
        return TimerState(timeLeft=self.time_left, isPaused=self.paused)

class TimerManager:
    """
    Pushes clock updates to the socket session that owns a round.

    Emits go to the owning sid only; rounds are never broadcast.
    """

    def __init__(self, sio):
        self.sio = sio
        self._tasks: Dict[str, asyncio.Task] = {}

    def watch(self, round_id: str, sid: str, game_round: "GameRound"):
        self.stop(round_id)
        self._tasks[round_id] = asyncio.create_task(self._run(round_id, sid, game_round))

    def stop(self, round_id: str):
        task = self._tasks.pop(round_id, None)
        if task and not task.done():
            task.cancel()

    def watching(self, round_id: str) -> bool:
        task = self._tasks.get(round_id)
        return task is not None and not task.done()

    async def _run(self, round_id: str, sid: str, game_round: "GameRound"):
        try:
            next_sync = time.monotonic() + SYNC_INTERVAL
            while game_round.status in ('playing', 'paused'):
                await asyncio.sleep(TICK_INTERVAL)
                if game_round.expire():
                    break
                if time.monotonic() >= next_sync:
                    await self.sio.emit('timer-sync', game_round.timer_state().model_dump(), to=sid)
                    next_sync = time.monotonic() + SYNC_INTERVAL
            if game_round.status == 'ended':
                logger.info("Round %s ended with score %s", round_id, game_round.score)
                await self.sio.emit('round:ended', game_round.to_state().model_dump(), to=sid)
        except asyncio.CancelledError:
            return
        finally:
            if self._tasks.get(round_id) is asyncio.current_task():
                self._tasks.pop(round_id, None)
