import logging
import random
import threading
import time
from typing import Callable, Optional

from .broadcaster import Broadcaster
from .physics import advance
from .state import StateStore


class TickScheduler:
    """Drives physics then broadcast on a fixed period.

    Ticks never overlap: a slow tick delays the next one, nothing is
    skipped or caught up.
    """

    def __init__(self, store: StateStore, broadcaster: Broadcaster,
                 period: float = 0.016, rng: Optional[random.Random] = None,
                 logger: Optional[logging.Logger] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 heartbeat: float = 0,
                 clock: Callable[[], float] = time.monotonic):
        self.store = store
        self.broadcaster = broadcaster
        self.period = period
        self.rng = rng or random.Random()
        self.logger = logger or logging.getLogger(__name__)
        self.heartbeat = heartbeat
        self._sleep = sleep
        self._clock = clock
        self._stop = threading.Event()
        self.ticks = 0

    @property
    def running(self) -> bool:
        return not self._stop.is_set()

    def tick(self) -> Optional[int]:
        scorer = self.store.mutate(lambda state: advance(state, self.rng))
        if scorer is not None:
            snapshot = self.store.read()
            self.logger.info(f"[goal] player={scorer} score={snapshot.score1}-{snapshot.score2}")
        self.broadcaster.broadcast()
        self.ticks += 1
        return scorer

    def run(self) -> None:
        self.logger.info(f"[tick-start] period={self.period * 1000:.0f}ms")
        last_beat = self._clock()
        while not self._stop.is_set():
            started = self._clock()
            try:
                self.tick()
            except Exception:
                self.logger.exception(f"[tick-error] tick={self.ticks}")
            now = self._clock()
            if self.heartbeat and now - last_beat >= self.heartbeat:
                last_beat = now
                self._beat()
                now = self._clock()
            self._sleep(max(0.0, self.period - (now - started)))
        self.logger.info(f"[tick-stop] ticks={self.ticks}")

    def stop(self) -> None:
        self._stop.set()

    def _beat(self) -> None:
        snapshot = self.store.read()
        self.logger.info(
            f"[tick-heartbeat] ticks={self.ticks} clients={len(self.broadcaster.registry)} "
            f"score={snapshot.score1}-{snapshot.score2}"
        )
