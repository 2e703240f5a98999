import random
from typing import Optional

from .broadcaster import Broadcaster
from .registry import ConnectionRegistry
from .scheduler import TickScheduler
from .state import StateStore


class GameServer:
    """Owns the shared state and connections for one running game."""

    def __init__(self, app, socketio, rng: Optional[random.Random] = None):
        self.app = app
        self.socketio = socketio
        self.store = StateStore()
        self.registry = ConnectionRegistry()
        self.broadcaster = Broadcaster(self.store, self.registry, logger=app.logger)
        seed = app.config.get('RANDOM_SEED')
        self.scheduler = TickScheduler(
            self.store,
            self.broadcaster,
            period=int(app.config.get('TICK_PERIOD_MS', 16)) / 1000.0,
            rng=rng or random.Random(seed),
            logger=app.logger,
            sleep=socketio.sleep,
            heartbeat=int(app.config.get('TICK_HEARTBEAT_SEC', 0)),
        )
        self._task = None

    def start(self) -> None:
        """Start the tick loop as a Socket.IO background task.

        No-ops in TESTING mode unless ENABLE_TICK_LOOP_IN_TESTS is set.
        """
        if self.app.config.get('TESTING') and not self.app.config.get('ENABLE_TICK_LOOP_IN_TESTS'):
            return
        if self._task is not None:
            return
        self._task = self.socketio.start_background_task(self.scheduler.run)

    def tick(self) -> Optional[int]:
        return self.scheduler.tick()

    def shutdown(self) -> None:
        self.scheduler.stop()
        closed = self.registry.close_all(
            on_error=lambda conn, exc: self.app.logger.warning(f"[close-error] sid={conn.sid} {exc!r}")
        )
        self.app.logger.info(f"[shutdown] closed={closed}")
