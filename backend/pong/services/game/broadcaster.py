import logging
from typing import Optional

from .registry import ConnectionRegistry
from .state import StateStore


class Broadcaster:
    """Fans one state snapshot out to every registered connection."""

    def __init__(self, store: StateStore, registry: ConnectionRegistry,
                 logger: Optional[logging.Logger] = None):
        self.store = store
        self.registry = registry
        self.logger = logger or logging.getLogger(__name__)

    def broadcast(self) -> int:
        """Send the current snapshot. Returns how many sends succeeded.

        A failed send closes and drops only that connection.
        """
        payload = self.store.read().to_dict()
        delivered = 0
        for conn in self.registry.members():
            try:
                conn.send(payload)
                delivered += 1
            except Exception as exc:
                self.logger.warning(f"[write-error] sid={conn.sid} {exc!r}")
                self._drop(conn)
        return delivered

    def _drop(self, conn) -> None:
        try:
            conn.close()
        except Exception as exc:
            self.logger.warning(f"[close-error] sid={conn.sid} {exc!r}")
        if self.registry.discard(conn.sid) is not None:
            self.logger.info(f"[disconnect] sid={conn.sid} reason=write-error")
