import threading
from typing import Any, Callable, Dict, List, Optional


class SocketConnection:
    """One Socket.IO session eligible for state broadcasts."""

    def __init__(self, sid: str, namespace: str, socketio, event: str = 'state'):
        self.sid = sid
        self.namespace = namespace
        self.event = event
        self._socketio = socketio
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, payload: Dict[str, Any]) -> None:
        if self.closed:
            raise ConnectionError(f"connection {self.sid} is closed")
        self._socketio.emit(self.event, payload, to=self.sid, namespace=self.namespace)

    def mark_closed(self) -> bool:
        """Flag the connection closed. True only for the first caller."""
        if self._closed.is_set():
            return False
        self._closed.set()
        return True

    def close(self) -> None:
        # Server-side disconnect re-enters the disconnect handler, which
        # discards this connection from the registry.
        if self.mark_closed():
            self._socketio.server.disconnect(self.sid, namespace=self.namespace)

    def __repr__(self) -> str:
        return f"<SocketConnection sid={self.sid} ns={self.namespace}>"


class ConnectionRegistry:
    """Live set of connections, keyed by session id."""

    def __init__(self):
        self._lock = threading.Lock()
        self._connections: Dict[str, Any] = {}

    def add(self, conn) -> None:
        with self._lock:
            self._connections[conn.sid] = conn

    def discard(self, sid: str):
        """Remove a connection. Returns it the first time, None afterwards."""
        with self._lock:
            return self._connections.pop(sid, None)

    def get(self, sid: str) -> Optional[Any]:
        with self._lock:
            return self._connections.get(sid)

    def members(self) -> List[Any]:
        with self._lock:
            return list(self._connections.values())

    def close_all(self, on_error: Optional[Callable[[Any, Exception], None]] = None) -> int:
        members = self.members()
        for conn in members:
            try:
                conn.close()
            except Exception as exc:
                if on_error is not None:
                    on_error(conn, exc)
            finally:
                self.discard(conn.sid)
        return len(members)

    def __len__(self) -> int:
        with self._lock:
            return len(self._connections)

    def __contains__(self, sid: str) -> bool:
        with self._lock:
            return sid in self._connections
