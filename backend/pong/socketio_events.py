from flask import current_app, request
from flask_socketio import disconnect

from pong import socketio
from pong.services.game.commands import CommandDecodeError, apply_move, decode_command
from pong.services.game.registry import SocketConnection

NAMESPACE = '/ws'


def _game():
    return current_app.extensions['pong']


def handle_connect(auth=None):
    game = _game()
    game.registry.add(SocketConnection(request.sid, request.namespace, socketio))
    current_app.logger.info(f"[connect] sid={request.sid} clients={len(game.registry)}")


def handle_disconnect(reason=None):
    game = _game()
    conn = game.registry.discard(request.sid)
    if conn is None:
        return
    conn.mark_closed()
    current_app.logger.info(f"[disconnect] sid={request.sid} reason={reason} clients={len(game.registry)}")


def handle_message(data):
    """Apply one paddle move. Malformed input ends the session."""
    game = _game()
    conn = game.registry.get(request.sid)
    if conn is None or conn.closed:
        return
    try:
        command = decode_command(data)
    except CommandDecodeError as exc:
        current_app.logger.info(f"[drop] sid={request.sid} {exc}")
        # Mark first so a broadcast racing with this handler skips it
        conn.mark_closed()
        game.registry.discard(request.sid)
        disconnect()
        return
    game.store.mutate(lambda state: apply_move(state, command))


def register_socketio_handlers() -> None:
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=NAMESPACE)
    socketio.on_event('message', handle_message, namespace=NAMESPACE)
