"""Game domain services: shared state, physics, commands and the tick loop.

Everything here is transport-agnostic. Socket handlers and HTTP routes
import these pieces; the pieces themselves never import Flask.
"""

from .state import GameState, StateStore
from .registry import ConnectionRegistry
from .broadcaster import Broadcaster
from .scheduler import TickScheduler
from .server import GameServer

__all__ = [
    'GameState',
    'StateStore',
    'ConnectionRegistry',
    'Broadcaster',
    'TickScheduler',
    'GameServer',
]
