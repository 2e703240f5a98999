import dataclasses
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, TypeVar

from .physics import WIDTH, HEIGHT, PADDLE_HEIGHT, BALL_SPEED


T = TypeVar('T')


@dataclass
class GameState:
    ball_x: float
    ball_y: float
    ball_vel_x: float
    ball_vel_y: float
    paddle1_y: float
    paddle2_y: float
    score1: int = 0
    score2: int = 0

    @classmethod
    def initial(cls) -> 'GameState':
        """Centered ball and paddles, zero scores."""
        paddle_y = HEIGHT / 2 - PADDLE_HEIGHT / 2
        return cls(
            ball_x=WIDTH / 2,
            ball_y=HEIGHT / 2,
            ball_vel_x=BALL_SPEED,
            ball_vel_y=BALL_SPEED,
            paddle1_y=paddle_y,
            paddle2_y=paddle_y,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ballX': float(self.ball_x),
            'ballY': float(self.ball_y),
            'ballVelX': float(self.ball_vel_x),
            'ballVelY': float(self.ball_vel_y),
            'paddle1Y': float(self.paddle1_y),
            'paddle2Y': float(self.paddle2_y),
            'score1': int(self.score1),
            'score2': int(self.score2),
        }


class StateStore:
    """Owns the single live GameState.

    Every access goes through ``read`` (returns a copy) or ``mutate``
    (runs a function against the live record while holding the lock).
    """

    def __init__(self, state: Optional[GameState] = None):
        self._lock = threading.Lock()
        self._state = state if state is not None else GameState.initial()

    def read(self) -> GameState:
        with self._lock:
            return dataclasses.replace(self._state)

    def mutate(self, fn: Callable[[GameState], T]) -> T:
        with self._lock:
            return fn(self._state)

    def reset(self, state: Optional[GameState] = None) -> None:
        with self._lock:
            self._state = state if state is not None else GameState.initial()
