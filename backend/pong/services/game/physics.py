"""Ball physics and scoring, advanced once per tick.

The functions here operate on a GameState in place and must be called
with exclusive access to it (see ``StateStore.mutate``).
"""

import random
from typing import Optional

# Client-facing constants. Browsers draw against these exact numbers.
WIDTH = 600
HEIGHT = 450
PADDLE_HEIGHT = 75
PADDLE_STEP = 16
BALL_SPEED = 1.5
GOAL_LINE_OFFSET = 30
LEFT_GOAL_LINE = GOAL_LINE_OFFSET
RIGHT_GOAL_LINE = WIDTH - GOAL_LINE_OFFSET

PLAYER1 = 1
PLAYER2 = 2


def paddle_covers(paddle_y: float, ball_y: float) -> bool:
    return paddle_y <= ball_y <= paddle_y + PADDLE_HEIGHT


def reset_ball(state, rng: random.Random) -> None:
    """Recenter the ball and redraw each velocity sign independently."""
    state.ball_x = WIDTH / 2
    state.ball_y = HEIGHT / 2
    state.ball_vel_x = BALL_SPEED if rng.randrange(2) == 0 else -BALL_SPEED
    state.ball_vel_y = BALL_SPEED if rng.randrange(2) == 0 else -BALL_SPEED


def advance(state, rng: random.Random) -> Optional[int]:
    """Move the ball one tick and resolve bounces and goals.

    Returns the player number that scored this tick, or None.
    """
    state.ball_x += state.ball_vel_x
    state.ball_y += state.ball_vel_y

    # Top and bottom walls. No positional correction.
    if state.ball_y <= 0 or state.ball_y >= HEIGHT:
        state.ball_vel_y = -state.ball_vel_y

    scorer = None

    # Left goal line, defended by paddle 1.
    if state.ball_x <= LEFT_GOAL_LINE:
        if paddle_covers(state.paddle1_y, state.ball_y):
            state.ball_vel_x = -state.ball_vel_x
        else:
            state.score2 += 1
            reset_ball(state, rng)
            scorer = PLAYER2

    # Right goal line, defended by paddle 2. Unreachable after a reset above.
    if state.ball_x >= RIGHT_GOAL_LINE:
        if paddle_covers(state.paddle2_y, state.ball_y):
            state.ball_vel_x = -state.ball_vel_x
        else:
            state.score1 += 1
            reset_ball(state, rng)
            scorer = PLAYER1

    return scorer
