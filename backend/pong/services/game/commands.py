"""Inbound control messages.

Clients send ``{"type": "move", "paddle": 1|2, "direction": "up"|"down"}``.
Anything else is rejected and the sender is disconnected.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from .physics import HEIGHT, PADDLE_HEIGHT, PADDLE_STEP


class CommandDecodeError(ValueError):
    """Raised when an inbound payload is not a valid command."""


class MoveCommand(BaseModel):
    model_config = ConfigDict(strict=True, extra='forbid', frozen=True)

    type: Literal['move']
    # StrictInt so a JSON true is not taken for paddle 1
    paddle: Annotated[StrictInt, Field(ge=1, le=2)]
    direction: Literal['up', 'down']


def decode_command(raw: Any) -> MoveCommand:
    """Validate a raw payload (JSON text or an already-decoded object)."""
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            return MoveCommand.model_validate_json(raw)
        if isinstance(raw, dict):
            return MoveCommand.model_validate(raw)
    except ValidationError as exc:
        raise CommandDecodeError(
            f"invalid command: {exc.error_count()} error(s): {exc.errors()[0]['msg']}"
        ) from exc
    raise CommandDecodeError(f"invalid command payload type {type(raw).__name__}")


def clamp_paddle(y: float) -> float:
    return max(0.0, min(float(HEIGHT - PADDLE_HEIGHT), y))


def apply_move(state, command: MoveCommand) -> float:
    """Step the named paddle and clamp it to the field. Returns the new y."""
    delta = -PADDLE_STEP if command.direction == 'up' else PADDLE_STEP
    if command.paddle == 1:
        state.paddle1_y = clamp_paddle(state.paddle1_y + delta)
        return state.paddle1_y
    state.paddle2_y = clamp_paddle(state.paddle2_y + delta)
    return state.paddle2_y
