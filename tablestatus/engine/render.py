"""
Plain-text rendering of status messages.

Every message kind is handled explicitly; an unknown object is an error
rather than a silently dropped line.
"""

from typing import Any

from .enums import MessageKind
from .status_data import (
    HandCompleteMessage,
    SeatLabelMessage,
    StatusMessage,
    WaitingForPlayerMessage,
    YourTurnMessage,
)


def render_message(msg: StatusMessage) -> str:
    """
    Render one message as a display line.

    Raises:
        ValueError: If msg is not a known status message
    """
    kind = getattr(msg, "kind", None)
    if kind == MessageKind.SEAT_LABEL and isinstance(msg, SeatLabelMessage):
        return msg.text
    if kind == MessageKind.YOUR_TURN and isinstance(msg, YourTurnMessage):
        return f">> {msg.text}"
    if kind == MessageKind.WAITING_FOR_PLAYER and isinstance(msg, WaitingForPlayerMessage):
        return msg.text
    if kind == MessageKind.HAND_COMPLETE and isinstance(msg, HandCompleteMessage):
        return msg.text
    raise ValueError(f"Unknown status message: {msg!r}")


def render_lines(messages: list[StatusMessage]) -> list[str]:
    return [render_message(m) for m in messages]


def messages_to_dicts(messages: list[StatusMessage]) -> list[dict[str, Any]]:
    return [m.to_dict() for m in messages]


def compose_status(primary_action_text: str | None, messages: list[StatusMessage]) -> list[str]:
    """
    Lines shown by the layout owner.

    The primary action display (which owns "waiting for players to join")
    goes first, followed by the stacked status lines.
    """
    lines = [primary_action_text] if primary_action_text else []
    lines.extend(render_lines(messages))
    return lines
