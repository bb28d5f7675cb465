"""
Status Engine - Pure derivation of table status messages.

Maps a StatusSnapshot to the ordered list of messages shown to an
observer at the table. No side effects, no logging, no I/O.

Messages stack: a seat label can be shown next to a turn indicator or a
hand-complete notice. The "waiting for players to join" message is NOT
produced here. It belongs to the primary action display, which is
mutually exclusive with its own siblings and is composed with this
output by the layout owner.
"""

from .seat_labels import label_for_seat
from .status_data import (
    HandCompleteMessage,
    SeatLabelMessage,
    StatusMessage,
    StatusSnapshot,
    WaitingForPlayerMessage,
    YourTurnMessage,
)

SEAT_LABEL_TEXT = "You are seated at position {seat}"
YOUR_TURN_TEXT = "Your turn to act!"
WAITING_FOR_PLAYER_TEXT = "Waiting for {label} to act"
HAND_COMPLETE_TEXT = "Hand complete - waiting for next hand"


def derive_status_messages(snapshot: StatusSnapshot) -> list[StatusMessage]:
    """
    Derive the status messages for a table snapshot.

    Rules are evaluated in a fixed order (seat label, turn indicator,
    hand complete) and renderers rely on that order for stable layout.

    Args:
        snapshot: Current table snapshot

    Returns:
        Ordered list of messages, possibly empty
    """
    messages: list[StatusMessage] = []

    if snapshot.current_user_seat >= 0:
        messages.append(SeatLabelMessage(
            seat_number=snapshot.current_user_seat,
            text=SEAT_LABEL_TEXT.format(seat=snapshot.current_user_seat),
        ))

    # Seat 0 is a real seat: test for presence, not truthiness.
    if snapshot.next_to_act_seat is not None and snapshot.is_game_in_progress:
        if snapshot.is_current_user_turn and snapshot.has_legal_actions:
            messages.append(YourTurnMessage(text=YOUR_TURN_TEXT))
        else:
            label = label_for_seat(snapshot.next_to_act_seat, snapshot.positions)
            messages.append(WaitingForPlayerMessage(
                seat_number=snapshot.next_to_act_seat,
                text=WAITING_FOR_PLAYER_TEXT.format(label=label),
            ))

    if (not snapshot.is_game_in_progress
            and snapshot.total_active_players > 1
            and not snapshot.is_sit_and_go_waiting_for_players):
        messages.append(HandCompleteMessage(text=HAND_COMPLETE_TEXT))

    return messages


def has_status_messages(snapshot: StatusSnapshot) -> bool:
    """Check whether any status message should be rendered."""
    return len(derive_status_messages(snapshot)) > 0
