"""
Data structures that flow into and out of the status engine.

StatusSnapshot is the single input; the four message records are the
only output. All of them are immutable and carry no behaviour beyond
serialisation.
"""

from dataclasses import dataclass, field
from typing import Any

from .enums import MessageKind

# Seat value used when the observer is not seated.
UNSEATED = -1


@dataclass(frozen=True)
class TablePositions:
    """Seats holding the dealer button and the blinds."""
    dealer: int | None = None
    small_blind: int | None = 1
    big_blind: int | None = 2


DEFAULT_POSITIONS = TablePositions()


@dataclass(frozen=True)
class StatusSnapshot:
    """Immutable view of the table, rebuilt by the caller on every update."""
    current_user_seat: int
    next_to_act_seat: int | None
    is_game_in_progress: bool
    # Trusted as given; never recomputed from the two seat fields.
    is_current_user_turn: bool
    has_legal_actions: bool
    total_active_players: int
    is_sit_and_go_waiting_for_players: bool
    positions: TablePositions | None = None


@dataclass(frozen=True)
class SeatLabelMessage:
    seat_number: int
    text: str
    kind: MessageKind = field(default=MessageKind.SEAT_LABEL, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "seatNumber": self.seat_number, "text": self.text}


@dataclass(frozen=True)
class YourTurnMessage:
    text: str
    kind: MessageKind = field(default=MessageKind.YOUR_TURN, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "text": self.text}


@dataclass(frozen=True)
class WaitingForPlayerMessage:
    seat_number: int
    text: str
    kind: MessageKind = field(default=MessageKind.WAITING_FOR_PLAYER, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "seatNumber": self.seat_number, "text": self.text}


@dataclass(frozen=True)
class HandCompleteMessage:
    text: str
    kind: MessageKind = field(default=MessageKind.HAND_COMPLETE, init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "text": self.text}


StatusMessage = SeatLabelMessage | YourTurnMessage | WaitingForPlayerMessage | HandCompleteMessage
