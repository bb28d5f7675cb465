"""
Snapshot Builder - Turns raw table view data into a StatusSnapshot.

The table view holds collections (legal actions, active players, empty
seats) and a game format string. The status engine only wants counts and
flags, so this module does that reduction in one place.
"""

from collections.abc import Sized

from .enums import GameFormat
from .logger import get_logger
from .status_data import UNSEATED, StatusSnapshot, TablePositions

logger = get_logger(__name__)


def parse_game_format(value: GameFormat | str) -> GameFormat:
    """
    Normalise a game format value.

    Raises:
        ValueError: If the value is not a known format
    """
    if isinstance(value, GameFormat):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported game format type: {type(value)}")
    try:
        return GameFormat(value.strip().lower())
    except ValueError as e:
        raise ValueError(f"Unknown game format: {value!r}") from e


def is_sit_and_go_waiting(game_format: GameFormat | str,
                          is_user_already_playing: bool,
                          empty_seat_count: int) -> bool:
    """True while a sit-and-go table the user sits at still has open seats."""
    return (parse_game_format(game_format) == GameFormat.SIT_AND_GO
            and is_user_already_playing
            and empty_seat_count > 0)


class StatusSnapshotBuilder:
    """Builds status snapshots from table view data."""

    def __init__(self, positions: TablePositions | None = None):
        self.positions = positions

    def build(
        self,
        current_user_seat: int | None,
        next_to_act_seat: int | None,
        is_game_in_progress: bool,
        legal_actions: Sized | None,
        active_players: Sized | None,
        is_sit_and_go_waiting_for_players: bool = False,
        is_current_user_turn: bool | None = None,
        positions: TablePositions | None = None,
    ) -> StatusSnapshot:
        """
        Build a snapshot for the observer.

        Args:
            current_user_seat: Observer's seat, or None/-1 when not seated
            next_to_act_seat: Seat to act next; None or negative when nothing is pending
            is_game_in_progress: Whether a hand is being played
            legal_actions: Legal actions computed for the observer (may be None)
            active_players: Players currently seated and active (may be None)
            is_sit_and_go_waiting_for_players: Whether the table is still filling
            is_current_user_turn: Caller's turn flag. Derived from the seats when None.
            positions: Dealer/blind seats, overriding the builder default

        Returns:
            StatusSnapshot ready for derive_status_messages
        """
        seat = UNSEATED if current_user_seat is None or current_user_seat < 0 else current_user_seat
        next_seat = None if next_to_act_seat is None or next_to_act_seat < 0 else next_to_act_seat

        if is_current_user_turn is None:
            is_current_user_turn = seat >= 0 and next_seat == seat

        snapshot = StatusSnapshot(
            current_user_seat=seat,
            next_to_act_seat=next_seat,
            is_game_in_progress=is_game_in_progress,
            is_current_user_turn=is_current_user_turn,
            has_legal_actions=len(legal_actions or ()) > 0,
            total_active_players=len(active_players or ()),
            is_sit_and_go_waiting_for_players=is_sit_and_go_waiting_for_players,
            positions=positions if positions is not None else self.positions,
        )
        logger.debug(f"Built status snapshot: {snapshot}")
        return snapshot
