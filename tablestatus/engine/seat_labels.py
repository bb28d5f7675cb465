from .status_data import DEFAULT_POSITIONS, TablePositions

DEALER_LABEL = "Dealer"
SMALL_BLIND_LABEL = "Small Blind"
BIG_BLIND_LABEL = "Big Blind"
GENERIC_SEAT_LABEL = "player at seat {seat}"


def label_for_seat(seat_number: int, positions: TablePositions | None = None) -> str:
    """
    Human-readable label for the player at a seat.

    Args:
        seat_number: Any integer seat index; no bounds checking
        positions: Dealer/blind seats. Defaults to small blind at seat 1
            and big blind at seat 2 with no dealer.

    Returns:
        "Dealer", "Small Blind", "Big Blind" or "player at seat N"
    """
    if positions is None:
        positions = DEFAULT_POSITIONS

    # Dealer wins when the button also posts a blind (heads-up).
    if positions.dealer is not None and positions.dealer == seat_number:
        return DEALER_LABEL
    if positions.small_blind is not None and positions.small_blind == seat_number:
        return SMALL_BLIND_LABEL
    if positions.big_blind is not None and positions.big_blind == seat_number:
        return BIG_BLIND_LABEL
    return GENERIC_SEAT_LABEL.format(seat=seat_number)
