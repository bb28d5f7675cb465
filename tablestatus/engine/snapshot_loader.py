import json
from pathlib import Path
from typing import Any

from .logger import get_logger
from .status_data import StatusSnapshot, TablePositions

logger = get_logger(__name__)

# camelCase (as sent by the table client) -> snake_case field name
FIELD_ALIASES = {
    "currentUserSeat": "current_user_seat",
    "nextToActSeat": "next_to_act_seat",
    "isGameInProgress": "is_game_in_progress",
    "isCurrentUserTurn": "is_current_user_turn",
    "hasLegalActions": "has_legal_actions",
    "totalActivePlayers": "total_active_players",
    "isSitAndGoWaitingForPlayers": "is_sit_and_go_waiting_for_players",
}

POSITION_ALIASES = {
    "smallBlind": "small_blind",
    "bigBlind": "big_blind",
    "smallBlindPosition": "small_blind",
    "bigBlindPosition": "big_blind",
    "dealerPosition": "dealer",
}

INT_FIELDS = ("current_user_seat", "total_active_players")
BOOL_FIELDS = (
    "is_game_in_progress",
    "is_current_user_turn",
    "has_legal_actions",
    "is_sit_and_go_waiting_for_players",
)
REQUIRED_FIELDS = INT_FIELDS + ("next_to_act_seat",) + BOOL_FIELDS


def load_snapshot(path: str | Path) -> StatusSnapshot:
    """
    Load a single snapshot from a JSON file.

    Args:
        path: Path to JSON snapshot file

    Returns:
        Validated StatusSnapshot

    Raises:
        ValueError: If the file holds invalid JSON or an invalid snapshot
    """
    snapshots = load_snapshots(path)
    if len(snapshots) != 1:
        raise ValueError(f"Expected exactly one snapshot in {path}, found {len(snapshots)}")
    return snapshots[0]


def load_snapshots(path: str | Path) -> list[StatusSnapshot]:
    """Load a snapshot file holding either one object or a list of them."""
    with open(Path(path)) as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    items = raw if isinstance(raw, list) else [raw]
    if not items:
        raise ValueError(f"No snapshots in {path}")
    snapshots = [snapshot_from_dict(item) for item in items]
    logger.debug(f"Loaded {len(snapshots)} snapshot(s) from {path}")
    return snapshots


def snapshot_from_dict(raw: dict[str, Any]) -> StatusSnapshot:
    """Normalize, validate and convert a parsed snapshot dict."""
    data = _normalize_keys(raw)
    validate_snapshot_structure(data)
    return StatusSnapshot(
        current_user_seat=data["current_user_seat"],
        next_to_act_seat=data["next_to_act_seat"],
        is_game_in_progress=data["is_game_in_progress"],
        is_current_user_turn=data["is_current_user_turn"],
        has_legal_actions=data["has_legal_actions"],
        total_active_players=data["total_active_players"],
        is_sit_and_go_waiting_for_players=data["is_sit_and_go_waiting_for_players"],
        positions=_positions_from_dict(data.get("positions")),
    )


def _normalize_keys(raw: Any) -> dict:
    """
    Map camelCase keys onto snake_case field names.

    Keys already in snake_case pass through unchanged.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"Snapshot must be a JSON object, got {type(raw).__name__}")

    out = {FIELD_ALIASES.get(k, k): v for k, v in raw.items()}
    positions = out.get("positions")
    if isinstance(positions, dict):
        out["positions"] = {POSITION_ALIASES.get(k, k): v for k, v in positions.items()}
    return out


def _is_int(value: Any) -> bool:
    # bool is a subclass of int; a flag is never a seat
    return isinstance(value, int) and not isinstance(value, bool)


def validate_snapshot_structure(data: dict) -> bool:
    """
    Validate that a normalized snapshot has the required fields and types.

    Args:
        data: Snapshot dict with snake_case keys

    Returns:
        True if valid, raises ValueError if invalid
    """
    for name in REQUIRED_FIELDS:
        if name not in data:
            raise ValueError(f"Snapshot missing required field: {name}")

    for name in INT_FIELDS:
        if not _is_int(data[name]):
            raise ValueError(f"{name} must be an integer, got {data[name]!r}")

    next_seat = data["next_to_act_seat"]
    if next_seat is not None and not _is_int(next_seat):
        raise ValueError(f"next_to_act_seat must be an integer or null, got {next_seat!r}")

    for name in BOOL_FIELDS:
        if not isinstance(data[name], bool):
            raise ValueError(f"{name} must be a boolean, got {data[name]!r}")

    positions = data.get("positions")
    if positions is not None:
        if not isinstance(positions, dict):
            raise ValueError("positions must be an object")
        for name in ("dealer", "small_blind", "big_blind"):
            value = positions.get(name)
            if value is not None and not _is_int(value):
                raise ValueError(f"positions.{name} must be an integer or null, got {value!r}")

    return True


def _positions_from_dict(positions: dict | None) -> TablePositions | None:
    if positions is None:
        return None
    # Keys left out keep the table defaults.
    defaults = TablePositions()
    return TablePositions(
        dealer=positions.get("dealer", defaults.dealer),
        small_blind=positions.get("small_blind", defaults.small_blind),
        big_blind=positions.get("big_blind", defaults.big_blind),
    )
