from enum import Enum


class MessageKind(str, Enum):
    SEAT_LABEL = "seat-label"
    YOUR_TURN = "your-turn"
    WAITING_FOR_PLAYER = "waiting-for-player"
    HAND_COMPLETE = "hand-complete"


class GameFormat(str, Enum):
    CASH = "cash"
    SIT_AND_GO = "sit-and-go"
    TOURNAMENT = "tournament"
