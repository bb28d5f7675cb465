import pytest

from tablestatus.engine.enums import GameFormat
from tablestatus.engine.snapshot_builder import StatusSnapshotBuilder, is_sit_and_go_waiting, parse_game_format
from tablestatus.engine.status_data import UNSEATED, TablePositions, WaitingForPlayerMessage
from tablestatus.engine.status_engine import derive_status_messages
from tests.fakes import FakePlayer, FakeTableView


def build_from_view(builder, view, **kwargs):
    return builder.build(
        current_user_seat=view.current_user_seat,
        next_to_act_seat=view.next_to_act_seat,
        is_game_in_progress=view.is_game_in_progress,
        legal_actions=view.legal_actions,
        active_players=view.active_players,
        is_sit_and_go_waiting_for_players=is_sit_and_go_waiting(
            view.game_format,
            view.current_user_seat is not None and view.current_user_seat >= 0,
            view.empty_seat_count,
        ),
        **kwargs,
    )


class TestStatusSnapshotBuilder:

    def setup_method(self):
        self.builder = StatusSnapshotBuilder()

    def test_counts_collections(self):
        view = FakeTableView(
            current_user_seat=2, next_to_act_seat=2, is_game_in_progress=True,
            legal_actions=["fold", "call"],
            active_players=[FakePlayer(0), FakePlayer(1), FakePlayer(2)],
        )
        snapshot = build_from_view(self.builder, view)
        assert snapshot.has_legal_actions is True
        assert snapshot.total_active_players == 3

    def test_missing_collections_count_as_empty(self):
        snapshot = self.builder.build(
            current_user_seat=1, next_to_act_seat=1, is_game_in_progress=True,
            legal_actions=None, active_players=None,
        )
        assert snapshot.has_legal_actions is False
        assert snapshot.total_active_players == 0

    @pytest.mark.parametrize("raw,expected", [(None, UNSEATED), (-1, UNSEATED), (-7, UNSEATED), (0, 0), (4, 4)])
    def test_normalizes_current_user_seat(self, raw, expected):
        snapshot = self.builder.build(raw, None, False, [], [])
        assert snapshot.current_user_seat == expected

    @pytest.mark.parametrize("raw,expected", [(None, None), (-1, None), (0, 0), (3, 3)])
    def test_normalizes_next_to_act_seat(self, raw, expected):
        snapshot = self.builder.build(1, raw, True, [], [])
        assert snapshot.next_to_act_seat == expected

    def test_derives_turn_flag_when_not_given(self):
        snapshot = self.builder.build(0, 0, True, ["check"], [FakePlayer(0), FakePlayer(1)])
        assert snapshot.is_current_user_turn is True

    def test_derived_turn_flag_false_for_other_seat(self):
        snapshot = self.builder.build(0, 1, True, ["check"], [FakePlayer(0), FakePlayer(1)])
        assert snapshot.is_current_user_turn is False

    def test_unseated_observer_never_has_turn(self):
        snapshot = self.builder.build(None, None, True, [], [])
        assert snapshot.is_current_user_turn is False

    def test_caller_turn_flag_is_kept(self):
        snapshot = self.builder.build(0, 1, True, ["check"], [], is_current_user_turn=True)
        assert snapshot.is_current_user_turn is True

    def test_builder_default_positions(self):
        builder = StatusSnapshotBuilder(positions=TablePositions(dealer=3, small_blind=4, big_blind=5))
        snapshot = builder.build(1, 3, True, [], [FakePlayer(1), FakePlayer(3)])
        assert derive_status_messages(snapshot)[1] == WaitingForPlayerMessage(3, "Waiting for Dealer to act")

    def test_call_positions_override_builder_default(self):
        builder = StatusSnapshotBuilder(positions=TablePositions(dealer=3))
        override = TablePositions(dealer=None, small_blind=3, big_blind=4)
        snapshot = builder.build(1, 3, True, [], [], positions=override)
        assert snapshot.positions == override


class TestSitAndGoWaiting:

    def test_waiting_when_seated_with_empty_seats(self):
        assert is_sit_and_go_waiting(GameFormat.SIT_AND_GO, True, 3) is True

    def test_accepts_string_format(self):
        assert is_sit_and_go_waiting("sit-and-go", True, 1) is True

    @pytest.mark.parametrize("game_format,playing,empty", [
        (GameFormat.CASH, True, 3),
        (GameFormat.TOURNAMENT, True, 3),
        (GameFormat.SIT_AND_GO, False, 3),
        (GameFormat.SIT_AND_GO, True, 0),
    ])
    def test_not_waiting(self, game_format, playing, empty):
        assert is_sit_and_go_waiting(game_format, playing, empty) is False

    def test_full_view_suppresses_hand_complete(self):
        view = FakeTableView(
            current_user_seat=1, is_game_in_progress=False,
            active_players=[FakePlayer(0), FakePlayer(1)],
            game_format="sit-and-go", empty_seat_count=4,
        )
        msgs = derive_status_messages(build_from_view(StatusSnapshotBuilder(), view))
        assert [m.kind.value for m in msgs] == ["seat-label"]


class TestParseGameFormat:

    @pytest.mark.parametrize("value,expected", [
        (GameFormat.CASH, GameFormat.CASH),
        ("cash", GameFormat.CASH),
        (" Sit-And-Go ", GameFormat.SIT_AND_GO),
        ("tournament", GameFormat.TOURNAMENT),
    ])
    def test_valid(self, value, expected):
        assert parse_game_format(value) == expected

    def test_unknown_string(self):
        with pytest.raises(ValueError, match="Unknown game format"):
            parse_game_format("freeroll")

    def test_wrong_type(self):
        with pytest.raises(ValueError, match="Unsupported game format type"):
            parse_game_format(3)
