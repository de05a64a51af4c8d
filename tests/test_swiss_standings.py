import pytest

from leaguepairing.exceptions import InvalidMatchRecordException
from leaguepairing.swiss import (
    Participant,
    SwissMatchRecord,
    SwissParticipantStanding,
    compute_swiss_standings,
    get_swiss_ranking,
)


def _participants(names):
    return [Participant(id=f"p{i + 1}", name=name) for i, name in enumerate(names)]


def _win(p1, p2, winner, forfeit=False):
    return SwissMatchRecord(p1, p2, winner, is_forfeit=forfeit)


def _draw(p1, p2):
    return SwissMatchRecord(p1, p2, None, is_draw=True)


def _bye(pid):
    return SwissMatchRecord(pid, None, pid, is_bye=True)


# Round 1: Alice beats Bob, Charlie beats Diana
# Round 2: Alice beats Charlie, Bob beats Diana
TWO_ROUND_HISTORY = [
    _win("p1", "p2", "p1"),
    _win("p3", "p4", "p3"),
    _win("p1", "p3", "p1"),
    _win("p2", "p4", "p2"),
]


def test_empty_history_gives_zeroed_standings():
    standings = compute_swiss_standings(_participants(["Alice", "Bob"]), [])
    assert list(standings) == ["p1", "p2"]
    assert standings["p1"] == SwissParticipantStanding(participant_id="p1", name="Alice")


def test_empty_participants():
    assert compute_swiss_standings([], []) == {}
    assert get_swiss_ranking({}) == []


def test_accepts_mapping_participants():
    standings = compute_swiss_standings(
        [{"id": "x", "name": "Xavier"}], [_bye("x")]
    )
    assert standings["x"].name == "Xavier"
    assert standings["x"].points == 1


def test_decisive_win_points():
    participants = _participants(["Alice", "Bob", "Charlie", "Diana"])
    matches = [_win("p1", "p2", "p1"), _win("p3", "p4", "p4")]
    standings = compute_swiss_standings(participants, matches)

    assert standings["p1"].points == 1
    assert standings["p1"].wins == 1
    assert standings["p2"].points == 0
    assert standings["p2"].losses == 1
    assert standings["p4"].points == 1
    assert standings["p3"].points == 0
    assert standings["p1"].opponent_ids == ["p2"]
    assert standings["p2"].opponent_ids == ["p1"]


def test_draw_points():
    standings = compute_swiss_standings(
        _participants(["Alice", "Bob"]), [_draw("p1", "p2")]
    )
    for pid in ("p1", "p2"):
        assert standings[pid].points == 0.5
        assert standings[pid].draws == 1
        assert standings[pid].wins == 0
        assert standings[pid].losses == 0


def test_bye_points_and_no_opponent():
    participants = _participants(["Alice", "Bob", "Charlie"])
    standings = compute_swiss_standings(
        participants, [_win("p1", "p2", "p1"), _bye("p3")]
    )
    charlie = standings["p3"]
    assert charlie.points == 1
    assert charlie.wins == 1
    assert charlie.bye_received
    assert charlie.opponent_ids == []
    assert charlie.buchholz == 0
    assert not standings["p1"].bye_received
    assert all(s.losses == 0 for s in standings.values() if s.participant_id != "p2")


def test_bye_in_second_slot():
    standings = compute_swiss_standings(
        _participants(["Alice"]), [SwissMatchRecord(None, "p1", "p1", is_bye=True)]
    )
    assert standings["p1"].points == 1
    assert standings["p1"].bye_received


def test_forfeit_counts_as_win_and_loss():
    standings = compute_swiss_standings(
        _participants(["Alice", "Bob"]), [_win("p1", "p2", "p2", forfeit=True)]
    )
    assert standings["p2"].points == 1
    assert standings["p2"].wins == 1
    assert standings["p1"].points == 0
    assert standings["p1"].losses == 1
    assert standings["p1"].opponent_ids == ["p2"]


def test_buchholz_uses_final_points():
    participants = _participants(["Alice", "Bob", "Charlie", "Diana"])
    standings = compute_swiss_standings(participants, TWO_ROUND_HISTORY)

    assert [standings[p].points for p in ("p1", "p2", "p3", "p4")] == [2, 1, 1, 0]
    for standing in standings.values():
        assert standing.buchholz == 2


def test_buchholz_with_draws():
    participants = _participants(["Alice", "Bob", "Charlie"])
    matches = [_draw("p1", "p2"), _bye("p3"), _win("p3", "p1", "p3"), _bye("p2")]
    standings = compute_swiss_standings(participants, matches)

    assert standings["p1"].points == 0.5
    assert standings["p2"].points == 1.5
    assert standings["p3"].points == 2
    assert standings["p1"].buchholz == 3.5
    assert standings["p2"].buchholz == 0.5
    assert standings["p3"].buchholz == 0.5


def test_many_half_points_stay_exact():
    participants = _participants(["Alice", "Bob"])
    matches = [_draw("p1", "p2") for _ in range(1001)]
    standings = compute_swiss_standings(participants, matches)
    assert standings["p1"].points == 500.5
    assert standings["p1"].buchholz == 1001 * 500.5


def test_inputs_are_not_mutated():
    participants = _participants(["Alice", "Bob"])
    matches = [_win("p1", "p2", "p1")]
    first = compute_swiss_standings(participants, matches)
    first["p1"].opponent_ids.append("tampered")
    second = compute_swiss_standings(participants, matches)
    assert second["p1"].opponent_ids == ["p2"]
    assert matches == [_win("p1", "p2", "p1")]


def test_unknown_participants_are_skipped():
    participants = _participants(["Alice", "Bob"])
    matches = [
        _win("p1", "ghost", "p1"),
        _bye("ghost"),
        SwissMatchRecord("p1", None, "p1"),
        _win("p1", "p2", "p2"),
    ]
    standings = compute_swiss_standings(participants, matches)
    assert "ghost" not in standings
    assert standings["p1"].points == 0
    assert standings["p1"].opponent_ids == ["p2"]
    assert standings["p2"].points == 1


@pytest.mark.parametrize(
    "record",
    [
        _win("p1", "ghost", "p1"),
        _bye("ghost"),
        SwissMatchRecord(None, None, None, is_bye=True),
        SwissMatchRecord("p1", None, "p1"),
        SwissMatchRecord("p1", "p2", None),
        SwissMatchRecord("p1", "p2", "ghost"),
    ],
)
def test_strict_mode_rejects_malformed_records(record):
    with pytest.raises(InvalidMatchRecordException):
        compute_swiss_standings(_participants(["Alice", "Bob"]), [record], strict=True)


def test_strict_mode_accepts_well_formed_history():
    participants = _participants(["Alice", "Bob", "Charlie", "Diana"])
    lenient = compute_swiss_standings(participants, TWO_ROUND_HISTORY)
    strict = compute_swiss_standings(participants, TWO_ROUND_HISTORY, strict=True)
    assert lenient == strict


def test_ranking_order():
    participants = _participants(["Diana", "Bob", "Alice", "Charlie"])
    standings = {
        "p1": SwissParticipantStanding("p1", "Diana", points=2, buchholz=1),
        "p2": SwissParticipantStanding("p2", "Bob", points=2, buchholz=3),
        "p3": SwissParticipantStanding("p3", "Alice", points=1, buchholz=3),
        "p4": SwissParticipantStanding("p4", "Charlie", points=1, buchholz=3),
    }
    ranking = get_swiss_ranking(standings)
    assert [s.name for s in ranking] == ["Bob", "Diana", "Alice", "Charlie"]
    assert len(participants) == len(ranking)


def test_ranking_is_stable_across_calls():
    participants = _participants(["Alice", "Bob", "Charlie", "Diana"])
    standings = compute_swiss_standings(participants, TWO_ROUND_HISTORY)
    first = [s.participant_id for s in get_swiss_ranking(standings)]
    assert first == ["p1", "p2", "p3", "p4"]
    for _ in range(5):
        assert [s.participant_id for s in get_swiss_ranking(standings)] == first


def test_ranking_name_order_ignores_case():
    standings = {
        "p1": SwissParticipantStanding("p1", "bob"),
        "p2": SwissParticipantStanding("p2", "Alice"),
        "p3": SwissParticipantStanding("p3", "Charlie"),
    }
    assert [s.name for s in get_swiss_ranking(standings)] == ["Alice", "bob", "Charlie"]


def test_standing_serialization():
    standing = SwissParticipantStanding(
        "p1", "Alice", points=1.5, buchholz=2.0, opponent_ids=["p2"], wins=1, draws=1
    )
    assert SwissParticipantStanding.from_dict(standing.to_dict()) == standing


def test_games_played_counts_byes_draws_and_losses():
    participants = _participants(["Alice", "Bob", "Charlie"])
    matches = [_draw("p1", "p2"), _bye("p3"), _win("p3", "p1", "p3")]
    standings = compute_swiss_standings(participants, matches)

    assert standings["p1"].games_played == 2
    assert standings["p1"].losses == 1
    assert standings["p1"].points == 0.5
    assert standings["p2"].games_played == 1
    assert standings["p3"].games_played == 2
