import json

import pytest

from leaguepairing.cli import create_completer, create_parser, main
from leaguepairing.swiss import Participant, SwissMatchRecord
from leaguepairing.tournament_file import TournamentFile


@pytest.fixture
def tournament_path(tmp_path):
    tournament = TournamentFile(
        name="Club Night",
        participants=[
            Participant("p1", "Alice"),
            Participant("p2", "Bob"),
            Participant("p3", "Charlie"),
            Participant("p4", "Diana"),
        ],
        matches=[
            SwissMatchRecord("p1", "p2", "p1"),
            SwissMatchRecord("p3", "p4", "p3"),
        ],
    )
    return str(tournament.save(tmp_path / "club.json"))


def test_bracket_text(capsys):
    assert main(["bracket", "--participants", "5"]) == 0
    out = capsys.readouterr().out
    assert "Quarterfinals" in out
    assert "Semifinals" in out
    assert "Final" in out
    assert "Match 1: #1 vs BYE -> R2 M1 (slot 1)" in out
    assert "Match 2: #4 vs #5 -> R2 M1 (slot 2)" in out


def test_bracket_json(capsys):
    assert main(["bracket", "--participants", "4", "--json"]) == 0
    slots = json.loads(capsys.readouterr().out)
    assert len(slots) == 3
    assert (slots[0]["seed1"], slots[0]["seed2"]) == (1, 4)
    assert slots[-1]["next_position"] is None


def test_bracket_too_small_fails(capsys):
    assert main(["bracket", "--participants", "1"]) == 1
    assert "Error" in capsys.readouterr().err


def test_round1_json(tournament_path, capsys):
    assert main(["round1", "--file", tournament_path, "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["pairings"] == [
        {"participant1_id": "p1", "participant2_id": "p2"},
        {"participant1_id": "p3", "participant2_id": "p4"},
    ]
    assert data["bye_participant_id"] is None


def test_next_round_text(tournament_path, capsys):
    assert main(["next-round", "--file", tournament_path]) == 0
    out = capsys.readouterr().out
    assert "Alice vs Charlie" in out
    assert "Bob vs Diana" in out


def test_standings_json(tournament_path, capsys):
    assert main(["standings", "--file", tournament_path, "--json"]) == 0
    ranking = json.loads(capsys.readouterr().out)
    assert [row["name"] for row in ranking] == ["Alice", "Charlie", "Bob", "Diana"]
    assert ranking[0]["points"] == 1.0


def test_standings_strict_rejects_bad_record(tmp_path, capsys):
    path = TournamentFile(
        participants=[Participant("p1", "Alice"), Participant("p2", "Bob")],
        matches=[SwissMatchRecord("p1", "ghost", "p1")],
    ).save(tmp_path / "bad.json")

    assert main(["standings", "--file", str(path)]) == 0
    assert main(["standings", "--file", str(path), "--strict"]) == 1
    assert "unknown participant" in capsys.readouterr().err


def test_validate_json(tournament_path, capsys):
    assert main(["validate", "--file", tournament_path, "--json"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["overall_status"] == "COMPLIANT"


def test_missing_file_fails(tmp_path, capsys):
    assert main(["round1", "--file", str(tmp_path / "nope.json")]) == 1
    assert "Cannot load" in capsys.readouterr().err


def test_simulate_swiss(tmp_path, capsys):
    output = tmp_path / "sim.json"
    code = main(
        [
            "simulate",
            "--players",
            "9",
            "--seed",
            "3",
            "--validate",
            "--output",
            str(output),
        ]
    )
    assert code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["format"] == "swiss"
    assert len(data["rounds"]) == 4
    assert "Tournament written to" in capsys.readouterr().out


def test_simulate_single_elimination(capsys):
    code = main(
        ["simulate", "--players", "6", "--format", "single_elimination", "--seed", "1"]
    )
    assert code == 0
    assert "Champion: Player-" in capsys.readouterr().out


def test_parser_requires_file():
    with pytest.raises(SystemExit):
        create_parser().parse_args(["standings"])


def test_completer_knows_subcommands():
    completer = create_completer()
    assert {"bracket", "round1", "next-round", "standings", "simulate", "validate"} <= set(
        completer.options
    )


def test_simulate_unwritable_output_fails(tmp_path, capsys):
    output = tmp_path / "missing" / "sim.json"
    code = main(
        ["simulate", "--players", "4", "--seed", "1", "--output", str(output)]
    )
    assert code == 1
    assert "Cannot write" in capsys.readouterr().err
    assert not output.exists()


def test_standings_text_shows_games_played(tournament_path, capsys):
    assert main(["standings", "--file", tournament_path]) == 0
    out = capsys.readouterr().out
    assert "GP" in out
    assert " 0.0   1  1-0-0" in out
