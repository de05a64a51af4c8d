import pytest

from leaguepairing.exceptions import RoundValidationException
from leaguepairing.swiss import (
    SwissPairing,
    SwissParticipantStanding,
    SwissRoundResult,
)
from leaguepairing.validation import CriterionStatus, validate_swiss_round


def _standings(ids, played=(), byes=()):
    standings = {
        pid: SwissParticipantStanding(participant_id=pid, name=pid.upper())
        for pid in ids
    }
    for a, b in played:
        standings[a].opponent_ids.append(b)
        standings[b].opponent_ids.append(a)
    for pid in byes:
        standings[pid].bye_received = True
    return standings


def _round(pairs, bye=None):
    return SwissRoundResult([SwissPairing(a, b) for a, b in pairs], bye)


def _status(report, criterion):
    return next(r for r in report.criteria_results if r.criterion == criterion).status


def test_valid_round():
    report = validate_swiss_round(
        _round([("a", "b")], bye="c"), _standings(["a", "b", "c"])
    )
    assert report.is_valid
    assert report.quality_warnings == []
    assert report.compliance_percentage == 100.0
    assert report.overall_status == CriterionStatus.COMPLIANT


def test_missing_and_duplicate_participants():
    report = validate_swiss_round(
        _round([("a", "b"), ("b", "c")]), _standings(["a", "b", "c", "d"])
    )
    assert not report.is_valid
    completeness = report.violations[0]
    assert completeness.criterion == "R1"
    assert completeness.details == {"duplicated": ["b"], "missing": ["d"]}


def test_self_and_unknown_pairings():
    report = validate_swiss_round(
        _round([("a", "a"), ("b", "zz")]), _standings(["a", "b"])
    )
    assert _status(report, "R2") == CriterionStatus.VIOLATION


def test_bye_parity():
    even = validate_swiss_round(_round([("a", "b")], bye="c"), _standings(["a", "b", "c", "d"]))
    assert _status(even, "R3") == CriterionStatus.VIOLATION

    odd = validate_swiss_round(_round([("a", "b")]), _standings(["a", "b", "c"]))
    assert _status(odd, "R3") == CriterionStatus.VIOLATION


def test_rematch_is_a_quality_warning():
    report = validate_swiss_round(
        _round([("a", "b")]), _standings(["a", "b"], played=[("a", "b")])
    )
    assert report.is_valid
    assert [w.criterion for w in report.quality_warnings] == ["Q1"]
    assert report.quality_warnings[0].details["rematches"] == [("a", "b")]


def test_repeat_bye_only_flagged_when_avoidable():
    avoidable = validate_swiss_round(
        _round([("a", "b")], bye="c"), _standings(["a", "b", "c"], byes=["c"])
    )
    assert _status(avoidable, "Q2") == CriterionStatus.VIOLATION

    forced = validate_swiss_round(
        _round([("a", "b")], bye="c"), _standings(["a", "b", "c"], byes=["a", "b", "c"])
    )
    assert _status(forced, "Q2") == CriterionStatus.COMPLIANT


def test_no_bye_is_not_applicable():
    report = validate_swiss_round(_round([("a", "b")]), _standings(["a", "b"]))
    assert _status(report, "Q2") == CriterionStatus.NOT_APPLICABLE


def test_raise_on_violation():
    with pytest.raises(RoundValidationException) as excinfo:
        validate_swiss_round(
            _round([]), _standings(["a", "b"]), raise_on_violation=True
        )
    assert excinfo.value.report is not None
    assert not excinfo.value.report.is_valid


def test_report_serialization():
    report = validate_swiss_round(_round([("a", "b")]), _standings(["a", "b"]))
    data = report.to_dict()
    assert data["overall_status"] == "COMPLIANT"
    assert [c["criterion"] for c in data["criteria"]] == ["R1", "R2", "R3", "Q1", "Q2"]
