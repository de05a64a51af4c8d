"""Swiss round validation.

Checks a generated round against the standings it was paired from. Absolute
criteria (R1-R3) must hold for any usable round; quality criteria (Q1-Q2)
flag outcomes the greedy pairing avoids when it can but may be forced into.
"""

# League Pairing
# Copyright (C) 2025  League Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from leaguepairing.constants import (
    CRITERION_BYE_PARITY,
    CRITERION_COMPLETENESS,
    CRITERION_NAMES,
    CRITERION_REMATCH,
    CRITERION_REPEAT_BYE,
    CRITERION_VALID_PAIRS,
)
from leaguepairing.exceptions import RoundValidationException
from leaguepairing.swiss.models import SwissRoundResult
from leaguepairing.type_hints import Standings
from leaguepairing.utils import setup_logger

logger = setup_logger(__name__)


class CriterionStatus(Enum):
    """Status of a criterion check."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class ViolationType(Enum):
    """Types of criterion violations."""

    ABSOLUTE = "ABSOLUTE"  # R1-R3: Must not violate
    QUALITY = "QUALITY"  # Q1-Q2: Should minimize


@dataclass
class CriterionResult:
    """Result of validating a single criterion."""

    criterion: str
    status: CriterionStatus
    violation_type: Optional[ViolationType] = None
    description: str = ""
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_violation(self) -> bool:
        return self.status == CriterionStatus.VIOLATION

    def to_dict(self) -> Dict[str, Any]:
        return {
            "criterion": self.criterion,
            "name": CRITERION_NAMES.get(self.criterion, self.criterion),
            "status": self.status.value,
            "violation_type": (
                self.violation_type.value if self.violation_type else None
            ),
            "description": self.description,
            "details": self.details,
        }


@dataclass
class ValidationReport:
    """Complete validation report for one round."""

    violations: List[CriterionResult]
    quality_warnings: List[CriterionResult]
    criteria_results: List[CriterionResult]
    summary: str

    @property
    def is_valid(self) -> bool:
        """No absolute criterion is violated."""
        return not self.violations

    @property
    def overall_status(self) -> CriterionStatus:
        return CriterionStatus.VIOLATION if self.violations else CriterionStatus.COMPLIANT

    @property
    def compliance_percentage(self) -> float:
        """Share of applicable criteria that are compliant."""
        applicable = [
            r
            for r in self.criteria_results
            if r.status != CriterionStatus.NOT_APPLICABLE
        ]
        if not applicable:
            return 100.0
        compliant = sum(1 for r in applicable if r.status == CriterionStatus.COMPLIANT)
        return compliant / len(applicable) * 100.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "overall_status": self.overall_status.value,
            "compliance_percentage": self.compliance_percentage,
            "criteria": [r.to_dict() for r in self.criteria_results],
        }


def _compliant(criterion: str, description: str) -> CriterionResult:
    return CriterionResult(
        criterion=criterion,
        status=CriterionStatus.COMPLIANT,
        description=description,
    )


class RoundValidator:
    """Validates a Swiss round against the standings it was paired from."""

    def check_r1_completeness(
        self, round_result: SwissRoundResult, standings: Standings
    ) -> CriterionResult:
        """R1: Every participant is paired or has the bye, exactly once."""
        counts = Counter(round_result.participant_ids())
        duplicated = sorted(pid for pid, n in counts.items() if n > 1)
        missing = sorted(pid for pid in standings if pid not in counts)
        if duplicated or missing:
            return CriterionResult(
                criterion=CRITERION_COMPLETENESS,
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description=(
                    f"{len(duplicated)} placed more than once, "
                    f"{len(missing)} not placed"
                ),
                details={"duplicated": duplicated, "missing": missing},
            )
        return _compliant(CRITERION_COMPLETENESS, "Every participant placed once")

    def check_r2_valid_pairs(
        self, round_result: SwissRoundResult, standings: Standings
    ) -> CriterionResult:
        """R2: Nobody is paired with themselves or with an unknown ID."""
        self_pairs = [
            pairing.as_tuple()
            for pairing in round_result.pairings
            if pairing.participant1_id == pairing.participant2_id
        ]
        unknown = sorted(
            {pid for pid in round_result.participant_ids() if pid not in standings}
        )
        if self_pairs or unknown:
            return CriterionResult(
                criterion=CRITERION_VALID_PAIRS,
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description=(
                    f"{len(self_pairs)} self pairings, {len(unknown)} unknown IDs"
                ),
                details={"self_pairs": self_pairs, "unknown": unknown},
            )
        return _compliant(CRITERION_VALID_PAIRS, "All pairings are valid")

    def check_r3_bye_parity(
        self, round_result: SwissRoundResult, standings: Standings
    ) -> CriterionResult:
        """R3: A bye is given exactly when the participant count is odd."""
        needs_bye = len(standings) % 2 != 0
        has_bye = round_result.bye_participant_id is not None
        if needs_bye != has_bye:
            return CriterionResult(
                criterion=CRITERION_BYE_PARITY,
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.ABSOLUTE,
                description=(
                    "Missing bye for an odd participant count"
                    if needs_bye
                    else "Bye given with an even participant count"
                ),
                details={"participant_count": len(standings)},
            )
        return _compliant(CRITERION_BYE_PARITY, "Bye matches participant parity")

    def check_q1_rematches(
        self, round_result: SwissRoundResult, standings: Standings
    ) -> CriterionResult:
        """Q1: Pairs that have already met."""
        rematches = []
        for pairing in round_result.pairings:
            standing = standings.get(pairing.participant1_id)
            if standing is not None and standing.has_played(pairing.participant2_id):
                rematches.append(pairing.as_tuple())
        if rematches:
            return CriterionResult(
                criterion=CRITERION_REMATCH,
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.QUALITY,
                description=f"{len(rematches)} rematches",
                details={"rematches": rematches},
            )
        return _compliant(CRITERION_REMATCH, "No rematches")

    def check_q2_repeat_bye(
        self, round_result: SwissRoundResult, standings: Standings
    ) -> CriterionResult:
        """Q2: Repeat bye while someone without a bye was available."""
        bye_id = round_result.bye_participant_id
        if bye_id is None:
            return CriterionResult(
                criterion=CRITERION_REPEAT_BYE,
                status=CriterionStatus.NOT_APPLICABLE,
                description="No bye assigned in this round",
            )
        bye_standing = standings.get(bye_id)
        eligible = [s.participant_id for s in standings.values() if not s.bye_received]
        if bye_standing is not None and bye_standing.bye_received and eligible:
            return CriterionResult(
                criterion=CRITERION_REPEAT_BYE,
                status=CriterionStatus.VIOLATION,
                violation_type=ViolationType.QUALITY,
                description=f"Repeat bye: {bye_standing.name}",
                details={"participant_id": bye_id, "eligible": sorted(eligible)},
            )
        return _compliant(CRITERION_REPEAT_BYE, f"Bye assignment valid: {bye_id}")

    def validate_round(
        self, round_result: SwissRoundResult, standings: Standings
    ) -> ValidationReport:
        """Run every criterion and collect the report."""
        results = [
            self.check_r1_completeness(round_result, standings),
            self.check_r2_valid_pairs(round_result, standings),
            self.check_r3_bye_parity(round_result, standings),
            self.check_q1_rematches(round_result, standings),
            self.check_q2_repeat_bye(round_result, standings),
        ]
        violations = [
            r
            for r in results
            if r.is_violation and r.violation_type == ViolationType.ABSOLUTE
        ]
        quality_warnings = [
            r
            for r in results
            if r.is_violation and r.violation_type == ViolationType.QUALITY
        ]

        if violations:
            summary = (
                f"Absolute violations detected - {len(violations)} criteria "
                f"failed; {len(quality_warnings)} quality warnings"
            )
        else:
            summary = (
                f"Absolute criteria satisfied; {len(quality_warnings)} "
                "quality criteria flagged"
            )
        logger.info("Round validation complete: %s", summary)

        return ValidationReport(
            violations=violations,
            quality_warnings=quality_warnings,
            criteria_results=results,
            summary=summary,
        )


def validate_swiss_round(
    round_result: SwissRoundResult, standings: Standings, raise_on_violation=False
) -> ValidationReport:
    """Quick validation function for a Swiss round.

    Raises:
        RoundValidationException: If ``raise_on_violation`` and an absolute
            criterion fails
    """
    report = RoundValidator().validate_round(round_result, standings)
    if raise_on_violation and not report.is_valid:
        raise RoundValidationException(report.summary, report=report)
    return report
