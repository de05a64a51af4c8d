"""Swiss round pairing.

Round 1 pairs participants consecutively in name order. Later rounds pair
by standings with a greedy nearest-available match: each participant, in rank
order, takes the closest-ranked unpaired participant they have not met, and
falls back to a rematch with the closest-ranked one only when no other
candidate is left. This is a heuristic, not a globally optimal matching.
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

from typing import Any, Callable, Iterable, List, Optional, Set

from leaguepairing.swiss.models import (
    Participant,
    SwissPairing,
    SwissParticipantStanding,
    SwissRoundResult,
    as_participant,
)
from leaguepairing.swiss.standings import get_swiss_ranking, participant_name_key
from leaguepairing.type_hints import ParticipantLike, Standings
from leaguepairing.utils import setup_logger

logger = setup_logger(__name__)


def generate_swiss_round1(
    participants: Iterable[ParticipantLike],
    sort_key: Callable[[Participant], Any] = participant_name_key,
) -> SwissRoundResult:
    """Pair the first round.

    Participants are ordered by ``sort_key`` (name by default). With an odd
    count the last one in that order gets the bye; the rest are paired
    (1st, 2nd), (3rd, 4th) and so on.

    Args:
        participants: Participants as ``Participant`` or ``{"id", "name"}``
        sort_key: Deterministic ordering key, replaceable by the caller
    """
    ordered = sorted((as_participant(p) for p in participants), key=sort_key)

    bye_participant_id = None
    if len(ordered) % 2 != 0:
        bye_participant_id = ordered.pop().id
        logger.debug("Round 1 bye: %s", bye_participant_id)

    pairings = [
        SwissPairing(ordered[i].id, ordered[i + 1].id)
        for i in range(0, len(ordered), 2)
    ]
    return SwissRoundResult(pairings=pairings, bye_participant_id=bye_participant_id)


def _select_bye(ranked: List[SwissParticipantStanding]) -> SwissParticipantStanding:
    """Lowest-ranked participant without a bye, else the lowest-ranked."""
    for standing in reversed(ranked):
        if not standing.bye_received:
            return standing
    logger.debug("Every participant has had a bye, repeating for the lowest rank")
    return ranked[-1]


def _find_opponent(
    standing: SwissParticipantStanding,
    candidates: List[SwissParticipantStanding],
    paired: Set[str],
) -> Optional[SwissParticipantStanding]:
    unpaired = [c for c in candidates if c.participant_id not in paired]
    for candidate in unpaired:
        if not standing.has_played(candidate.participant_id):
            return candidate
    if unpaired:
        logger.debug(
            "Forced rematch: %s vs %s",
            standing.participant_id,
            unpaired[0].participant_id,
        )
        return unpaired[0]
    return None


def generate_swiss_next_round(standings: Standings) -> SwissRoundResult:
    """Pair the next round from current standings.

    Args:
        standings: Output of :func:`compute_swiss_standings`

    Returns:
        Pairings in rank order and the bye, if the participant count is odd
    """
    pool = get_swiss_ranking(standings)

    bye_participant_id = None
    if len(pool) % 2 != 0:
        bye = _select_bye(pool)
        bye_participant_id = bye.participant_id
        pool = [s for s in pool if s is not bye]
        logger.debug("Bye assigned to %s", bye_participant_id)

    pairings: List[SwissPairing] = []
    paired: Set[str] = set()
    for i, standing in enumerate(pool):
        if standing.participant_id in paired:
            continue
        opponent = _find_opponent(standing, pool[i + 1 :], paired)
        if opponent is None:
            continue
        pairings.append(SwissPairing(standing.participant_id, opponent.participant_id))
        paired.add(standing.participant_id)
        paired.add(opponent.participant_id)

    return SwissRoundResult(pairings=pairings, bye_participant_id=bye_participant_id)
