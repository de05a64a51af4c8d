"""Swiss standings computation.

Standings are recomputed from the full match history on every call, never
updated incrementally. Buchholz is taken from the final points table, so it
reflects each opponent's total score rather than their score when played.
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

from typing import Dict, Iterable, List, Optional, Tuple

from leaguepairing.constants import BYE_SCORE, DRAW_SCORE, LOSS_SCORE, WIN_SCORE
from leaguepairing.exceptions import InvalidMatchRecordException
from leaguepairing.swiss.models import (
    Participant,
    SwissMatchRecord,
    SwissParticipantStanding,
    as_participant,
)
from leaguepairing.type_hints import ParticipantLike, Standings
from leaguepairing.utils import setup_logger

logger = setup_logger(__name__)


def name_key(name: str) -> Tuple[str, str]:
    """Case-insensitive name order with the raw name as a stable fallback."""
    return (name.casefold(), name)


def participant_name_key(participant: Participant) -> Tuple[str, str]:
    """Default round-1 ordering key: participant name."""
    return name_key(participant.name)


def ranking_key(standing: SwissParticipantStanding) -> Tuple:
    """Canonical ranking: points desc, Buchholz desc, name asc."""
    return (
        -standing.points,
        -standing.buchholz,
        name_key(standing.name),
        standing.participant_id,
    )


def _reject(strict: bool, record: SwissMatchRecord, reason: str) -> None:
    if strict:
        raise InvalidMatchRecordException(f"{reason}: {record}")
    logger.debug("Skipping match record (%s): %s", reason, record)


def _credit_win(
    winner: SwissParticipantStanding, loser: Optional[SwissParticipantStanding]
) -> None:
    winner.points += WIN_SCORE
    winner.wins += 1
    if loser is not None:
        loser.points += LOSS_SCORE
        loser.losses += 1


def compute_swiss_standings(
    participants: Iterable[ParticipantLike],
    completed_matches: Iterable[SwissMatchRecord],
    strict: bool = False,
) -> Standings:
    """Fold a match history into per-participant standings.

    Args:
        participants: Participants as ``Participant`` or ``{"id", "name"}``
        completed_matches: Completed match records, in play order
        strict: Raise on malformed or dangling records instead of skipping them

    Returns:
        Standings keyed by participant ID, in participant input order

    Raises:
        InvalidMatchRecordException: Only in strict mode
    """
    standings: Dict[str, SwissParticipantStanding] = {}
    for item in participants:
        participant = as_participant(item)
        standings[participant.id] = SwissParticipantStanding(
            participant_id=participant.id, name=participant.name
        )

    for match in completed_matches:
        if match.is_bye:
            bye_id = (
                match.participant1_id
                if match.participant1_id is not None
                else match.participant2_id
            )
            standing = standings.get(bye_id) if bye_id is not None else None
            if standing is None:
                _reject(strict, match, "bye for unknown participant")
                continue
            standing.points += BYE_SCORE
            standing.wins += 1
            standing.bye_received = True
            continue

        if match.participant1_id is None or match.participant2_id is None:
            _reject(strict, match, "match is missing a participant")
            continue

        s1 = standings.get(match.participant1_id)
        s2 = standings.get(match.participant2_id)
        if s1 is None or s2 is None:
            _reject(strict, match, "match names an unknown participant")
            continue

        s1.opponent_ids.append(s2.participant_id)
        s2.opponent_ids.append(s1.participant_id)

        if match.is_draw:
            s1.points += DRAW_SCORE
            s2.points += DRAW_SCORE
            s1.draws += 1
            s2.draws += 1
        elif match.winner_id == s1.participant_id:
            _credit_win(s1, s2)
        elif match.winner_id == s2.participant_id:
            _credit_win(s2, s1)
        elif strict:
            raise InvalidMatchRecordException(
                f"match has no valid winner: {match}"
            )
        else:
            logger.debug("Match without a recognised winner: %s", match)

    for standing in standings.values():
        standing.buchholz = sum(
            standings[opponent_id].points for opponent_id in standing.opponent_ids
        )

    return standings


def get_swiss_ranking(standings: Standings) -> List[SwissParticipantStanding]:
    """All participants sorted by the canonical ranking."""
    return sorted(standings.values(), key=ranking_key)
