"""Swiss system standings and pairing for League Pairing.

Typical flow: pair round 1 with :func:`generate_swiss_round1`, then after each
round recompute standings from the full history with
:func:`compute_swiss_standings` and pair the next round with
:func:`generate_swiss_next_round`. :func:`get_swiss_ranking` gives the
leaderboard at any point.
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

from leaguepairing.swiss.models import (
    Participant,
    SwissMatchRecord,
    SwissPairing,
    SwissParticipantStanding,
    SwissRoundResult,
)
from leaguepairing.swiss.pairing import generate_swiss_next_round, generate_swiss_round1
from leaguepairing.swiss.rounds import (
    bye_match_record,
    is_round_complete,
    is_swiss_complete,
    recommended_swiss_rounds,
)
from leaguepairing.swiss.standings import (
    compute_swiss_standings,
    get_swiss_ranking,
    name_key,
    participant_name_key,
    ranking_key,
)

__all__ = [
    "Participant",
    "SwissMatchRecord",
    "SwissPairing",
    "SwissParticipantStanding",
    "SwissRoundResult",
    "compute_swiss_standings",
    "generate_swiss_round1",
    "generate_swiss_next_round",
    "get_swiss_ranking",
    "name_key",
    "participant_name_key",
    "ranking_key",
    "bye_match_record",
    "is_round_complete",
    "is_swiss_complete",
    "recommended_swiss_rounds",
]
