"""League Pairing: single elimination brackets and Swiss pairing."""

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

from leaguepairing.bracket import (
    BracketMatch,
    BracketSlot,
    NextPosition,
    generate_single_elimination_bracket,
    get_round_label,
    record_bracket_result,
    seed_bracket,
    shuffle_seeds,
    total_bracket_rounds,
    undo_bracket_result,
)
from leaguepairing.exceptions import (
    InvalidArgumentException,
    InvalidMatchRecordException,
    LeaguePairingException,
)
from leaguepairing.swiss import (
    Participant,
    SwissMatchRecord,
    SwissPairing,
    SwissParticipantStanding,
    SwissRoundResult,
    bye_match_record,
    compute_swiss_standings,
    generate_swiss_next_round,
    generate_swiss_round1,
    get_swiss_ranking,
    is_round_complete,
    is_swiss_complete,
    recommended_swiss_rounds,
)

__version__ = "1.0.0"

__all__ = [
    "BracketMatch",
    "BracketSlot",
    "NextPosition",
    "generate_single_elimination_bracket",
    "get_round_label",
    "record_bracket_result",
    "seed_bracket",
    "shuffle_seeds",
    "total_bracket_rounds",
    "undo_bracket_result",
    "InvalidArgumentException",
    "InvalidMatchRecordException",
    "LeaguePairingException",
    "Participant",
    "SwissMatchRecord",
    "SwissPairing",
    "SwissParticipantStanding",
    "SwissRoundResult",
    "bye_match_record",
    "compute_swiss_standings",
    "generate_swiss_next_round",
    "generate_swiss_round1",
    "get_swiss_ranking",
    "is_round_complete",
    "is_swiss_complete",
    "recommended_swiss_rounds",
]
