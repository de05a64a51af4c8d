"""Round bookkeeping helpers for Swiss tournaments."""

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

import math
from typing import Iterable, Optional

from leaguepairing.constants import MIN_BRACKET_PARTICIPANTS
from leaguepairing.exceptions import InvalidArgumentException
from leaguepairing.swiss.models import SwissMatchRecord
from leaguepairing.type_hints import ParticipantId


def recommended_swiss_rounds(participant_count: int) -> int:
    """Default Swiss length: ceil(log2(participant_count))."""
    if participant_count < MIN_BRACKET_PARTICIPANTS:
        raise InvalidArgumentException(
            f"At least {MIN_BRACKET_PARTICIPANTS} participants are required"
        )
    return math.ceil(math.log2(participant_count))


def bye_match_record(participant_id: ParticipantId) -> SwissMatchRecord:
    """Completed record for a round's bye."""
    return SwissMatchRecord(
        participant1_id=participant_id,
        participant2_id=None,
        winner_id=participant_id,
        is_bye=True,
    )


def is_round_complete(records: Iterable[SwissMatchRecord]) -> bool:
    """True when every record of a round has a winner, is a draw or is a bye."""
    return all(record.is_decided for record in records)


def is_swiss_complete(current_round: int, total_rounds: Optional[int]) -> bool:
    """True once the current round reaches the configured total.

    A tournament without a configured total never completes on its own.
    """
    return total_rounds is not None and current_round >= total_rounds
