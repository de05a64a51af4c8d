"""Single elimination bracket generation.

The bracket is built once from a participant count. Round 1 pairs seeds in
standard tournament order (1 vs N, and the top seeds meet as late as
possible); seeds beyond the participant count become byes, which always land
on the strongest seeds. Later rounds carry no seeds and are filled in by
advancement along each slot's ``next_position`` as results are recorded.
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

import random
from typing import Dict, List, Optional, Sequence, Tuple

from leaguepairing.bracket.models import BracketMatch, BracketSlot, NextPosition
from leaguepairing.constants import (
    FIRST_SLOT,
    MIN_BRACKET_PARTICIPANTS,
    ROUND_LABEL_DEFAULT,
    ROUND_LABEL_FINAL,
    ROUND_LABEL_QUARTERFINALS,
    ROUND_LABEL_SEMIFINALS,
    SECOND_SLOT,
)
from leaguepairing.exceptions import InvalidArgumentException
from leaguepairing.type_hints import MaybeParticipantId, ParticipantId, SlotNumber
from leaguepairing.utils import setup_logger

logger = setup_logger(__name__)

MatchIndex = Dict[Tuple[int, int], BracketMatch]


def next_power_of_two(n: int) -> int:
    """Smallest power of two that is >= n."""
    power = 1
    while power < n:
        power *= 2
    return power


def generate_seed_order(bracket_size: int) -> List[int]:
    """Standard seeding order for a bracket of ``bracket_size`` (a power of two).

    Built by doubling: each seed ``e`` in the order for size ``s`` is followed
    by its complement ``2s + 1 - e`` in the order for size ``2s``.

    >>> generate_seed_order(8)
    [1, 8, 4, 5, 2, 7, 3, 6]
    """
    if bracket_size <= 1:
        return [1]

    order = [1, 2]
    while len(order) < bracket_size:
        size = len(order) * 2
        order = [seed for e in order for seed in (e, size + 1 - e)]
    return order


def _check_participant_count(participant_count: int) -> None:
    if participant_count < MIN_BRACKET_PARTICIPANTS:
        raise InvalidArgumentException(
            f"At least {MIN_BRACKET_PARTICIPANTS} participants are required"
        )


def total_bracket_rounds(participant_count: int) -> int:
    """Number of rounds in a single elimination bracket."""
    _check_participant_count(participant_count)
    return next_power_of_two(participant_count).bit_length() - 1


def _next_position(
    round_number: int, position: int, total_rounds: int
) -> Optional[NextPosition]:
    if round_number >= total_rounds:
        return None
    slot = FIRST_SLOT if position % 2 == 1 else SECOND_SLOT
    return NextPosition(
        round=round_number + 1, position=(position + 1) // 2, slot=slot
    )


def generate_single_elimination_bracket(participant_count: int) -> List[BracketSlot]:
    """Build every slot of a single elimination bracket.

    Args:
        participant_count: Number of entrants, at least 2

    Returns:
        ``bracket_size - 1`` slots ordered by round then position

    Raises:
        InvalidArgumentException: If fewer than 2 participants are given
    """
    _check_participant_count(participant_count)

    bracket_size = next_power_of_two(participant_count)
    total_rounds = bracket_size.bit_length() - 1
    seed_order = generate_seed_order(bracket_size)

    logger.debug(
        "Bracket for %s participants: size %s, %s rounds, %s byes",
        participant_count,
        bracket_size,
        total_rounds,
        bracket_size - participant_count,
    )

    slots: List[BracketSlot] = []

    for i in range(bracket_size // 2):
        seed1 = seed_order[2 * i]
        seed2 = seed_order[2 * i + 1]
        position = i + 1
        slots.append(
            BracketSlot(
                round=1,
                position=position,
                seed1=seed1 if seed1 <= participant_count else None,
                seed2=seed2 if seed2 <= participant_count else None,
                is_bye=seed1 > participant_count or seed2 > participant_count,
                next_position=_next_position(1, position, total_rounds),
            )
        )

    for round_number in range(2, total_rounds + 1):
        matches_in_round = bracket_size >> round_number
        for position in range(1, matches_in_round + 1):
            slots.append(
                BracketSlot(
                    round=round_number,
                    position=position,
                    next_position=_next_position(
                        round_number, position, total_rounds
                    ),
                )
            )

    return slots


def get_round_label(round_number: int, total_rounds: int) -> str:
    """Display label for a bracket round."""
    if round_number == total_rounds:
        return ROUND_LABEL_FINAL
    if round_number == total_rounds - 1:
        return ROUND_LABEL_SEMIFINALS
    if round_number == total_rounds - 2:
        return ROUND_LABEL_QUARTERFINALS
    return ROUND_LABEL_DEFAULT.format(round=round_number)


def seed_bracket(
    slots: Sequence[BracketSlot], seeded_participant_ids: Sequence[ParticipantId]
) -> List[BracketMatch]:
    """Assign participants to bracket slots and advance bye winners.

    Args:
        slots: Slots from :func:`generate_single_elimination_bracket`
        seeded_participant_ids: Participant IDs in seed order (seed 1 first)

    Returns:
        One match per slot, in slot order. Bye matches carry their present
        participant as the winner, already placed into the next round.

    Raises:
        InvalidArgumentException: If the ID list does not fit the bracket
    """
    seeds = [
        seed
        for slot in slots
        if slot.round == 1
        for seed in (slot.seed1, slot.seed2)
        if seed is not None
    ]
    participant_count = len(seeded_participant_ids)
    if participant_count != len(seeds):
        raise InvalidArgumentException(
            f"{participant_count} seeded participants do not fit a bracket "
            f"built for {len(seeds)}"
        )
    if len(set(seeded_participant_ids)) != participant_count:
        raise InvalidArgumentException("Seeded participant IDs must be unique")

    def participant_for(seed: Optional[int]) -> Optional[ParticipantId]:
        if seed is None:
            return None
        return seeded_participant_ids[seed - 1]

    matches = [
        BracketMatch(
            round=slot.round,
            position=slot.position,
            participant1_id=participant_for(slot.seed1),
            participant2_id=participant_for(slot.seed2),
            is_bye=slot.is_bye,
            next_position=slot.next_position,
        )
        for slot in slots
    ]
    by_position = index_matches(matches)

    for match in matches:
        if not match.is_bye:
            continue
        match.winner_id = (
            match.participant1_id
            if match.participant1_id is not None
            else match.participant2_id
        )
        advance_winner(match, by_position)

    return matches


def shuffle_seeds(
    participant_ids: Sequence[ParticipantId], rng: Optional[random.Random] = None
) -> List[ParticipantId]:
    """Random seed order for a bracket; the input sequence is left unchanged."""
    rng = rng if rng is not None else random.Random()
    shuffled = list(participant_ids)
    rng.shuffle(shuffled)
    return shuffled


def index_matches(matches: Sequence[BracketMatch]) -> MatchIndex:
    """Matches keyed by ``(round, position)``."""
    return {(match.round, match.position): match for match in matches}


def _set_side(
    match: BracketMatch, slot: SlotNumber, participant_id: MaybeParticipantId
) -> None:
    if slot == FIRST_SLOT:
        match.participant1_id = participant_id
    else:
        match.participant2_id = participant_id


def advance_winner(match: BracketMatch, by_position: MatchIndex) -> None:
    """Place the winner of ``match`` into its next-round slot, if any."""
    target = match.next_position
    if target is None:
        return
    next_match = by_position[(target.round, target.position)]
    _set_side(next_match, target.slot, match.winner_id)
    logger.debug(
        "Winner %s advanced to round %s position %s slot %s",
        match.winner_id,
        target.round,
        target.position,
        target.slot,
    )


def _find_match(
    matches: Sequence[BracketMatch], round_number: int, position: int
) -> Tuple[BracketMatch, MatchIndex]:
    by_position = index_matches(matches)
    match = by_position.get((round_number, position))
    if match is None:
        raise InvalidArgumentException(
            f"No match at round {round_number} position {position}"
        )
    return match, by_position


def record_bracket_result(
    matches: Sequence[BracketMatch],
    round_number: int,
    position: int,
    winner_id: ParticipantId,
) -> BracketMatch:
    """Record the winner of a bracket match and advance them.

    Args:
        matches: Seeded matches from :func:`seed_bracket`, updated in place
        round_number: Round of the decided match
        position: Position of the decided match within its round
        winner_id: One of the two participants of that match

    Returns:
        The decided match

    Raises:
        InvalidArgumentException: If the match does not exist, is not ready,
            already has a result, or ``winner_id`` is not one of its sides
    """
    match, by_position = _find_match(matches, round_number, position)
    if match.winner_id is not None:
        raise InvalidArgumentException(
            f"Round {round_number} position {position} already has a result"
        )
    if match.participant1_id is None or match.participant2_id is None:
        raise InvalidArgumentException(
            f"Round {round_number} position {position} is waiting for a participant"
        )
    if winner_id not in (match.participant1_id, match.participant2_id):
        raise InvalidArgumentException(
            f"{winner_id} is not playing round {round_number} position {position}"
        )

    match.winner_id = winner_id
    advance_winner(match, by_position)
    return match


def undo_bracket_result(
    matches: Sequence[BracketMatch], round_number: int, position: int
) -> BracketMatch:
    """Clear a recorded result and take the winner back out of the next round.

    Refused once the next-round match has been decided, and for byes.

    Raises:
        InvalidArgumentException: If the result cannot be undone
    """
    match, by_position = _find_match(matches, round_number, position)
    if match.is_bye:
        raise InvalidArgumentException("Bye results cannot be undone")
    if match.winner_id is None:
        raise InvalidArgumentException(
            f"Round {round_number} position {position} has no result"
        )

    target = match.next_position
    if target is not None:
        next_match = by_position[(target.round, target.position)]
        if next_match.winner_id is not None:
            raise InvalidArgumentException(
                "Cannot undo a result whose winner has already played "
                "in a subsequent round"
            )
        _set_side(next_match, target.slot, None)

    logger.debug(
        "Undid result of round %s position %s (winner %s)",
        round_number,
        position,
        match.winner_id,
    )
    match.winner_id = None
    return match
