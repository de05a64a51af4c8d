"""Single elimination bracket generation for League Pairing."""

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

from leaguepairing.bracket.models import BracketMatch, BracketSlot, NextPosition
from leaguepairing.bracket.single_elimination import (
    advance_winner,
    generate_seed_order,
    generate_single_elimination_bracket,
    get_round_label,
    index_matches,
    next_power_of_two,
    record_bracket_result,
    seed_bracket,
    shuffle_seeds,
    total_bracket_rounds,
    undo_bracket_result,
)

__all__ = [
    "BracketSlot",
    "BracketMatch",
    "NextPosition",
    "generate_single_elimination_bracket",
    "generate_seed_order",
    "get_round_label",
    "next_power_of_two",
    "seed_bracket",
    "shuffle_seeds",
    "record_bracket_result",
    "undo_bracket_result",
    "advance_winner",
    "index_matches",
    "total_bracket_rounds",
]
