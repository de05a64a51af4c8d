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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Match outcome points
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0
BYE_SCORE = WIN_SCORE  # A bye always counts as a full-point win

# Single elimination
MIN_BRACKET_PARTICIPANTS = 2
FIRST_SLOT = 1
SECOND_SLOT = 2

# Round labels shown for the last rounds of a bracket
ROUND_LABEL_FINAL = "Final"
ROUND_LABEL_SEMIFINALS = "Semifinals"
ROUND_LABEL_QUARTERFINALS = "Quarterfinals"
ROUND_LABEL_DEFAULT = "Round {round}"

# Tournament formats
FORMAT_SWISS = "swiss"
FORMAT_SINGLE_ELIMINATION = "single_elimination"
TOURNAMENT_FORMATS = (FORMAT_SWISS, FORMAT_SINGLE_ELIMINATION)

# Round validation criteria
CRITERION_COMPLETENESS = "R1"
CRITERION_VALID_PAIRS = "R2"
CRITERION_BYE_PARITY = "R3"
CRITERION_REMATCH = "Q1"
CRITERION_REPEAT_BYE = "Q2"

CRITERION_NAMES = {
    CRITERION_COMPLETENESS: "Every participant placed exactly once",
    CRITERION_VALID_PAIRS: "No self or unknown pairings",
    CRITERION_BYE_PARITY: "Bye only with an odd participant count",
    CRITERION_REMATCH: "No rematches",
    CRITERION_REPEAT_BYE: "No repeat byes",
}
