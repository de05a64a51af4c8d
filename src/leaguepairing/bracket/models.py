"""Single elimination bracket data classes."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from leaguepairing.type_hints import MaybeParticipantId, SlotNumber


@dataclass(frozen=True)
class NextPosition:
    """Where the winner of a match advances to.

    Attributes:
        round: Round of the next match
        position: Position of the next match within its round
        slot: Which of the next match's inputs is fed (1 or 2)
    """

    round: int
    position: int
    slot: SlotNumber

    def to_dict(self) -> Dict[str, Any]:
        """Serialize next position to dictionary."""
        return {"round": self.round, "position": self.position, "slot": self.slot}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NextPosition":
        """Deserialize next position from dictionary."""
        return cls(
            round=data["round"], position=data["position"], slot=data["slot"]
        )


@dataclass(frozen=True)
class BracketSlot:
    """One match position in a single elimination bracket.

    Attributes:
        round: Round number, 1 is the first round
        position: 1-indexed position within the round, left to right
        seed1: Seed feeding the first side (round 1 only, None for a bye side)
        seed2: Seed feeding the second side (round 1 only, None for a bye side)
        is_bye: Whether exactly one round-1 side is unfilled
        next_position: Where the winner advances, None for the final
    """

    round: int
    position: int
    seed1: Optional[int] = None
    seed2: Optional[int] = None
    is_bye: bool = False
    next_position: Optional[NextPosition] = None

    @property
    def is_final(self) -> bool:
        return self.next_position is None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize bracket slot to dictionary."""
        return {
            "round": self.round,
            "position": self.position,
            "seed1": self.seed1,
            "seed2": self.seed2,
            "is_bye": self.is_bye,
            "next_position": (
                self.next_position.to_dict() if self.next_position else None
            ),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BracketSlot":
        """Deserialize bracket slot from dictionary."""
        next_position = data.get("next_position")
        return cls(
            round=data["round"],
            position=data["position"],
            seed1=data.get("seed1"),
            seed2=data.get("seed2"),
            is_bye=data.get("is_bye", False),
            next_position=(
                NextPosition.from_dict(next_position) if next_position else None
            ),
        )


@dataclass
class BracketMatch:
    """A bracket slot with participants assigned from the seed list.

    Attributes:
        round: Round number
        position: Position within the round
        participant1_id: Participant on the first side, if known
        participant2_id: Participant on the second side, if known
        winner_id: Winner, pre-filled only for byes
        is_bye: Whether this is a round-1 bye
        next_position: Where the winner advances, None for the final
    """

    round: int
    position: int
    participant1_id: MaybeParticipantId = None
    participant2_id: MaybeParticipantId = None
    winner_id: MaybeParticipantId = None
    is_bye: bool = False
    next_position: Optional[NextPosition] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize bracket match to dictionary."""
        return {
            "round": self.round,
            "position": self.position,
            "participant1_id": self.participant1_id,
            "participant2_id": self.participant2_id,
            "winner_id": self.winner_id,
            "is_bye": self.is_bye,
            "next_position": (
                self.next_position.to_dict() if self.next_position else None
            ),
        }
