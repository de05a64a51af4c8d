"""Swiss system data classes."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from leaguepairing.type_hints import (
    MaybeParticipantId,
    PairingIDs,
    ParticipantId,
    ParticipantLike,
)


@dataclass(frozen=True)
class Participant:
    """A tournament entrant.

    Attributes:
        id: Stable identifier
        name: Display name, also used as a deterministic ordering key
    """

    id: ParticipantId
    name: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Participant":
        """Deserialize participant from dictionary."""
        return cls(id=data["id"], name=data["name"])


def as_participant(participant: ParticipantLike) -> Participant:
    """Accept a Participant or an ``{"id", "name"}`` mapping."""
    if isinstance(participant, Participant):
        return participant
    return Participant.from_dict(participant)


@dataclass
class SwissParticipantStanding:
    """Accumulated state for one participant after zero or more rounds.

    Attributes:
        participant_id: Stable identifier
        name: Display name, the final ranking tie-break
        points: 1 per win, forfeit win or bye, 0.5 per draw
        buchholz: Sum of the current points of every opponent faced
        bye_received: Whether a bye was received in any prior round
        opponent_ids: Opponents faced, in order (byes add none)
        wins: Wins, including byes and forfeit wins
        draws: Draws
        losses: Losses, including forfeit losses
    """

    participant_id: ParticipantId
    name: str
    points: float = 0.0
    buchholz: float = 0.0
    bye_received: bool = False
    opponent_ids: List[ParticipantId] = field(default_factory=list)
    wins: int = 0
    draws: int = 0
    losses: int = 0

    @property
    def games_played(self) -> int:
        return self.wins + self.draws + self.losses

    def has_played(self, participant_id: ParticipantId) -> bool:
        """Check if this participant has already faced ``participant_id``."""
        return participant_id in self.opponent_ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to dictionary."""
        return {
            "participant_id": self.participant_id,
            "name": self.name,
            "points": self.points,
            "buchholz": self.buchholz,
            "bye_received": self.bye_received,
            "opponent_ids": list(self.opponent_ids),
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SwissParticipantStanding":
        """Deserialize standing from dictionary."""
        return cls(
            participant_id=data["participant_id"],
            name=data["name"],
            points=float(data.get("points", 0.0)),
            buchholz=float(data.get("buchholz", 0.0)),
            bye_received=data.get("bye_received", False),
            opponent_ids=list(data.get("opponent_ids", [])),
            wins=data.get("wins", 0),
            draws=data.get("draws", 0),
            losses=data.get("losses", 0),
        )


@dataclass(frozen=True)
class SwissMatchRecord:
    """One completed pairing result as reported by the caller.

    A bye has exactly one participant and that participant as winner. A draw
    has no winner. A forfeit names the non-forfeiting side as winner.
    """

    participant1_id: MaybeParticipantId
    participant2_id: MaybeParticipantId
    winner_id: MaybeParticipantId = None
    is_draw: bool = False
    is_bye: bool = False
    is_forfeit: bool = False

    @property
    def is_decided(self) -> bool:
        """Whether the record carries a final outcome."""
        return self.winner_id is not None or self.is_draw or self.is_bye

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match record to dictionary."""
        return {
            "participant1_id": self.participant1_id,
            "participant2_id": self.participant2_id,
            "winner_id": self.winner_id,
            "is_draw": self.is_draw,
            "is_bye": self.is_bye,
            "is_forfeit": self.is_forfeit,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SwissMatchRecord":
        """Deserialize match record from dictionary."""
        return cls(
            participant1_id=data.get("participant1_id"),
            participant2_id=data.get("participant2_id"),
            winner_id=data.get("winner_id"),
            is_draw=data.get("is_draw", False),
            is_bye=data.get("is_bye", False),
            is_forfeit=data.get("is_forfeit", False),
        )


@dataclass(frozen=True)
class SwissPairing:
    """Two participants paired for a round."""

    participant1_id: ParticipantId
    participant2_id: ParticipantId

    def as_tuple(self) -> PairingIDs:
        return (self.participant1_id, self.participant2_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "participant1_id": self.participant1_id,
            "participant2_id": self.participant2_id,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SwissPairing":
        """Deserialize pairing from dictionary."""
        return cls(
            participant1_id=data["participant1_id"],
            participant2_id=data["participant2_id"],
        )


@dataclass
class SwissRoundResult:
    """Pairings for one round plus the optional bye.

    Attributes:
        pairings: Pairings in board order
        bye_participant_id: Participant sitting out with a bye, if any
    """

    pairings: List[SwissPairing] = field(default_factory=list)
    bye_participant_id: MaybeParticipantId = None

    @property
    def pairing_ids(self) -> List[PairingIDs]:
        return [pairing.as_tuple() for pairing in self.pairings]

    def participant_ids(self) -> List[ParticipantId]:
        """Every participant placed in this round, bye last."""
        ids = [pid for pairing in self.pairings for pid in pairing.as_tuple()]
        if self.bye_participant_id is not None:
            ids.append(self.bye_participant_id)
        return ids

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round result to dictionary."""
        return {
            "pairings": [pairing.to_dict() for pairing in self.pairings],
            "bye_participant_id": self.bye_participant_id,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SwissRoundResult":
        """Deserialize round result from dictionary."""
        return cls(
            pairings=[SwissPairing.from_dict(p) for p in data.get("pairings", [])],
            bye_participant_id=data.get("bye_participant_id"),
        )
