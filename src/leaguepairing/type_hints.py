"""Type hints used in League Pairing."""

from typing import Any, Dict, Literal, Mapping, Optional, Tuple, Union

# Stable participant identifier
ParticipantId = str
MaybeParticipantId = Optional[ParticipantId]

# Which of the next match's two inputs a winner feeds
SlotNumber = Literal[1, 2]

# One round pairing as a tuple of IDs
PairingIDs = Tuple[ParticipantId, ParticipantId]

# Participant inputs: a Participant, or a mapping with "id" and "name"
ParticipantLike = Union["Participant", Mapping[str, Any]]

# Standings keyed by participant ID
Standings = Dict[ParticipantId, "SwissParticipantStanding"]

#  LocalWords:  ParticipantId PairingIDs
