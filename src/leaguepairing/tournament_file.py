"""On-disk tournament state used by the command-line tools."""

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

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from leaguepairing.constants import (
    FORMAT_SWISS,
    SAVE_FILE_EXTENSION,
    TOURNAMENT_FORMATS,
)
from leaguepairing.exceptions import TournamentFileException
from leaguepairing.swiss.models import Participant, SwissMatchRecord
from leaguepairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class TournamentFile:
    """Participants and completed match history of one tournament.

    Attributes:
        name: Tournament name
        format: ``"swiss"`` or ``"single_elimination"``
        participants: Participants, in seed order for brackets
        matches: Completed match records, in play order
        total_rounds: Configured number of Swiss rounds, if any
    """

    name: str = "Untitled Tournament"
    format: str = FORMAT_SWISS
    participants: List[Participant] = field(default_factory=list)
    matches: List[SwissMatchRecord] = field(default_factory=list)
    total_rounds: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "name": self.name,
            "format": self.format,
            "participants": [p.to_dict() for p in self.participants],
            "matches": [m.to_dict() for m in self.matches],
            "total_rounds": self.total_rounds,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentFile":
        """Deserialize tournament from dictionary."""
        tournament_format = data.get("format", FORMAT_SWISS)
        if tournament_format not in TOURNAMENT_FORMATS:
            raise TournamentFileException(
                f"Unsupported tournament format: {tournament_format}"
            )
        try:
            return cls(
                name=data.get("name", "Untitled Tournament"),
                format=tournament_format,
                participants=[
                    Participant.from_dict(p) for p in data.get("participants", [])
                ],
                matches=[
                    SwissMatchRecord.from_dict(m) for m in data.get("matches", [])
                ],
                total_rounds=data.get("total_rounds"),
            )
        except (KeyError, TypeError) as e:
            raise TournamentFileException(f"Malformed tournament data: {e}") from e

    @classmethod
    def load(cls, path: Union[str, Path]) -> "TournamentFile":
        """Load a tournament from a JSON file."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise TournamentFileException(f"Cannot load {path}: {e}") from e
        if not isinstance(data, dict):
            raise TournamentFileException(f"Cannot load {path}: not a JSON object")
        logger.debug("Loaded tournament file %s", path)
        return cls.from_dict(data)

    def save(self, path: Union[str, Path]) -> Path:
        """Save the tournament as JSON, adding the extension if missing."""
        path = Path(path)
        if not path.suffix:
            path = path.with_suffix(SAVE_FILE_EXTENSION)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
        except OSError as e:
            raise TournamentFileException(f"Cannot save {path}: {e}") from e
        logger.debug("Saved tournament file %s", path)
        return path
