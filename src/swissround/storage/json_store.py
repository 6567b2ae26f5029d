"""Persistence of tournament aggregates."""

# Swiss Round
# Copyright (C) 2025  Swiss Round developers
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

from abc import ABC, abstractmethod
import json
from pathlib import Path
from typing import Union

from swissround.constants import SAVE_FILE_EXTENSION
from swissround.exceptions import (
    FileLoadException,
    FileSaveException,
    ValidationError,
)
from swissround.models.tournament import Tournament
from swissround.utils import setup_logger

logger = setup_logger(__name__)


class TournamentStore(ABC):
    """Loads and saves whole tournaments.

    Implementations receive and return complete Tournament objects; the
    core never holds a store itself.
    """

    @abstractmethod
    def load(self) -> Tournament:
        """Return the stored tournament.

        Raises:
            FileLoadException: If nothing can be read or decoded
        """
        pass

    @abstractmethod
    def save(self, tournament: Tournament) -> None:
        """Persist the tournament, replacing any previous copy.

        Raises:
            FileSaveException: If the tournament cannot be written
        """
        pass


class JsonTournamentStore(TournamentStore):
    """Stores a tournament as a single JSON document on disk."""

    def __init__(self, path: Union[str, Path]):
        path = Path(path)
        if not path.suffix:
            path = path.with_suffix(SAVE_FILE_EXTENSION)
        self.path = path

    def load(self) -> Tournament:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not load tournament from {self.path}: {e}")
            raise FileLoadException(
                f"Could not load tournament from {self.path}: {e}"
            ) from e

        try:
            tournament = Tournament.from_dict(data)
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            logger.error(f"Malformed tournament file {self.path}: {e}")
            raise FileLoadException(
                f"Malformed tournament file {self.path}: {e}"
            ) from e

        logger.info(f"Loaded tournament '{tournament.title}' from {self.path}")
        return tournament

    def save(self, tournament: Tournament) -> None:
        data = tournament.to_dict()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
        except OSError as e:
            logger.error(f"Could not save tournament to {self.path}: {e}")
            raise FileSaveException(
                f"Could not save tournament to {self.path}: {e}"
            ) from e
        logger.info(f"Tournament saved to {self.path}")
