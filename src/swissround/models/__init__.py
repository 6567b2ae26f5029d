"""Data models: competitors and the tournament aggregate."""

from swissround.models.competitor import Competitor, create_competitor
from swissround.models.tournament import (
    Event,
    Match,
    ResultCode,
    RoundData,
    Tournament,
    TournamentConfig,
)

__all__ = [
    "Competitor",
    "create_competitor",
    "Event",
    "Match",
    "ResultCode",
    "RoundData",
    "Tournament",
    "TournamentConfig",
]
