from swissround.models.tournament.event import Event
from swissround.models.tournament.match import Match, ResultCode
from swissround.models.tournament.round_data import RoundData
from swissround.models.tournament.tournament import Tournament
from swissround.models.tournament.tournament_config import TournamentConfig

__all__ = [
    "Event",
    "Match",
    "ResultCode",
    "RoundData",
    "Tournament",
    "TournamentConfig",
]
