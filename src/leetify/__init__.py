from leetify.client import Client, ClientBuilder
from leetify.constants import API_KEY_HEADER, DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S
from leetify.data_source import (
    FACEIT,
    MATCHMAKING,
    DataSource,
    FaceIt,
    Matchmaking,
    Other,
    as_data_source,
    parse_data_source,
)
from leetify.errors import (
    ApiError,
    DecodeError,
    InvalidApiKeyError,
    InvalidDataSourceError,
    InvalidGameIdError,
    LeetifyError,
    MissingParameterError,
    ServerError,
    TransportError,
)
from leetify.ids import LeetifyId, PlayerId, Steam64Id, as_player_id, parse_player_id
from leetify.models import (
    CompetitiveRank,
    MatchDetailsResponse,
    PlatformBanInfo,
    PlayerStats,
    ProfileResponse,
    Ranks,
    Rating,
    RecentMatch,
    RecentTeammate,
    Stats,
    TeamScore,
)
from leetify.player import Player

__all__ = [
    "API_KEY_HEADER",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_S",
    "FACEIT",
    "MATCHMAKING",
    "ApiError",
    "Client",
    "ClientBuilder",
    "CompetitiveRank",
    "DataSource",
    "DecodeError",
    "FaceIt",
    "InvalidApiKeyError",
    "InvalidDataSourceError",
    "InvalidGameIdError",
    "LeetifyError",
    "LeetifyId",
    "MatchDetailsResponse",
    "Matchmaking",
    "MissingParameterError",
    "Other",
    "PlatformBanInfo",
    "Player",
    "PlayerId",
    "PlayerStats",
    "ProfileResponse",
    "Ranks",
    "Rating",
    "RecentMatch",
    "RecentTeammate",
    "ServerError",
    "Stats",
    "Steam64Id",
    "TeamScore",
    "TransportError",
    "as_data_source",
    "as_player_id",
    "parse_data_source",
    "parse_player_id",
]
