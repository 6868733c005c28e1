"""Response records for the Leetify public CS API.

Field names mirror the upstream JSON. Optional fields default to ``None`` when the
API omits them; unknown keys are ignored so additive API changes do not break
decoding.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    StrictBool,
    StrictFloat,
    StrictInt,
    TypeAdapter,
)

from leetify.data_source import DataSource, FaceIt, Matchmaking, Other, parse_data_source


def exact_length(n: int) -> Callable[[Any], Any]:
    """
    Before-validator factory for fixed-size arrays.

    Accepts a list/tuple of exactly ``n`` items and hands it on as a tuple (order
    preserved). Any other length is rejected; nothing is truncated or padded.
    """

    def _check(value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            # Let the tuple schema report the type error.
            return value
        if len(value) != n:
            raise ValueError(f"invalid length {len(value)}, expected exactly {n} elements")
        return tuple(value)

    return _check


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _validate_data_source(value: Any) -> DataSource:
    if isinstance(value, (FaceIt, Matchmaking, Other)):
        return value
    if isinstance(value, str):
        return parse_data_source(value)
    raise ValueError(f"data source must be a string, got {type(value).__name__}")


# Numbers and booleans are not coerced from strings; a mistyped field is a schema
# mismatch. Ints are still accepted where a float is expected.
Count = Annotated[StrictInt, Field(ge=0)]

UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]

DataSourceField = Annotated[
    DataSource,
    PlainValidator(_validate_data_source),
    PlainSerializer(lambda ds: ds.as_str(), return_type=str),
]


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class TeamScore(_Record):
    team_number: Count
    score: Count


ScorePair = Annotated[tuple[Count, Count], BeforeValidator(exact_length(2))]
TeamScorePair = Annotated[tuple[TeamScore, TeamScore], BeforeValidator(exact_length(2))]


class CompetitiveRank(_Record):
    map_name: str
    rank: Count


class Ranks(_Record):
    leetify: StrictFloat | None = None
    premier: Count | None = None
    faceit: Count | None = None
    faceit_elo: Count | None = None
    wingman: Count | None = None
    renown: Count | None = None
    competitive: list[CompetitiveRank]


class Rating(_Record):
    aim: StrictFloat
    positioning: StrictFloat
    utility: StrictFloat
    clutch: StrictFloat
    opening: StrictFloat
    ct_leetify: StrictFloat
    t_leetify: StrictFloat


class Stats(_Record):
    """Aggregate stats over the player's recent matches."""

    accuracy_enemy_spotted: StrictFloat
    accuracy_head: StrictFloat
    counter_strafing_good_shots_ratio: StrictFloat
    ct_opening_aggression_success_rate: StrictFloat
    ct_opening_duel_success_percentage: StrictFloat
    flashbang_hit_foe_avg_duration: StrictFloat
    flashbang_hit_foe_per_flashbang: StrictFloat
    flashbang_hit_friend_per_flashbang: StrictFloat
    flashbang_leading_to_kill: StrictFloat
    flashbang_thrown: StrictFloat
    he_foes_damage_avg: StrictFloat
    he_friends_damage_avg: StrictFloat
    preaim: StrictFloat
    reaction_time_ms: StrictFloat
    spray_accuracy: StrictFloat
    t_opening_aggression_success_rate: StrictFloat
    t_opening_duel_success_percentage: StrictFloat
    traded_deaths_success_percentage: StrictFloat
    trade_kill_opportunities_per_round: StrictFloat
    trade_kills_success_percentage: StrictFloat
    utility_on_death_avg: StrictFloat


class RecentMatch(_Record):
    id: str
    finished_at: UtcDatetime
    data_source: DataSourceField
    outcome: str
    rank: Count
    rank_type: Count | None = None
    map_name: str
    leetify_rating: StrictFloat
    score: ScorePair
    preaim: StrictFloat
    reaction_time_ms: Count
    accuracy_enemy_spotted: StrictFloat
    accuracy_head: StrictFloat
    spray_accuracy: StrictFloat


class RecentTeammate(_Record):
    steam64_id: str
    recent_matches_count: Count


class PlatformBanInfo(_Record):
    platform: str
    platform_nickname: str
    banned_since: UtcDatetime


class ProfileResponse(_Record):
    privacy_mode: str
    winrate: StrictFloat
    total_matches: Count
    first_match_date: UtcDatetime | None = None
    name: str
    bans: list[PlatformBanInfo]
    steam64_id: str
    id: str | None = None
    ranks: Ranks
    rating: Rating
    stats: Stats
    recent_matches: list[RecentMatch]
    recent_teammates: list[RecentTeammate]


class PlayerStats(_Record):
    """One player's line in a match scoreboard."""

    steam64_id: str
    name: str
    mvps: Count
    preaim: StrictFloat
    reaction_time: StrictFloat
    accuracy: StrictFloat
    accuracy_enemy_spotted: StrictFloat
    accuracy_head: StrictFloat
    shots_fired_enemy_spotted: Count
    shots_fired: Count
    shots_hit_enemy_spotted: Count
    shots_hit_friend: Count
    shots_hit_friend_head: Count
    shots_hit_foe: Count
    shots_hit_foe_head: Count
    utility_on_death_avg: StrictFloat
    he_foes_damage_avg: StrictFloat
    he_friends_damage_avg: StrictFloat
    he_thrown: Count
    molotov_thrown: Count
    smoke_thrown: Count
    counter_strafing_shots_all: Count
    counter_strafing_shots_bad: Count
    counter_strafing_shots_good: Count
    counter_strafing_shots_good_ratio: StrictFloat
    flashbang_hit_foe: Count
    flashbang_leading_to_kill: Count
    flashbang_hit_foe_avg_duration: StrictFloat
    flashbang_hit_friend: Count
    flashbang_thrown: Count
    flash_assist: Count
    score: Count
    initial_team_number: Count
    spray_accuracy: StrictFloat
    total_kills: Count
    total_deaths: Count
    kd_ratio: StrictFloat
    rounds_survived: Count
    rounds_survived_percentage: StrictFloat
    dpr: StrictFloat
    total_assists: Count
    total_damage: Count
    leetify_rating: StrictFloat | None = None
    ct_leetify_rating: StrictFloat | None = None
    t_leetify_rating: StrictFloat | None = None
    multi1k: Count
    multi2k: Count
    multi3k: Count
    multi4k: Count
    multi5k: Count
    rounds_count: Count
    rounds_won: Count
    rounds_lost: Count
    total_hs_kills: Count
    trade_kill_opportunities: Count
    trade_kill_attempts: Count
    trade_kills_succeed: Count
    trade_kill_attempts_percentage: StrictFloat
    trade_kills_success_percentage: StrictFloat
    trade_kill_opportunities_per_round: StrictFloat
    traded_death_opportunities: Count
    traded_death_attempts: Count
    traded_deaths_succeed: Count
    traded_death_attempts_percentage: StrictFloat
    traded_deaths_success_percentage: StrictFloat
    traded_deaths_opportunities_per_round: StrictFloat


class MatchDetailsResponse(_Record):
    id: str
    finished_at: UtcDatetime
    data_source: DataSourceField
    data_source_match_id: str
    map_name: str
    has_banned_player: StrictBool
    team_scores: TeamScorePair
    stats: list[PlayerStats]


MatchDetailsList: TypeAdapter[list[MatchDetailsResponse]] = TypeAdapter(
    list[MatchDetailsResponse]
)
