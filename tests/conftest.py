from __future__ import annotations

from typing import Any

import pytest

_PLAYER_STATS_INT_FIELDS = [
    "mvps",
    "shots_fired_enemy_spotted",
    "shots_fired",
    "shots_hit_enemy_spotted",
    "shots_hit_friend",
    "shots_hit_friend_head",
    "shots_hit_foe",
    "shots_hit_foe_head",
    "he_thrown",
    "molotov_thrown",
    "smoke_thrown",
    "counter_strafing_shots_all",
    "counter_strafing_shots_bad",
    "counter_strafing_shots_good",
    "flashbang_hit_foe",
    "flashbang_leading_to_kill",
    "flashbang_hit_friend",
    "flashbang_thrown",
    "flash_assist",
    "score",
    "initial_team_number",
    "total_kills",
    "total_deaths",
    "rounds_survived",
    "total_assists",
    "total_damage",
    "multi1k",
    "multi2k",
    "multi3k",
    "multi4k",
    "multi5k",
    "rounds_count",
    "rounds_won",
    "rounds_lost",
    "total_hs_kills",
    "trade_kill_opportunities",
    "trade_kill_attempts",
    "trade_kills_succeed",
    "traded_death_opportunities",
    "traded_death_attempts",
    "traded_deaths_succeed",
]

_PLAYER_STATS_FLOAT_FIELDS = [
    "preaim",
    "reaction_time",
    "accuracy",
    "accuracy_enemy_spotted",
    "accuracy_head",
    "utility_on_death_avg",
    "he_foes_damage_avg",
    "he_friends_damage_avg",
    "counter_strafing_shots_good_ratio",
    "flashbang_hit_foe_avg_duration",
    "spray_accuracy",
    "kd_ratio",
    "rounds_survived_percentage",
    "dpr",
    "trade_kill_attempts_percentage",
    "trade_kills_success_percentage",
    "trade_kill_opportunities_per_round",
    "traded_death_attempts_percentage",
    "traded_deaths_success_percentage",
    "traded_deaths_opportunities_per_round",
]

_STATS_FIELDS = [
    "accuracy_enemy_spotted",
    "accuracy_head",
    "counter_strafing_good_shots_ratio",
    "ct_opening_aggression_success_rate",
    "ct_opening_duel_success_percentage",
    "flashbang_hit_foe_avg_duration",
    "flashbang_hit_foe_per_flashbang",
    "flashbang_hit_friend_per_flashbang",
    "flashbang_leading_to_kill",
    "flashbang_thrown",
    "he_foes_damage_avg",
    "he_friends_damage_avg",
    "preaim",
    "reaction_time_ms",
    "spray_accuracy",
    "t_opening_aggression_success_rate",
    "t_opening_duel_success_percentage",
    "traded_deaths_success_percentage",
    "trade_kill_opportunities_per_round",
    "trade_kills_success_percentage",
    "utility_on_death_avg",
]


def _player_stats(steam64_id: str, name: str, team: int) -> dict[str, Any]:
    item: dict[str, Any] = {"steam64_id": steam64_id, "name": name}
    item.update({k: 3 for k in _PLAYER_STATS_INT_FIELDS})
    item.update({k: 0.5 for k in _PLAYER_STATS_FLOAT_FIELDS})
    item["initial_team_number"] = team
    item["leetify_rating"] = 0.04
    return item


@pytest.fixture
def match_payload() -> dict[str, Any]:
    return {
        "id": "c8b4ab3b-8f6d-4a36-9f6b-1a0c1cbd3f53",
        "finished_at": "2024-05-01T20:15:00Z",
        "data_source": "faceit",
        "data_source_match_id": "1-abc",
        "map_name": "de_mirage",
        "has_banned_player": False,
        "team_scores": [
            {"team_number": 2, "score": 13},
            {"team_number": 3, "score": 9},
        ],
        "stats": [
            _player_stats("76561198283431555", "alpha", 2),
            _player_stats("76561198000000001", "bravo", 3),
        ],
    }


@pytest.fixture
def profile_payload() -> dict[str, Any]:
    return {
        "privacy_mode": "public",
        "winrate": 0.54,
        "total_matches": 812,
        "first_match_date": "2019-03-02T10:00:00Z",
        "name": "alpha",
        "bans": [
            {
                "platform": "faceit",
                "platform_nickname": "alpha_fc",
                "banned_since": "2023-01-01T00:00:00+02:00",
            }
        ],
        "steam64_id": "76561198283431555",
        "id": "5ea07280-2399-4c7e-88ab-f2f7db0c449f",
        "ranks": {
            "leetify": 2.31,
            "premier": 18250,
            "faceit": 8,
            "competitive": [{"map_name": "de_inferno", "rank": 15}],
        },
        "rating": {
            "aim": 71.2,
            "positioning": 55.0,
            "utility": 48.3,
            "clutch": 0.12,
            "opening": 0.03,
            "ct_leetify": 0.02,
            "t_leetify": -0.01,
        },
        "stats": {k: 0.25 for k in _STATS_FIELDS},
        "recent_matches": [
            {
                "id": "c8b4ab3b-8f6d-4a36-9f6b-1a0c1cbd3f53",
                "finished_at": "2024-05-01T20:15:00Z",
                "data_source": "matchmaking",
                "outcome": "win",
                "rank": 18250,
                "rank_type": 11,
                "map_name": "de_mirage",
                "leetify_rating": 0.04,
                "score": [13, 9],
                "preaim": 7.1,
                "reaction_time_ms": 540,
                "accuracy_enemy_spotted": 0.31,
                "accuracy_head": 0.22,
                "spray_accuracy": 0.4,
            }
        ],
        "recent_teammates": [
            {"steam64_id": "76561198000000001", "recent_matches_count": 12},
        ],
    }
