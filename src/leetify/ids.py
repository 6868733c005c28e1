from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_UUID_SEGMENT_LENGTHS = (8, 4, 4, 4, 12)
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_STEAM64_MIN_LENGTH = 15


@dataclass(frozen=True)
class Steam64Id:
    """Steam64 ID for a player (numeric, typically 17 digits)."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LeetifyId:
    """Leetify user ID (UUID format)."""

    value: str

    def __str__(self) -> str:
        return self.value


PlayerId = Union[Steam64Id, LeetifyId]


def is_uuid_format(value: str) -> bool:
    """True for xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx made of hex digits."""

    parts = value.split("-")
    if len(parts) != len(_UUID_SEGMENT_LENGTHS):
        return False
    return all(
        len(part) == length and all(c in _HEX_DIGITS for c in part)
        for part, length in zip(parts, _UUID_SEGMENT_LENGTHS)
    )


def _is_steam64_format(value: str) -> bool:
    # str.isdigit() accepts non-ASCII digits, so check the range explicitly.
    return len(value) >= _STEAM64_MIN_LENGTH and all("0" <= c <= "9" for c in value)


def parse_player_id(value: str) -> PlayerId:
    """
    Classify a raw string as a Steam64 or Leetify id.

    - UUID shaped -> LeetifyId
    - ASCII digits only, 15+ characters -> Steam64Id
    - anything else -> LeetifyId

    The last rule is a fallback, not validation: malformed input is accepted as a
    Leetify id and left for the API to reject.
    """

    if is_uuid_format(value):
        return LeetifyId(value)
    if _is_steam64_format(value):
        return Steam64Id(value)
    return LeetifyId(value)


def as_player_id(value: PlayerId | str) -> PlayerId:
    if isinstance(value, (Steam64Id, LeetifyId)):
        return value
    if isinstance(value, str):
        return parse_player_id(value)
    raise TypeError(f"Expected Steam64Id, LeetifyId or str, got {type(value)}")


def profile_query_params(player_id: PlayerId) -> dict[str, str]:
    """Query parameters the profile endpoints expect for each id kind."""

    if isinstance(player_id, Steam64Id):
        return {"steam64_id": player_id.value}
    if isinstance(player_id, LeetifyId):
        return {"id": player_id.value}
    raise TypeError(f"Unsupported player id: {player_id!r}")
