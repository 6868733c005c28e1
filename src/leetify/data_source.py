from __future__ import annotations

from dataclasses import dataclass
from typing import Union

_FACEIT = "faceit"
_MATCHMAKING = "matchmaking"


@dataclass(frozen=True)
class FaceIt:
    def as_str(self) -> str:
        return _FACEIT

    def __str__(self) -> str:
        return self.as_str()


@dataclass(frozen=True)
class Matchmaking:
    def as_str(self) -> str:
        return _MATCHMAKING

    def __str__(self) -> str:
        return self.as_str()


@dataclass(frozen=True)
class Other:
    """Any data source the client does not know by name; keeps the raw string."""

    value: str

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


DataSource = Union[FaceIt, Matchmaking, Other]

FACEIT = FaceIt()
MATCHMAKING = Matchmaking()


def parse_data_source(value: str) -> DataSource:
    """Map a raw data source string to its variant. Never fails."""

    if value == _FACEIT:
        return FACEIT
    if value == _MATCHMAKING:
        return MATCHMAKING
    return Other(value)


def as_data_source(value: DataSource | str) -> DataSource:
    if isinstance(value, (FaceIt, Matchmaking, Other)):
        return value
    if isinstance(value, str):
        return parse_data_source(value)
    raise TypeError(f"Expected DataSource or str, got {type(value)}")
