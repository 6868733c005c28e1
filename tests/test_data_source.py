from __future__ import annotations

import pytest

from leetify.data_source import (
    FACEIT,
    MATCHMAKING,
    FaceIt,
    Matchmaking,
    Other,
    as_data_source,
    parse_data_source,
)


@pytest.mark.parametrize("value", ["faceit", "matchmaking", "other", "esea", "FACEIT", ""])
def test_round_trip(value: str) -> None:
    assert parse_data_source(value).as_str() == value


def test_known_sources() -> None:
    assert parse_data_source("faceit") == FaceIt()
    assert parse_data_source("matchmaking") == Matchmaking()
    assert FACEIT.as_str() == "faceit"
    assert MATCHMAKING.as_str() == "matchmaking"


def test_unknown_sources_are_kept_verbatim() -> None:
    assert parse_data_source("other") == Other("other")
    assert Other("other").as_str() == "other"
    # Matching is case sensitive.
    assert parse_data_source("FACEIT") == Other("FACEIT")


def test_as_data_source() -> None:
    assert as_data_source(MATCHMAKING) is MATCHMAKING
    assert as_data_source("faceit") == FACEIT
    assert str(as_data_source("renown")) == "renown"

    with pytest.raises(TypeError):
        as_data_source(1)  # type: ignore[arg-type]
