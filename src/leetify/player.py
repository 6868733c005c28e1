from __future__ import annotations

from typing import TYPE_CHECKING

from leetify.ids import PlayerId, as_player_id
from leetify.models import MatchDetailsResponse, ProfileResponse

if TYPE_CHECKING:
    from leetify.client import Client


class Player:
    """
    A player id bound to a client, so calls don't need to repeat the id.

        player = client.player("76561198283431555")
        profile = player.profile()
        matches = player.matches()

    Nothing is cached; each call hits the API.
    """

    def __init__(self, player_id: PlayerId | str, client: Client) -> None:
        self._id = as_player_id(player_id)
        self._client = client

    @property
    def id(self) -> PlayerId:
        return self._id

    def profile(self) -> ProfileResponse:
        return self._client.get_profile(self._id)

    def matches(self) -> list[MatchDetailsResponse]:
        return self._client.get_profile_matches(self._id)

    def __repr__(self) -> str:
        return f"Player(id={self._id!r})"
