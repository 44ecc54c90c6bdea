import time

import pytest

from playwith.errors import ParseFailure
from playwith.models import (
    Game,
    GameLibrary,
    Identity,
    Profile,
    SharedGame,
    Timestamped,
    rank_shared_games,
)


def test_timestamped_of_uses_current_time():
    before = int(time.time())
    stamped = Timestamped.of("value")
    after = int(time.time())

    assert before <= stamped.timestamp <= after
    assert stamped.object == "value"


def test_timestamped_freshness_window():
    stamped = Timestamped.of_time(1000, "value")

    assert stamped.is_fresh(3600, current=1000)
    assert stamped.is_fresh(3600, current=4599)
    assert not stamped.is_fresh(3600, current=4600)
    assert not stamped.is_fresh(3600, current=4601)


def test_profile_round_trip_with_library():
    """Test that a profile with a library survives encoding."""
    profile = Profile(
        ids=Identity("76561197960287930", "gabelogannewell"),
        games=GameLibrary(1, [Game(440, "Team Fortress 2", 100, 5, "logo", "icon")]),
    )

    data = profile.to_dict()
    assert data["games"]["response"]["game_count"] == 1
    assert data["ids"] == {"steamid64": "76561197960287930", "custom_url": "gabelogannewell"}

    assert Profile.from_dict(data) == profile


def test_profile_without_library():
    profile = Profile(ids=Identity("76561197960287930"))

    data = profile.to_dict()

    assert data["games"] is None
    assert Profile.from_dict(data) == profile


def test_game_to_dict_omits_missing_recent_playtime():
    assert "playtime_2weeks" not in Game(1, "x", 0).to_dict()


def test_rank_shared_games():
    games = [
        SharedGame(1, "Beta", 10, "", ""),
        SharedGame(2, "Alpha", 50, "", ""),
        SharedGame(3, "Alpha", 10, "", ""),
    ]

    ranked = rank_shared_games(games)

    assert [g.appid for g in ranked] == [2, 3, 1]


def test_profile_from_non_object_is_parse_failure():
    """Decoding a profile stored as the wrong JSON type reports a ParseFailure."""
    with pytest.raises(ParseFailure):
        Profile.from_dict([])

    with pytest.raises(ParseFailure):
        Profile.from_dict({"ids": "76561198054973203", "games": None})
