from typing import Any

from ..errors import ParseFailure
from ..models import Game, GameLibrary


def parse_owned_games(payload: Any) -> GameLibrary:
    """
    Validate an owned-games document and build a GameLibrary.

    Expected shape:

        {"response": {"game_count": 2, "games": [{"appid": 10, "name": "...",
            "playtime_forever": 32, "img_icon_url": "...", ...}, ...]}}

    Args:
        payload: Decoded JSON document

    Returns:
        GameLibrary in the order the service returned the games

    Raises:
        ParseFailure: If the envelope or any game lacks a required field
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("response"), dict):
        raise ParseFailure("owned games document has no response object")

    response = payload["response"]

    if "game_count" not in response:
        raise ParseFailure("owned games document has no game_count")
    game_count = _as_int(response["game_count"], "game_count")

    # The service omits the list entirely for empty libraries
    raw_games = response.get("games", [])
    if not isinstance(raw_games, list):
        raise ParseFailure("owned games document has a non-list games field")

    return GameLibrary(game_count=game_count, games=[_parse_game(g) for g in raw_games])


def _parse_game(raw: Any) -> Game:
    if not isinstance(raw, dict):
        raise ParseFailure("game entry is not an object")

    for key in ("appid", "name", "playtime_forever"):
        if key not in raw:
            raise ParseFailure(f"game entry is missing {key}")

    playtime_2weeks = raw.get("playtime_2weeks")

    return Game(
        appid=_as_int(raw["appid"], "appid"),
        name=str(raw["name"]),
        playtime_forever=_as_int(raw["playtime_forever"], "playtime_forever"),
        playtime_2weeks=_as_int(playtime_2weeks, "playtime_2weeks") if playtime_2weeks is not None else None,
        img_logo_url=str(raw.get("img_logo_url") or ""),
        img_icon_url=str(raw.get("img_icon_url") or ""),
    )


def _as_int(value: Any, field: str) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool):
        raise ParseFailure(f"{field} is not an integer: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ParseFailure(f"{field} is not an integer: {value!r}") from None
