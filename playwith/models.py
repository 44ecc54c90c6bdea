import time
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .errors import ParseFailure

T = TypeVar("T")


def now() -> int:
    """Current Unix time in whole seconds."""
    return int(time.time())


@dataclass
class Identity:
    steamid64: str
    custom_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"steamid64": self.steamid64, "custom_url": self.custom_url}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Identity":
        if not isinstance(data, dict):
            raise ParseFailure(f"identity is not an object: {data!r}")
        return cls(steamid64=str(data["steamid64"]), custom_url=data.get("custom_url") or None)


@dataclass
class Game:
    appid: int
    name: str
    playtime_forever: int
    playtime_2weeks: int | None = None
    img_logo_url: str = ""
    img_icon_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "appid": self.appid,
            "name": self.name,
            "playtime_forever": self.playtime_forever,
            "img_logo_url": self.img_logo_url,
            "img_icon_url": self.img_icon_url,
        }
        if self.playtime_2weeks is not None:
            data["playtime_2weeks"] = self.playtime_2weeks
        return data


@dataclass
class GameLibrary:
    game_count: int
    games: list[Game] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Encode in the same envelope the owned-games endpoint returns."""
        return {
            "response": {
                "game_count": self.game_count,
                "games": [game.to_dict() for game in self.games],
            }
        }


@dataclass
class Profile:
    ids: Identity
    games: GameLibrary | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "ids": self.ids.to_dict(),
            "games": self.games.to_dict() if self.games is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Profile":
        if not isinstance(data, dict):
            raise ParseFailure(f"profile is not an object: {data!r}")
        # parsers.library imports this module
        from .parsers.library import parse_owned_games

        games_data = data.get("games")
        games = parse_owned_games(games_data) if games_data is not None else None
        return cls(ids=Identity.from_dict(data["ids"]), games=games)


@dataclass
class Timestamped(Generic[T]):
    """A persisted value paired with the Unix time it was captured."""
    timestamp: int
    object: T

    @classmethod
    def of(cls, value: T) -> "Timestamped[T]":
        return cls(timestamp=now(), object=value)

    @classmethod
    def of_time(cls, timestamp: int, value: T) -> "Timestamped[T]":
        return cls(timestamp=timestamp, object=value)

    def is_fresh(self, window: int, current: int | None = None) -> bool:
        """True while less than `window` seconds have passed since capture."""
        if current is None:
            current = now()
        return current - self.timestamp < window


@dataclass
class SharedGame:
    appid: int
    name: str
    playtime_shared_average: int
    img_logo_url: str
    img_icon_url: str


def rank_shared_games(shared: list[SharedGame]) -> list[SharedGame]:
    """Order shared games by average play time, most played first.

    Ties are broken by name and then appid so output is stable between runs.
    """
    return sorted(shared, key=lambda g: (-g.playtime_shared_average, g.name, g.appid))
