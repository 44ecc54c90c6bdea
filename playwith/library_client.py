from . import profile_store
from .config import Config
from .http_client import fetch_json
from .logger import setup_logger
from .models import GameLibrary, Profile
from .parsers.library import parse_owned_games

logger = setup_logger(__name__)


def get_api_url(config: Config, service: str, method: str, version: str = "v0001") -> str:
    """
    Build a Web API method URL.

    Example:
        IPlayerService, GetOwnedGames -> https://api.steampowered.com/IPlayerService/GetOwnedGames/v0001/
    """
    return f"{config.api_url}{service}/{method}/{version}/"


def get_games(config: Config, profile: Profile) -> GameLibrary:
    """
    Return a profile's game library, fetching it only when not cached.

    A fetched library is stored on the profile and the profile is saved.

    Args:
        config: Runtime configuration
        profile: Profile to fetch games for (mutated on fetch)

    Returns:
        The profile's GameLibrary

    Raises:
        TransportFailure, RemoteStatusFailure: If the service cannot be reached
        ParseFailure: If the response is malformed
        FilesystemFailure: If the profile cannot be saved
    """
    if profile.games is not None:
        logger.debug(f"Using cached library for {profile.ids.steamid64}")
        return profile.games

    params = {
        "format": "json",
        "key": config.api_key,
        "steamid": profile.ids.steamid64,
        "include_appinfo": "1",
        "include_played_free_games": "1",
    }
    url = get_api_url(config, "IPlayerService", "GetOwnedGames")

    logger.info(f"Fetching owned games for {profile.ids.steamid64}")
    library = parse_owned_games(fetch_json(url, params=params, timeout=config.timeout))

    profile.games = library
    profile_store.save(config, profile)

    return library
