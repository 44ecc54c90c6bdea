import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigError

# Identity data older than this must be revalidated against the directory
FRESHNESS_WINDOW_SECONDS = 3600

DEFAULT_API_URL = "https://api.steampowered.com/"
DEFAULT_COMMUNITY_URL = "https://steamcommunity.com/"
DEFAULT_MEDIA_URL = "https://media.steampowered.com/steamcommunity/public/images/apps/"


@dataclass(frozen=True)
class Config:
    api_key: str
    profiles_dir: Path = Path("profiles")
    icons_dir: Path = Path("icons")
    your_steam_id: str | None = None
    freshness_window: int = FRESHNESS_WINDOW_SECONDS
    timeout: float = 30.0
    api_url: str = DEFAULT_API_URL
    community_url: str = DEFAULT_COMMUNITY_URL
    media_url: str = DEFAULT_MEDIA_URL


def load_config() -> Config:
    """Build configuration from the environment.

    Reads a .env file first (if present), then STEAMAPI_KEY, YOUR_STEAM_ID
    and the optional PLAYWITH_* overrides.
    """
    load_dotenv()

    api_key = os.getenv("STEAMAPI_KEY")
    if not api_key:
        raise ConfigError("Missing API key. Set STEAMAPI_KEY in the environment or .env file.")

    timeout_text = os.getenv("PLAYWITH_TIMEOUT", "30")
    try:
        timeout = float(timeout_text)
    except ValueError:
        raise ConfigError(f"PLAYWITH_TIMEOUT must be a number, got {timeout_text!r}") from None

    return Config(
        api_key=api_key,
        profiles_dir=Path(os.getenv("PLAYWITH_PROFILES_DIR", "profiles")),
        icons_dir=Path(os.getenv("PLAYWITH_ICONS_DIR", "icons")),
        your_steam_id=os.getenv("YOUR_STEAM_ID") or None,
        timeout=timeout,
    )
