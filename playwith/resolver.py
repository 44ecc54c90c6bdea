"""Resolve aliases and numeric identities to fresh profiles."""

from . import profile_store
from .config import Config
from .errors import PlayWithError
from .http_client import fetch_text
from .logger import setup_logger
from .models import Identity, Profile, Timestamped, now
from .parsers.directory import parse_ids

logger = setup_logger(__name__)

# Individual account identities all share this prefix
_STEAM_ID_PREFIX = "7656119"


def resolve(config: Config, token: str) -> Timestamped[Profile]:
    """
    Resolve a token that may be either a numeric identity or an alias.

    Tokens shaped like a 64-bit account id go straight to the identity path.
    Anything else is looked up as an alias first; purely numeric aliases that
    are not registered fall back to the identity path.

    Args:
        config: Runtime configuration
        token: Numeric identity or custom URL alias

    Returns:
        A profile whose identity data is within the freshness window

    Raises:
        PlayWithError: If the token cannot be resolved
    """
    if looks_like_steam_id(token):
        return from_steam_id(config, token)

    try:
        return from_username(config, token)
    except PlayWithError:
        if not token.isdigit():
            raise
        logger.debug(f"Alias lookup failed for numeric token {token}, trying it as an identity")
        return from_steam_id(config, token)


def looks_like_steam_id(token: str) -> bool:
    return len(token) == 17 and token.isdigit() and token.startswith(_STEAM_ID_PREFIX)


def from_steam_id(config: Config, steam_id: str) -> Timestamped[Profile]:
    """
    Load the stored profile for a numeric identity and revalidate it.

    Args:
        config: Runtime configuration
        steam_id: Numeric identity

    Returns:
        A fresh profile

    Raises:
        PlayWithError: If the stored profile cannot be read or the lookup fails
    """
    return revalidate(config, _load_or_stale(config, steam_id))


def from_username(config: Config, username: str) -> Timestamped[Profile]:
    """
    Resolve an alias through the directory, then load and revalidate its profile.

    A stored profile without an alias gets the looked-up alias backfilled and saved.

    Args:
        config: Runtime configuration
        username: Custom URL alias

    Returns:
        A fresh profile

    Raises:
        PlayWithError: If the lookup fails or the stored profile cannot be used
    """
    url = f"{config.community_url}id/{username}/"
    ids = download_ids(config, url, username)

    profile = _load_or_stale(config, ids.steamid64)
    if profile.object.ids.custom_url is None and ids.custom_url is not None:
        profile.object.ids.custom_url = ids.custom_url
        profile_store.save(config, profile.object)
        logger.info(f"Backfilled alias {ids.custom_url} for {ids.steamid64}")

    # The lookup just happened, so revalidation can reuse its result
    return revalidate(config, profile, ids)


def revalidate(
    config: Config,
    profile: Timestamped[Profile],
    ids: Identity | None = None
) -> Timestamped[Profile]:
    """
    Apply the freshness policy to a profile's identity data.

    A fresh profile is returned untouched. A stale one is replaced by a new
    profile built from `ids` (or from a new directory lookup when `ids` is not
    given) with its library cleared, so the library is fetched again later.

    Args:
        config: Runtime configuration
        profile: Stored or synthesized profile
        ids: Identity data that was just resolved, if any

    Returns:
        A profile within the freshness window
    """
    if profile.is_fresh(config.freshness_window, now()):
        logger.debug(f"Profile {profile.object.ids.steamid64} is fresh")
        return profile

    if ids is None:
        steam_id = profile.object.ids.steamid64
        url = f"{config.community_url}profiles/{steam_id}/"
        ids = download_ids(config, url, steam_id)

    logger.debug(f"Revalidated profile {ids.steamid64}")
    return Timestamped.of(Profile(ids=ids, games=None))


def download_ids(config: Config, url: str, identifier: str) -> Identity:
    """
    Look up identity data in the community directory.

    Args:
        config: Runtime configuration
        url: Profile page URL (the XML rendering is requested)
        identifier: What is being looked up, for error messages

    Returns:
        Identity parsed from the directory document

    Raises:
        TransportFailure, RemoteStatusFailure: If the directory cannot be reached
        ParseFailure, NotFound: If the document is unusable
    """
    logger.info(f"Looking up {identifier} in the community directory")
    xml = fetch_text(url, params={"xml": "1"}, timeout=config.timeout)
    return parse_ids(xml, identifier)


def _load_or_stale(config: Config, steam_id: str) -> Timestamped[Profile]:
    """Stored profile, or a placeholder old enough to force revalidation."""
    if profile_store.exists(config, steam_id):
        return profile_store.load(config, steam_id)

    stale_at = now() - config.freshness_window - 1
    return Timestamped.of_time(stale_at, Profile(ids=Identity(steamid64=steam_id)))
