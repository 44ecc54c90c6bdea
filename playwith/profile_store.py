"""On-disk persistence of timestamped profiles, one JSON file per identity."""

import json
from pathlib import Path

from .config import Config
from .errors import FilesystemFailure, ParseFailure, PlayWithError
from .logger import setup_logger
from .models import Profile, Timestamped

logger = setup_logger(__name__)


def get_path(config: Config, steam_id: str) -> Path:
    """Path of the profile file for a numeric identity, e.g. profiles/7656....json"""
    return (config.profiles_dir / steam_id).with_suffix(".json")


def exists(config: Config, steam_id: str) -> bool:
    return get_path(config, steam_id).exists()


def load(config: Config, steam_id: str) -> Timestamped[Profile]:
    """
    Read a persisted profile.

    Args:
        config: Runtime configuration
        steam_id: Numeric identity

    Returns:
        The stored profile with the timestamp it was saved at

    Raises:
        FilesystemFailure: If the file cannot be read
        ParseFailure: If the file does not hold a timestamped profile
    """
    path = get_path(config, steam_id)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FilesystemFailure(f"could not read profile file {path}") from e

    try:
        data = json.loads(text)
        timestamped = Timestamped.of_time(int(data["timestamp"]), Profile.from_dict(data["object"]))
    except (ValueError, KeyError, TypeError, PlayWithError) as e:
        raise ParseFailure(f"could not read profile file {path}") from e

    logger.debug(f"Loaded profile {steam_id} saved at {timestamped.timestamp}")
    return timestamped


def save(config: Config, profile: Profile) -> Path:
    """
    Persist a profile stamped with the current time.

    Creates the profiles directory if needed and replaces any previous file.

    Args:
        config: Runtime configuration
        profile: Profile to write

    Returns:
        Path written

    Raises:
        FilesystemFailure: If the directory or file cannot be written
    """
    path = get_path(config, profile.ids.steamid64)
    _ensure_dir(path.parent)

    timestamped = Timestamped.of(profile)
    payload = {"timestamp": timestamped.timestamp, "object": profile.to_dict()}

    try:
        path.write_text(json.dumps(payload), encoding="utf-8")
    except OSError as e:
        raise FilesystemFailure(f"could not write profile file {path}") from e

    logger.info(f"Saved profile {profile.ids.steamid64}")
    return path


def _ensure_dir(directory: Path) -> None:
    if directory.exists() and not directory.is_dir():
        raise FilesystemFailure(f"{directory} exists but is not a directory")

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemFailure(f"could not create directory {directory}") from e
