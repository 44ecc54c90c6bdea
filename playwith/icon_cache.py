"""Local cache of game icons, verified against their content hash."""

import hashlib
from pathlib import Path

from .config import Config
from .errors import FilesystemFailure
from .http_client import fetch_bytes
from .logger import setup_logger
from .models import SharedGame

logger = setup_logger(__name__)


def get_icon_url(config: Config, appid: int, icon_hash: str) -> str:
    return f"{config.media_url}{appid}/{icon_hash}.jpg"


def get_cache_path(config: Config, appid: int, icon_hash: str) -> Path:
    return config.icons_dir / f"{appid}_{icon_hash}.jpg"


def content_hash(data: bytes) -> str:
    """SHA-1 of the data as lowercase hex, the scheme icon hashes use."""
    return hashlib.sha1(data).hexdigest()


def get_icon(config: Config, game: SharedGame) -> Path:
    """
    Return a local path holding the game's icon, downloading it if needed.

    A cached file is only reused when its SHA-1 matches the icon hash;
    otherwise it is deleted and fetched again.

    Args:
        config: Runtime configuration
        game: Shared game whose img_icon_url hash names the icon

    Returns:
        Path to the icon file

    Raises:
        FilesystemFailure: If the cache directory or file cannot be used
        TransportFailure, RemoteStatusFailure: If the download fails
    """
    icon_hash = game.img_icon_url
    _ensure_dir(config.icons_dir)

    path = get_cache_path(config, game.appid, icon_hash)
    if path.exists():
        if _verify(path, icon_hash):
            logger.debug(f"Icon cache hit for {game.appid}")
            return path

        logger.info(f"Cached icon for {game.appid} failed verification, fetching again")
        try:
            path.unlink()
        except OSError as e:
            raise FilesystemFailure(f"could not delete {path}") from e

    image = fetch_bytes(get_icon_url(config, game.appid, icon_hash), timeout=config.timeout)

    try:
        path.write_bytes(image)
    except OSError as e:
        raise FilesystemFailure(f"could not write {path}") from e

    logger.debug(f"Downloaded icon for {game.appid}")
    return path


def _verify(path: Path, expected_hash: str) -> bool:
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FilesystemFailure(f"could not read {path}") from e

    return content_hash(data) == expected_hash.lower()


def _ensure_dir(directory: Path) -> None:
    if directory.exists() and not directory.is_dir():
        raise FilesystemFailure(f"icons directory {directory} is a file")

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemFailure(f"could not create icons directory {directory}") from e
