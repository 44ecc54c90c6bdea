import hashlib
from unittest.mock import patch

import pytest

from playwith import icon_cache
from playwith.errors import FilesystemFailure, TransportFailure
from playwith.models import SharedGame

IMAGE = b"\xff\xd8\xff\xe0 fake jpeg data"
IMAGE_HASH = hashlib.sha1(IMAGE).hexdigest()


@pytest.fixture
def game():
    return SharedGame(440, "Team Fortress 2", 100, "logo", IMAGE_HASH)


def test_get_icon_url(config):
    url = icon_cache.get_icon_url(config, 440, "abc")

    assert url == "https://media.steampowered.com/steamcommunity/public/images/apps/440/abc.jpg"


def test_get_cache_path(config):
    assert icon_cache.get_cache_path(config, 440, "abc") == config.icons_dir / "440_abc.jpg"


def test_get_icon_downloads_on_miss(config, game):
    with patch("playwith.icon_cache.fetch_bytes") as mock_fetch:
        mock_fetch.return_value = IMAGE

        path = icon_cache.get_icon(config, game)

    mock_fetch.assert_called_once()
    assert mock_fetch.call_args[0][0].endswith(f"/440/{IMAGE_HASH}.jpg")
    assert path == config.icons_dir / f"440_{IMAGE_HASH}.jpg"
    assert path.read_bytes() == IMAGE


def test_get_icon_twice_fetches_once(config, game):
    """The second request for the same icon is a pure cache hit."""
    with patch("playwith.icon_cache.fetch_bytes") as mock_fetch:
        mock_fetch.return_value = IMAGE

        first = icon_cache.get_icon(config, game)
        second = icon_cache.get_icon(config, game)

    assert mock_fetch.call_count == 1
    assert first == second
    assert second.read_bytes() == IMAGE


def test_get_icon_hash_compared_case_insensitively(config):
    game = SharedGame(440, "Team Fortress 2", 100, "logo", IMAGE_HASH.upper())
    config.icons_dir.mkdir(parents=True)
    icon_cache.get_cache_path(config, 440, IMAGE_HASH.upper()).write_bytes(IMAGE)

    with patch("playwith.icon_cache.fetch_bytes") as mock_fetch:
        icon_cache.get_icon(config, game)

    mock_fetch.assert_not_called()


def test_get_icon_corrupt_file_refetched(config, game):
    """A cached file whose hash does not match is replaced."""
    config.icons_dir.mkdir(parents=True)
    path = icon_cache.get_cache_path(config, game.appid, IMAGE_HASH)
    path.write_bytes(b"truncated")

    with patch("playwith.icon_cache.fetch_bytes") as mock_fetch:
        mock_fetch.return_value = IMAGE

        result = icon_cache.get_icon(config, game)

    mock_fetch.assert_called_once()
    assert result == path
    assert path.read_bytes() == IMAGE


def test_get_icon_icons_dir_is_file(config, game):
    config.icons_dir.parent.mkdir(parents=True, exist_ok=True)
    config.icons_dir.write_bytes(b"")

    with patch("playwith.icon_cache.fetch_bytes") as mock_fetch:
        with pytest.raises(FilesystemFailure):
            icon_cache.get_icon(config, game)

    mock_fetch.assert_not_called()


def test_get_icon_download_failure(config, game):
    with patch("playwith.icon_cache.fetch_bytes") as mock_fetch:
        mock_fetch.side_effect = TransportFailure("could not contact media.steampowered.com")

        with pytest.raises(TransportFailure):
            icon_cache.get_icon(config, game)

    assert not icon_cache.get_cache_path(config, game.appid, IMAGE_HASH).exists()


def test_content_hash():
    assert icon_cache.content_hash(b"") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"
