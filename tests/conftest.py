import pytest

from playwith.config import Config


@pytest.fixture
def config(tmp_path):
    """Configuration with caches under a temporary directory."""
    return Config(
        api_key="test-key",
        profiles_dir=tmp_path / "profiles",
        icons_dir=tmp_path / "icons",
    )
