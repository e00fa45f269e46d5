from pathlib import Path

import pytest

from screenerx.config import Config, get_config
from screenerx.errors import BrowserLaunchFailed, CaptureFailed


class FakeEngine:
    """Stands in for CaptureEngine; writes a few bytes instead of a screenshot."""

    instances: list["FakeEngine"] = []
    fail_urls: set[str] = set()
    fail_launch: bool = False

    def __init__(self, settings, config=None):
        self.settings = settings
        self.config = config
        self.captured: list[tuple[str, Path]] = []
        self.closed = False
        FakeEngine.instances.append(self)

    async def __aenter__(self):
        if FakeEngine.fail_launch:
            raise BrowserLaunchFailed(self.settings.browser, "no browser installed")
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True

    async def capture(self, url: str, path: Path) -> Path:
        if url in FakeEngine.fail_urls:
            raise CaptureFailed(url, "net::ERR_NAME_NOT_RESOLVED")
        path.write_bytes(b"\x89PNG")
        self.captured.append((url, path))
        return path


@pytest.fixture
def fake_engine():
    FakeEngine.instances = []
    FakeEngine.fail_urls = set()
    FakeEngine.fail_launch = False
    yield FakeEngine
    FakeEngine.instances = []
    FakeEngine.fail_urls = set()
    FakeEngine.fail_launch = False


@pytest.fixture
def settings(tmp_path: Path) -> Config:
    return Config(
        _env_file=None,
        screenshot_base_path=str(tmp_path / "screenshots"),
    )


@pytest.fixture(autouse=True)
def clear_config_cache():
    get_config.cache_clear()
    yield
    get_config.cache_clear()
