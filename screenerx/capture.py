from pathlib import Path
from typing import Optional

from playwright.async_api import Browser, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from screenerx.config import Config, get_config
from screenerx.console import console
from screenerx.errors import BrowserLaunchFailed, CaptureFailed
from screenerx.models import EffectiveTaskSettings

BROWSER_TYPES = {
    "chrome": "chromium",
    "firefox": "firefox",
}


def first_line(error: PlaywrightError) -> str:
    lines = (error.message or str(error)).splitlines()
    return lines[0] if lines else type(error).__name__


class CaptureEngine:
    """A single headless browser page, open for the duration of one task.

    Use as an async context manager; the browser is closed on exit.
    """

    def __init__(
        self, settings: EffectiveTaskSettings, config: Optional[Config] = None
    ):
        self.settings = settings
        self.config = config or get_config()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None

    async def __aenter__(self) -> "CaptureEngine":
        self._playwright = await async_playwright().start()
        browser_type = getattr(self._playwright, BROWSER_TYPES[self.settings.browser])
        try:
            self._browser = await browser_type.launch(headless=self.config.headless)
            context = await self._browser.new_context(
                viewport={
                    "width": self.settings.width,
                    "height": self.settings.height,
                },
                device_scale_factor=1,
                ignore_https_errors=self.config.ignore_https_errors,
            )
            self._page = await context.new_page()
        except PlaywrightError as e:
            await self.close()
            raise BrowserLaunchFailed(self.settings.browser, first_line(e)) from e
        console.log(
            f"launched {self.settings.browser} "
            f"{self.settings.width}x{self.settings.height}"
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._browser is not None:
            await self._browser.close()
            self._browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None
        self._page = None

    async def capture(self, url: str, path: Path) -> Path:
        """Navigate to ``url`` and write a screenshot to ``path``."""
        if self._page is None:
            raise RuntimeError("CaptureEngine used outside of 'async with'")
        try:
            await self._page.goto(
                url,
                wait_until=self.config.wait_until,
                timeout=self.config.navigation_timeout_ms,
            )
            await self._page.screenshot(
                path=str(path), full_page=self.settings.full_page
            )
        except PlaywrightError as e:
            raise CaptureFailed(url, first_line(e)) from e
        except OSError as e:
            raise CaptureFailed(url, str(e)) from e
        return path
