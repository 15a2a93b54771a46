"""
Direct Playwright Client
========================

Launches the browser in-process for the booking journeys.

Usage:
    from booking_ui.playwright_client import PlaywrightClient

    async with PlaywrightClient() as client:
        await client.page.goto(settings.base_url)
"""

import logging
from typing import Optional

from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright

from booking_ui.config import settings

logger = logging.getLogger(__name__)


class PlaywrightClient:
    """
    Owns one Playwright driver, browser, context and default page.

    Example:
        async with PlaywrightClient(headless=False, slow_mo=250) as client:
            home = HomePage(client.page)
            await home.open()
    """

    def __init__(
        self,
        browser_type: Optional[str] = None,
        headless: Optional[bool] = None,
        slow_mo: Optional[int] = None,
        timeout: Optional[float] = None,
        base_url: Optional[str] = None,
    ):
        """
        Args:
            browser_type: chromium, firefox or webkit (default: BROWSER setting)
            headless: Run headless (default: HEADLESS setting)
            slow_mo: Delay in milliseconds between operations (default: SLOW_MO setting)
            timeout: Default action timeout in seconds
            base_url: Base URL for relative navigation
        """
        self.browser_type = browser_type or settings.run.browser
        self.headless = settings.headless if headless is None else headless
        self.slow_mo = settings.run.slow_mo if slow_mo is None else slow_mo
        self.timeout = settings.timeouts.action if timeout is None else timeout
        self.base_url = base_url or settings.base_url

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def connect(self):
        """Launch the browser and open the default context and page."""
        self._playwright = await async_playwright().start()

        if self.browser_type == 'firefox':
            launcher = self._playwright.firefox
        elif self.browser_type == 'webkit':
            launcher = self._playwright.webkit
        else:
            launcher = self._playwright.chromium
        self._browser = await launcher.launch(headless=self.headless, slow_mo=self.slow_mo)
        logger.debug(f"Launched {self.browser_type} (headless={self.headless}, slow_mo={self.slow_mo})")

        self._context = await self._browser.new_context(base_url=self.base_url)
        self._context.set_default_timeout(self.timeout * 1000)
        self._context.set_default_navigation_timeout(settings.timeouts.navigation * 1000)

        self._page = await self._context.new_page()

    async def new_page(self) -> Page:
        if not self._context:
            raise RuntimeError("Client not connected. Use 'async with' or call connect()")
        return await self._context.new_page()

    async def close(self):
        """Close all connections and cleanup resources."""
        if self._page:
            await self._page.close()
            self._page = None

        if self._context:
            await self._context.close()
            self._context = None

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    @property
    def browser(self) -> Browser:
        if not self._browser:
            raise RuntimeError("Client not connected")
        return self._browser

    @property
    def context(self) -> BrowserContext:
        if not self._context:
            raise RuntimeError("Client not connected")
        return self._context

    @property
    def page(self) -> Page:
        if not self._page:
            raise RuntimeError("Client not connected or page not created")
        return self._page
