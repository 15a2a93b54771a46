"""Common behaviour for all booking funnel page objects."""
from __future__ import annotations

from typing import Optional

from playwright.async_api import Locator, Page, TimeoutError as PlaywrightTimeout

from booking_ui.errors import NavigationFailure
from booking_ui.interaction import ActionReport, LocatorTarget, act_on


class BasePage:
    """Wraps a Playwright page with the interaction protocol.

    Every click made by a page object goes through :func:`act_on`, so hidden
    duplicates are never clicked and failures carry the element description.
    """

    def __init__(self, page: Page) -> None:
        self.page = page

    async def goto(self, url: str, wait_until: str = "domcontentloaded", timeout: Optional[float] = None) -> None:
        """Navigate to URL.

        Note: "networkidle" can time out on pages with long-polling connections;
              it falls back to "domcontentloaded" once before giving up.
        """
        kwargs = {} if timeout is None else {"timeout": timeout * 1000}
        try:
            await self.page.goto(url, wait_until=wait_until, **kwargs)
        except PlaywrightTimeout as exc:
            if wait_until == "networkidle":
                try:
                    await self.page.goto(url, wait_until="domcontentloaded", **kwargs)
                    return
                except PlaywrightTimeout:
                    pass  # Fall through to original error
            raise NavigationFailure(str(exc), payload={"url": url, "wait_until": wait_until}) from exc

    async def click(self, locator: Locator, description: str, timeout: Optional[float] = None) -> ActionReport:
        return await act_on(LocatorTarget(locator, description), timeout)

    async def text(self, locator: Locator) -> str:
        return await locator.text_content() or ""

    async def attribute(self, locator: Locator, name: str) -> str:
        return await locator.get_attribute(name) or ""

    async def count(self, locator: Locator) -> int:
        return await locator.count()

    async def is_visible(self, locator: Locator) -> bool:
        return await locator.is_visible()

    async def wait_visible(self, locator: Locator, description: str, timeout: float) -> None:
        await LocatorTarget(locator, description).wait_visible(timeout)

    async def wait_hidden(self, locator: Locator, timeout: float) -> None:
        await locator.wait_for(state="hidden", timeout=timeout * 1000)

    @property
    def current_url(self) -> str:
        return self.page.url

    async def title(self) -> str:
        return await self.page.title()
