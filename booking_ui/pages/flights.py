"""Flight selection page. The pre-selected flights are accepted as-is."""
from __future__ import annotations

from playwright.async_api import Locator

from booking_ui.locators import FlightsPageLocators as L
from booking_ui.pages.base import BasePage


class FlightsPage(BasePage):
    @property
    def summary_container(self) -> Locator:
        return self.page.locator(L.summary_container)

    async def select_available_flights_and_continue(self) -> None:
        await self.click(self.page.locator(L.continue_button), "flights continue")
