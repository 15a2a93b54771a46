"""Hotel details page."""
from __future__ import annotations

from playwright.async_api import Locator

from booking_ui.locators import HotelDetailsLocators as L
from booking_ui.pages.base import BasePage


class HotelDetailsPage(BasePage):
    @property
    def overview_container(self) -> Locator:
        return self.page.locator(L.overview_container)

    async def continue_from_hotel_details(self) -> None:
        await self.click(self.page.locator(L.continue_button), "hotel details continue")
