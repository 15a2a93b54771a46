"""Search results page."""
from __future__ import annotations

import logging
from typing import Optional

from playwright.async_api import Locator

from booking_ui.locators import ResultsPageLocators as L
from booking_ui.pages.base import BasePage
from booking_ui.seeded_random import SeededRandom

logger = logging.getLogger(__name__)


class ResultsPage(BasePage):
    @property
    def results_list(self) -> Locator:
        return self.page.locator(L.results_list)

    @property
    def result_items(self) -> Locator:
        return self.results_list.locator(L.result_item)

    async def open_hotel(self, rng: Optional[SeededRandom] = None) -> str:
        """Open one hotel from the results; the first unless a generator is given.

        Returns:
            The hotel name as shown in the result card.
        """
        if rng is None:
            result = self.result_items.first
        else:
            result = self.result_items.nth(rng.pick_index(await self.count(self.result_items)))

        hotel_name = (await self.text(result.locator(L.hotel_name))).strip()
        await self.click(result.locator(L.continue_button), f"continue for '{hotel_name}'")
        logger.info(f"[BOOKING] Hotel Selected: {hotel_name}")
        return hotel_name

    async def open_first_available_hotel(self) -> str:
        return await self.open_hotel()
