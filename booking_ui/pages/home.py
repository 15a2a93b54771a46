"""Home page: the holiday search form."""
from __future__ import annotations

import logging
from typing import List, Optional

from playwright.async_api import Locator

from booking_ui.config import settings
from booking_ui.errors import BookingUiError
from booking_ui.interaction import BestEffortResult, maybe_accept_cookies
from booking_ui.locators import HomePageLocators as L
from booking_ui.pages.base import BasePage
from booking_ui.scenario_data import AgeRange
from booking_ui.seeded_random import SeededRandom

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    # ---- locators -----------------------------------------------------------------
    @property
    def airports_panel(self) -> Locator:
        return self.page.locator(L.airports_panel)

    @property
    def airport_boxes(self) -> Locator:
        return self.airports_panel.locator(L.airport_boxes)

    @property
    def destination_panel(self) -> Locator:
        return self.page.locator(L.destination_panel)

    @property
    def destination_links(self) -> Locator:
        return self.destination_panel.locator(L.destination_links)

    @property
    def departure_date_panel(self) -> Locator:
        return self.page.locator(L.departure_date_panel)

    @property
    def available_departure_dates(self) -> Locator:
        return self.departure_date_panel.locator(L.available_departure_dates)

    @property
    def guests_panel(self) -> Locator:
        return self.page.locator(L.guests_panel)

    @property
    def child_age_selects(self) -> Locator:
        return self.page.locator(L.child_age_select)

    @property
    def search_results_list(self) -> Locator:
        return self.page.locator(L.search_results_list)

    # ---- actions ------------------------------------------------------------------
    async def open(self) -> BestEffortResult:
        """Navigate to the home page and dismiss the cookie banner if present."""
        await self.goto(settings.base_url, wait_until="networkidle", timeout=settings.timeouts.navigation)
        return await maybe_accept_cookies(self.page)

    async def select_departure_airport(self, rng: Optional[SeededRandom] = None) -> str:
        """Tick one departure airport; the first one unless a generator is given."""
        await self.click(self.page.locator(L.airport_input), "airport input")
        if rng is None:
            picked = self.airport_boxes.first
        else:
            picked = self.airport_boxes.nth(rng.pick_index(await self.count(self.airport_boxes)))
        airport = (await self.text(picked)).strip()
        await self.click(picked, f"airport '{airport}'")
        await self.click(self.airports_panel.locator(L.airports_apply), "airports apply")
        logger.info(f"[BOOKING] Departure Airport: {airport}")
        return airport

    async def select_random_destination(self, rng: SeededRandom) -> str:
        await self.click(self.page.locator(L.destination_open), "destination input")
        count = await self.count(self.destination_links)
        picked = self.destination_links.nth(rng.pick_index(count))
        destination = (await self.text(picked)).strip()
        await self.click(picked, f"destination '{destination}'")

        await self.click(self.destination_panel.locator(L.destination_parent_checkbox), "destination parent checkbox")
        await self.click(self.destination_panel.locator(L.destination_apply), "destinations apply")
        logger.info(f"[BOOKING] Destination: {destination}")
        return destination

    async def select_departure_date(self, rng: SeededRandom) -> str:
        """Pick one of the available departure dates; returns its aria-label."""
        await self.click(self.page.locator(L.departure_date_input), "departure date input")
        count = await self.count(self.available_departure_dates)
        picked = self.available_departure_dates.nth(rng.pick_index(count))
        label = await self.attribute(picked, "aria-label") or await self.text(picked)
        label = label.strip()
        await self.click(picked, f"departure date '{label}'")
        await self.click(self.departure_date_panel.locator(L.departure_date_apply), "departure date apply")
        logger.info(f"[BOOKING] Departure Date: {label}")
        return label

    async def child_age_values(self, select: Locator, age_range: Optional[AgeRange] = None) -> List[str]:
        """Option values of an age select that are enabled, numeric and >= 0.

        The placeholder option has an empty or negative value and is skipped.
        """
        options = select.locator(L.enabled_option)
        values: List[str] = []
        for i in range(await self.count(options)):
            value = await self.attribute(options.nth(i), "value")
            if not value:
                continue
            try:
                age = int(value)
            except ValueError:
                continue
            if age < 0 or (age_range is not None and not age_range.contains(age)):
                continue
            values.append(value)
        return values

    async def set_rooms_and_guests(
        self,
        rng: SeededRandom,
        adults: Optional[int] = None,
        children: Optional[int] = None,
        age_range: Optional[AgeRange] = None,
    ) -> List[int]:
        """Set the party size and give every child a seeded age.

        Returns:
            The selected child ages, in select order.
        """
        adults = settings.scenario_defaults.adults if adults is None else adults
        children = settings.scenario_defaults.children if children is None else children

        await self.click(self.page.locator(L.rooms_guests_input), "rooms and guests input")
        await self.page.locator(L.adults_select).select_option(str(adults))
        await self.page.locator(L.children_select).select_option(str(children))

        ages: List[int] = []
        for index in range(children):
            select = self.child_age_selects.nth(index)
            values = await self.child_age_values(select, age_range)
            if not values:
                raise BookingUiError(
                    "No valid child age options (value >= 0) found",
                    payload={"child": index, "age_range": age_range},
                )
            chosen = rng.pick(values)
            await select.select_option(chosen)
            ages.append(int(chosen))

        await self.click(self.guests_panel.locator(L.guests_apply), "guests apply")
        logger.info(f"[BOOKING] Guests: {adults} Adults, {children} Children (ages {ages})")
        return ages

    async def search_holidays(self) -> None:
        await self.click(self.page.locator(L.search_button), "search button")
