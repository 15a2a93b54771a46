"""Reusable booking journey workflows."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from playwright.async_api import Page

from booking_ui.config import settings
from booking_ui.pages import FlightsPage, HomePage, HotelDetailsPage, PassengerDetailsPage, ResultsPage
from booking_ui.scenario_data import BookingScenario
from booking_ui.seeded_random import SeededRandom

logger = logging.getLogger(__name__)


@dataclass
class BookingPages:
    home: HomePage
    results: ResultsPage
    hotel: HotelDetailsPage
    flights: FlightsPage
    passengers: PassengerDetailsPage

    @classmethod
    def for_page(cls, page: Page) -> "BookingPages":
        return cls(
            home=HomePage(page),
            results=ResultsPage(page),
            hotel=HotelDetailsPage(page),
            flights=FlightsPage(page),
            passengers=PassengerDetailsPage(page),
        )


@dataclass
class BookingSelection:
    """What a journey picked, for logs and failure reports."""

    seed: int
    departure_airport: str = ""
    destination: str = ""
    departure_date: str = ""
    adults: int = 0
    children: int = 0
    child_ages: List[int] = field(default_factory=list)
    hotel_name: str = ""

    def summary(self) -> str:
        return (
            f"seed={self.seed} airport={self.departure_airport!r} destination={self.destination!r} "
            f"date={self.departure_date!r} adults={self.adults} children={self.children} "
            f"ages={self.child_ages} hotel={self.hotel_name!r}"
        )


async def search_and_open_passenger_form(
    pages: BookingPages,
    rng: SeededRandom,
    scenario: Optional[BookingScenario] = None,
) -> BookingSelection:
    """Drive the funnel from the home page to the passenger details form.

    Steps run strictly in order; the first failing step raises and the rest
    are not attempted. ``scenario`` sets the party; settings defaults otherwise.
    """
    selection = BookingSelection(seed=rng.seed)

    await pages.home.open()
    selection.departure_airport = await pages.home.select_departure_airport()
    selection.destination = await pages.home.select_random_destination(rng)
    selection.departure_date = await pages.home.select_departure_date(rng)

    defaults = settings.scenario_defaults
    selection.adults = scenario.adults if scenario else defaults.adults
    selection.children = scenario.children if scenario else defaults.children
    selection.child_ages = await pages.home.set_rooms_and_guests(
        rng,
        adults=selection.adults,
        children=selection.children,
        age_range=scenario.child_age_range if scenario else None,
    )

    await pages.home.search_holidays()
    selection.hotel_name = await pages.results.open_first_available_hotel()
    await pages.hotel.continue_from_hotel_details()
    await pages.flights.select_available_flights_and_continue()

    logger.info(f"[BOOKING] Reached passenger details: {selection.summary()}")
    return selection
