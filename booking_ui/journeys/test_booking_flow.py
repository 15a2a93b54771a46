"""
Journey: search a holiday, reach passenger details, check the empty form.

1. Open the home page and accept cookies
2. Pick departure airport, destination, date and party (seeded)
3. Search and open an available hotel
4. Continue past hotel details and flights
5. Submit the empty passenger form; every required field must report an error
"""
import logging

import pytest

from booking_ui.scenario_data import get_scenario_by_name
from booking_ui.workflows import search_and_open_passenger_form

logger = logging.getLogger(__name__)

pytestmark = [pytest.mark.asyncio, pytest.mark.live]


async def test_passenger_form_reports_required_fields(booking_pages, rng, scenario):
    selection = await search_and_open_passenger_form(booking_pages, rng, scenario)

    results = await booking_pages.passengers.validate_passenger_field_errors()

    assert results, f"No passenger fields checked ({selection.summary()})"
    assert all(result.found for result in results.values())
    assert "FIRSTNAMEADULT" in results


async def test_infant_party_validates_infant_section(booking_pages, rng):
    infant = get_scenario_by_name("family_with_infant")
    selection = await search_and_open_passenger_form(booking_pages, rng, infant)

    sections = await booking_pages.passengers.get_sections_to_validate()
    logger.info(f"Sections for {selection.summary()}: {sections}")
    assert sections[0] == "adult_mainBooker"

    results = await booking_pages.passengers.validate_passenger_field_errors()
    assert all(result.found for result in results.values())
