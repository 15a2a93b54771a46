"""Selector tables for the booking funnel.

Several controls exist twice in the DOM (a hidden clone plus the live one);
those selectors carry ``:visible`` so strict-mode locators resolve to one node.
"""
from __future__ import annotations

import re
from typing import Dict, Literal, Tuple

PassengerSection = Literal["adult_mainBooker", "child_passenger", "infant_passenger"]

APPLY_BUTTON = ".DropModal__footerContainer .DropModal__apply"


class HomePageLocators:
    # Airport selection
    airport_input = '[data-test-id="airport-input"]'
    airports_panel = ".dropModalScope_airports"
    airport_boxes = ".SelectAirports__parentGroup .inputs__CheckboxTextAligned"
    airports_apply = APPLY_BUTTON

    # Destination selection
    destination_open = ".Package__destinations .inputs__children:visible"
    destination_panel = ".dropModalScope_destinations"
    destination_links = ".DestinationsList__link:not(.DestinationsList__disabled)"
    destination_parent_checkbox = ".DestinationsList__droplistContainer .DestinationsList__parentCheckbox:visible"
    destination_apply = APPLY_BUTTON

    # Departure date
    departure_date_input = '[data-test-id="departure-date-input"]'
    departure_date_panel = ".dropModalScope_Departuredate"
    available_departure_dates = ".SelectLegacyDate__available"
    departure_date_apply = APPLY_BUTTON

    # Rooms & guests
    rooms_guests_input = '[data-test-id="rooms-and-guest-input"]'
    adults_select = ".AdultSelector__adultSelector select"
    children_select = ".ChildrenSelector__childrenSelector select"
    child_age_select = ".ChildrenAge__childAgeSelector select"
    enabled_option = "option:not([disabled])"
    guests_panel = ".dropModalScope_roomandguest"
    guests_apply = APPLY_BUTTON

    # Search
    search_button = '[data-test-id="search-button"]'
    search_results_list = '[data-test-id="search-results-list"]'


class ResultsPageLocators:
    results_list = '[data-test-id="search-results-list"]'
    result_item = '[data-test-id="result-item"]'
    hotel_name = '[data-test-id="hotel-name"]'
    # Identical continue buttons are rendered per breakpoint; only one is visible.
    continue_button = 'div.ResultsListItem__continue button[data-test-id="continue-button"]:visible'


class HotelDetailsLocators:
    overview_container = "#headerContainer__component"
    continue_button = ".ProgressbarNavigation__summaryButton"


class FlightsPageLocators:
    summary_container = ".ContainerWithRiteSideHolidaySummary"
    continue_button = ".ProgressbarNavigation__container .ProgressbarNavigation__summaryButton:visible"


class PassengerDetailsLocators:
    pax_form = "#pax-form"
    continue_button = "#PassengerV2ContinueButton__component .ContinueButtonV2__continue:visible button"
    first_name_child = '[id^="FIRSTNAMECHILD"]'
    first_name_infant = '[id^="FIRSTNAMEINFANT"]'
    any_error_message = '[id$="__errorMessage"]:visible'
    error_message_suffixes = ("__errorMessage", "_error")


def error_messages_for_prefix(prefix: str) -> str:
    """Visible error nodes for every input whose id starts with ``prefix``.

    Inputs are numbered per passenger (``FIRSTNAMEADULT1``, ``FIRSTNAMEADULT3``),
    so the match is on prefix, not on an exact id.
    """
    return ", ".join(
        f'[id^="{prefix}"][id$="{suffix}"]:visible'
        for suffix in PassengerDetailsLocators.error_message_suffixes
    )


PASSENGER_VALIDATION_IDS: Dict[PassengerSection, Tuple[str, ...]] = {
    "adult_mainBooker": (
        "FIRSTNAMEADULT",
        "SURNAMEADULT",
        "ADDRESS1ADULT",
        "HOUSENUMBERADULT",
        "POSTALCODEADULT",
        "TOWNADULT",
        "MOBILENUMBERADULT",
        "EMAILADDRESSADULT",
    ),
    "child_passenger": ("FIRSTNAMECHILD", "SURNAMECHILD"),
    "infant_passenger": ("FIRSTNAMEINFANT", "SURNAMEINFANT"),
}

# Tried in order; the Dutch site uses several consent managers.
CONSENT_BUTTON_LABELS = [
    re.compile(r"accepteer cookies|accept cookies", re.IGNORECASE),
    re.compile(r"akkoord|toestaan|accept all", re.IGNORECASE),
]
