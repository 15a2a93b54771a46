"""Page objects for the holiday booking funnel."""
from booking_ui.pages.base import BasePage
from booking_ui.pages.flights import FlightsPage
from booking_ui.pages.home import HomePage
from booking_ui.pages.hotel_details import HotelDetailsPage
from booking_ui.pages.passenger_details import PassengerDetailsPage
from booking_ui.pages.results import ResultsPage

__all__ = [
    "BasePage",
    "FlightsPage",
    "HomePage",
    "HotelDetailsPage",
    "PassengerDetailsPage",
    "ResultsPage",
]
