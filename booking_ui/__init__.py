"""Holiday booking UI test support: seeded selection, resilient interaction, page objects."""
from booking_ui.errors import (
    ActionFailure,
    BookingUiError,
    FeedbackNotTriggered,
    InvalidArgument,
    ValidationErrorMissing,
    VisibilityTimeout,
)
from booking_ui.seeded_random import SeededRandom, create, effective_seed

__all__ = [
    "ActionFailure",
    "BookingUiError",
    "FeedbackNotTriggered",
    "InvalidArgument",
    "SeededRandom",
    "ValidationErrorMissing",
    "VisibilityTimeout",
    "create",
    "effective_seed",
]
