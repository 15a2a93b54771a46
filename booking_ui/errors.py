"""Error taxonomy shared by the generator, the interaction layer and page objects."""
from __future__ import annotations

from typing import Any, Dict, Optional


class BookingUiError(Exception):
    """Base class for every failure raised by the booking UI helpers."""

    name = "booking_ui"

    def __init__(self, message: str, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload: Dict[str, Any] = payload or {}

    def __str__(self) -> str:  # pragma: no cover - human readable helper
        if not self.payload:
            return self.message
        return f"{self.name} failed ({self.message}) with payload={self.payload}"


class InvalidArgument(BookingUiError, ValueError):
    """Programming error: a caller passed a value the operation cannot accept."""

    name = "invalid_argument"


class ConfigError(BookingUiError, ValueError):
    """Environment configuration could not be parsed."""

    name = "config"


class VisibilityTimeout(BookingUiError):
    """Target never became visible within its budget."""

    name = "wait_visible"


class ActionFailure(BookingUiError):
    """The action itself failed after visibility was confirmed."""

    name = "click"


class NavigationFailure(BookingUiError):
    name = "goto"


class FeedbackNotTriggered(BookingUiError, AssertionError):
    """The triggering action never produced any visible feedback."""

    name = "feedback_triggered"


class ValidationErrorMissing(BookingUiError, AssertionError):
    """Feedback appeared, but not for the expected field."""

    name = "field_error"


class ScenarioDataError(BookingUiError):
    name = "scenario_data"
