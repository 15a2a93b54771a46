"""Passenger details form and its client-side validation.

Submitting the empty form must show an error under every required field.
Errors render asynchronously and the first click on Continue is sometimes
swallowed by an animation, so each check polls and, if nothing shows up,
clicks Continue again up to ``settings.retry.validation_attempts`` times.

Two failures are kept apart:

* :class:`FeedbackNotTriggered`: no error appeared anywhere on the form.
* :class:`ValidationErrorMissing`: errors appeared, but not for a given field.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from playwright.async_api import Locator

from booking_ui.config import settings
from booking_ui.errors import FeedbackNotTriggered, ValidationErrorMissing
from booking_ui.interaction import ConfirmationResult, confirm_with_retrigger, poll_until_true
from booking_ui.locators import (
    PASSENGER_VALIDATION_IDS,
    PassengerDetailsLocators as L,
    PassengerSection,
    error_messages_for_prefix,
)
from booking_ui.pages.base import BasePage

logger = logging.getLogger(__name__)


class PassengerDetailsPage(BasePage):
    @property
    def pax_form(self) -> Locator:
        return self.page.locator(L.pax_form)

    @property
    def continue_button(self) -> Locator:
        return self.page.locator(L.continue_button)

    @property
    def any_error_message(self) -> Locator:
        return self.page.locator(L.any_error_message)

    def error_messages_for_field(self, field_id: str) -> Locator:
        return self.page.locator(error_messages_for_prefix(field_id))

    async def click_continue(self) -> None:
        await self.click(self.continue_button, "passenger continue", settings.timeouts.continue_button)

    async def _has_any_error(self) -> bool:
        return await self.count(self.any_error_message) > 0

    async def has_error_for_field(self, field_id: str) -> bool:
        """Immediate check, no waiting."""
        return await self.count(self.error_messages_for_field(field_id)) > 0

    async def wait_for_validation_triggered(self, timeout: Optional[float] = None) -> bool:
        """True once any field error is visible; False when none appeared in time."""
        budget = settings.timeouts.validation_trigger if timeout is None else timeout
        return await poll_until_true(self._has_any_error, budget)

    async def get_sections_to_validate(self) -> List[PassengerSection]:
        # The child passenger block is named CHILD or INFANT depending on age.
        sections: List[PassengerSection] = ["adult_mainBooker"]
        if await self.count(self.page.locator(L.first_name_infant)) > 0:
            sections.append("infant_passenger")
        if await self.count(self.page.locator(L.first_name_child)) > 0:
            sections.append("child_passenger")
        return sections

    async def confirm_validation_triggered(self) -> ConfirmationResult:
        """Wait for any error after Continue, re-clicking within the retry cap.

        Raises:
            FeedbackNotTriggered: No error appeared after the last attempt.
        """
        result = await confirm_with_retrigger(
            self._has_any_error,
            self.click_continue,
            max_attempts=settings.retry.validation_attempts,
            timeout=settings.timeouts.validation_trigger,
        )
        if not result.found:
            raise FeedbackNotTriggered(
                f"Validation failed to trigger: no error messages after {result.attempts} continue clicks",
                payload={"attempts": result.attempts, "elapsed": round(result.elapsed, 2)},
            )
        return result

    async def expect_validation_error_for_field(self, field_id: str, section: str = "") -> ConfirmationResult:
        """Require a visible error for every input whose id starts with ``field_id``.

        Raises:
            ValidationErrorMissing: The field never showed an error within the retry cap.
        """
        result = await confirm_with_retrigger(
            lambda: self.has_error_for_field(field_id),
            self.click_continue,
            max_attempts=settings.retry.validation_attempts,
            timeout=settings.timeouts.expect,
        )
        if not result.found:
            raise ValidationErrorMissing(
                f'No visible validation errors found for prefix "{field_id}" after {result.attempts} attempts',
                payload={
                    "field": field_id,
                    "section": section,
                    "attempts": result.attempts,
                    "elapsed": round(result.elapsed, 2),
                },
            )
        if result.attempts > 1:
            logger.info(f"Error for {field_id} appeared after {result.attempts} attempts")
        return result

    async def validate_passenger_field_errors(self) -> Dict[str, ConfirmationResult]:
        """Submit the empty form and assert every required field reports an error.

        Returns:
            Confirmation per field id, for diagnostics.
        """
        await self.wait_visible(self.pax_form, "passenger form", settings.timeouts.form_visible)
        await self.click_continue()
        await self.confirm_validation_triggered()

        results: Dict[str, ConfirmationResult] = {}
        for section in await self.get_sections_to_validate():
            for field_id in PASSENGER_VALIDATION_IDS[section]:
                results[field_id] = await self.expect_validation_error_for_field(field_id, section)
        logger.info(f"[BOOKING] Validation errors confirmed for {len(results)} fields")
        return results
