"""Resilient element interaction and validation polling.

The travel site keeps hidden clones of most controls in the DOM and renders
validation feedback asynchronously. Two rules follow from that:

* Never act on a query result until exactly one *visible* match is confirmed
  (:func:`act_on`).
* Never trust a snapshot of the page; poll the live DOM until the condition
  holds or the deadline passes (:func:`poll`, :func:`poll_until_true`,
  :func:`confirm_with_retrigger`).

Every wait here carries a timeout. Nothing in this module blocks unbounded.
"""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Pattern, Protocol, Union

import anyio
from playwright.async_api import Locator, Page, TimeoutError as PlaywrightTimeout

from booking_ui.config import settings
from booking_ui.errors import ActionFailure, InvalidArgument, VisibilityTimeout
from booking_ui.locators import CONSENT_BUTTON_LABELS

logger = logging.getLogger(__name__)

# Scrolling hidden or animating elements can hang, so it gets a short budget.
SCROLL_TIMEOUT = 2.0
DEFAULT_POLL_INTERVAL = 0.25
# Playwright reports more than one match for a strict locator with this text.
STRICT_MODE_MARKER = "strict mode violation"

Predicate = Callable[[], Union[bool, Awaitable[bool]]]
Clock = Callable[[], float]
Sleeper = Callable[[float], Awaitable[None]]


class InteractionTarget(Protocol):
    """Capability the protocol needs from "an element on the page"."""

    description: str

    async def count(self) -> int: ...

    async def is_visible(self) -> bool: ...

    async def wait_visible(self, timeout: float) -> None: ...

    async def scroll_into_view(self, timeout: float) -> None: ...

    async def click(self) -> None: ...


class LocatorTarget:
    """:class:`InteractionTarget` backed by a Playwright locator. Timeouts are seconds."""

    def __init__(self, locator: Locator, description: Optional[str] = None) -> None:
        self.locator = locator
        self.description = description or str(locator)

    def __repr__(self) -> str:
        return f"LocatorTarget({self.description})"

    async def count(self) -> int:
        return await self.locator.count()

    async def is_visible(self) -> bool:
        return await self.locator.is_visible()

    async def wait_visible(self, timeout: float) -> None:
        try:
            await self.locator.wait_for(state="visible", timeout=timeout * 1000)
        except PlaywrightTimeout as exc:
            raise VisibilityTimeout(
                f"'{self.description}' not visible after {timeout}s",
                payload={"target": self.description, "timeout": timeout},
            ) from exc

    async def scroll_into_view(self, timeout: float) -> None:
        await self.locator.scroll_into_view_if_needed(timeout=timeout * 1000)

    async def click(self) -> None:
        await self.locator.click()


def as_target(target: Union[InteractionTarget, Locator]) -> InteractionTarget:
    if isinstance(target, Locator):
        return LocatorTarget(target)
    return target


# ---- best-effort steps ---------------------------------------------------------

class StepOutcome(str, Enum):
    COMPLETED = "completed"
    SKIPPED = "skipped"
    FAILED_IGNORED = "failed_ignored"


@dataclass
class BestEffortResult:
    """Outcome of a step whose failure must never fail the journey."""

    step: str
    outcome: StepOutcome
    error: Optional[BaseException] = None

    @property
    def attempted(self) -> bool:
        return self.outcome is not StepOutcome.SKIPPED

    @property
    def succeeded(self) -> bool:
        return self.outcome is StepOutcome.COMPLETED


async def best_effort(step: str, action: Callable[[], Awaitable[object]]) -> BestEffortResult:
    """Run ``action``; swallow and log any failure at DEBUG level."""
    try:
        await action()
    except Exception as exc:
        logger.debug(f"[{step}] ignored failure: {exc}")
        return BestEffortResult(step=step, outcome=StepOutcome.FAILED_IGNORED, error=exc)
    return BestEffortResult(step=step, outcome=StepOutcome.COMPLETED)


# ---- act_on --------------------------------------------------------------------

@dataclass
class ActionReport:
    target: str
    scroll: BestEffortResult


async def act_on(
    target: Union[InteractionTarget, Locator],
    timeout: Optional[float] = None,
) -> ActionReport:
    """Scroll (best effort), wait for visibility, then click.

    Args:
        target: Element to click. A bare Playwright locator is wrapped.
        timeout: Visibility budget in seconds (default: expect timeout).

    Raises:
        VisibilityTimeout: Target never became visible. The click is not attempted.
        ActionFailure: The locator matched more than one element, or the click
            itself failed. Not retried here.
    """
    element = as_target(target)
    budget = settings.timeouts.expect if timeout is None else timeout

    scroll = await best_effort(
        "scroll_into_view",
        lambda: element.scroll_into_view(SCROLL_TIMEOUT),
    )

    try:
        await element.wait_visible(budget)
    except VisibilityTimeout:
        raise
    except Exception as exc:
        if STRICT_MODE_MARKER in str(exc):
            raise ActionFailure(
                f"'{element.description}' is an ambiguous match: {exc}",
                payload={"target": element.description, "reason": "ambiguous match"},
            ) from exc
        raise VisibilityTimeout(
            f"'{element.description}' not visible: {exc}",
            payload={"target": element.description, "timeout": budget},
        ) from exc

    try:
        await element.click()
    except Exception as exc:
        raise ActionFailure(
            f"Click on '{element.description}' failed: {exc}",
            payload={"target": element.description},
        ) from exc

    return ActionReport(target=element.description, scroll=scroll)


# ---- polling -------------------------------------------------------------------

class PollState(str, Enum):
    UNRESOLVED = "unresolved"
    SEARCHING = "searching"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class PollResult:
    state: PollState = PollState.UNRESOLVED
    attempts: int = 0
    elapsed: float = 0.0
    last_error: Optional[BaseException] = None

    @property
    def found(self) -> bool:
        return self.state is PollState.FOUND


async def _evaluate(predicate: Predicate) -> bool:
    value = predicate()
    if inspect.isawaitable(value):
        value = await value
    return bool(value)


async def poll(
    predicate: Predicate,
    timeout: float,
    interval: float = DEFAULT_POLL_INTERVAL,
    *,
    clock: Optional[Clock] = None,
    sleep: Optional[Sleeper] = None,
) -> PollResult:
    """Re-evaluate ``predicate`` until it is true or ``timeout`` seconds pass.

    The predicate is always evaluated at least once. Exceptions raised by the
    predicate count as a false tick and are kept on ``last_error``.
    """
    if timeout < 0 or interval <= 0:
        raise InvalidArgument(
            "Poll timeout must be >= 0 and interval > 0",
            payload={"timeout": timeout, "interval": interval},
        )
    now_fn = clock or anyio.current_time
    sleep_fn = sleep or anyio.sleep

    result = PollResult()
    started = now_fn()
    deadline = started + timeout
    result.state = PollState.SEARCHING

    while True:
        result.attempts += 1
        try:
            satisfied = await _evaluate(predicate)
        except Exception as exc:
            logger.debug(f"Poll predicate raised on attempt {result.attempts}: {exc}")
            result.last_error = exc
            satisfied = False

        now = now_fn()
        result.elapsed = now - started
        if satisfied:
            result.state = PollState.FOUND
            return result
        if now >= deadline:
            result.state = PollState.EXHAUSTED
            return result
        await sleep_fn(min(interval, deadline - now))


async def poll_until_true(
    predicate: Predicate,
    timeout: float,
    interval: float = DEFAULT_POLL_INTERVAL,
    *,
    clock: Optional[Clock] = None,
    sleep: Optional[Sleeper] = None,
) -> bool:
    """Boolean form of :func:`poll`; never raises for an unmet condition."""
    result = await poll(predicate, timeout, interval, clock=clock, sleep=sleep)
    return result.found


@dataclass
class ConfirmationResult:
    found: bool
    attempts: int
    elapsed: float
    polls: List[PollResult] = field(default_factory=list)


async def confirm_with_retrigger(
    check: Predicate,
    retrigger: Callable[[], Awaitable[object]],
    *,
    max_attempts: int,
    timeout: float,
    interval: float = DEFAULT_POLL_INTERVAL,
    clock: Optional[Clock] = None,
    sleep: Optional[Sleeper] = None,
) -> ConfirmationResult:
    """Poll for feedback of an action the caller already performed.

    The first attempt only polls. Each further attempt re-runs ``retrigger``
    and polls again, up to ``max_attempts`` attempts in total. ``elapsed`` spans
    the whole exchange, re-triggers included. Errors raised by ``retrigger``
    propagate unchanged.
    """
    if max_attempts < 1:
        raise InvalidArgument(
            "max_attempts must be at least 1", payload={"max_attempts": max_attempts}
        )

    now_fn = clock or anyio.current_time
    started = now_fn()
    confirmation = ConfirmationResult(found=False, attempts=0, elapsed=0.0)
    for attempt in range(1, max_attempts + 1):
        if attempt > 1:
            logger.debug(f"Feedback not observed, re-triggering (attempt {attempt}/{max_attempts})")
            await retrigger()
        result = await poll(check, timeout, interval, clock=clock, sleep=sleep)
        confirmation.polls.append(result)
        confirmation.attempts = attempt
        if result.found:
            confirmation.found = True
            break
    confirmation.elapsed = now_fn() - started
    return confirmation


# ---- consent banner -------------------------------------------------------------

async def maybe_accept_cookies(page: Page, labels: Optional[List[Pattern[str]]] = None) -> BestEffortResult:
    """Dismiss the cookie banner if one is showing.

    Consent managers differ per locale, so several button labels are tried in
    order. A missing banner is ``SKIPPED``; any error is logged and ignored.
    """
    last_error: Optional[BaseException] = None
    for label in labels or CONSENT_BUTTON_LABELS:
        button = page.get_by_role("button", name=label).first
        try:
            if await button.is_visible():
                await button.click()
                logger.debug(f"Accepted cookies via '{label.pattern}'")
                return BestEffortResult(step="accept_cookies", outcome=StepOutcome.COMPLETED)
        except Exception as exc:
            logger.debug(f"[accept_cookies] '{label.pattern}' failed: {exc}")
            last_error = exc

    if last_error is not None:
        return BestEffortResult(step="accept_cookies", outcome=StepOutcome.FAILED_IGNORED, error=last_error)
    logger.debug("No cookie banner found")
    return BestEffortResult(step="accept_cookies", outcome=StepOutcome.SKIPPED)

