"""Shared configuration for the booking UI suite.

Everything is read from environment variables, falling back to the
workspace ``.env.defaults`` file and then to built-in defaults:

- TEST_ENV: dev (default), staging or production
- BASE_URL / API_URL: override the environment's URLs
- TEST_TIMEOUT / EXPECT_TIMEOUT: milliseconds, like the Playwright options
- RETRY_COUNT / VALIDATION_RETRIES: retry caps
- SEED: base seed for the journey generator (default: wall clock in ms)
- HEADLESS / SLOW_MO / BROWSER / CI / DEBUG: browser and run options

Timeouts are exposed in seconds.
"""
from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional
from urllib.parse import urljoin

from booking_ui.env_defaults import get_env_default
from booking_ui.errors import ConfigError

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"true", "1"}


@dataclass
class EnvironmentProfile:
    """URLs and logging switch for one target environment."""

    name: str
    base_url: str
    api_url: Optional[str] = None
    enable_logging: bool = False


ENVIRONMENTS: Dict[str, EnvironmentProfile] = {
    "dev": EnvironmentProfile(
        name="dev",
        base_url="https://www.tui.nl/h/nl",
        enable_logging=True,
    ),
    "staging": EnvironmentProfile(
        name="staging",
        base_url="https://staging.tui.nl/h/nl",
        enable_logging=True,
    ),
    "production": EnvironmentProfile(
        name="production",
        base_url="https://www.tui.nl/h/nl",
    ),
}


@dataclass
class Timeouts:
    default: float = 30.0
    action: float = 5.0
    expect: float = 5.0
    navigation: float = 10.0
    validation_trigger: float = 3.0
    form_visible: float = 40.0
    continue_button: float = 20.0


@dataclass
class RetryPolicy:
    max_attempts: int = 2
    delay: float = 0.25
    validation_attempts: int = 5


@dataclass
class ScenarioDefaults:
    adults: int = 2
    children: int = 1
    child_age_min: int = 0
    child_age_max: int = 17


@dataclass
class RunOptions:
    seed: int
    headless: bool = True
    slow_mo: int = 0
    browser: str = "chromium"
    ci: bool = False
    debug: bool = False


class BookingTestConfig:
    """Configuration resolved once per process from the environment."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        use_env_defaults: bool = True,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._use_env_defaults = use_env_defaults

        self.environment: EnvironmentProfile = self._resolve_environment()

        self.timeouts = Timeouts(
            default=self._millis("TEST_TIMEOUT", 30_000),
            expect=self._millis("EXPECT_TIMEOUT", 5_000),
        )
        self.retry = RetryPolicy(
            max_attempts=self._int("RETRY_COUNT", 2),
            validation_attempts=self._int("VALIDATION_RETRIES", 5),
        )
        if self.retry.validation_attempts < 1:
            raise ConfigError(
                "VALIDATION_RETRIES must be at least 1",
                payload={"VALIDATION_RETRIES": self.retry.validation_attempts},
            )
        self.scenario_defaults = ScenarioDefaults()

        browser = (self._get("BROWSER") or "chromium").lower()
        if browser not in ("chromium", "firefox", "webkit"):
            raise ConfigError(f"Unsupported BROWSER: {browser}", payload={"BROWSER": browser})

        self.run = RunOptions(
            seed=self._int("SEED", int(clock() * 1000)),
            headless=self._bool("HEADLESS", True),
            slow_mo=self._int("SLOW_MO", 0),
            browser=browser,
            ci=self._bool("CI", False),
            debug=self._bool("DEBUG", False),
        )

    # ---- raw value access -------------------------------------------------------
    def _get(self, key: str) -> Optional[str]:
        value = self._environ.get(key)
        if value is None and self._use_env_defaults:
            value = get_env_default(key)
        return value

    def _int(self, key: str, default: int) -> int:
        raw = self._get(key)
        if raw is None or raw == "":
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigError(f"{key} must be an integer, got '{raw}'", payload={key: raw})

    def _millis(self, key: str, default_ms: int) -> float:
        return self._int(key, default_ms) / 1000.0

    def _bool(self, key: str, default: bool) -> bool:
        raw = self._get(key)
        if raw is None or raw == "":
            return default
        return raw.lower() in _TRUE_VALUES

    def _resolve_environment(self) -> EnvironmentProfile:
        name = (self._get("TEST_ENV") or "dev").lower()
        if name not in ENVIRONMENTS:
            logger.warning(f"Invalid TEST_ENV: {name}. Defaulting to 'dev'")
            name = "dev"
        base = ENVIRONMENTS[name]
        profile = EnvironmentProfile(
            name=base.name,
            base_url=base.base_url,
            api_url=base.api_url,
            enable_logging=base.enable_logging,
        )

        base_url_override = self._get("BASE_URL")
        if base_url_override:
            logger.info(f"Overriding baseUrl with BASE_URL env var: {base_url_override}")
            profile.base_url = base_url_override
        api_url_override = self._get("API_URL")
        if api_url_override:
            profile.api_url = api_url_override
        return profile

    # ---- convenience ------------------------------------------------------------
    @property
    def base_url(self) -> str:
        return self.environment.base_url

    @property
    def seed(self) -> int:
        return self.run.seed

    @property
    def headless(self) -> bool:
        return self.run.headless

    def url(self, path: str = "") -> str:
        """Return an absolute URL for the provided path."""
        return urljoin(self.base_url.rstrip("/") + "/", path.lstrip("/"))


def configure_logging(config: Optional[BookingTestConfig] = None) -> None:
    """Set the package log level from DEBUG / the environment's logging flag."""
    config = config or settings
    package_logger = logging.getLogger("booking_ui")
    if config.run.debug:
        package_logger.setLevel(logging.DEBUG)
    elif config.environment.enable_logging:
        package_logger.setLevel(logging.INFO)
    else:
        package_logger.setLevel(logging.WARNING)


# Singleton instance - initialized on first import
settings = BookingTestConfig()
