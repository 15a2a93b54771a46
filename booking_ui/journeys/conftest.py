"""
Fixtures for live booking journeys.

The generator seed is SEED plus the pytest-xdist worker index, so parallel
workers take different paths while each one stays reproducible.
"""
import logging
import os

import pytest
import pytest_asyncio

from booking_ui.config import configure_logging, settings
from booking_ui.playwright_client import PlaywrightClient
from booking_ui.scenario_data import get_default_scenario
from booking_ui.seeded_random import SeededRandom, effective_seed, worker_index_from_env
from booking_ui.workflows import BookingPages

logger = logging.getLogger(__name__)


def pytest_collection_modifyitems(config, items):
    if os.environ.get("UI_LIVE") == "1":
        return
    skip_live = pytest.mark.skip(reason="live journeys need UI_LIVE=1")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(scope="session", autouse=True)
def journey_logging():
    configure_logging()
    logger.info(f"Running journeys against {settings.environment.name} ({settings.base_url})")


@pytest.fixture
def rng(record_property):
    seed = effective_seed(settings.seed, worker_index_from_env())
    record_property("seed", seed)
    logger.info(f"Journey seed: {seed} (base {settings.seed})")
    return SeededRandom(seed)


@pytest.fixture
def scenario():
    return get_default_scenario()


@pytest_asyncio.fixture()
async def playwright_client():
    async with PlaywrightClient() as client:
        yield client


@pytest_asyncio.fixture()
async def booking_pages(playwright_client):
    return BookingPages.for_page(playwright_client.page)
