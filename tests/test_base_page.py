"""Navigation and thin wrappers shared by every page object."""
import pytest

from booking_ui.errors import NavigationFailure, VisibilityTimeout
from booking_ui.pages import BasePage

pytestmark = pytest.mark.asyncio

URL = "https://example.test/h/nl"


class TestGoto:
    async def test_plain_navigation(self, fake_page):
        await BasePage(fake_page).goto(URL, timeout=2.0)
        assert fake_page.navigations == [(URL, "domcontentloaded", 2000.0)]
        assert fake_page.url == URL

    async def test_no_timeout_leaves_page_default(self, fake_page):
        await BasePage(fake_page).goto(URL)
        assert fake_page.navigations == [(URL, "domcontentloaded", None)]

    async def test_networkidle_falls_back_to_domcontentloaded(self, fake_page):
        fake_page.slow_loads.add("networkidle")
        await BasePage(fake_page).goto(URL, wait_until="networkidle", timeout=10.0)

        assert [nav[1] for nav in fake_page.navigations] == ["networkidle", "domcontentloaded"]
        assert fake_page.url == URL

    async def test_both_load_states_time_out(self, fake_page):
        fake_page.slow_loads.update({"networkidle", "domcontentloaded"})
        with pytest.raises(NavigationFailure) as excinfo:
            await BasePage(fake_page).goto(URL, wait_until="networkidle", timeout=10.0)

        assert excinfo.value.payload == {"url": URL, "wait_until": "networkidle"}
        assert "networkidle" in excinfo.value.message
        assert len(fake_page.navigations) == 2

    async def test_domcontentloaded_timeout_is_not_retried(self, fake_page):
        fake_page.slow_loads.add("domcontentloaded")
        with pytest.raises(NavigationFailure):
            await BasePage(fake_page).goto(URL)
        assert len(fake_page.navigations) == 1


class TestReaders:
    async def test_missing_text_and_attribute_are_empty(self, fake_page):
        base = BasePage(fake_page)
        assert await base.text(fake_page.locator("#nothing")) == ""
        assert await base.attribute(fake_page.locator("#nothing"), "aria-label") == ""

    async def test_wait_hidden_target_raises_visibility_timeout(self, fake_page):
        fake_page.hidden.add("#form")
        with pytest.raises(VisibilityTimeout) as excinfo:
            await BasePage(fake_page).wait_visible(fake_page.locator("#form"), "form", 0.1)
        assert excinfo.value.payload == {"target": "form", "timeout": 0.1}
