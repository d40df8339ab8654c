"""Test configuration for pytest."""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from playwright.async_api import async_playwright

from rad_playwright.config import Config

# --- Fakes for unit tests ---

def make_fake_page():
    """A Page double whose goto() can be inspected."""
    page = MagicMock(name="page")
    page.goto = AsyncMock(return_value=None)
    return page


@pytest.fixture
def fake_context():
    """A BrowserContext double handing out a new fake page per new_page() call."""
    context = MagicMock(name="browser_context")
    context.pages = []

    async def new_page():
        page = make_fake_page()
        context.pages.append(page)
        return page

    context.new_page = AsyncMock(side_effect=new_page)
    return context


# --- Live browser fixtures for integration tests ---

@pytest.fixture(scope="session")
def live_config(request):
    """Configuration for a live system; skips when no system is configured."""
    config = Config.load(request.config.getoption("--rad-config"))
    config.configure_logging()
    if not os.environ.get("PLAYWRIGHT_URL"):
        pytest.skip("PLAYWRIGHT_URL is not set")
    return config


@pytest_asyncio.fixture
async def browser_context(request, live_config):
    """Playwright browser context pointed at the configured DataMiner system."""
    visible = request.config.getoption("--visible")

    async with async_playwright() as playwright:
        playwright.selectors.set_test_id_attribute(live_config.test_id_attribute)
        browser = await playwright.chromium.launch(headless=live_config.headless and not visible)
        try:
            context = await browser.new_context(**live_config.get_browser_context_options())
            yield context
            await context.close()
        finally:
            await browser.close()
