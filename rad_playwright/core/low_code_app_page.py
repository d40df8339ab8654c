"""Page object for a single opened low-code app page."""

import asyncio
import logging
import re
from typing import Any, List, Optional

from playwright.async_api import Locator, Page, expect

from rad_playwright.core.exceptions import InvalidArgumentError
from rad_playwright.tools.constants import (
    COMPONENT_SELECTOR,
    COMPONENT_TITLE_SELECTOR,
    SIDEBAR_TAB_TEST_ID,
)
from rad_playwright.utils import locator_tools

logger = logging.getLogger(__name__)


class LowCodeAppPage:
    """Thin wrapper around a Playwright page showing a low-code app."""

    def __init__(self, page: Page):
        if page is None:
            raise InvalidArgumentError("page")

        self.page = page

    @property
    def body(self) -> Locator:
        return self.page.locator("body")

    def locator(self, selector: str, **options: Any) -> Locator:
        return self.page.locator(selector, **options)

    def get_components(self) -> Locator:
        return self.locator(COMPONENT_SELECTOR)

    def get_component_by_id(self, component_id: int) -> Locator:
        return self.locator(f"{COMPONENT_SELECTOR}[id='{component_id}']")

    def get_component_by_title(self, title: str) -> Locator:
        """Dashboard component whose header title is exactly `title`."""
        title_locator = self.locator(COMPONENT_TITLE_SELECTOR, has_text=re.compile(f"^{re.escape(title)}$"))

        return self.locator(COMPONENT_SELECTOR, has=title_locator)

    def get_component_by_text(self, text: str, selector: Optional[str] = None, index: Optional[int] = None) -> Locator:
        """
        Locate an element by its text.

        Args:
            text: Text the element contains
            selector: Optional CSS selector the element must match
            index: Optional index among the matches

        Returns:
            Locator for the element(s)
        """
        if selector is None:
            locator = self.page.get_by_text(text)
        else:
            locator = self.locator(selector).filter(has_text=text)

        if index is not None:
            locator = locator.nth(index)

        return locator

    def get_component_by_role(self, name: str, role: str = "row", exact: bool = False) -> Locator:
        return self.page.get_by_role(role, name=name, exact=exact)

    def get_component_by_placeholder(self, text: str) -> Locator:
        return self.page.get_by_placeholder(text)

    async def check_component_availability(self, locator: Locator) -> None:
        """Assert that the component is visible on the page."""
        if locator is None:
            raise InvalidArgumentError("locator")

        await expect(locator).to_be_visible()

    async def wait_until_everything_is_loaded(self) -> None:
        await locator_tools.wait_until_page_is_loaded(self.page)

    async def get_sidebar_pages(self) -> List[str]:
        """
        Get the titles of the pages listed in the app sidebar.

        Returns:
            Titles in sidebar order, without empty ones
        """
        sidebar_tabs = await self.page.get_by_test_id(SIDEBAR_TAB_TEST_ID).all()

        titles = await asyncio.gather(
            *(tab.locator("i").get_attribute("title") for tab in sidebar_tabs)
        )
        pages = [title for title in titles if title]
        logger.debug(f"Found {len(pages)} sidebar pages")

        return pages
