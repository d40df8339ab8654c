"""Helpers for Playwright locators and pages showing low-code apps."""

import logging
import re

from playwright.async_api import Locator, LocatorAssertions, Page, PageAssertions, expect

from rad_playwright.core.components.dropdown_component import DropDownComponent
from rad_playwright.core.components.table_component import TableComponent
from rad_playwright.core.exceptions import InvalidArgumentError
from rad_playwright.tools.constants import (
    COMPONENT_SELECTOR,
    COMPONENT_TITLE_SELECTOR,
    DMA_BUTTON_SELECTOR,
    HEADER_BAR_SELECTOR,
    LOADER_SELECTORS,
)

logger = logging.getLogger(__name__)


def _require(value, param_name: str) -> None:
    if value is None:
        raise InvalidArgumentError(param_name)


def _exact_text(text: str) -> "re.Pattern[str]":
    return re.compile(f"^{re.escape(text)}$")


def expect_locator(locator: Locator) -> LocatorAssertions:
    _require(locator, "locator")
    return expect(locator)


def expect_page(page: Page) -> PageAssertions:
    _require(page, "page")
    return expect(page)


async def wait_until_everything_is_loaded(locator: Locator) -> None:
    """
    Wait until no loader or skeleton element is left inside the locator.

    Args:
        locator: Region of the page to watch
    """
    _require(locator, "locator")

    loader_locator = locator.locator(", ".join(LOADER_SELECTORS))
    await expect(loader_locator).to_have_count(0)


async def wait_until_page_is_loaded(page: Page) -> None:
    """Wait until no loader or skeleton element is left on the whole page."""
    _require(page, "page")
    await wait_until_everything_is_loaded(page.locator(":root"))


def as_table_component(locator: Locator) -> TableComponent:
    _require(locator, "locator")
    return TableComponent(locator)


def as_dropdown_component(locator: Locator) -> DropDownComponent:
    _require(locator, "locator")
    return DropDownComponent(locator)


def as_low_code_app_page(page: Page):
    """Wrap an already opened page, e.g. one opened by a click, as a LowCodeAppPage."""
    from rad_playwright.core.low_code_app_page import LowCodeAppPage

    _require(page, "page")
    return LowCodeAppPage(page)


def get_component_by_id(locator: Locator, component_id: int) -> Locator:
    _require(locator, "locator")
    return locator.locator(f"{COMPONENT_SELECTOR}[id='{component_id}']")


def get_component_by_title(locator: Locator, title: str) -> Locator:
    """Dashboard component below `locator` whose header title is exactly `title`."""
    _require(locator, "locator")

    title_locator = locator.page.locator(COMPONENT_TITLE_SELECTOR, has_text=_exact_text(title))
    return locator.locator(COMPONENT_SELECTOR, has=title_locator)


async def press_dma_button(locator: Locator, text: str) -> None:
    _require(locator, "locator")

    logger.debug(f"Pressing button '{text}'")
    await locator.locator(DMA_BUTTON_SELECTOR, has_text=_exact_text(text)).click()


async def press_header_button(locator: Locator, text: str) -> None:
    """Click the app header bar button titled `text`."""
    _require(locator, "locator")

    header_bar = locator.locator(HEADER_BAR_SELECTOR)
    logger.debug(f"Pressing header button '{text}'")
    await header_bar.get_by_title(text, exact=True).click()
