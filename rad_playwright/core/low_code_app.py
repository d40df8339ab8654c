"""Navigation entry points for DataMiner low-code apps."""

import logging
import uuid
from typing import Mapping, Union
from urllib.parse import quote

from rad_playwright.core.app_ids import APP_IDS, RAD_MANAGER, parse_app_id
from rad_playwright.core.browser_interface import BrowsingContext
from rad_playwright.core.exceptions import InvalidArgumentError, UnknownAppError
from rad_playwright.core.low_code_app_page import LowCodeAppPage
from rad_playwright.tools.constants import APP_PATH_PREFIX, INITIAL_PAGE_WAIT_UNTIL

logger = logging.getLogger(__name__)


class LowCodeApp:
    """Opens pages of one low-code app in a browser context it does not own."""

    def __init__(self, browser_context: BrowsingContext, app_id: Union[uuid.UUID, str]):
        """
        Args:
            browser_context: Context used to open new pages; its lifetime stays with the caller
            app_id: ID of the deployed app

        Raises:
            InvalidArgumentError: If browser_context is None or app_id is not a valid ID
        """
        if browser_context is None:
            raise InvalidArgumentError("browser_context")

        self._browser_context = browser_context
        self._app_id = parse_app_id(app_id)

    @property
    def app_id(self) -> uuid.UUID:
        return self._app_id

    def initial_page_path(self) -> str:
        return f"{APP_PATH_PREFIX}/{self._app_id}"

    def page_path(self, title: str) -> str:
        """Path of a named app page, with the title percent-encoded."""
        if not isinstance(title, str) or not title.strip():
            logger.error(f"Rejected page title {title!r} for app {self._app_id}")
            raise InvalidArgumentError("title", "'title' cannot be None or whitespace.")

        return f"{self.initial_page_path()}/{quote(title, safe='')}"

    async def navigate_to_initial_page(self) -> LowCodeAppPage:
        """
        Open a new tab on the app root and wait for its load event.

        Returns:
            The opened page; the caller owns it
        """
        path = self.initial_page_path()
        page = await self._browser_context.new_page()

        logger.info(f"Navigating to {path}")
        await page.goto(path, wait_until=INITIAL_PAGE_WAIT_UNTIL)

        return LowCodeAppPage(page)

    async def navigate_to_page(self, title: str) -> LowCodeAppPage:
        """
        Open a new tab on a named page of the app.

        Unlike navigate_to_initial_page, no wait condition is passed, so the
        engine default applies.

        Args:
            title: Page title as shown in the app sidebar

        Returns:
            The opened page; the caller owns it

        Raises:
            InvalidArgumentError: If title is not a string, or is empty or whitespace
        """
        path = self.page_path(title)
        page = await self._browser_context.new_page()

        logger.info(f"Navigating to {path}")
        await page.goto(path)

        return LowCodeAppPage(page)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(app_id={self._app_id})"


def open_app(
    browser_context: BrowsingContext,
    name: str,
    app_ids: Mapping[str, uuid.UUID] = APP_IDS,
) -> LowCodeApp:
    """
    Build an accessor for a well-known app by name.

    Raises:
        UnknownAppError: If the name is not in the registry
    """
    if name not in app_ids:
        raise UnknownAppError(name, app_ids.keys())

    return LowCodeApp(browser_context, app_ids[name])


def rad_manager_app(browser_context: BrowsingContext, app_ids: Mapping[str, uuid.UUID] = APP_IDS) -> LowCodeApp:
    """Accessor bound to the RAD Manager app."""
    return open_app(browser_context, RAD_MANAGER, app_ids)
