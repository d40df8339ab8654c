"""Interfaces the page objects expect from the browser automation engine."""

from typing import Any, Optional, Protocol

from playwright.async_api import Response


class NavigablePage(Protocol):
    """The part of a Playwright Page used for navigation."""

    async def goto(self, url: str, **kwargs: Any) -> Optional[Response]:
        """Navigate to a URL."""
        ...


class BrowsingContext(Protocol):
    """Anything that can open a new page, e.g. a Playwright BrowserContext."""

    async def new_page(self) -> NavigablePage:
        """Open a new page (tab) in this context."""
        ...
