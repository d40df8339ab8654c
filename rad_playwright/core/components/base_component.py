"""Base class for dashboard component wrappers."""
import logging

from playwright.async_api import Locator, LocatorAssertions, expect

from rad_playwright.core.exceptions import InvalidArgumentError


class BaseComponent:
    def __init__(self, locator: Locator):
        if locator is None:
            raise InvalidArgumentError("locator")

        self.locator = locator
        self.logger = logging.getLogger(self.__class__.__name__)

    def expect(self) -> LocatorAssertions:
        return expect(self.locator)
