"""Wrapper for the virtualised table dashboard component."""
from typing import AsyncIterator, List

from playwright.async_api import Locator

from rad_playwright.core.components.base_component import BaseComponent
from rad_playwright.tools.constants import (
    COMPONENT_HEADER_SELECTOR,
    SEARCH_TEST_ID,
    SELECT_INPUT_TEST_ID,
    TABLE_BODY_TEST_ID,
    TABLE_HEADER_TEST_ID,
)


class TableComponent(BaseComponent):
    def get_header_row_locator(self) -> Locator:
        header = self.locator.get_by_test_id(TABLE_HEADER_TEST_ID)
        return header.locator("tr.header")

    def get_data_rows_locator(self) -> Locator:
        body = self.locator.get_by_test_id(TABLE_BODY_TEST_ID)
        return body.locator("tr:not(.header, .buffer)")

    async def get_header(self) -> List[str]:
        """Column names, skipping the virtualisation buffer cells."""
        header_row = self.get_header_row_locator()
        return await header_row.locator("th:not(.buffer)").all_text_contents()

    async def get_rows_data(self) -> AsyncIterator[List[str]]:
        """Yield the cell texts of each rendered data row."""
        rows = self.get_data_rows_locator()

        for row in await rows.all():
            yield await row.locator("td:not(.buffer)").all_text_contents()

    async def search(self, text: str) -> None:
        component_header = self.locator.locator(COMPONENT_HEADER_SELECTOR)

        await component_header.get_by_test_id(SEARCH_TEST_ID).click()

        search_input = component_header.locator("dwa-search-box").get_by_test_id(SELECT_INPUT_TEST_ID)
        await search_input.fill(text)

    async def clear_search(self) -> None:
        component_header = self.locator.locator(COMPONENT_HEADER_SELECTOR)
        await component_header.get_by_title("Clear and close search").click()
