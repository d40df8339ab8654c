"""Wrapper for the DataMiner select/drop-down control."""
from rad_playwright.core.components.base_component import BaseComponent
from rad_playwright.tools.constants import (
    SELECT_INPUT_TEST_ID,
    SELECT_OPTION_TEST_ID,
    SELECT_OVERLAY_TEST_ID,
    SELECT_TOGGLE_TEST_ID,
)


class DropDownComponent(BaseComponent):
    async def select_option(self, option: str) -> None:
        """Open the drop-down and click `option`, filtering the list when it is not shown."""
        page = self.locator.page

        await self.locator.get_by_test_id(SELECT_TOGGLE_TEST_ID).click()

        select_overlay = page.get_by_test_id(SELECT_OVERLAY_TEST_ID)
        await select_overlay.locator("dma-loader").wait_for(state="hidden")

        select_option = select_overlay.get_by_test_id(SELECT_OPTION_TEST_ID).filter(has_text=option)

        if not await select_option.is_visible():
            self.logger.debug(f"Option '{option}' not listed, filtering drop-down")
            await select_overlay.get_by_test_id(SELECT_INPUT_TEST_ID).fill(option)

        await select_option.click()
