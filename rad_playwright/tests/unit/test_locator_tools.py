"""Unit tests for the locator and page helpers."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from rad_playwright.core.components.dropdown_component import DropDownComponent
from rad_playwright.core.components.table_component import TableComponent
from rad_playwright.core.exceptions import InvalidArgumentError
from rad_playwright.core.low_code_app_page import LowCodeAppPage
from rad_playwright.utils import locator_tools


@pytest.mark.parametrize("helper", [
    locator_tools.expect_locator,
    locator_tools.expect_page,
    locator_tools.as_table_component,
    locator_tools.as_dropdown_component,
    locator_tools.as_low_code_app_page,
])
def test_helpers_reject_none(helper):
    with pytest.raises(InvalidArgumentError):
        helper(None)


@pytest.mark.asyncio
async def test_async_helpers_reject_none():
    with pytest.raises(InvalidArgumentError):
        await locator_tools.wait_until_everything_is_loaded(None)
    with pytest.raises(InvalidArgumentError):
        await locator_tools.wait_until_page_is_loaded(None)
    with pytest.raises(InvalidArgumentError):
        await locator_tools.press_dma_button(None, "OK")


def test_wrappers():
    locator = MagicMock()
    page = MagicMock()

    assert isinstance(locator_tools.as_table_component(locator), TableComponent)
    assert isinstance(locator_tools.as_dropdown_component(locator), DropDownComponent)
    wrapped = locator_tools.as_low_code_app_page(page)
    assert isinstance(wrapped, LowCodeAppPage)
    assert wrapped.page is page


def test_component_lookups_are_scoped_to_locator():
    locator = MagicMock()

    locator_tools.get_component_by_id(locator, 5)
    locator.locator.assert_called_with("dma-db-component[id='5']")

    result = locator_tools.get_component_by_title(locator, "Anomalies")
    title_call = locator.page.locator.call_args
    assert title_call.args == ("dma-db-component-header div.component-title",)
    assert title_call.kwargs["has_text"].match("Anomalies")
    locator.locator.assert_called_with("dma-db-component", has=locator.page.locator.return_value)
    assert result is locator.locator.return_value


@pytest.mark.asyncio
async def test_press_dma_button_matches_exact_text():
    locator = MagicMock()
    locator.locator.return_value.click = AsyncMock()

    await locator_tools.press_dma_button(locator, "Add group")

    selector = locator.locator.call_args.args[0]
    pattern = locator.locator.call_args.kwargs["has_text"]
    assert selector == "dma-button"
    assert pattern.match("Add group")
    assert not pattern.match("Add group now")
    locator.locator.return_value.click.assert_awaited_once()


@pytest.mark.asyncio
async def test_press_header_button():
    locator = MagicMock()
    header_bar = locator.locator.return_value
    header_bar.get_by_title.return_value.click = AsyncMock()

    await locator_tools.press_header_button(locator, "Edit Group")

    locator.locator.assert_called_once_with("dma-app-headerbar")
    header_bar.get_by_title.assert_called_once_with("Edit Group", exact=True)
    header_bar.get_by_title.return_value.click.assert_awaited_once()


def test_expect_helpers_delegate_to_playwright():
    locator = MagicMock()

    with patch("rad_playwright.utils.locator_tools.expect") as mock_expect:
        assert locator_tools.expect_locator(locator) is mock_expect.return_value

    mock_expect.assert_called_once_with(locator)
