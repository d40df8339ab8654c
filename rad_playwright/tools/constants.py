"""Constants for the low-code app page objects."""

# Routing
APP_PATH_PREFIX = "/app"

# Lifecycle event awaited by the initial page navigation
INITIAL_PAGE_WAIT_UNTIL = "load"

# Selectors
COMPONENT_SELECTOR = "dma-db-component"
COMPONENT_TITLE_SELECTOR = "dma-db-component-header div.component-title"
COMPONENT_HEADER_SELECTOR = "dma-db-component-header"
HEADER_BAR_SELECTOR = "dma-app-headerbar"
DMA_BUTTON_SELECTOR = "dma-button"
ERROR_LIST_SELECTOR = "dma-vr-error-list"
LOADER_SELECTORS = (
    "dma-loader",
    "dma-loader-bar",
    "div.skeleton",
    "div.skeleton-cell",
    "div.loader-icon",
)

# Test IDs (resolved through the configured test id attribute)
TEST_ID_ATTRIBUTE = "data-cy"
SIDEBAR_TAB_TEST_ID = "app-sidebar.sidebar-tab"
SELECT_TOGGLE_TEST_ID = "select.toggle"
SELECT_OVERLAY_TEST_ID = "select.overlay"
SELECT_OPTION_TEST_ID = "select.option"
SELECT_INPUT_TEST_ID = "select.input"
TABLE_HEADER_TEST_ID = "virtualised-table.header"
TABLE_BODY_TEST_ID = "virtualised-table.body"
SEARCH_TEST_ID = "search"

# Viewport used for the browser context
VIEWPORT_WIDTH = 1920
VIEWPORT_HEIGHT = 1080
