"""Command-line options shared by the unit and integration tests."""


def pytest_addoption(parser):
    """Add custom command-line options to pytest."""
    parser.addoption(
        "--visible", action="store_true", default=False, help="Show browser window"
    )
    parser.addoption(
        "--rad-config", action="store", default=None, help="Path to a JSON configuration file"
    )
