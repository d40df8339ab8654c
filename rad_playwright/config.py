"""Configuration module for the RAD Playwright page objects."""

import copy
import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from rad_playwright.core.app_ids import RAD_MANAGER, build_app_ids
from rad_playwright.tools.constants import TEST_ID_ATTRIBUTE, VIEWPORT_HEIGHT, VIEWPORT_WIDTH

logger = logging.getLogger(__name__)

# Environment variables mapped onto dotted configuration keys
ENV_OVERRIDES = {
    "PLAYWRIGHT_URL": "browser.base_url",
    "PLAYWRIGHT_HEADLESS": "browser.headless",
    "PLAYWRIGHT_TEST_ID_ATTRIBUTE": "browser.test_id_attribute",
    "RAD_MANAGER_APP_ID": f"app_ids.{RAD_MANAGER}",
    "LOG_LEVEL": "logging.level",
}


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """
    Configuration for running page objects against a DataMiner system.

    Values come from the defaults, then an optional JSON file, then the
    environment (including a .env file).
    """

    DEFAULTS = {
        "browser": {
            "base_url": "https://analyticscl56-skyline.on.dataminer.services/",
            "headless": True,
            "test_id_attribute": TEST_ID_ATTRIBUTE,
            "viewport": {"width": VIEWPORT_WIDTH, "height": VIEWPORT_HEIGHT},
        },
        "app_ids": {},
        "logging": {
            "level": "INFO",
            "log_file": None,
            "console_output": True,
        },
    }

    def __init__(self, config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize configuration.

        Args:
            config_path: Optional path to a JSON configuration file
            environ: Environment to read overrides from. Defaults to os.environ after loading .env
        """
        self.config_path = config_path

        if environ is None:
            load_dotenv()
            environ = os.environ

        self.config = self._load_config()
        self._apply_environment(environ)

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        return cls(config_path=config_path)

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from file, merged over the defaults.

        Returns:
            Dictionary with configuration
        """
        config = copy.deepcopy(self.DEFAULTS)

        if not self.config_path:
            return config

        with open(self.config_path, 'r', encoding='utf-8') as f:
            file_config = json.load(f)

        self._deep_merge(config, file_config)
        logger.info(f"Loaded configuration from {self.config_path}")
        return config

    @staticmethod
    def _deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                Config._deep_merge(target[key], value)
            else:
                target[key] = value

    def _apply_environment(self, environ: Mapping[str, str]) -> None:
        for env_name, key in ENV_OVERRIDES.items():
            value = environ.get(env_name)
            if value is None or value == "":
                continue

            if key == "browser.headless":
                value = _parse_bool(value)

            self._set(key, value)
            logger.debug(f"Configuration '{key}' set from {env_name}")

    def _set(self, key: str, value: Any) -> None:
        # App names may contain dots, so only the first part is a section
        section, _, name = key.partition('.')
        self.config.setdefault(section, {})[name] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (dotted notation, e.g. 'browser.base_url')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self.config
        for part in key.split('.'):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    @property
    def base_url(self) -> str:
        return self.get('browser.base_url')

    @property
    def headless(self) -> bool:
        return self.get('browser.headless', True)

    @property
    def test_id_attribute(self) -> str:
        return self.get('browser.test_id_attribute', TEST_ID_ATTRIBUTE)

    def get_browser_context_options(self) -> Dict[str, Any]:
        """
        Get the keyword arguments for Browser.new_context().

        Returns:
            Dictionary with context options
        """
        return {
            'base_url': self.base_url,
            'viewport': dict(self.get('browser.viewport')),
        }

    def get_app_ids(self):
        """Registry of app IDs with the configured overrides applied."""
        return build_app_ids(self.get('app_ids') or {})

    def configure_logging(self):
        """Configure logging based on configuration."""
        log_level = getattr(logging, str(self.get('logging.level', 'INFO')).upper(), logging.INFO)
        log_file = self.get('logging.log_file')
        console_output = self.get('logging.console_output', True)

        handlers = []

        if log_file:
            handlers.append(logging.FileHandler(log_file))

        if console_output:
            handlers.append(logging.StreamHandler())

        logging.basicConfig(
            level=log_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=handlers
        )
