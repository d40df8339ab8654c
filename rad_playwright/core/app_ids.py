"""Registry of well-known low-code app identifiers."""

import logging
import uuid
from types import MappingProxyType
from typing import Mapping, Optional, Union

from rad_playwright.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

RAD_MANAGER = "RAD Manager"


class AppIDs:
    """Named constants for the apps deployed with the RAD tooling."""

    RAD_MANAGER = uuid.UUID("8a1f3b4e-6c2d-4e57-9b0a-2f6d7c1e5a93")


APP_IDS: Mapping[str, uuid.UUID] = MappingProxyType({
    RAD_MANAGER: AppIDs.RAD_MANAGER,
})


def parse_app_id(value: Union[uuid.UUID, str, None], param_name: str = "app_id") -> uuid.UUID:
    """Coerce a UUID or UUID string into a UUID.

    Raises:
        InvalidArgumentError: If the value is None or not a valid UUID
    """
    if value is None:
        raise InvalidArgumentError(param_name)
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise InvalidArgumentError(param_name, f"'{param_name}' is not a valid app ID: {value!r}") from None


def build_app_ids(overrides: Optional[Mapping[str, Union[uuid.UUID, str]]] = None) -> Mapping[str, uuid.UUID]:
    """
    Build a read-only registry from the defaults plus overrides.

    Args:
        overrides: App name to ID, replacing or extending the defaults

    Returns:
        A new immutable mapping; APP_IDS itself is left untouched
    """
    if not overrides:
        return APP_IDS

    merged = dict(APP_IDS)
    for name, value in overrides.items():
        merged[name] = parse_app_id(value, param_name=name)
        logger.debug(f"App ID for '{name}' set to {merged[name]}")

    return MappingProxyType(merged)
