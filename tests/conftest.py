"""Shared test fixtures for schemavalidator.

Keeps global state (cached settings, root logger handlers) from leaking
between tests.
"""

import logging
from collections.abc import Generator

import pytest

from schemavalidator.settings import get_settings


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Reload settings from the environment in every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# LOGGING
# =============================================================================


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Undo configure_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    package_level = logging.getLogger("schemavalidator").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("schemavalidator").setLevel(package_level)
