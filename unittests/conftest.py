import logging

import pytest

from fieldcheck.logging import initialize_logger
from fieldcheck.validation import ValidatorRegistry, default_registry


@pytest.fixture(scope="session", autouse=True)
def setup_log_context_var_fixture():
    """
    Set up the logging configuration. This fixture is automatically used by pytest.
    """
    initialize_logger(logging.getLogger("fieldcheck-tests"))
    print("Initialized logger", flush=True)


@pytest.fixture
def registry() -> ValidatorRegistry:
    """
    A registry with all built-in validators which can be extended without affecting other tests.
    """
    return default_registry.copy()
