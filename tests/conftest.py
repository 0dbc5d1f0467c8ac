"""Root conftest.py for the Stratum test suite.

Project-wide fixtures and pytest configuration. Environment defaults are
set in ``pytest_configure`` so they are in place before any application
module reads its settings.
"""

import os
from collections.abc import Generator

import pytest

from stratum.core.config import get_settings
from stratum.core.context import RequestContext

TEST_ENVIRONMENT = {
    "DATABASE_CONFIG__DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "OBSERVABILITY_CONFIG__ENABLE_TRACING": "false",
    "SECURITY_CONFIG__BCRYPT_ROUNDS": "4",
}


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers and test environment defaults."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components in isolation"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that test multiple components"
    )
    for key, value in TEST_ENVIRONMENT.items():
        os.environ.setdefault(key, value)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None]:
    """Drop cached settings around every test so env changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def clean_request_context() -> Generator[None]:
    """Ensure no correlation or request ID leaks between tests."""
    RequestContext.clear()
    yield
    RequestContext.clear()
