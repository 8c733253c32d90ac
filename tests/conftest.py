"""Pytest configuration and shared fixtures for the fpbook test suite."""

from collections.abc import Generator

import pytest
from hypothesis import HealthCheck, settings

from fpbook.config import Settings, get_settings, set_settings

settings.register_profile(
    "fpbook", max_examples=100, suppress_health_check=[HealthCheck.too_slow]
)
settings.register_profile("ci", max_examples=500, deadline=None)
settings.load_profile("fpbook")


# Pytest configuration
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        if "property" in path:
            item.add_marker(pytest.mark.property)


@pytest.fixture(autouse=True)
def restore_settings() -> Generator[Settings, None, None]:
    """Put back the active settings if a test replaced them."""
    original = get_settings()
    yield original
    set_settings(original)
