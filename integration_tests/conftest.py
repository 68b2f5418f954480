"""Pytest configuration for live Gemini tests."""

import pytest


def pytest_collection_modifyitems(items):
    """Mark everything under integration_tests so `-m "not integration"` skips it."""
    for item in items:
        if "integration_tests" in item.path.parts:
            item.add_marker(pytest.mark.integration)
