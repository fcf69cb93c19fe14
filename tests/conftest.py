"""
Pytest configuration and shared fixtures for textcalc tests.
"""

import pytest

from textcalc.config import CalcConfig


@pytest.fixture
def strict_config():
    """Config that reports division by zero as an error."""
    return CalcConfig(division_policy="strict")


@pytest.fixture
def no_trailing_dot_config():
    """Config that rejects numbers such as '5.'."""
    return CalcConfig(allow_trailing_dot=False)


@pytest.fixture
def scripted_input():
    """Build an input_fn that replays the given lines, then raises EOFError."""
    def _scripted_input(lines):
        remaining = list(lines)
        prompts = []

        def _input(prompt):
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        _input.prompts = prompts
        return _input
    return _scripted_input


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that test component interactions"
    )


def pytest_collection_modifyitems(config, items):
    """Add markers based on test module names."""
    for item in items:
        if "cli" in item.nodeid.lower() or "repl" in item.nodeid.lower():
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
