"""
Pytest configuration and fixtures for NameCraft tests.

Specialized fixtures are organized in the fixtures/ directory:
- fixtures.naming: temp NAMECRAFT_HOME, rule store, mock context, sample
  translations and sessions
"""

import pytest

# Load fixture modules
pytest_plugins = [
    "tests.fixtures.naming",
]


@pytest.fixture
def sample_words():
    """ASCII word lists used by the tokenizer/style property tests."""
    return [
        ["user", "name"],
        ["total", "items", "count"],
        ["http", "server"],
        ["ab1", "cd"],
        ["x"],
        ["get", "user", "id"],
        ["get", "a", "value"],
        ["is", "a", "file"],
        ["max", "retry", "limit2"],
    ]
