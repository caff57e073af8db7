"""Unit test configuration.

Unit tests run against in-memory adapters only and never touch MongoDB.
"""

import pytest


@pytest.fixture(autouse=True)
def inmemory_backend(monkeypatch):
    """Force the in-memory repository unless a test overrides it."""
    monkeypatch.setenv("USER_REPOSITORY", "inmemory")
