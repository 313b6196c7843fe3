"""
Shared fixtures for the Prefab Shapes test suite.
"""

import pytest

from prefab_shapes.adapters import InMemoryAdapter


@pytest.fixture
def adapter():
    """A fresh in-memory render context."""
    ctx = InMemoryAdapter()
    yield ctx
    ctx.close()
