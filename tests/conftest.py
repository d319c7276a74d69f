"""Shared fixtures for digit extraction tests."""

import random
import pytest
from engine_context import EngineContext


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def make_ctx():
    """Factory for seeded contexts: make_ctx(p, r, **overrides)."""
    def _make(p, r, **kwargs):
        kwargs.setdefault("slot_count", 8)
        kwargs.setdefault("seed", 7)
        return EngineContext(p, r, **kwargs)
    return _make


@pytest.fixture
def ctx5(make_ctx):
    return make_ctx(5, 3)
