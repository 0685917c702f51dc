from __future__ import annotations

import pytest

from orrery.generator import StarSystemGenerator


@pytest.fixture
def generator() -> StarSystemGenerator:
    """A generator seeded with a fixed string."""
    return StarSystemGenerator(seed="pytest")
