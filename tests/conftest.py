import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from ropesim.rope import RopeSimulation  # noqa: E402


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def rope(rng):
    return RopeSimulation((0, 0), (200, 0), segments=12, rng=rng)


@pytest.fixture
def calm_rope():
    """No wind: every step is deterministic."""
    return RopeSimulation((0, 0), (200, 0), segments=12, wind=0.0)
