import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import matplotlib
matplotlib.use("Agg")

import pytest

from flocking.core.config import SimulationConfig
from flocking.core.flock import Flock


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def small_config():
    return SimulationConfig(screenWidth=200, screenHeight=150, boidCount=12,
                            ticksPerSecond=120, seed=7, statsInterval=10)


@pytest.fixture
def pair_flock():
    """Two-slot flock on a 100x100 canvas at 120 ticks per second."""
    return Flock(100, 100, 2, 120, rng=random.Random(0))
