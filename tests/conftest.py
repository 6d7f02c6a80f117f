"""Shared fixtures for the maze game tests."""

import os
import random
import sys

import pytest

# Headless pygame for the drawing tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


class BarrierRandom:
    """
    Random source that always walls off column 1, top to bottom.
    randrange() alternates x=1 and y=0..height-1, so every candidate is unsolvable.
    """

    def __init__(self, height):
        self.height = height
        self.calls = 0

    def randrange(self, n):
        pair, is_y = divmod(self.calls, 2)
        self.calls += 1
        if is_y:
            return pair % self.height
        return 1


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def barrier_rng():
    return BarrierRandom(height=10)
