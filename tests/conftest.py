import random

import pytest

from gridsnake.config import Config
from gridsnake.session import Session


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session(rng):
    """A fresh session on a 10x10 grid (500x500 px, 50 px cells)."""
    return Session(500, 500, config=Config(seed=1234), rng=rng)
