import random

import pytest

from floppy.data_models import Playfield
from floppy.game import FloppyGame
from floppy.score_db import ScoreDatabase


class FixedRandom:
    """Stands in for random.Random: hands out preset gap tops in order."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        value = self.values.pop(0) if self.values else a
        return max(a, min(b, value))


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def playfield():
    return Playfield(480, 480)


@pytest.fixture
def db():
    database = ScoreDatabase(":memory:")
    yield database
    database.close()


@pytest.fixture
def game(db):
    g = FloppyGame(480, 480, store=db, rng=random.Random(1234))
    events = []
    g.subscribe(events.append)
    g.events = events
    return g
