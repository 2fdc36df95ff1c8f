import pathlib
import random
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedRandom:
    """Random source that replays fixed candidates and always picks witness 2."""

    def __init__(self, candidates):
        self._candidates = list(candidates)
        self.calls = 0

    def getrandbits(self, k):
        self.calls += 1
        value = self._candidates.pop(0)
        assert value < (1 << k)
        return value

    def randrange(self, start, stop=None):
        return start


@pytest.fixture()
def rng():
    return random.Random(0x5EED)


@pytest.fixture()
def scripted():
    return ScriptedRandom
