import itertools

import pytest


class ScriptedRandom:
    """
    Stand-in random source replaying a fixed list of draws (cycled).
    """

    def __init__(self, values):
        self._values = itertools.cycle(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return next(self._values)


@pytest.fixture
def scripted():
    return ScriptedRandom
