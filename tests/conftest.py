import pytest


class ScriptedRandomness:
    """Random source that replays fixed answers.

    Fractions default to 0.99 (the made-up word branch) and indices to 0 once
    the scripted values run out.
    """

    def __init__(self, fractions=(), indices=()):
        self.fractions = list(fractions)
        self.indices = list(indices)
        self.fraction_calls = 0
        self.uniform_calls = []

    def fraction(self):
        self.fraction_calls += 1
        return self.fractions.pop(0) if self.fractions else 0.99

    def uniform(self, upper):
        self.uniform_calls.append(upper)
        index = self.indices.pop(0) if self.indices else 0
        assert 0 <= index < upper
        return index


@pytest.fixture
def scripted():
    return ScriptedRandomness
