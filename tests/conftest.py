import copy

import pytest

from dnspinglib.common import options, QueryError


@pytest.fixture(autouse=True)
def reset_options():
    saved = copy.deepcopy(options)
    yield
    options.clear()
    options.update(saved)


class FakeTimer:
    """Timer whose clock only moves when a fake query advances it"""

    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

    def advance_ms(self, ms):
        self.now += ms / 1000.0


class FakeResult:

    def __init__(self, size=56, answers=()):
        self.size = size
        self.answers = list(answers)


class FakeClient:
    """Plays back a list of (elapsed_ms, ok) outcomes"""

    def __init__(self, timer, outcomes, on_query=None):
        self.timer = timer
        self.outcomes = list(outcomes)
        self.on_query = on_query
        self.calls = 0

    def query(self):
        elapsed, ok = self.outcomes[self.calls]
        self.calls += 1
        self.timer.advance_ms(elapsed)
        if self.on_query is not None:
            self.on_query(self.calls)
        if not ok:
            raise QueryError("request timed out")
        return FakeResult()


@pytest.fixture
def timer():
    return FakeTimer()
