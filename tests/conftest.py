########### EXTERNAL IMPORTS ############

import pytest

#########################################

############# LOCAL IMPORTS #############

import util.functions.clock as clock

#########################################


class FakeClock:
    """Monotonic clock driven by the test."""

    def __init__(self, start: float = 1000.0):
        self.current = start

    def now(self) -> float:
        return self.current

    def advance_ms(self, ms: float) -> None:
        self.current += clock.ms_to_seconds(ms)

    def ms_ago(self, ms: float) -> float:
        return self.current - clock.ms_to_seconds(ms)


@pytest.fixture
def fake_clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(clock, "now", fake.now)
    return fake
