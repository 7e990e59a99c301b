import time
from typing import Iterable, List

import pytest


class FakeClock:
    """Stand-in for time.perf_counter that only moves when told to."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000.0


class ScriptedOperation:
    """Operation whose successive calls take the scripted durations (ms)."""

    def __init__(self, clock: FakeClock, durations_ms: Iterable[float]) -> None:
        self.clock = clock
        self.durations_ms: List[float] = list(durations_ms)
        self.calls = 0

    def __call__(self) -> None:
        self.clock.advance_ms(self.durations_ms[self.calls % len(self.durations_ms)])
        self.calls += 1


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    fake = FakeClock()
    monkeypatch.setattr(time, "perf_counter", fake)
    return fake


@pytest.fixture
def scripted(clock: FakeClock):
    def factory(durations_ms: Iterable[float]) -> ScriptedOperation:
        return ScriptedOperation(clock, durations_ms)

    return factory
