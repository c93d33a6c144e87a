import pytest

_NANOSEC_IN_SEC = 1_000_000_000

class ManualClock:
    """Clock that only moves when told to. `sleep` advances it instead of blocking."""

    def __init__(self):
        self.ns = 0
        self.sleeps: list[float] = []

    def now(self) -> float:
        return self.ns / _NANOSEC_IN_SEC

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.advance(seconds)

    def advance(self, seconds: float):
        self.ns += round(seconds * _NANOSEC_IN_SEC)

@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()
