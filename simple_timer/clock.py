import time
from typing import Protocol


class Clock(Protocol):
    """Monotonic time source used by `Timer`."""

    def now(self) -> float:
        """Current monotonic time in seconds."""
        ...

    def sleep(self, seconds: float) -> None: ...


class SystemClock:
    def now(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

    def __repr__(self):
        return f"{self.__class__.__name__}()"


SYSTEM_CLOCK: Clock = SystemClock()

__all__ = ["Clock", "SystemClock", "SYSTEM_CLOCK"]
