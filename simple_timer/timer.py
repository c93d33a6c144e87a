from dataclasses import dataclass, field
from datetime import timedelta
from typing import Self

from .clock import Clock, SYSTEM_CLOCK
from .utils import Cell, ZERO, checked_sub, saturating_sub


@dataclass(frozen=True, eq=False, init=False)
class Timer:
    """
    Polling timer measured against a monotonic clock.

    A timer is expired once the time elapsed since it was last reset reaches its
    duration. Nothing fires on expiry; callers poll `expired`. A zero-duration
    timer is always expired and is only useful for reading `elapsed`.

    Fields cannot be rebound, but `reset` only touches the `begin` cell, so a
    `Timer` held by another frozen object can still be restarted. There is no
    locking: a timer shared between threads must be reset by one of them at a time.
    """
    begin: Cell[float]
    duration: timedelta
    clock: Clock = field(repr=False)

    def __init__(self, duration: timedelta = ZERO, *, clock: Clock = SYSTEM_CLOCK):
        if duration < ZERO:
            raise ValueError(f"timer duration must be non-negative, got {duration}")
        object.__setattr__(self, "begin", Cell(clock.now()))
        object.__setattr__(self, "duration", duration)
        object.__setattr__(self, "clock", clock)

    @classmethod
    def with_duration(cls, duration: timedelta, *, clock: Clock = SYSTEM_CLOCK) -> Self:
        return cls(duration, clock=clock)

    def reset(self):
        """Restart the timer. `elapsed` starts over at zero."""
        self.begin.set(self.clock.now())

    @property
    def elapsed(self) -> timedelta:
        """Time since construction or the last `reset`."""
        return timedelta(seconds=self.clock.now() - self.begin.get())

    @property
    def expired(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def remaining(self) -> timedelta:
        return saturating_sub(self.duration, self.elapsed)

    def wait(self):
        """Sleep the calling thread until the timer has expired."""
        remaining = checked_sub(self.duration, self.elapsed)
        if remaining is None or remaining == ZERO:
            return
        self.clock.sleep(remaining.total_seconds())

    def __copy__(self) -> Self:
        other = type(self)(self.duration, clock=self.clock)
        other.begin.set(self.begin.get())
        return other

    def __deepcopy__(self, memo) -> Self:
        return self.__copy__()

__all__ = ["Timer"]
