from dataclasses import dataclass
from datetime import timedelta
from typing import Generic, TypeVar

ZERO = timedelta(0)

T = TypeVar("T")

@dataclass
class Cell(Generic[T]):
    """
    Mutable single-value container.

    Lets an otherwise frozen object update one value in place. Not thread-safe:
    callers sharing a cell across threads must serialize `set` themselves.
    """
    value: T

    def get(self) -> T:
        return self.value

    def set(self, value: T):
        self.value = value

def checked_sub(a: timedelta, b: timedelta) -> timedelta | None:
    """Return `a - b`, or `None` if the difference would be negative."""
    if b > a:
        return None
    return a - b

def saturating_sub(a: timedelta, b: timedelta) -> timedelta:
    """Return `a - b` clamped at zero."""
    difference = checked_sub(a, b)
    if difference is None:
        return ZERO
    return difference

__all__ = ["Cell", "checked_sub", "saturating_sub", "ZERO"]
