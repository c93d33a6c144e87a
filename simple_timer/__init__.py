from .clock import Clock, SystemClock, SYSTEM_CLOCK
from .timer import Timer

__all__ = ["Clock", "SystemClock", "SYSTEM_CLOCK", "Timer"]
