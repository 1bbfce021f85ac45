"""Clock adapters - Implementations of the ClockPort.

Available implementations:
- SystemClock: Reads the real system clock
- FixedClock: Always returns the same instant (for testing)
"""

from .fixed_clock import FixedClock
from .system_clock import SystemClock

__all__ = ["SystemClock", "FixedClock"]
