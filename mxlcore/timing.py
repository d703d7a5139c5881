"""Clocks, points in time and durations, all in integer nanoseconds."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Callable, Optional

_NS_PER_SECOND = 1_000_000_000
_TAI_LEAP_SECONDS = 37.0


class Clock(enum.Enum):
    """The clocks available in the system."""

    MONOTONIC = enum.auto()
    REALTIME = enum.auto()
    TAI = enum.auto()
    PROCESS_CPU_TIME = enum.auto()
    THREAD_CPU_TIME = enum.auto()


def _trunc_divmod(value: int, divisor: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the sign of value."""
    quotient = abs(value) // abs(divisor)
    if (value < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, value - quotient * divisor


@dataclass(frozen=True, order=True)
class Duration:
    """A span of time in nanoseconds."""

    value: int = 0

    def __bool__(self) -> bool:
        return self.value != 0

    def __add__(self, other: object) -> Duration:
        if isinstance(other, Duration):
            return Duration(self.value + other.value)
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if isinstance(other, Duration):
            return Duration(self.value - other.value)
        return NotImplemented

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, int) and not isinstance(other, bool):
            return Duration(self.value * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Duration:
        """Divide by an integer, rounding toward zero."""
        if isinstance(other, int) and not isinstance(other, bool):
            return Duration(_trunc_divmod(self.value, other)[0])
        return NotImplemented

    def in_seconds(self) -> float:
        return self.value / 1_000_000_000.0

    def in_milliseconds(self) -> float:
        return self.value / 1_000_000.0

    def in_microseconds(self) -> float:
        return self.value / 1_000.0

    def in_nanoseconds(self) -> float:
        return float(self.value)

    def to_timespec(self) -> tuple[int, int]:
        """Return (seconds, nanoseconds), both truncated toward zero."""
        return _trunc_divmod(self.value, _NS_PER_SECOND)


@dataclass(frozen=True, order=True)
class Timepoint:
    """A point in time in nanoseconds relative to a clock's epoch."""

    value: int = 0

    def __bool__(self) -> bool:
        return self.value != 0

    def __add__(self, other: object) -> Timepoint:
        if isinstance(other, Duration):
            return Timepoint(max(self.value + other.value, 0))
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, Timepoint):
            return Duration(self.value - other.value)
        if isinstance(other, Duration):
            return Timepoint(max(self.value - other.value, 0))
        return NotImplemented

    def to_timespec(self) -> tuple[int, int]:
        """Return (seconds, nanoseconds), both truncated toward zero."""
        return _trunc_divmod(self.value, _NS_PER_SECOND)


def from_seconds(seconds: float) -> Duration:
    return Duration(int(seconds * 1_000_000_000.0))


def from_milliseconds(milliseconds: float) -> Duration:
    return Duration(int(milliseconds * 1_000_000.0))


def from_microseconds(microseconds: float) -> Duration:
    return Duration(int(microseconds * 1_000.0))


def duration_from_timespec(seconds: int, nanoseconds: int) -> Duration:
    return Duration(seconds * _NS_PER_SECOND + nanoseconds)


def timepoint_from_timespec(seconds: int, nanoseconds: int) -> Timepoint:
    return Timepoint(seconds * _NS_PER_SECOND + nanoseconds)


def _clock_id(clock: Clock) -> Optional[int]:
    if clock is Clock.MONOTONIC:
        return getattr(time, "CLOCK_MONOTONIC_RAW", getattr(time, "CLOCK_MONOTONIC", None))
    if clock is Clock.TAI and hasattr(time, "CLOCK_TAI"):
        return time.CLOCK_TAI
    if clock is Clock.PROCESS_CPU_TIME:
        return getattr(time, "CLOCK_PROCESS_CPUTIME_ID", None)
    if clock is Clock.THREAD_CPU_TIME:
        return getattr(time, "CLOCK_THREAD_CPUTIME_ID", None)
    return getattr(time, "CLOCK_REALTIME", None)


_FALLBACK_READERS: dict[Clock, Callable[[], int]] = {
    Clock.MONOTONIC: time.monotonic_ns,
    Clock.PROCESS_CPU_TIME: time.process_time_ns,
    Clock.THREAD_CPU_TIME: time.thread_time_ns,
}


def _read_clock(clock: Clock) -> Optional[int]:
    clock_id = _clock_id(clock)
    if clock_id is not None and hasattr(time, "clock_gettime_ns"):
        try:
            return time.clock_gettime_ns(clock_id)
        except OSError:
            return None
    return _FALLBACK_READERS.get(clock, time.time_ns)()


def clock_offset(clock: Clock) -> Duration:
    """Offset added to the raw reading of a clock.

    TAI is emulated from the realtime clock plus the leap seconds when the
    system has no TAI clock of its own.
    """
    if clock is Clock.TAI and not hasattr(time, "CLOCK_TAI"):
        return from_seconds(_TAI_LEAP_SECONDS)
    return from_seconds(0.0)


def current_time(clock: Clock) -> Timepoint:
    """Read a clock; a zero Timepoint means the clock could not be read."""
    reading = _read_clock(clock)
    if reading is None:
        return Timepoint()
    return Timepoint(reading) + clock_offset(clock)


def current_time_utc() -> Timepoint:
    return Timepoint(time.time_ns())