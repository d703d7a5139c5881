"""Mapping between TAI time and ring buffer head indices.

Index 0 is the start of the SMPTE ST 2059 epoch.
"""

from __future__ import annotations

import time
from typing import Optional

from .rational import Rational
from .timing import Clock, current_time

UNDEFINED_INDEX = 2**64 - 1

_NS_PER_SECOND = 1_000_000_000


def _usable(edit_rate: Optional[Rational]) -> bool:
    return edit_rate is not None and edit_rate.numerator != 0 and edit_rate.denominator != 0


def get_time() -> int:
    """Current TAI time in nanoseconds since the epoch."""
    return current_time(Clock.TAI).value


def get_current_head_index(edit_rate: Optional[Rational]) -> int:
    """Head index for the current TAI time, or UNDEFINED_INDEX."""
    if not _usable(edit_rate):
        return UNDEFINED_INDEX
    now = current_time(Clock.TAI)
    if not now:
        return UNDEFINED_INDEX
    return timestamp_to_head_index(edit_rate, now.value)


def timestamp_to_head_index(edit_rate: Optional[Rational], timestamp: int) -> int:
    """Head index nearest to a timestamp in nanoseconds, or UNDEFINED_INDEX."""
    if not _usable(edit_rate):
        return UNDEFINED_INDEX
    return (timestamp * edit_rate.numerator + 500_000_000 * edit_rate.denominator) // (
        _NS_PER_SECOND * edit_rate.denominator
    )


def head_index_to_timestamp(edit_rate: Optional[Rational], index: int) -> int:
    """Timestamp in nanoseconds of a head index, or UNDEFINED_INDEX."""
    if not _usable(edit_rate):
        return UNDEFINED_INDEX
    return (index * edit_rate.denominator * _NS_PER_SECOND) // edit_rate.numerator


def get_ns_until_head_index(index: int, edit_rate: Optional[Rational]) -> int:
    """Nanoseconds left until a head index starts; 0 if it already has."""
    if not _usable(edit_rate):
        return UNDEFINED_INDEX
    target = (index * edit_rate.denominator * _NS_PER_SECOND) // edit_rate.numerator
    now = current_time(Clock.TAI).value
    if now != 0 and target >= now:
        return target - now
    return 0


def sleep_for_ns(ns: int) -> None:
    """Sleep for the given number of nanoseconds."""
    if ns > 0:
        time.sleep(ns / _NS_PER_SECOND)