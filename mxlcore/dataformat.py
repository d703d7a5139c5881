"""Flow data formats as defined by NMOS IS-04 (events excluded)."""

from __future__ import annotations

import enum


class DataFormat(enum.IntEnum):
    UNSPECIFIED = 0
    VIDEO = 1
    AUDIO = 2
    DATA = 3
    MUX = 4


_VALID = frozenset({DataFormat.VIDEO, DataFormat.AUDIO, DataFormat.DATA, DataFormat.MUX})
_SUPPORTED = frozenset({DataFormat.VIDEO, DataFormat.AUDIO, DataFormat.DATA})
_DISCRETE = frozenset({DataFormat.VIDEO, DataFormat.DATA})
_CONTINUOUS = frozenset({DataFormat.AUDIO})


def is_valid_data_format(format: int) -> bool:
    return format in _VALID


def is_supported_data_format(format: int) -> bool:
    return format in _SUPPORTED


def is_discrete_data_format(format: int) -> bool:
    """True for formats carried in discrete grains."""
    return format in _DISCRETE


def is_continuous_data_format(format: int) -> bool:
    """True for formats carried as continuous samples."""
    return format in _CONTINUOUS