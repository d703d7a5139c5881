"""Status codes, the error raised for them, and the SDK version."""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields
from typing import Optional

_UINT16_MAX = 0xFFFF


class Status(enum.IntEnum):
    """Outcome codes of SDK operations."""

    OK = 0
    UNKNOWN = 1
    FLOW_NOT_FOUND = 2
    OUT_OF_RANGE_TOO_LATE = 3
    OUT_OF_RANGE_TOO_EARLY = 4
    INVALID_FLOW_READER = 5
    INVALID_FLOW_WRITER = 6
    TIMEOUT = 7
    INVALID_ARG = 8
    CONFLICT = 9


class MxlError(Exception):
    """An operation failed with a status other than OK."""

    def __init__(self, status: int, message: Optional[str] = None) -> None:
        status = Status(status)
        if status is Status.OK:
            raise ValueError("an error cannot carry the OK status")
        self.status = status
        super().__init__(message if message is not None else status.name)


@dataclass(frozen=True, order=True)
class Version:
    """Semantic version of the SDK; each part is a 16 bit unsigned value."""

    major: int
    minor: int
    bugfix: int
    build: int

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not 0 <= value <= _UINT16_MAX:
                raise ValueError(f"version part {field.name} out of range: {value}")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.bugfix}.{self.build}"


_VERSION = Version(0, 6, 0, 0)


def get_version() -> Version:
    """Return the version of the SDK."""
    return _VERSION