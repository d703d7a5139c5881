"""Grain headers and views over (possibly wrapped) ring buffer regions."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import Iterator, Tuple

GRAIN_FLAG_INVALID = 0x00000001

GRAIN_INFO_VERSION = 1
GRAIN_INFO_SIZE = 4096
GRAIN_USER_DATA_SIZE = 4068

_GRAIN_HEADER = struct.Struct("<IIIIiII")


class PayloadLocation(enum.IntEnum):
    HOST_MEMORY = 0
    DEVICE_MEMORY = 1


@dataclass
class GrainInfo:
    """Header stored in front of every grain payload.

    A grain marked invalid still moves the ring buffer forward while telling
    readers not to use its content.
    """

    grain_size: int = 0
    committed_size: int = 0
    flags: int = 0
    payload_location: PayloadLocation = PayloadLocation.HOST_MEMORY
    device_index: int = -1
    user_data: bytes = field(default=b"")
    version: int = GRAIN_INFO_VERSION
    size: int = GRAIN_INFO_SIZE

    def __post_init__(self) -> None:
        self.payload_location = PayloadLocation(self.payload_location)
        user_data = bytes(self.user_data)
        if len(user_data) > GRAIN_USER_DATA_SIZE:
            raise ValueError(f"user data holds at most {GRAIN_USER_DATA_SIZE} bytes, got {len(user_data)}")
        self.user_data = user_data.ljust(GRAIN_USER_DATA_SIZE, b"\0")

    def is_complete(self) -> bool:
        """True once every byte of the payload has been committed."""
        return self.committed_size == self.grain_size

    def is_invalid(self) -> bool:
        return bool(self.flags & GRAIN_FLAG_INVALID)

    def to_bytes(self) -> bytes:
        """Encode the header in its fixed 4096 byte little-endian layout."""
        try:
            head = _GRAIN_HEADER.pack(
                self.version,
                self.size,
                self.flags,
                int(self.payload_location),
                self.device_index,
                self.grain_size,
                self.committed_size,
            )
        except struct.error as exc:
            raise ValueError(f"grain header field out of range: {exc}") from exc
        return head + self.user_data

    @classmethod
    def from_bytes(cls, data: bytes) -> GrainInfo:
        raw = bytes(data)
        if len(raw) < GRAIN_INFO_SIZE:
            raise ValueError(f"grain header needs {GRAIN_INFO_SIZE} bytes, got {len(raw)}")
        version, size, flags, location, device, grain_size, committed = _GRAIN_HEADER.unpack_from(raw)
        return cls(
            grain_size=grain_size,
            committed_size=committed,
            flags=flags,
            payload_location=PayloadLocation(location),
            device_index=device,
            user_data=raw[_GRAIN_HEADER.size:GRAIN_INFO_SIZE],
            version=version,
            size=size,
        )


def _byte_view(buffer) -> memoryview:
    return memoryview(buffer).cast("B")


@dataclass(frozen=True)
class WrappedBufferSlice:
    """A run of bytes in a ring buffer, split in two where it wraps around."""

    first: memoryview
    second: memoryview = field(default_factory=lambda: memoryview(b""))

    def __post_init__(self) -> None:
        object.__setattr__(self, "first", _byte_view(self.first))
        object.__setattr__(self, "second", _byte_view(self.second))

    @property
    def fragments(self) -> Tuple[memoryview, memoryview]:
        return self.first, self.second

    def size(self) -> int:
        return self.first.nbytes + self.second.nbytes

    def tobytes(self) -> bytes:
        """The bytes of both fragments, in order."""
        return self.first.tobytes() + self.second.tobytes()


@dataclass(frozen=True)
class WrappedMultiBufferSlice:
    """The same wrapped range in `count` ring buffers laid out `stride` bytes apart.

    `fragments` gives (offset, size) of the two parts within the first buffer,
    relative to the start of `data`. Views share memory with `data`.
    """

    data: memoryview
    fragments: Tuple[Tuple[int, int], ...]
    stride: int
    count: int

    def __post_init__(self) -> None:
        view = _byte_view(self.data)
        parts = tuple((int(off), int(size)) for off, size in self.fragments)
        if len(parts) > 2:
            raise ValueError("a wrapped slice has at most two fragments")
        parts = parts + ((0, 0),) * (2 - len(parts))
        if self.count < 0 or self.stride < 0:
            raise ValueError("stride and count must not be negative")
        last_shift = max(self.count - 1, 0) * self.stride
        for offset, size in parts:
            if offset < 0 or size < 0:
                raise ValueError("fragment offsets and sizes must not be negative")
            if size and self.count and offset + last_shift + size > view.nbytes:
                raise ValueError("fragment extends past the end of the data")
        object.__setattr__(self, "data", view)
        object.__setattr__(self, "fragments", parts)

    def buffer(self, n: int) -> WrappedBufferSlice:
        """The wrapped range within the n-th buffer."""
        if not 0 <= n < self.count:
            raise IndexError(f"buffer {n} out of range for {self.count} buffers")
        shift = n * self.stride
        views = [self.data[offset + shift:offset + shift + size] for offset, size in self.fragments]
        return WrappedBufferSlice(*views)

    @property
    def base(self) -> WrappedBufferSlice:
        return self.buffer(0)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[WrappedBufferSlice]:
        return (self.buffer(n) for n in range(self.count))