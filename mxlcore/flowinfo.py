"""The binary flow header stored at the start of a flow's shared memory."""

from __future__ import annotations

import struct
import uuid
from dataclasses import dataclass, field
from typing import Union

from .dataformat import DataFormat, is_continuous_data_format
from .rational import Rational

FLOW_INFO_VERSION = 1
FLOW_INFO_SIZE = 4096
FLOW_USER_DATA_SIZE = 3840

_HEADER = struct.Struct("<II")
_COMMON = struct.Struct("<16sQQII80x")
_DISCRETE = struct.Struct("<qqIIQ96x")
_CONTINUOUS = struct.Struct("<qqIIIIQ88x")

_COMMON_OFFSET = _HEADER.size
_DETAILS_OFFSET = _COMMON_OFFSET + _COMMON.size
_USER_DATA_OFFSET = _DETAILS_OFFSET + _DISCRETE.size


def _as_format(value: int) -> int:
    try:
        return DataFormat(value)
    except ValueError:
        return value


def _padded(data: bytes, size: int) -> bytes:
    data = bytes(data)
    if len(data) > size:
        raise ValueError(f"user data holds at most {size} bytes, got {len(data)}")
    return data.ljust(size, b"\0")


@dataclass
class CommonFlowInfo:
    """Metadata shared by flows of every data format."""

    id: uuid.UUID
    last_write_time: int = 0
    last_read_time: int = 0
    format: int = DataFormat.UNSPECIFIED
    flags: int = 0


@dataclass
class DiscreteFlowInfo:
    """Header of flows carried in discrete grains."""

    grain_rate: Rational
    grain_count: int = 0
    sync_counter: int = 0
    head_index: int = 0


@dataclass
class ContinuousFlowInfo:
    """Header of flows carried as continuous per-channel samples."""

    sample_rate: Rational
    channel_count: int = 0
    buffer_length: int = 0
    commit_batch_size: int = 0
    sync_batch_size: int = 0
    head_index: int = 0


FormatInfo = Union[DiscreteFlowInfo, ContinuousFlowInfo]


def _pack_details(details: FormatInfo) -> bytes:
    if isinstance(details, DiscreteFlowInfo):
        return _DISCRETE.pack(
            details.grain_rate.numerator,
            details.grain_rate.denominator,
            details.grain_count,
            details.sync_counter,
            details.head_index,
        )
    return _CONTINUOUS.pack(
        details.sample_rate.numerator,
        details.sample_rate.denominator,
        details.channel_count,
        details.buffer_length,
        details.commit_batch_size,
        details.sync_batch_size,
        details.head_index,
    )


def _unpack_discrete(raw: bytes) -> DiscreteFlowInfo:
    num, den, count, sync, head = _DISCRETE.unpack_from(raw)
    return DiscreteFlowInfo(Rational(num, den), count, sync, head)


def _unpack_continuous(raw: bytes) -> ContinuousFlowInfo:
    num, den, channels, length, commit, sync, head = _CONTINUOUS.unpack_from(raw)
    return ContinuousFlowInfo(Rational(num, den), channels, length, commit, sync, head)


@dataclass
class FlowInfo:
    """The complete flow header.

    The format specific part shares its bytes between the discrete and the
    continuous layouts; `discrete` and `continuous` view those bytes either way.
    """

    common: CommonFlowInfo
    details: FormatInfo
    user_data: bytes = field(default=b"")
    version: int = FLOW_INFO_VERSION
    size: int = FLOW_INFO_SIZE

    def __post_init__(self) -> None:
        self.user_data = _padded(self.user_data, FLOW_USER_DATA_SIZE)

    @property
    def discrete(self) -> DiscreteFlowInfo:
        """The format specific bytes read as a discrete header (a copy unless stored so)."""
        if isinstance(self.details, DiscreteFlowInfo):
            return self.details
        return _unpack_discrete(self._details_bytes())

    @property
    def continuous(self) -> ContinuousFlowInfo:
        """The format specific bytes read as a continuous header (a copy unless stored so)."""
        if isinstance(self.details, ContinuousFlowInfo):
            return self.details
        return _unpack_continuous(self._details_bytes())

    def _details_bytes(self) -> bytes:
        try:
            return _pack_details(self.details)
        except struct.error as exc:
            raise ValueError(f"flow header field out of range: {exc}") from exc

    def to_bytes(self) -> bytes:
        """Encode the header in its fixed 4096 byte little-endian layout."""
        user_data = _padded(self.user_data, FLOW_USER_DATA_SIZE)
        try:
            head = _HEADER.pack(self.version, self.size)
            common = _COMMON.pack(
                self.common.id.bytes,
                self.common.last_write_time,
                self.common.last_read_time,
                int(self.common.format),
                self.common.flags,
            )
        except struct.error as exc:
            raise ValueError(f"flow header field out of range: {exc}") from exc
        return head + common + self._details_bytes() + user_data

    @classmethod
    def from_bytes(cls, data: bytes) -> FlowInfo:
        """Decode a header; the data format picks which layout is stored."""
        raw = bytes(data)
        if len(raw) < FLOW_INFO_SIZE:
            raise ValueError(f"flow header needs {FLOW_INFO_SIZE} bytes, got {len(raw)}")
        version, size = _HEADER.unpack_from(raw)
        id_bytes, write_time, read_time, fmt, flags = _COMMON.unpack_from(raw, _COMMON_OFFSET)
        common = CommonFlowInfo(uuid.UUID(bytes=id_bytes), write_time, read_time, _as_format(fmt), flags)
        details_raw = raw[_DETAILS_OFFSET:_USER_DATA_OFFSET]
        if is_continuous_data_format(fmt):
            details: FormatInfo = _unpack_continuous(details_raw)
        else:
            details = _unpack_discrete(details_raw)
        user_data = raw[_USER_DATA_OFFSET:FLOW_INFO_SIZE]
        return cls(common, details, user_data, version, size)