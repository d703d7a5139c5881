"""Human readable descriptions of flow headers."""

from __future__ import annotations

from .dataformat import DataFormat, is_continuous_data_format, is_discrete_data_format
from .flowinfo import FlowInfo
from .headindex import timestamp_to_head_index

_UINT64_MASK = 2**64 - 1

_FORMAT_NAMES = {
    DataFormat.UNSPECIFIED: "UNSPECIFIED",
    DataFormat.VIDEO: "Video",
    DataFormat.AUDIO: "Audio",
    DataFormat.DATA: "Data",
    DataFormat.MUX: "Multiplexed",
}


def format_name(format: int) -> str:
    """Display name of a data format; "UNKNOWN" for values outside the enumeration."""
    return _FORMAT_NAMES.get(format, "UNKNOWN")


def _line(label: str, value: object) -> str:
    return f"\t{label:>18}: {value}\n"


def describe_flow(info: FlowInfo, now: int) -> str:
    """Describe a flow header as of the TAI time `now` in nanoseconds.

    Latencies are computed in unsigned 64 bit arithmetic and wrap around when
    the flow appears to be ahead of `now`.
    """
    common = info.common
    fmt = int(common.format)
    parts = [
        f"- Flow [{common.id}]\n",
        _line("Version", info.version),
        _line("Struct size", info.size),
        _line("Last write time", common.last_write_time),
        _line("Last read time", common.last_read_time),
        _line("Format", format_name(fmt)),
        _line("Flags", f"{common.flags:08x}"),
    ]

    if is_discrete_data_format(fmt):
        discrete = info.discrete
        parts += [
            _line("Grain rate", f"{discrete.grain_rate.numerator}/{discrete.grain_rate.denominator}"),
            _line("Grain count", discrete.grain_count),
            _line("Head index", discrete.head_index),
        ]
    elif is_continuous_data_format(fmt):
        continuous = info.continuous
        parts += [
            _line("Sample rate", f"{continuous.sample_rate.numerator}/{continuous.sample_rate.denominator}"),
            _line("Channel count", continuous.channel_count),
            _line("Buffer length", continuous.buffer_length),
            _line("Commit batch size", continuous.commit_batch_size),
            _line("Sync batch size", continuous.sync_batch_size),
            _line("Head index", continuous.head_index),
        ]

    # The header bytes are read through the discrete layout whatever the format.
    discrete_view = info.discrete
    current_index = timestamp_to_head_index(discrete_view.grain_rate, now)
    latency_grains = (current_index - discrete_view.head_index) & _UINT64_MASK
    latency_ns = (now - common.last_write_time) & _UINT64_MASK
    parts += [
        _line("Latency (grains)", latency_grains),
        _line("Latency (ns)", latency_ns),
    ]
    return "".join(parts)