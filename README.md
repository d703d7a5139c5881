# mxlcore

Building blocks for exchanging media flows between processes: clocks and a
TAI time source, conversions between timestamps and head indices for a given
edit rate, data format helpers, and the binary layouts of flow and grain
descriptors.

## Installation

```
pip install mxlcore
```

For running the tests:

```
pip install "mxlcore[test]"
pytest
```

## Timing

`mxlcore.timing` provides the `Clock` enumeration (`MONOTONIC`, `REALTIME`,
`TAI`, `PROCESS_CPU_TIME`, `THREAD_CPU_TIME`) and the `Timepoint` and
`Duration` values, both counted in integer nanoseconds.

```python
from mxlcore.timing import Clock, current_time, from_milliseconds

now = current_time(Clock.TAI)
later = now + from_milliseconds(20)
print((later - now).in_milliseconds())  # 20.0
```

- `current_time(clock)` reads a clock; a zero `Timepoint` means it could not
  be read. `current_time_utc()` reads the system UTC time.
- Where the system has no TAI clock, TAI is the realtime clock plus 37 leap
  seconds; `clock_offset(clock)` returns that offset.
- Adding or subtracting a `Duration` to a `Timepoint` never goes below zero.
- `from_seconds`, `from_milliseconds`, `from_microseconds`,
  `duration_from_timespec` and `timepoint_from_timespec` build values;
  `Duration.in_seconds()` and friends, and `to_timespec()`, convert back.

## Head indices

`mxlcore.headindex` maps TAI time to ring buffer head indices. Index 0 is the
start of the epoch. Edit rates are `mxlcore.rational.Rational` values, which
compare equal by cross product (`Rational(1, 2) == Rational(2, 4)`).

```python
from mxlcore.rational import Rational
from mxlcore.headindex import (
    get_current_head_index,
    get_ns_until_head_index,
    get_time,
    head_index_to_timestamp,
    sleep_for_ns,
    timestamp_to_head_index,
)

rate = Rational(30000, 1001)
print(timestamp_to_head_index(rate, 0))   # 0
print(head_index_to_timestamp(rate, 1))   # 33366666

index = get_current_head_index(rate)
sleep_for_ns(get_ns_until_head_index(index + 1, rate))
```

An edit rate that is `None` or has a zero numerator or denominator makes
these functions return `UNDEFINED_INDEX` (2**64 - 1).
`get_ns_until_head_index` returns 0 for an index that has already started.

## Data formats

`mxlcore.dataformat.DataFormat` lists `UNSPECIFIED`, `VIDEO`, `AUDIO`, `DATA`
and `MUX`.

```python
from mxlcore.dataformat import DataFormat, is_discrete_data_format

is_discrete_data_format(DataFormat.VIDEO)  # True
```

`is_valid_data_format`, `is_supported_data_format` and
`is_continuous_data_format` answer the other questions; video and data are
discrete, audio is continuous, and mux is valid but not supported.

## Flow and grain descriptors

- `mxlcore.flowinfo.FlowInfo` holds a `CommonFlowInfo` and either a
  `DiscreteFlowInfo` or a `ContinuousFlowInfo`, plus user data. It encodes
  to and decodes from its fixed 4096 byte little-endian layout with
  `to_bytes()` and `FlowInfo.from_bytes(data)`. The `discrete` and
  `continuous` properties read the format specific bytes either way.
- `mxlcore.grain.GrainInfo` is the 4096 byte grain header, with
  `is_complete()`, `is_invalid()` (the `GRAIN_FLAG_INVALID` flag),
  `to_bytes()` and `GrainInfo.from_bytes(data)`.
- `WrappedBufferSlice` views a run of bytes split in two where a ring buffer
  wraps; `WrappedMultiBufferSlice` views the same range across several
  buffers laid out a fixed stride apart, one `WrappedBufferSlice` per buffer
  via `buffer(n)` or iteration.

## Reports

`mxlcore.info.describe_flow(info, now)` renders a `FlowInfo` as a
human-readable report at TAI time `now` (nanoseconds), including latency in
grains and nanoseconds. `format_name(format)` gives the display name of a
data format.

## Versions and errors

`mxlcore.status.get_version()` returns a `Version` whose `str()` is
`major.minor.bugfix.build`. `Status` lists the outcome codes, and `MxlError`
is an exception that carries a non-OK `Status`.

## What this package does not do

It does not create, open or delete flows, map shared memory, read or write
grains and samples, watch a domain directory, or garbage-collect flows, and it
provides no command line tool. It supplies the timing arithmetic, the
descriptor layouts and the report text that such components work with.