import pytest

from mxlcore.dataformat import (
    DataFormat,
    is_continuous_data_format,
    is_discrete_data_format,
    is_supported_data_format,
    is_valid_data_format,
)

TABLE = [
    # format, valid, supported, discrete, continuous
    (DataFormat.UNSPECIFIED, False, False, False, False),
    (DataFormat.VIDEO, True, True, True, False),
    (DataFormat.AUDIO, True, True, False, True),
    (DataFormat.DATA, True, True, True, False),
    (DataFormat.MUX, True, False, False, False),
]


@pytest.mark.parametrize("fmt,valid,supported,discrete,continuous", TABLE)
def test_classification(fmt, valid, supported, discrete, continuous):
    assert is_valid_data_format(fmt) is valid
    assert is_supported_data_format(fmt) is supported
    assert is_discrete_data_format(fmt) is discrete
    assert is_continuous_data_format(fmt) is continuous


@pytest.mark.parametrize("fmt,valid,supported,discrete,continuous", TABLE)
def test_plain_integers_accepted(fmt, valid, supported, discrete, continuous):
    assert is_valid_data_format(int(fmt)) is valid
    assert is_discrete_data_format(int(fmt)) is discrete


@pytest.mark.parametrize("value", [-1, 5, 100])
def test_unknown_values_are_rejected(value):
    assert not is_valid_data_format(value)
    assert not is_supported_data_format(value)
    assert not is_discrete_data_format(value)
    assert not is_continuous_data_format(value)


def test_discrete_and_continuous_are_disjoint_and_supported():
    for fmt in DataFormat:
        assert not (is_discrete_data_format(fmt) and is_continuous_data_format(fmt))
        if is_discrete_data_format(fmt) or is_continuous_data_format(fmt):
            assert is_supported_data_format(fmt)
        if is_supported_data_format(fmt):
            assert is_valid_data_format(fmt)


def test_enumeration_order():
    assert [f.name for f in DataFormat] == ["UNSPECIFIED", "VIDEO", "AUDIO", "DATA", "MUX"]
    assert [is_valid_data_format(value) for value in range(5)] == [False, True, True, True, True]
    assert [is_continuous_data_format(value) for value in range(5)] == [False, False, True, False, False]