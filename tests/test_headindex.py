import time

import pytest

from mxlcore.headindex import (
    UNDEFINED_INDEX,
    get_current_head_index,
    get_ns_until_head_index,
    get_time,
    head_index_to_timestamp,
    sleep_for_ns,
    timestamp_to_head_index,
)
from mxlcore.rational import Rational

BAD_RATE = Rational(0, 0)
BAD_NUMERATOR = Rational(0, 1001)
BAD_DENOMINATOR = Rational(30000, 0)
GOOD_RATE = Rational(30000, 1001)


def test_undefined_index_is_uint64_max():
    assert timestamp_to_head_index(None, 0) == 0xFFFFFFFFFFFFFFFF
    assert head_index_to_timestamp(BAD_RATE, 0) == 0xFFFFFFFFFFFFFFFF


def test_invalid_times():
    now = get_time()
    assert timestamp_to_head_index(None, now) == UNDEFINED_INDEX
    assert timestamp_to_head_index(BAD_RATE, now) == UNDEFINED_INDEX
    assert timestamp_to_head_index(BAD_NUMERATOR, now) == UNDEFINED_INDEX
    assert timestamp_to_head_index(BAD_DENOMINATOR, now) == UNDEFINED_INDEX
    assert timestamp_to_head_index(GOOD_RATE, now) != UNDEFINED_INDEX


def test_index_0_and_1():
    rate = Rational(30000, 1001)
    first_index_time_ns = 0
    second_index_time_ns = rate.denominator * 1_000_000_000 // rate.numerator

    assert timestamp_to_head_index(rate, first_index_time_ns) == 0
    assert timestamp_to_head_index(rate, second_index_time_ns) == 1

    assert head_index_to_timestamp(rate, 0) == first_index_time_ns
    assert head_index_to_timestamp(rate, 1) == second_index_time_ns


@pytest.mark.parametrize("rate", [None, BAD_RATE, BAD_NUMERATOR, BAD_DENOMINATOR])
def test_other_functions_reject_bad_rates(rate):
    assert head_index_to_timestamp(rate, 1) == UNDEFINED_INDEX
    assert get_current_head_index(rate) == UNDEFINED_INDEX
    assert get_ns_until_head_index(1, rate) == UNDEFINED_INDEX


@pytest.mark.parametrize("rate", [Rational(30000, 1001), Rational(60000, 1001), Rational(48000, 1), Rational(25, 1)])
def test_index_timestamp_round_trip(rate):
    base = timestamp_to_head_index(rate, get_time())
    for index in (0, 1, 2, 1000, base, base + 1):
        assert timestamp_to_head_index(rate, head_index_to_timestamp(rate, index)) == index


def test_get_time_is_positive_and_advances():
    first = get_time()
    second = get_time()
    assert first > 0
    assert second >= first


def test_current_head_index_matches_now():
    before = timestamp_to_head_index(GOOD_RATE, get_time())
    current = get_current_head_index(GOOD_RATE)
    after = timestamp_to_head_index(GOOD_RATE, get_time())
    assert before <= current <= after


def test_ns_until_past_index_is_zero():
    assert get_ns_until_head_index(0, GOOD_RATE) == 0
    past = get_current_head_index(GOOD_RATE) - 10
    assert get_ns_until_head_index(past, GOOD_RATE) == 0


def test_ns_until_future_index_is_bounded():
    target = get_current_head_index(GOOD_RATE) + 3
    remaining = get_ns_until_head_index(target, GOOD_RATE)
    frame_ns = head_index_to_timestamp(GOOD_RATE, 1)
    assert 0 < remaining <= 4 * frame_ns


def test_sleep_for_ns_sleeps_at_least_that_long():
    duration_ns = 2_000_000
    start_mono = time.monotonic_ns()
    start = get_time()
    sleep_for_ns(duration_ns)
    elapsed = get_time() - start
    elapsed_mono = time.monotonic_ns() - start_mono
    assert elapsed >= duration_ns - 100_000
    assert elapsed_mono >= duration_ns - 100_000