from datetime import datetime, timedelta

import pytest

from carpark.fees import FeeQuote, billable_hours, compute_fee

PARKED = datetime(2024, 5, 1, 9, 0, 0)


def test_ninety_minutes_bills_two_hours():
    quote = compute_fee(PARKED, PARKED + timedelta(minutes=90))

    assert quote == FeeQuote(hours=1, minutes=30, seconds=0, billable_hours=2, amount=12)


def test_exact_hour_bills_one_hour():
    quote = compute_fee(PARKED, PARKED + timedelta(minutes=60))

    assert quote.billable_hours == 1
    assert quote.amount == 6


def test_zero_elapsed_is_free():
    quote = compute_fee(PARKED, PARKED)

    assert quote.billable_hours == 0
    assert quote.amount == 0


def test_one_second_bills_a_full_hour():
    quote = compute_fee(PARKED, PARKED + timedelta(seconds=1))

    assert (quote.hours, quote.minutes, quote.seconds) == (0, 0, 1)
    assert quote.amount == 6


def test_sub_second_remainder_is_dropped():
    quote = compute_fee(PARKED, PARKED + timedelta(hours=2, microseconds=500))

    assert quote.billable_hours == 2


def test_multi_day_stay():
    quote = compute_fee(PARKED, PARKED + timedelta(days=1, hours=1, minutes=1, seconds=1))

    assert (quote.hours, quote.minutes, quote.seconds) == (25, 1, 1)
    assert quote.billable_hours == 26


def test_custom_rate():
    assert compute_fee(PARKED, PARKED + timedelta(minutes=150), hourly_rate=4).amount == 12


def test_query_before_park_time_raises():
    with pytest.raises(ValueError):
        compute_fee(PARKED, PARKED - timedelta(seconds=1))


def test_billable_hours_rounding():
    assert billable_hours(0, 0, 0) == 0
    assert billable_hours(3, 0, 0) == 3
    assert billable_hours(3, 1, 0) == 4
    assert billable_hours(3, 0, 59) == 4
