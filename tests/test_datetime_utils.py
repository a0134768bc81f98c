from datetime import date, datetime, time

import pytest

from dtr_payroll.common.datetime_utils import now_local, resolve_period, try_parse_iso_date

NOW = datetime(2026, 2, 2, 18, 0, 0)


def test_full_period_is_inclusive_of_end_day():
    start, end = resolve_period("2026-01-01", "2026-01-31", now=NOW)

    assert start == datetime(2026, 1, 1, 0, 0)
    assert end == datetime.combine(date(2026, 1, 31), time.max)


@pytest.mark.parametrize("start_s", [None, "", "01/01/2026", "garbage"])
def test_missing_or_bad_start_has_no_lower_bound(start_s):
    start, _ = resolve_period(start_s, "2026-01-31", now=NOW)

    assert start is None


@pytest.mark.parametrize("end_s", [None, "", "2026-13-40"])
def test_missing_or_bad_end_defaults_to_now(end_s):
    _, end = resolve_period("2026-01-01", end_s, now=NOW)

    assert end == NOW


def test_reversed_period_is_passed_through():
    start, end = resolve_period("2026-02-10", "2026-02-01", now=NOW)

    assert start > end


def test_try_parse_iso_date():
    assert try_parse_iso_date(" 2026-03-04 ") == date(2026, 3, 4)
    assert try_parse_iso_date("2026-3-4x") is None


def test_now_local_is_naive():
    assert now_local("Asia/Manila").tzinfo is None
    assert now_local().tzinfo is None
