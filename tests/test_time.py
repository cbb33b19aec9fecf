"""Tests for day-number calendar arithmetic and the Timestamp type."""

from datetime import datetime, timedelta, timezone

import pytest

from plan13.time import (
    caldate_to_daynumber,
    daynumber_to_caldate,
    doy_to_daynumber,
    fraction_to_hms,
    hms_to_fraction,
)
from plan13.timestamp import Timestamp


class TestDayNumber:
    def test_reference_epoch(self):
        assert caldate_to_daynumber(2014, 1, 0) == 735248
        assert caldate_to_daynumber(2014, 1, 1) == 735249

    def test_consecutive_across_year_end(self):
        assert caldate_to_daynumber(2024, 1, 1) - caldate_to_daynumber(2023, 12, 31) == 1

    def test_leap_day(self):
        feb29 = caldate_to_daynumber(2024, 2, 29)
        assert caldate_to_daynumber(2024, 3, 1) - feb29 == 1
        assert daynumber_to_caldate(feb29) == (2024, 2, 29)

    def test_non_leap_year_length(self):
        assert caldate_to_daynumber(2024, 1, 1) - caldate_to_daynumber(2023, 1, 1) == 365
        assert caldate_to_daynumber(2025, 1, 1) - caldate_to_daynumber(2024, 1, 1) == 366

    def test_valid_range_limits(self):
        assert daynumber_to_caldate(caldate_to_daynumber(1900, 3, 1)) == (1900, 3, 1)
        assert daynumber_to_caldate(caldate_to_daynumber(2100, 2, 28)) == (2100, 2, 28)

    @pytest.mark.parametrize("year", range(1901, 2100, 11))
    def test_roundtrip(self, year):
        for month in range(1, 13):
            for day in (1, 10, 28):
                dn = caldate_to_daynumber(year, month, day)
                assert daynumber_to_caldate(dn) == (year, month, day)

    def test_roundtrip_every_day_of_a_leap_year(self):
        dn0 = caldate_to_daynumber(2024, 1, 1)
        for k in range(366):
            expected = (datetime(2024, 1, 1) + timedelta(days=k)).timetuple()[:3]
            assert daynumber_to_caldate(dn0 + k) == expected

    def test_doy_split(self):
        dn, frac = doy_to_daynumber(2008, 264.5)
        assert dn == caldate_to_daynumber(2008, 9, 20)
        assert frac == 0.5


class TestTimeOfDay:
    def test_hms_to_fraction(self):
        assert hms_to_fraction(18, 0, 0) == 0.75
        assert hms_to_fraction(0, 0, 0) == 0.0

    def test_fraction_to_hms(self):
        assert fraction_to_hms(0.75) == (18, 0, 0)
        assert fraction_to_hms(0.0) == (0, 0, 0)

    def test_truncates_rather_than_rounds(self):
        # 0.9999 s before midnight stays on the same day
        assert fraction_to_hms(1.0 - 0.9999 / 86400.0) == (23, 59, 59)


class TestTimestamp:
    def test_from_calendar(self):
        t = Timestamp.from_calendar(2014, 1, 1, 12, 0, 0)
        assert t.day_number == 735249
        assert t.fraction == 0.5

    def test_fraction_normalised_on_construction(self):
        t = Timestamp(100, 2.25)
        assert t.day_number == 102
        assert t.fraction == 0.25

    def test_add_positive_carries(self):
        t = Timestamp.from_calendar(2014, 1, 1, 12).add(1.25)
        assert t.day_number == 735250
        assert t.fraction == 0.75

    def test_add_negative_floors(self):
        t = Timestamp.from_calendar(2014, 1, 1, 12).add(-0.75)
        assert t.day_number == 735248
        assert t.fraction == 0.75

    def test_add_tiny_negative_stays_in_range(self):
        t = Timestamp(10, 0.0).add(-1e-18)
        assert 0.0 <= t.fraction < 1.0

    def test_operators(self):
        t0 = Timestamp.from_calendar(2020, 6, 1, 6)
        t1 = t0 + 2.5
        assert t1 - t0 == pytest.approx(2.5, abs=1e-12)
        assert t1 - 2.5 == t0
        assert t0 < t1
        assert t1 >= t0
        assert t0 != t1

    def test_is_immutable_value(self):
        t0 = Timestamp.from_calendar(2020, 6, 1)
        t0.add(1.0)
        assert t0 == Timestamp.from_calendar(2020, 6, 1)
        assert hash(t0) == hash(Timestamp.from_calendar(2020, 6, 1))

    def test_round_up(self):
        t = Timestamp.from_calendar(2014, 1, 1, 6).round_up(0.5)
        assert t == Timestamp.from_calendar(2014, 1, 1, 12)

    def test_round_up_carries_into_next_day(self):
        t = Timestamp.from_calendar(2014, 1, 1, 18).round_up(0.5)
        assert t.day_number == 735250
        assert t.fraction == 0.0

    def test_format(self):
        assert Timestamp.from_calendar(2019, 5, 11, 18, 0, 0).format() == "2019-05-11 18:00:00"
        assert str(Timestamp.from_calendar(2019, 5, 11, 6)) == "2019-05-11 06:00:00"

    @pytest.mark.parametrize(
        "components",
        [
            (2019, 5, 11, 0, 53, 13),
            (2000, 2, 29, 23, 59, 59),
            (1999, 12, 31, 12, 30, 45),
            (2057, 7, 4, 1, 2, 3),
        ],
    )
    def test_calendar_roundtrip_within_one_second(self, components):
        t = Timestamp.from_calendar(*components)
        year, month, day, hour, minute, second = t.caldate()
        assert (year, month, day) == components[:3]

        expected = datetime(*components, tzinfo=timezone.utc)
        lag = (expected - t.to_datetime()).total_seconds()
        assert 0.0 <= lag <= 1.0

    def test_from_datetime_aware(self):
        cet = timezone(timedelta(hours=1))
        t = Timestamp.from_datetime(datetime(2024, 1, 1, 13, 0, 0, tzinfo=cet))
        assert t == Timestamp.from_calendar(2024, 1, 1, 12, 0, 0)

    def test_from_datetime_naive_is_utc(self):
        t = Timestamp.from_datetime(datetime(2024, 1, 1, 18))
        assert t == Timestamp.from_calendar(2024, 1, 1, 18)
