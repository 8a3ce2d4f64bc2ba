"""Tests for Julian date calculation functions."""

import unittest
from datetime import datetime, timedelta, timezone

from solarkit.errors import InvalidInputError
from solarkit.space_time.julian_calc import (
    J2000,
    MAX_JULIAN_DATE,
    MIN_JULIAN_DATE,
    check_julian_date,
    julian_day,
    julian_to_utc,
)
from solarkit.space_time.pythonic_datetimes import NaiveDateTimeError
from solarkit.space_time.utc_datetime import UtcDateTime


class TestJulianDay(unittest.TestCase):
    """Test case for UTC instant to Julian date conversion."""

    def test_j2000_epoch_is_exact(self):
        self.assertEqual(julian_day(UtcDateTime(2000, 1, 1, 12, 0, 0)), 2451545.0)
        self.assertEqual(J2000, 2451545.0)

    def test_known_dates(self):
        """Test dates from Meeus, Astronomical Algorithms, chapter 7 and 12."""
        self.assertEqual(julian_day(UtcDateTime(1987, 4, 10)), 2446895.5)
        self.assertEqual(julian_day(UtcDateTime(1999, 1, 1)), 2451179.5)
        self.assertAlmostEqual(
            julian_day(UtcDateTime(2025, 3, 19, 17, 0, 0)), 2460754.208333333, places=6
        )

    def test_january_and_february_use_previous_year(self):
        # Feb 28 -> Mar 1 spans Feb 29 in a leap year
        feb_28 = julian_day(UtcDateTime(2024, 2, 28))
        mar_1 = julian_day(UtcDateTime(2024, 3, 1))
        self.assertEqual(mar_1 - feb_28, 2.0)

        feb_28 = julian_day(UtcDateTime(2023, 2, 28))
        mar_1 = julian_day(UtcDateTime(2023, 3, 1))
        self.assertEqual(mar_1 - feb_28, 1.0)

    def test_time_of_day_fraction(self):
        self.assertAlmostEqual(
            julian_day(UtcDateTime(2000, 1, 1, 18, 0, 0)), 2451545.25, places=9
        )
        self.assertAlmostEqual(
            julian_day(UtcDateTime(2000, 1, 1, 0, 0, 0)), 2451544.5, places=9
        )
        self.assertAlmostEqual(
            julian_day(UtcDateTime(2000, 1, 1, 12, 0, 36)),
            2451545.0 + 36 / 86400.0,
            places=9,
        )

    def test_accepts_aware_datetime(self):
        pkt = timezone(timedelta(hours=5))
        self.assertEqual(julian_day(datetime(2000, 1, 1, 17, 0, tzinfo=pkt)), 2451545.0)
        self.assertEqual(
            julian_day(datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)), 2451545.0
        )

    def test_rejects_naive_datetime(self):
        with self.assertRaises(NaiveDateTimeError):
            julian_day(datetime(2000, 1, 1, 12, 0))

        # The naive-datetime error is an input error
        with self.assertRaises(InvalidInputError):
            julian_day(datetime(2000, 1, 1, 12, 0))

    def test_rejects_dates_before_gregorian_adoption(self):
        with self.assertRaises(InvalidInputError):
            julian_day(UtcDateTime(1582, 10, 15))

    def test_defaults_to_now(self):
        before = julian_day(UtcDateTime.now())
        result = julian_day()
        after = julian_day(UtcDateTime.now())
        self.assertGreaterEqual(result, before)
        self.assertLessEqual(result, after)

    def test_deterministic(self):
        instant = UtcDateTime(2031, 7, 14, 3, 25, 59)
        self.assertEqual(julian_day(instant), julian_day(instant))


class TestJulianToUtc(unittest.TestCase):
    """Test case for Julian date to UTC conversion."""

    def test_j2000(self):
        self.assertEqual(julian_to_utc(2451545.0), UtcDateTime(2000, 1, 1, 12, 0, 0))

    def test_midnight(self):
        self.assertEqual(julian_to_utc(2446895.5), UtcDateTime(1987, 4, 10))

    def test_inverse_of_julian_day(self):
        instants = [
            UtcDateTime(2024, 2, 29, 23, 59, 59),
            UtcDateTime(1999, 12, 31, 0, 0, 1),
            UtcDateTime(2038, 1, 19, 3, 14, 7),
            UtcDateTime(1970, 1, 1),
        ]
        for instant in instants:
            with self.subTest(instant=instant):
                self.assertEqual(julian_to_utc(julian_day(instant)), instant)

    def test_rounding_rolls_over_to_next_day(self):
        self.assertEqual(julian_to_utc(2451545.4999999), UtcDateTime(2000, 1, 2))

    def test_supported_range_limits(self):
        self.assertEqual(MIN_JULIAN_DATE, 2299238.5)
        self.assertEqual(julian_to_utc(MIN_JULIAN_DATE), UtcDateTime(1583, 1, 1))
        self.assertEqual(
            julian_to_utc(MAX_JULIAN_DATE), UtcDateTime(9999, 12, 31, 23, 59, 59)
        )

    def test_rejects_unsupported_julian_dates(self):
        for jd in (5.0, 1000.0, MIN_JULIAN_DATE - 0.5, 1e10):
            with self.subTest(jd=jd):
                with self.assertRaises(InvalidInputError):
                    julian_to_utc(jd)

    def test_rejects_non_finite_julian_dates(self):
        for jd in (float("nan"), float("inf"), float("-inf")):
            with self.subTest(jd=jd):
                with self.assertRaisesRegex(InvalidInputError, "finite"):
                    julian_to_utc(jd)


class TestCheckJulianDate(unittest.TestCase):
    def test_returns_float(self):
        result = check_julian_date(2451545)
        self.assertIsInstance(result, float)
        self.assertEqual(result, J2000)

    def test_agrees_with_julian_day_cutoff(self):
        first_day = julian_day(UtcDateTime(1583, 1, 1))
        self.assertEqual(check_julian_date(first_day), MIN_JULIAN_DATE)
        with self.assertRaises(InvalidInputError):
            check_julian_date(first_day - 1e-3)


if __name__ == "__main__":
    unittest.main()
