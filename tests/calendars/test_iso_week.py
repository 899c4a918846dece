"""
tests/calendars/test_iso_week.py

Covers:
  - 52/53-week years over four centuries
  - Year boundaries falling in the neighbouring Gregorian year
  - First and last day of an ISO year
  - Conversion to and from Gregorian dates
  - Agreement with datetime.date.isocalendar
"""

import datetime as dt

import pytest

from calendrical.calendars import date, gregorian, iso_week

# Years 2000..2400 with 53 weeks.
LONG_YEARS = frozenset(2000 + x for x in [
    4, 9, 15, 20, 26, 32, 37, 43, 48, 54, 60, 65, 71, 76, 82, 88, 93, 99,
    105, 111, 116, 122, 128, 133, 139, 144, 150, 156, 161, 167, 172, 178,
    184, 189, 195, 201, 207, 212, 218, 224, 229, 235, 240, 246, 252, 257,
    263, 268, 274, 280, 285, 291, 296, 303, 308, 314, 320, 325, 331, 336,
    342, 348, 353, 359, 364, 370, 376, 381, 387, 392, 398,
])


# ── Weeks per year ────────────────────────────────────────────────────────────

class TestWeeksInYear:

    def test_four_centuries(self):
        for year in range(2000, 2401):
            expected = 53 if year in LONG_YEARS else 52
            assert iso_week.weeks_in_year(year) == expected, year

    def test_leap_year_means_long_year(self):
        assert iso_week.is_leap_year(2004)
        assert iso_week.is_leap_year(2009)
        assert not iso_week.is_leap_year(2017)

    def test_year_spans_whole_weeks(self):
        for year in range(1990, 2030):
            first = iso_week.first_day_of_year(year)
            last = iso_week.last_day_of_year(year)
            assert last - first + 1 == 7 * iso_week.weeks_in_year(year)

    def test_week_has_seven_days(self):
        assert iso_week.days_in_month(2017, 1) == 7
        assert iso_week.days_in_month(2004, 53) == 7


# ── Year boundaries ───────────────────────────────────────────────────────────

class TestBoundaries:

    @pytest.mark.parametrize(
        "gregorian_date, iso_date",
        [
            ((2017, 6, 30), (2017, 26, 5)),
            ((2017, 1, 1), (2016, 52, 7)),
            ((2017, 1, 2), (2017, 1, 1)),
            ((2008, 12, 29), (2009, 1, 1)),
            ((2010, 1, 3), (2009, 53, 7)),
            ((2005, 1, 2), (2004, 53, 7)),
            ((-586, 7, 24), (-586, 29, 7)),
        ],
    )
    def test_from_gregorian(self, gregorian_date, iso_date):
        assert iso_week.from_gregorian(*gregorian_date) == iso_date
        assert iso_week.date_to_day_count(*iso_date) == gregorian.date_to_day_count(*gregorian_date)

    def test_first_and_last_day(self):
        assert iso_week.first_day_of_year(2009) == gregorian.date_to_day_count(2008, 12, 29)
        assert iso_week.last_day_of_year(2009) == gregorian.date_to_day_count(2010, 1, 3)

    def test_first_day_is_monday(self):
        for year in range(1990, 2030):
            assert date(year, 1, 1, "iso_week").day_of_week() == 1

    def test_week_one_contains_first_thursday(self):
        for year in range(1990, 2030):
            thursday = iso_week.date_to_day_count(year, 1, 4)
            assert gregorian.day_count_to_date(thursday)[0] == year
            assert gregorian.day_count_to_date(thursday - 7)[0] == year - 1

    def test_convert(self):
        assert date(2017, 6, 30).convert("iso_week") == date(2017, 26, 5, "iso_week")
        assert date(2009, 53, 7, "iso_week").convert("gregorian") == date(2010, 1, 3)


# ── Agreement with isocalendar ────────────────────────────────────────────────

class TestIsoCalendar:

    @pytest.mark.parametrize("month, day", [(1, 1), (1, 4), (12, 28), (12, 31)])
    def test_year_anchors_1900_to_2100(self, month, day):
        for year in range(1900, 2101):
            expected = tuple(dt.date(year, month, day).isocalendar())
            assert iso_week.from_gregorian(year, month, day) == expected, year

    @pytest.mark.parametrize("year", [1993, 1999, 2010, 2016, 2021, 2027])
    def test_years_whose_reference_week_ends_on_sunday(self, year):
        # 27 December of the previous year is a Sunday.
        assert date(year - 1, 12, 27).day_of_week() == 7
        first = iso_week.first_day_of_year(year)
        assert tuple(dt.date.fromordinal(first).isocalendar()) == (year, 1, 1)
        assert iso_week.day_count_to_date(first) == (year, 1, 1)
