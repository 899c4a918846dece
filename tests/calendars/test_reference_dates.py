"""
tests/calendars/test_reference_dates.py

Known dates expressed in every calendar, checked in both directions.

Covers:
  - day count -> date for each calendar
  - date -> day count for each calendar
  - Weekday of each reference day
  - Fixed epochs
"""

import pytest

from calendrical.calendars import (
    armenian,
    coptic,
    egyptian,
    ethiopic,
    gregorian,
    iso_week,
    julian,
    persian,
)
from calendrical.calendars.armenian import armenian_epoch, egyptian_epoch
from calendrical.calendars.coptic import coptic_epoch, ethiopic_epoch
from calendrical.calendars.julian import epoch as julian_epoch
from calendrical.calendars.persian import epoch as persian_epoch
from calendrical.day_count import day_of_week


# Each row: day count, weekday, then (year, month, day) per calendar.
REFERENCE = [
    {
        "day": -214193,
        "weekday": 7,
        gregorian: (-586, 7, 24),
        julian: (-587, 7, 30),
        coptic: (-870, 12, 6),
        ethiopic: (-594, 12, 6),
        egyptian: (161, 7, 15),
        armenian: (-1138, 4, 10),
        persian: (-1208, 5, 1),
        iso_week: (-586, 29, 7),
    },
    {
        "day": -61387,
        "weekday": 3,
        gregorian: (-168, 12, 5),
        julian: (-169, 12, 8),
        coptic: (-451, 4, 12),
        ethiopic: (-175, 4, 12),
        egyptian: (580, 3, 6),
        armenian: (-720, 12, 6),
        persian: (-790, 9, 14),
        iso_week: (-168, 49, 3),
    },
    {
        "day": 736510,
        "weekday": 5,
        gregorian: (2017, 6, 30),
        julian: (2017, 6, 17),
        coptic: (1733, 10, 23),
        ethiopic: (2009, 10, 23),
        egyptian: (2766, 3, 13),
        armenian: (1466, 12, 13),
        persian: (1396, 4, 9),
        iso_week: (2017, 26, 5),
    },
]

CALENDARS = [gregorian, julian, coptic, ethiopic, egyptian, armenian, persian, iso_week]

CASES = [
    pytest.param(row["day"], calendar, row[calendar], id=f"{calendar.kind.value}-{row['day']}")
    for row in REFERENCE
    for calendar in CALENDARS
]


# ── Both directions ───────────────────────────────────────────────────────────

@pytest.mark.parametrize("day, calendar, ymd", CASES)
def test_day_count_to_date(day, calendar, ymd):
    assert calendar.day_count_to_date(day) == ymd


@pytest.mark.parametrize("day, calendar, ymd", CASES)
def test_date_to_day_count(day, calendar, ymd):
    assert calendar.date_to_day_count(*ymd) == day


@pytest.mark.parametrize("day, calendar, ymd", CASES)
def test_reference_date_is_valid(day, calendar, ymd):
    assert calendar.is_valid_date(*ymd)


@pytest.mark.parametrize("row", REFERENCE, ids=lambda r: str(r["day"]))
def test_weekday(row):
    assert day_of_week(row["day"]) == row["weekday"]


# ── Epochs ────────────────────────────────────────────────────────────────────

class TestEpochs:

    def test_gregorian_day_one(self):
        assert gregorian.date_to_day_count(1, 1, 1) == 1

    def test_julian(self):
        assert julian_epoch() == -1
        assert julian.date_to_day_count(1, 1, 1) == -1

    def test_coptic(self):
        assert coptic_epoch() == 103605
        assert coptic.date_to_day_count(1, 1, 1) == 103605

    def test_ethiopic(self):
        assert ethiopic_epoch() == 2796
        assert ethiopic.date_to_day_count(1, 1, 1) == 2796

    def test_armenian(self):
        assert armenian_epoch() == 201443
        assert armenian.date_to_day_count(1, 1, 1) == 201443

    def test_egyptian(self):
        assert egyptian_epoch() == -272787
        assert egyptian.date_to_day_count(1, 1, 1) == -272787

    def test_persian(self):
        assert persian_epoch() == 226896
        assert persian.date_to_day_count(1, 1, 1) == 226896

    def test_new_year_anchors(self):
        # Coptic and Ethiopic new year 2017 fall on Gregorian 2017-09-11.
        assert coptic.date_to_day_count(1734, 1, 1) == 736583
        assert ethiopic.date_to_day_count(2010, 1, 1) == 736583
        assert gregorian.date_to_day_count(2017, 9, 11) == 736583
        # Nowruz 1396 is Gregorian 2017-03-21.
        assert persian.date_to_day_count(1396, 1, 1) == 736409
        assert gregorian.date_to_day_count(2017, 3, 21) == 736409
