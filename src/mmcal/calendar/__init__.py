"""
mmcal.calendar
~~~~~~~~~~~~~~

Whole-day calendar values.  Dates carry no time of day and no timezone.

Basic usage::

    from mmcal.calendar import CalendarDate, DateRange, MonthCursor

    march = DateRange(CalendarDate(2016, 3, 1), CalendarDate(2016, 3, 31))
    march.overlaps(DateRange.single(CalendarDate(2016, 3, 31)))   # → True

    cursor = MonthCursor(10, 2016)          # November 2016 (0-based month)
    cursor.shift(3)                         # → MonthCursor(month=1, year=2017)
    cursor.window(2)                        # → 2016-11-01 .. 2016-12-31

Public API
----------
CalendarDate   A (year, month, day) value, month 1-12.
DateRange      Inclusive span of days with overlap / adjacency / intersection.
MonthCursor    A (month, year) pair with month arithmetic.
"""

from __future__ import annotations

from mmcal.calendar.dates import CalendarDate, DateRange
from mmcal.calendar.month import MonthCursor, is_leap_year

__all__ = [
    "CalendarDate",
    "DateRange",
    "MonthCursor",
    "is_leap_year",
]
