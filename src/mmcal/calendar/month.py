from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from functools import total_ordering

from mmcal._exceptions import CalendarError
from .dates import CalendarDate, DateRange

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


@total_ordering
@dataclass(frozen=True, slots=True)
class MonthCursor:
    """
    A (month, year) pair.  ``month`` is 0-based (0 = January, 11 = December).

    Cursors are ordered by year, then month.
    """

    month: int
    year: int

    def __post_init__(self) -> None:
        if not 0 <= self.month <= 11:
            raise CalendarError(f"Month must be in 0-11; got {self.month}.")

    @classmethod
    def of(cls, day: CalendarDate) -> "MonthCursor":
        return cls(day.month - 1, day.year)

    # ── arithmetic ───────────────────────────────────────────────────────

    def shift(self, months: int) -> "MonthCursor":
        years, month = divmod(self.month + months, 12)
        return MonthCursor(month, self.year + years)

    def days_in_month(self) -> int:
        if self.month == 1 and is_leap_year(self.year):
            return 29
        return _DAYS_IN_MONTH[self.month]

    def weekday_of(self, day: int) -> int:
        """Day of week for ``day`` of this month; 0 = Sunday .. 6 = Saturday."""
        if not 1 <= day <= self.days_in_month():
            raise CalendarError(
                f"Day {day} is outside {self.year}-{self.month + 1:02d} "
                f"(1-{self.days_in_month()})."
            )
        # date.weekday() counts from Monday.
        return (dt.date(self.year, self.month + 1, day).weekday() + 1) % 7

    # ── windows ──────────────────────────────────────────────────────────

    def first_day(self) -> CalendarDate:
        return CalendarDate(self.year, self.month + 1, 1)

    def last_day(self) -> CalendarDate:
        return CalendarDate(self.year, self.month + 1, self.days_in_month())

    def window(self, count: int = 1) -> DateRange:
        """Days covered by ``count`` consecutive months starting at this one."""
        if count < 1:
            raise CalendarError(f"Month count must be at least 1; got {count}.")
        return DateRange(self.first_day(), self.shift(count - 1).last_day())

    def clamp(
        self,
        earliest: MonthCursor | None = None,
        latest: MonthCursor | None = None,
    ) -> "MonthCursor":
        if earliest is not None and latest is not None and latest < earliest:
            raise CalendarError(f"Navigation limits are inverted: {earliest} > {latest}.")
        if earliest is not None and self < earliest:
            return earliest
        if latest is not None and latest < self:
            return latest
        return self

    # ── ordering ─────────────────────────────────────────────────────────

    def _key(self) -> tuple[int, int]:
        return self.year, self.month

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonthCursor):
            return NotImplemented
        return self._key() < other._key()

    @staticmethod
    def compare(a: MonthCursor, b: MonthCursor) -> int:
        return (a._key() > b._key()) - (a._key() < b._key())

    def __str__(self) -> str:
        return f"{self.year}-{self.month + 1:02d}"
