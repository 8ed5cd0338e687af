from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Optional

from mmcal._exceptions import CalendarError


@dataclass(frozen=True, order=True, slots=True)
class CalendarDate:
    """
    Timezone-naive whole day.  Ordered by (year, month, day); month is 1-12.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        try:
            dt.date(self.year, self.month, self.day)
        except (TypeError, ValueError) as exc:
            raise CalendarError(
                f"Invalid calendar date {self.year}-{self.month}-{self.day}: {exc}"
            ) from exc

    # ── conversions ──────────────────────────────────────────────────────

    @classmethod
    def from_date(cls, value: dt.date) -> "CalendarDate":
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "CalendarDate":
        try:
            value = dt.date.fromordinal(int(ordinal))
        except (ValueError, OverflowError) as exc:
            raise CalendarError(f"Day ordinal {ordinal} is out of range: {exc}") from exc
        return cls.from_date(value)

    def to_date(self) -> dt.date:
        return dt.date(self.year, self.month, self.day)

    @property
    def ordinal(self) -> int:
        """Proleptic Gregorian ordinal, 0001-01-01 being 1."""
        return self.to_date().toordinal()

    def plus_days(self, days: int) -> "CalendarDate":
        return CalendarDate.from_ordinal(self.ordinal + days)

    def __str__(self) -> str:
        return self.to_date().isoformat()


@dataclass(frozen=True, order=True, slots=True)
class DateRange:
    """
    Inclusive, continuous span of days.

    The dataclass ordering compares start first and end second, which is the
    canonical order for event parts.
    """

    start: CalendarDate
    end: CalendarDate

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise CalendarError(f"Range end {self.end} is before its start {self.start}.")

    @classmethod
    def single(cls, day: CalendarDate) -> "DateRange":
        return cls(day, day)

    @classmethod
    def from_ordinals(cls, start: int, end: int) -> "DateRange":
        return cls(CalendarDate.from_ordinal(start), CalendarDate.from_ordinal(end))

    # ── relations ────────────────────────────────────────────────────────

    def overlaps(self, other: DateRange) -> bool:
        # Sharing a single day counts as overlap.
        return self.start <= other.end and other.start <= self.end

    def is_adjacent(self, other: DateRange) -> bool:
        return (
            self.end.ordinal + 1 == other.start.ordinal
            or other.end.ordinal + 1 == self.start.ordinal
        )

    def intersect(self, other: DateRange) -> Optional[DateRange]:
        if not self.overlaps(other):
            return None
        return DateRange(max(self.start, other.start), min(self.end, other.end))

    def contains(self, other: DateRange) -> bool:
        return self.start <= other.start and other.end <= self.end

    @property
    def days(self) -> int:
        return self.end.ordinal - self.start.ordinal + 1

    @staticmethod
    def compare(a: DateRange, b: DateRange) -> int:
        if a < b:
            return -1
        if b < a:
            return 1
        return 0

    def __str__(self) -> str:
        return f"[{self.start} .. {self.end}]"
