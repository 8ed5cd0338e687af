"""
mmcal
~~~~~

Event-range indexing for multi-month calendars: validation of multi-part
events, clipping to a visible window, and lane/colour assignment so that
overlapping events never share a display row.

Basic usage::

    from mmcal import MonthCursor, parse_and_validate

    index = parse_and_validate([
        (1, "Sitting 1", [["2016-03-09", "2016-03-24"]]),
        (2, "Sitting 2", ["2016-03-24", "2016-04-02"]),
    ])
    visible = index.get_overlapping(MonthCursor(2, 2016).window(2), reindex=True)
    visible.find_by_id(2).lane     # → 1

Public API
----------
parse_and_validate   Raw records → EventIndex (fail-fast).
EventIndex           Windowed, lane-annotated event collection.
Event                Validated multi-part event.
CalendarDate, DateRange, MonthCursor
CalendarConfig, validate_config, load_config
CalendarError, ParseError, ValidationError
"""

from __future__ import annotations

from mmcal._exceptions import CalendarError, ParseError, ValidationError
from mmcal.calendar import CalendarDate, DateRange, MonthCursor
from mmcal.config import DEFAULT_EVENT_COLORS, CalendarConfig, load_config, validate_config
from mmcal.events import Event, parse_date, parse_range
from mmcal.index import EventIndex, EventViewModel
from mmcal.loader import parse_and_validate

__all__ = [
    "CalendarConfig",
    "CalendarDate",
    "CalendarError",
    "DateRange",
    "DEFAULT_EVENT_COLORS",
    "Event",
    "EventIndex",
    "EventViewModel",
    "MonthCursor",
    "ParseError",
    "ValidationError",
    "load_config",
    "parse_and_validate",
    "parse_date",
    "parse_range",
    "validate_config",
]
