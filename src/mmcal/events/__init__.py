"""
mmcal.events
~~~~~~~~~~~~

Calendar events made of one or more disjoint day spans, and the parsing of
raw event records into them.

Basic usage::

    from mmcal.events import parse_record

    event = parse_record(
        (7, "Session", ["2016-03-03", ["2016-03-08", "2016-03-10"]])
    )
    event.parts          # two DateRanges, sorted
    event.is_overlapping(other)

Public API
----------
Event          Validated, immutable event.
parse_date     Raw value → CalendarDate.
parse_range    Raw date or [start, end] pair → DateRange.
parse_record   Raw record → Event.
parse_events   Batch of raw records → list of Events (fail-fast).
"""

from __future__ import annotations

from mmcal.events.event import Event, EventId
from mmcal.events.parsing import parse_date, parse_events, parse_range, parse_record

__all__ = [
    "Event",
    "EventId",
    "parse_date",
    "parse_events",
    "parse_range",
    "parse_record",
]
