"""
mmcal.index
~~~~~~~~~~~

Windowed views over a set of events, with display lanes and colours.

Each event in an index gets a lane: a non-negative row number such that two
overlapping events never share one.  Lanes are assigned greedily (first fit)
over the events sorted by start, end and title; colours cycle through the
palette in that same sorted order.

Basic usage::

    from mmcal.calendar import MonthCursor
    from mmcal.index import EventIndex

    index = EventIndex(events)
    visible = index.get_overlapping(MonthCursor(2, 2016).window(2), reindex=True)
    for event, lane, color in visible.events_on(day).items():
        ...

Public API
----------
EventIndex       Ordered collection of lane/colour-annotated events.
EventViewModel   (event, lane, color) record.
"""

from __future__ import annotations

from mmcal.index.index import UNASSIGNED_COLOR, EventIndex, EventViewModel

__all__ = [
    "EventIndex",
    "EventViewModel",
    "UNASSIGNED_COLOR",
]
