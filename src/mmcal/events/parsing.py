"""Validation and parsing of raw event records."""

from __future__ import annotations

import datetime as dt
from typing import Any, Iterable, Mapping, Sequence

from dateutil.parser import ParserError
from dateutil.parser import parse as parse_dt

from mmcal._exceptions import ParseError, ValidationError
from mmcal.calendar import CalendarDate, DateRange
from .event import Event

_RECORD_KEYS = {
    "id": "id",
    "title": "title",
    "ranges": "ranges",
    "hidden_display": "hidden_display",
    "hasHiddenDisplay": "hidden_display",
    "data_for_callback": "data_for_callback",
    "dataForCallback": "data_for_callback",
}

# Missing month or day in a partial date string fall back to 1.
_PARSE_DEFAULT = dt.datetime(1, 1, 1)


def parse_date(value: Any) -> CalendarDate:
    """
    Parse ``value`` into a whole day.  Time of day and timezone are dropped.

    Accepts ``CalendarDate``, ``datetime.date``/``datetime.datetime`` or any
    string ``dateutil`` understands.
    """
    if isinstance(value, CalendarDate):
        return value
    if isinstance(value, dt.datetime):
        return CalendarDate.from_date(value.date())
    if isinstance(value, dt.date):
        return CalendarDate.from_date(value)
    if not isinstance(value, str) or not value.strip():
        raise ParseError(f"This is not a valid date specification: [{value!r}].")
    try:
        return CalendarDate.from_date(parse_dt(value, default=_PARSE_DEFAULT).date())
    except (ParserError, ValueError, OverflowError) as exc:
        raise ParseError(f"This is not a valid date specification: [{value!r}].") from exc


def parse_range(value: Any) -> DateRange:
    """
    Parse a single date (a one-day range) or a ``[start, end]`` pair.
    """
    if isinstance(value, DateRange):
        return value
    if isinstance(value, (list, tuple)):
        if len(value) != 2:
            raise ParseError(
                f"A date range pair must have exactly two elements; got {len(value)}."
            )
        start, end = parse_date(value[0]), parse_date(value[1])
        if end < start:
            raise ParseError(f"In range [{start} - {end}], end date is before the start date.")
        return DateRange(start, end)
    return DateRange.single(parse_date(value))


def _record_fields(record: Any) -> dict[str, Any]:
    if isinstance(record, Mapping):
        fields: dict[str, Any] = {}
        for key, value in record.items():
            name = _RECORD_KEYS.get(key)
            if name is None:
                raise ValidationError(f"unknown record key {key!r}.")
            fields[name] = value
        for required in ("id", "title", "ranges"):
            if required not in fields:
                raise ValidationError(f"record is missing {required!r}.")
        return fields

    if isinstance(record, (list, tuple)):
        if not 3 <= len(record) <= 5:
            raise ValidationError("event record must contain 3 to 5 elements.")
        names = ("id", "title", "ranges", "hidden_display", "data_for_callback")
        return dict(zip(names, record))

    raise ValidationError("event record must be a sequence or a mapping.")


def parse_record(record: Any) -> Event:
    """Build one validated ``Event`` from a raw record."""
    fields = _record_fields(record)
    ranges = fields["ranges"]
    if isinstance(ranges, (str, bytes)) or not isinstance(ranges, Sequence) or not ranges:
        raise ValidationError("date range param must be a non-empty list.")

    hidden = fields.get("hidden_display", False)
    if not isinstance(hidden, bool):
        raise ValidationError("hidden_display must be a bool.")

    return Event(
        fields["id"],
        fields["title"],
        [parse_range(r) for r in ranges],
        hidden_display=hidden,
        data_for_callback=fields.get("data_for_callback"),
    )


def parse_events(records: Iterable[Any]) -> list[Event]:
    """
    Parse a whole batch.  The first bad record aborts the batch; the raised
    error's ``position`` is that record's index.
    """
    if isinstance(records, (str, bytes, Mapping)):
        raise ValidationError('"events" parameter must be a list.')

    events: list[Event] = []
    for i, record in enumerate(records):
        try:
            events.append(parse_record(record))
        except (ParseError, ValidationError) as exc:
            raise exc.at(i) from exc
    return events

