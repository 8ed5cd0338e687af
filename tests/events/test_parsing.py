"""
tests/events/test_parsing.py

Covers:
  - parse_date on strings, date / datetime objects and garbage
  - parse_range on single dates and [start, end] pairs
  - parse_record on sequence and mapping records
  - parse_events fail-fast behaviour and error positions
"""

import datetime as dt

import pytest

from mmcal.calendar import CalendarDate, DateRange
from mmcal.events import parse_date, parse_events, parse_range, parse_record
from mmcal._exceptions import ParseError, ValidationError


# ── Helpers ───────────────────────────────────────────────────────────────────

def day(m, d, y=2016):
    return CalendarDate(y, m, d)


# ── parse_date ────────────────────────────────────────────────────────────────

class TestParseDate:

    def test_iso_string(self):
        assert parse_date("2016-03-09") == day(3, 9)

    def test_time_component_dropped(self):
        assert parse_date("2016-03-09T23:30:00") == day(3, 9)

    def test_timezone_dropped(self):
        assert parse_date("2016-03-09T23:30:00+05:00") == day(3, 9)

    def test_missing_day_defaults_to_first(self):
        assert parse_date("2016-02") == day(2, 1)

    def test_partial_date_independent_of_today(self):
        assert parse_date("2016") == day(1, 1)
        assert parse_date("3") == CalendarDate(1, 1, 3)

    def test_date_object(self):
        assert parse_date(dt.date(2016, 3, 9)) == day(3, 9)

    def test_datetime_object(self):
        assert parse_date(dt.datetime(2016, 3, 9, 12, 0)) == day(3, 9)

    def test_calendar_date_passthrough(self):
        assert parse_date(day(3, 9)) == day(3, 9)

    @pytest.mark.parametrize("value", ["xyzzy", "2016-02-30", "", "   ", None, 20160309])
    def test_unparseable_raises(self, value):
        with pytest.raises(ParseError):
            parse_date(value)


# ── parse_range ───────────────────────────────────────────────────────────────

class TestParseRange:

    def test_single_date_is_one_day(self):
        assert parse_range("2016-03-09") == DateRange(day(3, 9), day(3, 9))

    def test_pair(self):
        assert parse_range(["2016-03-09", "2016-03-24"]) == DateRange(day(3, 9), day(3, 24))

    def test_tuple_pair(self):
        assert parse_range(("2016-03-09", "2016-03-24")) == DateRange(day(3, 9), day(3, 24))

    def test_same_day_pair_allowed(self):
        assert parse_range(["2016-03-09", "2016-03-09"]).days == 1

    def test_end_before_start_raises(self):
        with pytest.raises(ParseError):
            parse_range(["2016-03-24", "2016-03-09"])

    def test_wrong_pair_length_raises(self):
        with pytest.raises(ParseError):
            parse_range(["2016-03-09", "2016-03-10", "2016-03-11"])

    def test_bad_member_raises(self):
        with pytest.raises(ParseError):
            parse_range(["2016-03-09", "soon"])


# ── parse_record ──────────────────────────────────────────────────────────────

class TestParseRecord:

    def test_three_element_record(self):
        event = parse_record(
            (6, "Sitting 6", [["2016-04-01", "2016-04-30"], "2016-03-08", "2016-03-03"])
        )
        assert event.id == 6
        assert [str(p) for p in event.parts] == [
            "[2016-03-03 .. 2016-03-03]",
            "[2016-03-08 .. 2016-03-08]",
            "[2016-04-01 .. 2016-04-30]",
        ]
        assert event.hidden_display is False

    def test_five_element_record(self):
        payload = {"href": "/s/6"}
        event = parse_record(("s6", "Sitting 6", ["2016-03-03"], True, payload))
        assert event.hidden_display is True
        assert event.data_for_callback is payload

    def test_mapping_record(self):
        event = parse_record({
            "id": 7,
            "title": "Sitting 7",
            "ranges": ["2016-03-02"],
            "hasHiddenDisplay": True,
            "dataForCallback": 99,
        })
        assert event.hidden_display is True
        assert event.data_for_callback == 99

    def test_mapping_snake_case_keys(self):
        event = parse_record({
            "id": 7, "title": "Sitting 7", "ranges": ["2016-03-02"],
            "hidden_display": False, "data_for_callback": "x",
        })
        assert event.data_for_callback == "x"

    def test_mapping_missing_key(self):
        with pytest.raises(ValidationError):
            parse_record({"id": 7, "title": "Sitting 7"})

    def test_mapping_unknown_key(self):
        with pytest.raises(ValidationError):
            parse_record({"id": 7, "title": "Sitting 7", "ranges": ["2016-03-02"], "color": "red"})

    @pytest.mark.parametrize("record", [
        (1, "Sitting"),
        (1, "Sitting", ["2016-03-02"], False, None, "extra"),
        "1, Sitting, 2016-03-02",
        42,
    ])
    def test_bad_shape(self, record):
        with pytest.raises(ValidationError):
            parse_record(record)

    @pytest.mark.parametrize("ranges", [[], "2016-03-02", None])
    def test_bad_ranges(self, ranges):
        with pytest.raises(ValidationError):
            parse_record((1, "Sitting", ranges))

    def test_hidden_flag_must_be_bool(self):
        with pytest.raises(ValidationError):
            parse_record((1, "Sitting", ["2016-03-02"], "yes"))

    def test_adjacent_ranges_rejected(self):
        with pytest.raises(ValidationError):
            parse_record((1, "Sitting", [["2016-03-01", "2016-03-05"], "2016-03-06"]))

    def test_overlapping_ranges_rejected(self):
        with pytest.raises(ValidationError):
            parse_record((1, "Sitting", [["2016-03-01", "2016-03-05"], "2016-03-05"]))


# ── parse_events ──────────────────────────────────────────────────────────────

class TestParseEvents:

    def test_batch(self):
        events = parse_events([
            (1, "Sitting 1", [["2016-03-09", "2016-03-24"]]),
            (2, "Sitting 2", ["2016-03-24"]),
        ])
        assert [e.id for e in events] == [1, 2]

    def test_empty_batch(self):
        assert parse_events([]) == []

    def test_not_a_list(self):
        with pytest.raises(ValidationError):
            parse_events({"id": 1})

    def test_validation_error_position(self):
        with pytest.raises(ValidationError) as info:
            parse_events([
                (1, "Sitting 1", ["2016-03-09"]),
                (2, "", ["2016-03-10"]),
            ])
        assert info.value.position == 1
        assert str(info.value).startswith("Event [1]: ")

    def test_parse_error_position(self):
        with pytest.raises(ParseError) as info:
            parse_events([
                (1, "Sitting 1", ["2016-03-09"]),
                (2, "Sitting 2", ["2016-03-10"]),
                (3, "Sitting 3", ["someday"]),
            ])
        assert info.value.position == 2

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_events([(1, "Sitting 1", ["nope"])])
