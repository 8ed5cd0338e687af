from __future__ import annotations

from typing import Any, Iterable, Optional, Union

import numpy as np

from mmcal._exceptions import ValidationError
from mmcal.calendar import DateRange

EventId = Union[str, int]


def _check_id(event_id: Any) -> EventId:
    # bool is an int subclass but never a meaningful id.
    if isinstance(event_id, bool):
        raise ValidationError("id must be a non-empty string or int.")
    if isinstance(event_id, int):
        return event_id
    if isinstance(event_id, str) and event_id.strip():
        return event_id
    raise ValidationError("id must be a non-empty string or int.")


def _check_title(title: Any) -> str:
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("title must be a non-empty string.")
    return title


class Event:
    """
    Identified, titled set of disjoint day spans ("parts").

    Parts are stored in ``DateRange`` order.  No two parts may overlap or be
    adjacent; merging touching spans is up to the caller.  Parts are also
    kept as ``int64`` ordinal arrays for the vectorised queries.
    """

    __slots__ = ("_id", "_title", "_parts", "_hidden", "_data", "_starts", "_ends")

    def __init__(
        self,
        id: EventId,
        title: str,
        parts: Iterable[DateRange],
        hidden_display: bool = False,
        data_for_callback: Any = None,
    ) -> None:
        self._id: EventId = _check_id(id)
        self._title: str = _check_title(title)

        ranges = sorted(parts)
        if not ranges:
            raise ValidationError("date range list must not be empty.")
        for a, b in zip(ranges, ranges[1:]):
            if a.overlaps(b) or a.is_adjacent(b):
                raise ValidationError(f"date ranges {a} and {b} are overlapping or adjacent.")

        self._parts: tuple[DateRange, ...] = tuple(ranges)
        self._hidden: bool = bool(hidden_display)
        self._data: Any = data_for_callback
        self._starts: np.ndarray = np.array([r.start.ordinal for r in ranges], dtype=np.int64)
        self._ends: np.ndarray = np.array([r.end.ordinal for r in ranges], dtype=np.int64)
        self._starts.setflags(write=False)
        self._ends.setflags(write=False)

    # ── properties ───────────────────────────────────────────────────────

    @property
    def id(self) -> EventId:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def parts(self) -> tuple[DateRange, ...]:
        return self._parts

    @property
    def hidden_display(self) -> bool:
        return self._hidden

    @property
    def data_for_callback(self) -> Any:
        return self._data

    @property
    def starts(self) -> np.ndarray:
        return self._starts

    @property
    def ends(self) -> np.ndarray:
        return self._ends

    @property
    def span(self) -> DateRange:
        """First day of the first part to last day of the last part."""
        return DateRange(self._parts[0].start, self._parts[-1].end)

    # ── queries ──────────────────────────────────────────────────────────

    def is_overlapping(self, other: Event) -> bool:
        starts = np.concatenate([self._starts, other._starts])
        ends = np.concatenate([self._ends, other._ends])
        # lexsort sorts by the last key first: start, then end.
        order = np.lexsort((ends, starts))
        starts, ends = starts[order], ends[order]
        return bool(np.any(starts[1:] <= ends[:-1]))

    def clip(self, window: DateRange) -> Optional[Event]:
        """
        Copy of this event restricted to ``window``, or None if no part
        touches it.
        """
        lo, hi = window.start.ordinal, window.end.ordinal
        mask = (self._starts <= hi) & (self._ends >= lo)
        if not mask.any():
            return None
        starts = np.maximum(self._starts[mask], lo)
        ends = np.minimum(self._ends[mask], hi)
        return Event(
            self._id,
            self._title,
            [DateRange.from_ordinals(s, e) for s, e in zip(starts.tolist(), ends.tolist())],
            hidden_display=self._hidden,
            data_for_callback=self._data,
        )

    # ── dunder ───────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return (
            self._id == other._id
            and self._title == other._title
            and self._parts == other._parts
            and self._hidden == other._hidden
            and self._data == other._data
        )

    def __hash__(self) -> int:
        return hash((self._id, self._title, self._parts, self._hidden))

    def __repr__(self) -> str:
        parts = ", ".join(str(p) for p in self._parts)
        return (
            f"Event(id={self._id!r}, "
            f"title={self._title!r}, "
            f"parts=[{parts}], "
            f"hidden_display={self._hidden})"
        )
