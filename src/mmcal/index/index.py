from __future__ import annotations

import locale
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

import numpy as np

from mmcal._exceptions import ValidationError
from mmcal.calendar import CalendarDate, DateRange
from mmcal.config import DEFAULT_EVENT_COLORS
from mmcal.events import Event, EventId

logger = logging.getLogger("mmcal")

UNASSIGNED_COLOR = "#ffffff"


@dataclass(frozen=True, slots=True)
class EventViewModel:
    """An event with the lane and colour it is drawn with."""

    event: Event
    lane: int = 0
    color: str = UNASSIGNED_COLOR


def _display_key(vm: EventViewModel) -> tuple[int, int, str]:
    event = vm.event
    return (
        int(event.starts[0]),
        int(event.ends[-1]),
        locale.strxfrm(event.title),
    )


class EventIndex:
    """
    Ordered collection of ``EventViewModel`` plus the palette used to colour
    them.

    Window queries never touch the index they are called on; they build and
    return a new one.  Lanes and colours belong to the index an event sits
    in, not to the event.
    """

    def __init__(
        self,
        events: Iterable[Event] = (),
        colors: Sequence[str] | None = None,
    ) -> None:
        palette = tuple(colors) if colors is not None else DEFAULT_EVENT_COLORS
        if not palette:
            raise ValidationError("color palette must not be empty.")
        self._colors: tuple[str, ...] = palette
        self._items: list[EventViewModel] = []
        for event in events:
            self.add(event)

    # ── construction ─────────────────────────────────────────────────────

    def add(self, event: Event, lane: int = 0, color: str = UNASSIGNED_COLOR) -> None:
        # TODO: Enforce unique event ids.
        if isinstance(lane, bool) or not isinstance(lane, (int, np.integer)):
            raise ValidationError(f"lane must be an int; got {lane!r}.")
        if lane < 0:
            raise ValidationError(f"lane must be non-negative; got {lane}.")
        for vm in self._items:
            other = vm.event
            if (event.hidden_display or other.hidden_display) and event.is_overlapping(other):
                hidden, shown = (event, other) if event.hidden_display else (other, event)
                raise ValidationError(
                    f"hidden event {hidden.id!r} overlaps event {shown.id!r}."
                )
        self._items.append(EventViewModel(event, int(lane), color))

    def _append(self, vm: EventViewModel) -> None:
        # Sub-lists of a validated index need no hidden-overlap check.
        self._items.append(vm)

    def sort(self) -> None:
        """
        Order by first day, then last day, then title (locale collation).
        """
        self._items.sort(key=_display_key)

    # ── lane & colour assignment ─────────────────────────────────────────

    def assign_lanes_and_colors(self) -> None:
        """
        Sort, then give each event the lowest lane not taken by an earlier
        overlapping event (first-fit).  Colour follows sorted position.
        """
        self.sort()
        lanes = np.zeros(len(self._items), dtype=np.int64)

        for i, vm in enumerate(self._items):
            taken = np.zeros(i + 1, dtype=bool)
            for j in range(i):
                if vm.event.is_overlapping(self._items[j].event):
                    taken[lanes[j]] = True
            # At most i lanes are taken, so a free one exists below i + 1.
            lanes[i] = int(np.argmin(taken))
            self._items[i] = EventViewModel(
                vm.event, int(lanes[i]), self._colors[i % len(self._colors)]
            )

        logger.debug(
            "Reindexed %d event(s) into %d lane(s)",
            len(self._items),
            int(lanes.max()) + 1 if lanes.size else 0,
        )

    # ── queries ──────────────────────────────────────────────────────────

    def get_overlapping(self, window: DateRange, reindex: bool = False) -> "EventIndex":
        """
        New index of the events touching ``window``, each clipped to it.

        Without ``reindex`` lanes and colours are carried over, which keeps
        them stable across the per-day queries of one rendering pass.
        """
        result = EventIndex(colors=self._colors)
        for vm in self._items:
            clipped = vm.event.clip(window)
            if clipped is not None:
                result._append(EventViewModel(clipped, vm.lane, vm.color))
        if reindex:
            result.assign_lanes_and_colors()
        return result

    def events_on(self, day: CalendarDate) -> "EventIndex":
        return self.get_overlapping(DateRange.single(day), reindex=False)

    def max_lane(self) -> Optional[int]:
        """Highest lane in use, or None when the index is empty."""
        if not self._items:
            return None
        return max(vm.lane for vm in self._items)

    def find_by_id(self, event_id: EventId) -> Optional[EventViewModel]:
        for vm in self._items:
            if vm.event.id == event_id:
                return vm
        return None

    def items(self) -> Iterator[tuple[Event, int, str]]:
        for vm in self._items:
            yield vm.event, vm.lane, vm.color

    # ── properties / dunder ──────────────────────────────────────────────

    @property
    def colors(self) -> tuple[str, ...]:
        return self._colors

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, i: int) -> EventViewModel:
        return self._items[i]

    def __iter__(self) -> Iterator[EventViewModel]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return (
            f"EventIndex(events={len(self._items)}, "
            f"max_lane={self.max_lane()}, "
            f"colors={len(self._colors)})"
        )
