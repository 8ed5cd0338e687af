from __future__ import annotations

import logging
from typing import Any, Iterable

from mmcal._exceptions import ValidationError
from mmcal.config import CalendarConfig
from mmcal.events import parse_events
from mmcal.index import EventIndex

logger = logging.getLogger("mmcal")


def parse_and_validate(
    records: Iterable[Any],
    config: CalendarConfig | None = None,
) -> EventIndex:
    """
    Parse raw event records into an ``EventIndex`` using ``config``'s palette.

    Validation is all-or-nothing: the first bad record raises ``ParseError``
    or ``ValidationError`` with ``position`` set to its index, and no index
    is returned.  A hidden event overlapping any other event is rejected at
    the position where the conflict first appears.
    """
    config = config if config is not None else CalendarConfig()
    index = EventIndex(colors=config.event_colors)
    for i, event in enumerate(parse_events(records)):
        try:
            index.add(event)
        except ValidationError as exc:
            raise exc.at(i) from exc
    logger.debug("Parsed %d event(s)", len(index))
    return index
