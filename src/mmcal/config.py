"""Configuration consumed by the event index, optionally loaded from YAML."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Mapping

import yaml

from mmcal._exceptions import ValidationError

logger = logging.getLogger("mmcal")

CONFIG_ENV = "MMCAL_CONFIG"

DEFAULT_EVENT_COLORS: tuple[str, ...] = (
    "#62bb46",
    "#0099da",
    "#fdb924",
    "#e23d40",
    "#993f98",
    "#4a9536",
    "#f79433",
    "#b55594",
)

# Interpreted by the rendering layer only.
PRESENTATION_KEYS = {
    "week_starts_on",
    "weekStartsOn",
    "breakpoints",
    "months_around_breakpoints",
    "container_id",
    "containerId",
    "indicator_style",
    "indicatorStyle",
    "month_names",
    "day_names",
}

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class CalendarConfig:
    """Settings the event index uses.  Colours cycle in the given order."""

    event_colors: tuple[str, ...] = DEFAULT_EVENT_COLORS


def validate_config(raw: Mapping[str, Any] | None) -> CalendarConfig:
    """Turn a loosely typed options mapping into a ``CalendarConfig``."""
    if raw is None:
        return CalendarConfig()
    if not isinstance(raw, Mapping):
        raise ValidationError("configuration must be a mapping.")

    colors: Any = None
    for key, value in raw.items():
        if key in ("event_colors", "eventColors"):
            if colors is not None:
                raise ValidationError("event colors are given twice.")
            colors = value
        elif key in PRESENTATION_KEYS:
            logger.debug("Ignoring presentation option '%s'", key)
        else:
            raise ValidationError(f"unknown configuration option {key!r}.")

    if colors is None:
        return CalendarConfig()
    if isinstance(colors, str) or not isinstance(colors, (list, tuple)) or not colors:
        raise ValidationError("event_colors must be a non-empty list of hex colors.")
    for color in colors:
        if not isinstance(color, str) or not _HEX_COLOR.match(color):
            raise ValidationError(f"invalid event color {color!r}; expected '#rgb' or '#rrggbb'.")
    return CalendarConfig(event_colors=tuple(colors))


def load_config(path: str | None = None) -> CalendarConfig:
    """
    Load and validate a YAML configuration file.

    ``path`` defaults to ``$MMCAL_CONFIG``.  A missing file yields the default
    configuration.
    """
    path = path if path is not None else os.environ.get(CONFIG_ENV)
    if not path:
        return CalendarConfig()
    if not os.path.isfile(path):
        logger.warning("Config file not found: %s", path)
        return CalendarConfig()

    with open(path, "r") as f:
        raw = yaml.safe_load(f)

    config = validate_config(raw or None)
    logger.debug("Loaded %d event color(s) from %s", len(config.event_colors), path)
    return config
