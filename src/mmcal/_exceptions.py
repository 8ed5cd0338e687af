from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all mmcal errors."""


class _BatchError(CalendarError, ValueError):

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position

    def at(self, position: int) -> "_BatchError":
        """Return a copy of this error located at record ``position``."""
        return type(self)(f"Event [{position}]: {self}", position=position)


class ParseError(_BatchError):
    """A date cannot be parsed, or a range ends before it starts."""


class ValidationError(_BatchError):
    """A record, an event or a configuration is structurally invalid."""
