"""Calendar adapters used by the time stepper."""

from .base import DateTimeAdapter
from .native import NativeDateTimeAdapter
from .zoned import ZonedDateTimeAdapter

__all__ = ["DateTimeAdapter", "NativeDateTimeAdapter", "ZonedDateTimeAdapter"]
