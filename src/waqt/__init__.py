"""Waqt bounds-aware time stepper."""

from importlib.metadata import version, PackageNotFoundError

from .adapters import DateTimeAdapter, NativeDateTimeAdapter, ZonedDateTimeAdapter
from .models import StepDirection, TimeField
from .timer import TimeStepper

try:
    __version__ = version("waqt")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "DateTimeAdapter",
    "NativeDateTimeAdapter",
    "StepDirection",
    "TimeField",
    "TimeStepper",
    "ZonedDateTimeAdapter",
]
