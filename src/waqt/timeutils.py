from __future__ import annotations

from datetime import time


class ClockFormatError(ValueError):
    """Raised when a clock value is not HH:MM or HH:MM:SS."""


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def parse_clock(value: str) -> time:
    value = value.strip()
    if ":" in value:
        parts = value.split(":")
    elif "." in value:
        parts = value.split(".")
    else:
        raise ClockFormatError(f"Unsupported time format: {value}")
    if len(parts) not in (2, 3):
        raise ClockFormatError(f"Unsupported time format: {value}")
    try:
        hour, minute = int(parts[0]), int(parts[1])
        second = int(parts[2]) if len(parts) == 3 else 0
    except ValueError as exc:
        raise ClockFormatError(f"Unsupported time format: {value}") from exc
    if not (0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60):
        raise ClockFormatError(f"Invalid time value: {value}")
    return time(hour=hour, minute=minute, second=second)


def format_clock(value: time, *, seconds: bool = False) -> str:
    return value.strftime("%H:%M:%S" if seconds else "%H:%M")


def format_field(value: int) -> str:
    return f"{value:02d}"
