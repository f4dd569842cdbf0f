from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

from .base import DateTimeAdapter


class NativeDateTimeAdapter(DateTimeAdapter[datetime]):
    """Adapter over plain :class:`datetime.datetime` values.

    Without ``tz`` every moment is naive local time; with ``tz`` every moment
    is aware and expressed in that zone. ``deserialize`` converts input to
    whichever of the two applies, and ``is_valid`` rejects the other kind.

    Field setters overflow into the neighbouring field instead of raising:
    ``set_minutes(m, 60)`` lands on minute 0 of the next hour and
    ``set_hours(m, -1)`` on 23:00 of the previous day.
    """

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz

    def deserialize(self, value: Any) -> datetime | None:
        if isinstance(value, str):
            value = self._parse_iso(value)
        if not isinstance(value, datetime):
            return super().deserialize(value)
        return self._coerce(value)

    def now(self) -> datetime:
        return datetime.now(self.tz) if self.tz is not None else datetime.now()

    def is_date_instance(self, obj: Any) -> bool:
        return isinstance(obj, datetime)

    def is_valid(self, moment: datetime) -> bool:
        if not isinstance(moment, datetime):
            return False
        is_aware = moment.utcoffset() is not None
        return is_aware if self.tz is not None else not is_aware

    def get_hours(self, moment: datetime) -> int:
        return moment.hour

    def get_minutes(self, moment: datetime) -> int:
        return moment.minute

    def get_seconds(self, moment: datetime) -> int:
        return moment.second

    def set_hours(self, moment: datetime, value: int) -> datetime:
        return self._normalize(moment.replace(hour=0) + timedelta(hours=value))

    def set_minutes(self, moment: datetime, value: int) -> datetime:
        return self._normalize(moment.replace(minute=0) + timedelta(minutes=value))

    def set_seconds(self, moment: datetime, value: int) -> datetime:
        return self._normalize(moment.replace(second=0) + timedelta(seconds=value))

    def compare(self, first: datetime, second: datetime) -> int:
        if first.tzinfo is not None:
            # same-tzinfo comparison in Python ignores offsets, so go through UTC
            first = first.astimezone(timezone.utc)
            second = second.astimezone(timezone.utc)
        if first < second:
            return -1
        if first > second:
            return 1
        return 0

    def _coerce(self, moment: datetime) -> datetime:
        if self.tz is None:
            if moment.utcoffset() is None:
                return moment
            return moment.astimezone().replace(tzinfo=None)
        if moment.tzinfo is None:
            return moment.replace(tzinfo=self.tz)
        return moment.astimezone(self.tz)

    def _normalize(self, moment: datetime) -> datetime:
        # wall-clock arithmetic can land in a DST gap; the UTC round trip
        # moves it to the instant that actually exists
        if moment.tzinfo is None:
            return moment
        return moment.astimezone(timezone.utc).astimezone(self.tz or moment.tzinfo)

    def _parse_iso(self, value: str) -> datetime | None:
        cleaned = value.strip()
        if not cleaned:
            return None
        if cleaned.endswith(("Z", "z")):
            cleaned = cleaned[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(cleaned)
        except ValueError:
            return None
