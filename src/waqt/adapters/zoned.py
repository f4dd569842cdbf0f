from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .native import NativeDateTimeAdapter


class ZonedDateTimeAdapter(NativeDateTimeAdapter):
    """Adapter over timezone-aware datetimes pinned to one IANA zone.

    Naive datetimes are not valid moments here. Field values are wall-clock
    values in the zone; comparison uses the absolute instant.
    """

    def __init__(self, zone: str | ZoneInfo) -> None:
        if isinstance(zone, str):
            try:
                zone = ZoneInfo(zone)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"Unknown timezone '{zone}'") from exc
        super().__init__(tz=zone)
        self.zone = zone

    def get_hours(self, moment: datetime) -> int:
        return self._coerce(moment).hour

    def get_minutes(self, moment: datetime) -> int:
        return self._coerce(moment).minute

    def get_seconds(self, moment: datetime) -> int:
        return self._coerce(moment).second

    def set_hours(self, moment: datetime, value: int) -> datetime:
        return super().set_hours(self._coerce(moment), value)

    def set_minutes(self, moment: datetime, value: int) -> datetime:
        return super().set_minutes(self._coerce(moment), value)

    def set_seconds(self, moment: datetime, value: int) -> datetime:
        return super().set_seconds(self._coerce(moment), value)
