from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

from .adapters.base import DateTimeAdapter
from .models import StepDirection, TimeField
from .timeutils import clamp

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TimeStepper(Generic[T]):
    """Hour/minute/second stepping for one picker moment, bounded by min/max.

    The stepper never stores the moments it produces. ``set_*_value`` hands
    the new moment to ``on_change`` and returns it; feeding it back into
    :attr:`picker_moment` is up to the caller.
    """

    def __init__(
        self,
        adapter: DateTimeAdapter[T] | None,
        picker_moment: Any = None,
        *,
        min_date_time: Any = None,
        max_date_time: Any = None,
        step_hour: int = 1,
        step_minute: int = 1,
        step_second: int = 1,
        show_seconds_timer: bool = False,
        on_change: Callable[[T], None] | None = None,
    ) -> None:
        if adapter is None:
            raise ValueError(
                "No DateTimeAdapter provided. Pass an adapter such as NativeDateTimeAdapter()."
            )
        self.adapter = adapter
        self.step_hour = step_hour
        self.step_minute = step_minute
        self.step_second = step_second
        self.show_seconds_timer = show_seconds_timer
        self.on_change = on_change
        self.picker_moment = picker_moment
        self.min_date_time = min_date_time
        self.max_date_time = max_date_time

    @property
    def picker_moment(self) -> T:
        return self._picker_moment

    @picker_moment.setter
    def picker_moment(self, value: Any) -> None:
        moment = self.adapter.get_valid_date_or_none(self.adapter.deserialize(value))
        if moment is None:
            if value is not None:
                logger.debug("Discarding invalid picker moment %r, using now()", value)
            moment = self.adapter.now()
        self._picker_moment = moment

    @property
    def min_date_time(self) -> T | None:
        return self._min_date_time

    @min_date_time.setter
    def min_date_time(self, value: Any) -> None:
        self._min_date_time = self._read_bound(value, "minimum")

    @property
    def max_date_time(self) -> T | None:
        return self._max_date_time

    @max_date_time.setter
    def max_date_time(self, value: Any) -> None:
        self._max_date_time = self._read_bound(value, "maximum")

    @property
    def hour_value(self) -> int:
        return self.adapter.get_hours(self.picker_moment)

    @property
    def minute_value(self) -> int:
        return self.adapter.get_minutes(self.picker_moment)

    @property
    def second_value(self) -> int:
        return self.adapter.get_seconds(self.picker_moment)

    def field_value(self, field: TimeField) -> int:
        return self.adapter.get_field(self.picker_moment, field)

    def step_for(self, field: TimeField) -> int:
        if field is TimeField.HOUR:
            return self.step_hour
        if field is TimeField.MINUTE:
            return self.step_minute
        return self.step_second

    def set_hour_value(self, hours: int) -> T:
        return self.set_field_value(TimeField.HOUR, hours)

    def set_minute_value(self, minutes: int) -> T:
        return self.set_field_value(TimeField.MINUTE, minutes)

    def set_second_value(self, seconds: int) -> T:
        return self.set_field_value(TimeField.SECOND, seconds)

    def set_field_value(self, field: TimeField, value: int) -> T:
        """Emit the picker moment with ``field`` replaced by ``value``.

        ``value`` is not clamped; overflow follows the adapter's setter.
        """
        moment = self.adapter.set_field(self.picker_moment, field, value)
        logger.debug("Emitting %s=%s -> %r", field.value, value, moment)
        if self.on_change is not None:
            self.on_change(moment)
        return moment

    def up_hour_enabled(self) -> bool:
        return self.step_enabled(TimeField.HOUR, StepDirection.UP)

    def down_hour_enabled(self) -> bool:
        return self.step_enabled(TimeField.HOUR, StepDirection.DOWN)

    def up_minute_enabled(self) -> bool:
        return self.step_enabled(TimeField.MINUTE, StepDirection.UP)

    def down_minute_enabled(self) -> bool:
        return self.step_enabled(TimeField.MINUTE, StepDirection.DOWN)

    def up_second_enabled(self) -> bool:
        return self.step_enabled(TimeField.SECOND, StepDirection.UP)

    def down_second_enabled(self) -> bool:
        return self.step_enabled(TimeField.SECOND, StepDirection.DOWN)

    def step_enabled(self, field: TimeField, direction: StepDirection) -> bool:
        amount = self.step_for(field) * direction.sign
        if direction is StepDirection.UP:
            if self.max_date_time is None:
                return True
            return self._compare_field(field, amount, self.max_date_time) < 1
        if self.min_date_time is None:
            return True
        return self._compare_field(field, amount, self.min_date_time) > -1

    def _compare_field(self, field: TimeField, amount: int, compared: T) -> int:
        # the candidate is clamped to the field's range; set_field_value is not
        value = clamp(self.field_value(field) + amount, field.minimum, field.maximum)
        candidate = self.adapter.set_field(self.picker_moment, field, value)
        return self.adapter.compare(candidate, compared)

    def _read_bound(self, value: Any, name: str) -> T | None:
        bound = self.adapter.get_valid_date_or_none(self.adapter.deserialize(value))
        if bound is None and value is not None:
            logger.debug("Discarding invalid %s bound %r", name, value)
        return bound
