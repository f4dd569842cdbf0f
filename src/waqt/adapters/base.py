from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..models import TimeField

T = TypeVar("T")


class DateTimeAdapter(ABC, Generic[T]):
    """Calendar operations the time stepper delegates to.

    Implementations must never mutate a moment passed in; setters return a
    new moment with the requested field replaced.
    """

    def deserialize(self, value: Any) -> T | None:
        """Convert raw input into a moment, or ``None`` when that is impossible.

        The base version only passes through ``None`` and valid moments.
        Subclasses extend it with the formats their representation supports.
        """
        if value is None:
            return None
        if self.is_date_instance(value) and self.is_valid(value):
            return value
        return None

    @abstractmethod
    def now(self) -> T:
        ...

    @abstractmethod
    def is_date_instance(self, obj: Any) -> bool:
        ...

    @abstractmethod
    def is_valid(self, moment: T) -> bool:
        ...

    @abstractmethod
    def get_hours(self, moment: T) -> int:
        ...

    @abstractmethod
    def get_minutes(self, moment: T) -> int:
        ...

    @abstractmethod
    def get_seconds(self, moment: T) -> int:
        ...

    @abstractmethod
    def set_hours(self, moment: T, value: int) -> T:
        ...

    @abstractmethod
    def set_minutes(self, moment: T, value: int) -> T:
        ...

    @abstractmethod
    def set_seconds(self, moment: T, value: int) -> T:
        ...

    @abstractmethod
    def compare(self, first: T, second: T) -> int:
        """Negative if ``first`` is earlier, zero if equal, positive if later."""

    def get_valid_date_or_none(self, obj: Any) -> T | None:
        if self.is_date_instance(obj) and self.is_valid(obj):
            return obj
        return None

    def get_field(self, moment: T, field: TimeField) -> int:
        if field is TimeField.HOUR:
            return self.get_hours(moment)
        if field is TimeField.MINUTE:
            return self.get_minutes(moment)
        return self.get_seconds(moment)

    def set_field(self, moment: T, field: TimeField, value: int) -> T:
        if field is TimeField.HOUR:
            return self.set_hours(moment, value)
        if field is TimeField.MINUTE:
            return self.set_minutes(moment, value)
        return self.set_seconds(moment, value)
