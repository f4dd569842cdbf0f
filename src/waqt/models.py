from __future__ import annotations

from enum import Enum


class TimeField(str, Enum):
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @property
    def minimum(self) -> int:
        return 0

    @property
    def maximum(self) -> int:
        return 23 if self is TimeField.HOUR else 59


class StepDirection(str, Enum):
    UP = "up"
    DOWN = "down"

    @property
    def sign(self) -> int:
        return 1 if self is StepDirection.UP else -1
