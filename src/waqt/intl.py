from __future__ import annotations

from dataclasses import dataclass

from .models import StepDirection, TimeField


@dataclass(slots=True)
class TimerIntl:
    """Button labels for the timer controls."""

    up_hour_label: str = "Add a hour"
    down_hour_label: str = "Minus a hour"
    up_minute_label: str = "Add a minute"
    down_minute_label: str = "Minus a minute"
    up_second_label: str = "Add a second"
    down_second_label: str = "Minus a second"

    @classmethod
    def from_dict(cls, values: dict[str, str]) -> "TimerIntl":
        defaults = cls()
        return cls(
            up_hour_label=values.get("up_hour") or defaults.up_hour_label,
            down_hour_label=values.get("down_hour") or defaults.down_hour_label,
            up_minute_label=values.get("up_minute") or defaults.up_minute_label,
            down_minute_label=values.get("down_minute") or defaults.down_minute_label,
            up_second_label=values.get("up_second") or defaults.up_second_label,
            down_second_label=values.get("down_second") or defaults.down_second_label,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "up_hour": self.up_hour_label,
            "down_hour": self.down_hour_label,
            "up_minute": self.up_minute_label,
            "down_minute": self.down_minute_label,
            "up_second": self.up_second_label,
            "down_second": self.down_second_label,
        }

    def label_for(self, field: TimeField, direction: StepDirection) -> str:
        return getattr(self, f"{direction.value}_{field.value}_label")
