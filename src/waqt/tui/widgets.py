from __future__ import annotations

from typing import Any

from textual.app import ComposeResult  # type: ignore[import]
from textual.containers import Horizontal, Vertical  # type: ignore[import]
from textual.message import Message  # type: ignore[import]
from textual.widget import Widget  # type: ignore[import]
from textual.widgets import Button, Static  # type: ignore[import]

from ..intl import TimerIntl
from ..models import StepDirection, TimeField
from ..timer import TimeStepper
from ..timeutils import format_field


class TimerWidget(Widget):
    """Up/down buttons around the hour, minute and (optionally) second values."""

    can_focus = True

    class Changed(Message):
        def __init__(self, moment: Any) -> None:
            super().__init__()
            self.moment = moment

    def __init__(self, stepper: TimeStepper[Any], intl: TimerIntl | None = None) -> None:
        super().__init__(id="timer", classes="panel")
        self.stepper = stepper
        self.intl = intl or TimerIntl()
        self._buttons: dict[tuple[TimeField, StepDirection], Button] = {}
        self._values: dict[TimeField, Static] = {}
        for field in self.fields():
            for direction in StepDirection:
                self._buttons[(field, direction)] = Button(
                    self._arrow(direction),
                    id=f"{direction.value}-{field.value}",
                    classes="timer-button",
                )
            self._values[field] = Static(
                format_field(stepper.field_value(field)),
                id=f"{field.value}-value",
                classes="timer-value",
            )

    def fields(self) -> list[TimeField]:
        if self.stepper.show_seconds_timer:
            return [TimeField.HOUR, TimeField.MINUTE, TimeField.SECOND]
        return [TimeField.HOUR, TimeField.MINUTE]

    def compose(self) -> ComposeResult:
        columns = []
        for field in self.fields():
            columns.append(
                Vertical(
                    self._buttons[(field, StepDirection.UP)],
                    self._values[field],
                    self._buttons[(field, StepDirection.DOWN)],
                    classes="timer-column",
                )
            )
        yield Horizontal(*columns, id="timer-columns")

    def on_mount(self) -> None:
        for (field, direction), button in self._buttons.items():
            button.tooltip = self.intl.label_for(field, direction)
        self.refresh_view()

    def button_states(self) -> dict[tuple[TimeField, StepDirection], bool]:
        return {
            (field, direction): self.stepper.step_enabled(field, direction)
            for field in self.fields()
            for direction in StepDirection
        }

    def refresh_view(self) -> None:
        for key, enabled in self.button_states().items():
            self._buttons[key].disabled = not enabled
        for field, static in self._values.items():
            static.update(format_field(self.stepper.field_value(field)))

    def step(self, field: TimeField, direction: StepDirection) -> Any | None:
        if field not in self.fields() or not self.stepper.step_enabled(field, direction):
            return None
        target = self.stepper.field_value(field) + self.stepper.step_for(field) * direction.sign
        moment = self.stepper.set_field_value(field, target)
        self.post_message(self.Changed(moment))
        return moment

    def focus_when_ready(self) -> None:
        # focus only once the layout has settled
        self.call_after_refresh(self.focus)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if not event.button.id:
            return
        direction_name, _, field_name = event.button.id.partition("-")
        self.step(TimeField(field_name), StepDirection(direction_name))

    @staticmethod
    def _arrow(direction: StepDirection) -> str:
        return "▲" if direction is StepDirection.UP else "▼"
