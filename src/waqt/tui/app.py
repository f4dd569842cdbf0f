from __future__ import annotations

from datetime import datetime

from textual.app import App, ComposeResult  # type: ignore[import]
from textual.binding import Binding  # type: ignore[import]
from textual.containers import Vertical  # type: ignore[import]
from textual.widgets import Footer, Header, Static  # type: ignore[import]

from ..config import ConfigManager, TimerSettings
from ..models import StepDirection, TimeField
from ..timer import TimeStepper
from ..timeutils import format_clock
from .widgets import TimerWidget


def format_moment(value: datetime | None) -> str:
    if value is None:
        return "unset"
    return f"{value:%Y-%m-%d} {format_clock(value.time(), seconds=True)}"


class StatusLine(Static):
    def show(self, stepper: TimeStepper[datetime], errors: list[str]) -> None:
        parts = [
            f"Selected: {format_moment(stepper.picker_moment)}",
            f"Min: {format_moment(stepper.min_date_time)}",
            f"Max: {format_moment(stepper.max_date_time)}",
        ]
        if errors:
            parts.append(f"[red]{len(errors)} config error(s)[/red]")
        self.update(" • ".join(parts))


class WaqtApp(App):
    CSS = """
    Screen {
        background: $surface;
        align: center middle;
    }

    .panel {
        border: round $accent;
        padding: 1 2;
        background: $boost;
        width: auto;
        height: auto;
    }

    #timer-columns {
        width: auto;
        height: auto;
    }

    .timer-column {
        width: auto;
        height: auto;
        padding: 0 1;
    }

    .timer-value {
        text-style: bold;
        content-align: center middle;
        width: 100%;
    }

    #status-line {
        color: $text-muted;
        margin-top: 1;
        width: auto;
    }
    """
    TITLE = "Waqt Time Stepper"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("H", "hour_up", "Hour +"),
        Binding("h", "hour_down", "Hour -"),
        Binding("M", "minute_up", "Minute +"),
        Binding("m", "minute_down", "Minute -"),
        Binding("S", "second_up", "Second +", show=False),
        Binding("s", "second_down", "Second -", show=False),
        Binding("n", "now", "Now"),
    ]

    def __init__(self, config_manager: ConfigManager | None = None) -> None:
        super().__init__()
        self.config_manager = config_manager or ConfigManager()
        self.config = self.config_manager.load()
        settings = self.config.timer
        adapter = settings.build_adapter()
        self.stepper: TimeStepper[datetime] = TimeStepper(
            adapter,
            TimerSettings.resolve_moment(settings.start, adapter),
            min_date_time=TimerSettings.resolve_moment(settings.min_time, adapter),
            max_date_time=TimerSettings.resolve_moment(settings.max_time, adapter),
            step_hour=settings.step_hour,
            step_minute=settings.step_minute,
            step_second=settings.step_second,
            show_seconds_timer=settings.show_seconds,
        )
        self.timer_widget = TimerWidget(self.stepper, self.config.labels)
        self.status_line = StatusLine(id="status-line")

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(self.timer_widget, self.status_line, id="main-layout")
        yield Footer()

    def on_mount(self) -> None:
        self.timer_widget.focus_when_ready()
        self.refresh_timer()

    def refresh_timer(self) -> None:
        self.timer_widget.refresh_view()
        self.status_line.show(self.stepper, self.config_manager.errors())

    def on_timer_widget_changed(self, message: TimerWidget.Changed) -> None:
        self.stepper.picker_moment = message.moment
        self.refresh_timer()

    def _step(self, field: TimeField, direction: StepDirection) -> None:
        self.timer_widget.step(field, direction)

    def action_hour_up(self) -> None:
        self._step(TimeField.HOUR, StepDirection.UP)

    def action_hour_down(self) -> None:
        self._step(TimeField.HOUR, StepDirection.DOWN)

    def action_minute_up(self) -> None:
        self._step(TimeField.MINUTE, StepDirection.UP)

    def action_minute_down(self) -> None:
        self._step(TimeField.MINUTE, StepDirection.DOWN)

    def action_second_up(self) -> None:
        self._step(TimeField.SECOND, StepDirection.UP)

    def action_second_down(self) -> None:
        self._step(TimeField.SECOND, StepDirection.DOWN)

    def action_now(self) -> None:
        self.stepper.picker_moment = None
        self.refresh_timer()
