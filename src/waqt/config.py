from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
import logging
from pathlib import Path
import tomllib
from typing import Any

from .adapters import DateTimeAdapter, NativeDateTimeAdapter, ZonedDateTimeAdapter
from .intl import TimerIntl
from .timeutils import ClockFormatError, parse_clock

logger = logging.getLogger(__name__)


def _default_config_root() -> Path:
    return Path.home() / ".config" / "waqt"


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("\"", "\\\"").replace("\n", "\\n")
    return f"\"{escaped}\""


def _is_clock_or_iso(value: str) -> bool:
    try:
        parse_clock(value)
        return True
    except ClockFormatError:
        pass
    cleaned = value.strip()
    if cleaned.endswith(("Z", "z")):
        cleaned = cleaned[:-1] + "+00:00"
    try:
        datetime.fromisoformat(cleaned)
    except ValueError:
        return False
    return True


@dataclass(slots=True)
class TimerSettings:
    step_hour: int = 1
    step_minute: int = 1
    step_second: int = 1
    show_seconds: bool = False
    start: str = ""
    min_time: str = ""
    max_time: str = ""
    timezone: str = ""

    def build_adapter(self) -> DateTimeAdapter[datetime]:
        if self.timezone:
            return ZonedDateTimeAdapter(self.timezone)
        return NativeDateTimeAdapter()

    @staticmethod
    def resolve_moment(value: str, adapter: DateTimeAdapter[Any]) -> Any:
        """Turn a config value into a moment.

        ``HH:MM[:SS]`` is placed on today's date; anything else goes through
        ``adapter.deserialize``. Empty text means unset.
        """
        if not value or not value.strip():
            return None
        try:
            clock = parse_clock(value)
        except ClockFormatError:
            return adapter.deserialize(value)
        moment = adapter.now()
        moment = adapter.set_hours(moment, clock.hour)
        moment = adapter.set_minutes(moment, clock.minute)
        return adapter.set_seconds(moment, clock.second)


@dataclass(slots=True)
class WaqtConfig:
    timer: TimerSettings = field(default_factory=TimerSettings)
    labels: TimerIntl = field(default_factory=TimerIntl)

    @classmethod
    def default(cls) -> "WaqtConfig":
        return cls()

    def to_dict(self) -> dict:
        return {
            "timer": {
                "step_hour": self.timer.step_hour,
                "step_minute": self.timer.step_minute,
                "step_second": self.timer.step_second,
                "show_seconds": self.timer.show_seconds,
                "start": self.timer.start,
                "min_time": self.timer.min_time,
                "max_time": self.timer.max_time,
                "timezone": self.timer.timezone,
            },
            "labels": self.labels.to_dict(),
        }


class ConfigManager:
    """Simple TOML configuration loader."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or (_default_config_root() / "config.toml")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self._errors: list[str] = []

    def errors(self) -> list[str]:
        return list(self._errors)

    def load(self) -> WaqtConfig:
        self._errors.clear()
        if not self.config_path.exists():
            config = WaqtConfig.default()
            self._write(config)
            return config

        try:
            with self.config_path.open("rb") as handle:
                raw = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            self._error(f"Could not parse {self.config_path}: {exc}")
            return WaqtConfig.default()

        timer_cfg = raw.get("timer", {})
        if not isinstance(timer_cfg, dict):
            self._error("Invalid [timer] section")
            timer_cfg = {}
        defaults = TimerSettings()

        def _step(key: str) -> int:
            value = timer_cfg.get(key, getattr(defaults, key))
            if isinstance(value, bool) or not isinstance(value, int):
                self._error(f"Invalid timer.{key}: {value!r}")
                return getattr(defaults, key)
            return value

        def _flag(key: str) -> bool:
            value = timer_cfg.get(key, getattr(defaults, key))
            if not isinstance(value, bool):
                self._error(f"Invalid timer.{key}: {value!r}")
                return getattr(defaults, key)
            return value

        def _moment_text(key: str) -> str:
            value = str(timer_cfg.get(key, "") or "")
            if value and not _is_clock_or_iso(value):
                self._error(f"Invalid timer.{key}: {value!r}")
                return ""
            return value

        timezone = str(timer_cfg.get("timezone", "") or "")
        if timezone:
            try:
                ZonedDateTimeAdapter(timezone)
            except ValueError as exc:
                self._error(f"Invalid timer.timezone: {exc}")
                timezone = ""

        labels_cfg = raw.get("labels", {})
        if not isinstance(labels_cfg, dict):
            self._error("Invalid [labels] section")
            labels_cfg = {}

        return WaqtConfig(
            timer=TimerSettings(
                step_hour=_step("step_hour"),
                step_minute=_step("step_minute"),
                step_second=_step("step_second"),
                show_seconds=_flag("show_seconds"),
                start=_moment_text("start"),
                min_time=_moment_text("min_time"),
                max_time=_moment_text("max_time"),
                timezone=timezone,
            ),
            labels=TimerIntl.from_dict({k: str(v) for k, v in labels_cfg.items()}),
        )

    def _error(self, message: str) -> None:
        logger.warning(message)
        self._errors.append(message)

    def _write(self, config: WaqtConfig) -> None:
        data = config.to_dict()
        timer = data["timer"]
        lines = [
            "[timer]",
            f"step_hour = {timer['step_hour']}",
            f"step_minute = {timer['step_minute']}",
            f"step_second = {timer['step_second']}",
            f"show_seconds = {str(timer['show_seconds']).lower()}",
            "start = " + _quote(timer["start"]),
            "min_time = " + _quote(timer["min_time"]),
            "max_time = " + _quote(timer["max_time"]),
            "timezone = " + _quote(timer["timezone"]),
            "",
            "[labels]",
        ]
        for key, value in data["labels"].items():
            lines.append(f"{key} = {_quote(value)}")
        self.config_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    def save(self, config: WaqtConfig) -> None:
        self._write(config)
