from __future__ import annotations

from datetime import date, datetime, timezone
import unittest

from waqt.adapters import NativeDateTimeAdapter
from waqt.models import StepDirection, TimeField
from waqt.timer import TimeStepper

FROZEN_NOW = datetime(2024, 3, 1, 12, 0, 0)


class FrozenAdapter(NativeDateTimeAdapter):
    def now(self) -> datetime:
        return FROZEN_NOW


def at(hour: int, minute: int = 0, second: int = 0, day: int = 1) -> datetime:
    return datetime(2024, 1, day, hour, minute, second)


class TimeStepperNormalizationTest(unittest.TestCase):
    def setUp(self) -> None:
        self.adapter = FrozenAdapter()

    def test_requires_adapter(self) -> None:
        with self.assertRaises(ValueError):
            TimeStepper(None)

    def test_missing_picker_moment_uses_now(self) -> None:
        stepper = TimeStepper(self.adapter)
        self.assertEqual(stepper.picker_moment, FROZEN_NOW)

    def test_invalid_picker_moment_falls_back_to_now(self) -> None:
        stepper = TimeStepper(self.adapter, at(9))
        for invalid in ("not a time", "", date(2024, 1, 1), 1700000000, object()):
            stepper.picker_moment = invalid
            self.assertEqual(stepper.picker_moment, FROZEN_NOW)

    def test_iso_picker_moment_is_deserialized(self) -> None:
        stepper = TimeStepper(self.adapter, "2024-01-01T08:15:30")
        self.assertEqual(stepper.picker_moment, at(8, 15, 30))

    def test_invalid_bounds_read_as_unset(self) -> None:
        stepper = TimeStepper(self.adapter, at(10), min_date_time=at(9), max_date_time=at(11))
        stepper.min_date_time = "garbage"
        stepper.max_date_time = date(2024, 1, 1)
        self.assertIsNone(stepper.min_date_time)
        self.assertIsNone(stepper.max_date_time)

    def test_unset_bounds_enable_every_direction(self) -> None:
        stepper = TimeStepper(
            self.adapter,
            at(0),
            min_date_time="garbage",
            max_date_time=object(),
            step_hour=7,
            step_minute=45,
            step_second=59,
        )
        for field in TimeField:
            for direction in StepDirection:
                self.assertTrue(stepper.step_enabled(field, direction))

    def test_aware_bound_is_comparable_with_naive_picker(self) -> None:
        stepper = TimeStepper(
            self.adapter,
            "2024-01-01T10:00:00",
            min_date_time=datetime(2024, 1, 1, 6, 0, tzinfo=timezone.utc),
            max_date_time="2024-01-01T18:00:00Z",
        )
        self.assertIsNone(stepper.max_date_time.tzinfo)
        self.assertIsNone(stepper.min_date_time.tzinfo)
        for field in TimeField:
            for direction in StepDirection:
                self.assertIsInstance(stepper.step_enabled(field, direction), bool)

    def test_invalid_picker_moment_is_logged(self) -> None:
        stepper = TimeStepper(self.adapter, at(9))
        with self.assertLogs("waqt.timer", level="DEBUG") as captured:
            stepper.picker_moment = "nonsense"
        self.assertIn("nonsense", captured.output[0])


class TimeStepperAccessorTest(unittest.TestCase):
    def setUp(self) -> None:
        self.adapter = FrozenAdapter()

    def test_field_values_follow_picker_moment(self) -> None:
        stepper = TimeStepper(self.adapter, at(14, 30, 15))
        self.assertEqual((stepper.hour_value, stepper.minute_value, stepper.second_value), (14, 30, 15))
        stepper.picker_moment = at(7, 5, 1)
        self.assertEqual((stepper.hour_value, stepper.minute_value, stepper.second_value), (7, 5, 1))
        self.assertEqual(stepper.field_value(TimeField.MINUTE), 5)

    def test_step_defaults(self) -> None:
        stepper = TimeStepper(self.adapter)
        self.assertEqual([stepper.step_for(field) for field in TimeField], [1, 1, 1])


class TimeStepperSetValueTest(unittest.TestCase):
    def setUp(self) -> None:
        self.adapter = FrozenAdapter()
        self.emitted: list[datetime] = []
        self.stepper = TimeStepper(self.adapter, at(10, 20, 30), on_change=self.emitted.append)

    def test_set_hour_emits_once_and_keeps_picker_moment(self) -> None:
        result = self.stepper.set_hour_value(11)
        self.assertEqual(result, at(11, 20, 30))
        self.assertEqual(self.emitted, [at(11, 20, 30)])
        self.assertEqual(self.stepper.picker_moment, at(10, 20, 30))

    def test_set_minute_and_second(self) -> None:
        self.stepper.set_minute_value(45)
        self.stepper.set_second_value(0)
        self.assertEqual(self.emitted, [at(10, 45, 30), at(10, 20, 0)])

    def test_set_value_matches_adapter_normalization(self) -> None:
        moment = self.stepper.picker_moment
        for hours in (-1, 0, 23, 24, 25, 49):
            emitted = self.stepper.set_hour_value(hours)
            expected = self.adapter.get_hours(self.adapter.set_hours(moment, hours))
            self.assertEqual(self.adapter.get_hours(emitted), expected)

    def test_out_of_range_value_overflows_through_adapter(self) -> None:
        self.assertEqual(self.stepper.set_minute_value(60), at(11, 0, 30))
        self.assertEqual(self.stepper.set_hour_value(24), at(0, 20, 30, day=2))

    def test_works_without_callback(self) -> None:
        stepper = TimeStepper(self.adapter, at(10))
        self.assertEqual(stepper.set_field_value(TimeField.SECOND, 5), at(10, 0, 5))


class TimeStepperEnablementTest(unittest.TestCase):
    def setUp(self) -> None:
        self.adapter = FrozenAdapter()

    def test_no_bounds_both_directions_enabled(self) -> None:
        stepper = TimeStepper(self.adapter, at(14, 30))
        self.assertTrue(stepper.up_hour_enabled())
        self.assertTrue(stepper.down_hour_enabled())

    def test_up_hour_at_end_of_day_clamps_candidate(self) -> None:
        stepper = TimeStepper(self.adapter, at(23), max_date_time=at(23, 30))
        # candidate hour 24 clamps to 23, so the candidate is 23:00:00 itself
        self.assertTrue(stepper.up_hour_enabled())
        stepper.max_date_time = at(22, 59, 59)
        self.assertFalse(stepper.up_hour_enabled())

    def test_down_minute_candidate_clamps_to_zero(self) -> None:
        stepper = TimeStepper(self.adapter, at(0, 5), min_date_time=at(0), step_minute=10)
        self.assertTrue(stepper.down_minute_enabled())
        stepper.min_date_time = at(0, 0, 1)
        self.assertFalse(stepper.down_minute_enabled())

    def test_up_hour_flips_exactly_when_candidate_exceeds_max(self) -> None:
        stepper = TimeStepper(self.adapter, at(0), max_date_time=at(15))
        for hour in range(23):
            stepper.picker_moment = at(hour)
            self.assertEqual(stepper.up_hour_enabled(), hour + 1 <= 15, hour)

    def test_candidate_keeps_other_fields(self) -> None:
        stepper = TimeStepper(self.adapter, at(14, 30), max_date_time=at(15))
        self.assertFalse(stepper.up_hour_enabled())
        stepper.picker_moment = at(14, 0)
        self.assertTrue(stepper.up_hour_enabled())

    def test_minute_and_second_against_bounds(self) -> None:
        stepper = TimeStepper(
            self.adapter,
            at(10, 30, 30),
            min_date_time=at(10, 30, 10),
            max_date_time=at(10, 30, 50),
            step_second=20,
        )
        self.assertFalse(stepper.up_minute_enabled())
        self.assertFalse(stepper.down_minute_enabled())
        self.assertTrue(stepper.up_second_enabled())
        self.assertTrue(stepper.down_second_enabled())
        stepper.step_second = 21
        self.assertFalse(stepper.up_second_enabled())
        self.assertFalse(stepper.down_second_enabled())

    def test_second_candidate_clamps_at_range_edges(self) -> None:
        stepper = TimeStepper(
            self.adapter,
            at(10, 30, 30),
            min_date_time=at(10, 30, 0),
            max_date_time=at(10, 31, 0),
            step_second=45,
        )
        # 75 clamps to 59 and -15 clamps to 0, both inside the bounds
        self.assertTrue(stepper.up_second_enabled())
        self.assertTrue(stepper.down_second_enabled())

    def test_negative_step_inverts_direction(self) -> None:
        stepper = TimeStepper(self.adapter, at(12), min_date_time=at(12), max_date_time=at(12))
        self.assertFalse(stepper.up_hour_enabled())
        self.assertFalse(stepper.down_hour_enabled())
        stepper.step_hour = -1
        self.assertTrue(stepper.up_hour_enabled())
        self.assertTrue(stepper.down_hour_enabled())

    def test_enabled_check_and_commit_can_disagree_at_day_edge(self) -> None:
        stepper = TimeStepper(self.adapter, at(23, 10), max_date_time=at(23, 50))
        self.assertTrue(stepper.up_hour_enabled())
        committed = stepper.set_hour_value(stepper.hour_value + stepper.step_hour)
        self.assertGreater(self.adapter.compare(committed, stepper.max_date_time), 0)

    def test_generic_and_named_predicates_agree(self) -> None:
        stepper = TimeStepper(self.adapter, at(10, 10, 10), min_date_time=at(10, 10), max_date_time=at(10, 11))
        named = {
            (TimeField.HOUR, StepDirection.UP): stepper.up_hour_enabled(),
            (TimeField.HOUR, StepDirection.DOWN): stepper.down_hour_enabled(),
            (TimeField.MINUTE, StepDirection.UP): stepper.up_minute_enabled(),
            (TimeField.MINUTE, StepDirection.DOWN): stepper.down_minute_enabled(),
            (TimeField.SECOND, StepDirection.UP): stepper.up_second_enabled(),
            (TimeField.SECOND, StepDirection.DOWN): stepper.down_second_enabled(),
        }
        for (field, direction), expected in named.items():
            self.assertEqual(stepper.step_enabled(field, direction), expected)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
