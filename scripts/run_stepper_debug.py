from datetime import datetime

from waqt.adapters import NativeDateTimeAdapter
from waqt.models import StepDirection, TimeField
from waqt.timer import TimeStepper

emitted = []
stepper = TimeStepper(
    NativeDateTimeAdapter(),
    datetime(2024, 1, 1, 23, 10),
    min_date_time=datetime(2024, 1, 1, 22, 0),
    max_date_time=datetime(2024, 1, 1, 23, 50),
    step_minute=15,
    on_change=emitted.append,
)

print('Picker:', stepper.picker_moment)
for field in TimeField:
    states = {d.value: stepper.step_enabled(field, d) for d in StepDirection}
    print(f'{field.value:>6}: value={stepper.field_value(field):02d} step={stepper.step_for(field)} {states}')

print('Committing hour + 1 ...')
stepper.set_hour_value(stepper.hour_value + stepper.step_hour)
print('Emitted:', emitted)
print('Past max:', stepper.adapter.compare(emitted[-1], stepper.max_date_time) > 0)
