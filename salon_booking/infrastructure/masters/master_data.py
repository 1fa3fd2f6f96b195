from __future__ import annotations

from salon_booking.domain.entities.master import Master
from salon_booking.domain.entities.working_hours import DaySchedule

MASTERS: dict[str, Master] = {
    "master-1": Master(
        id="master-1",
        name="Olga",
        specializations=["m1", "w1", "w2", "k1", "c1", "c2", "s1"],
        working_hours={
            1: DaySchedule(start="10:00", end="20:00"),  # Mon
            2: DaySchedule(start="10:00", end="20:00"),  # Tue
            3: DaySchedule(start="10:00", end="20:00"),  # Wed
            4: DaySchedule(start="10:00", end="20:00"),  # Thu
            5: DaySchedule(start="10:00", end="20:00"),  # Fri
            6: DaySchedule(start="11:00", end="16:00"),  # Sat
            0: DaySchedule(start="10:00", end="20:00", is_day_off=True),  # Sun
        },
    ),
}
