"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import DayKey


@dataclass(frozen=True)
class WeekDay:
    key: DayKey
    label: str


WEEK_ORDER: tuple[WeekDay, ...] = (
    WeekDay(DayKey.MONDAY, "Monday"),
    WeekDay(DayKey.TUESDAY, "Tuesday"),
    WeekDay(DayKey.WEDNESDAY, "Wednesday"),
    WeekDay(DayKey.THURSDAY, "Thursday"),
    WeekDay(DayKey.FRIDAY, "Friday"),
    WeekDay(DayKey.SATURDAY, "Saturday"),
    WeekDay(DayKey.SUNDAY, "Sunday"),
)

# Days that are off in a freshly synthesized schedule.
DEFAULT_OFF_DAYS = frozenset({DayKey.SATURDAY, DayKey.SUNDAY})

NA_TIME_LABEL = "N/A"
EMPTY_TIME_LABEL = "--:--"
OFF_DAY_SUFFIX = " (Off Day)"

OVERTIME_RATE_OPTIONS: tuple[tuple[str, str], ...] = (
    ("0", "None"),
    ("0.5", "x0.5"),
    ("1", "x1"),
    ("1.5", "x1.5"),
    ("2", "x2"),
    ("2.5", "x2.5"),
    ("3", "x3"),
)
