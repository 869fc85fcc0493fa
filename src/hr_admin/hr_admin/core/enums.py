from __future__ import annotations

from enum import Enum


class DayKey(str, Enum):
    """Weekday identifiers used as keys of a policy's day overrides."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def ordered(cls) -> tuple["DayKey", ...]:
        """Monday-first week order."""
        return tuple(cls)

    @classmethod
    def parse(cls, value: object) -> "DayKey | None":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class DayType(str, Enum):
    """Classification label of a working day, independent of its times."""

    FULL = "full"
    HALF = "half"
    CUSTOM = "custom"


class Meridiem(str, Enum):
    AM = "AM"
    PM = "PM"


class ShortDayUnit(str, Enum):
    HOURS = "hours"
    MINS = "mins"
