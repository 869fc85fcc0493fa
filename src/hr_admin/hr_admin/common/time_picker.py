from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..core.enums import Meridiem
from .time_format import time12_to_24, time24_to_12

HOUR_OPTIONS: tuple[str, ...] = tuple(f"{h:02d}" for h in range(1, 13))
MINUTE_OPTIONS: tuple[str, ...] = tuple(f"{m:02d}" for m in range(60))

Selection = tuple["TimePickerState", Optional[str]]


@dataclass(frozen=True)
class TimePickerState:
    """Hour/minute/AM-PM selection behind a single 24-hour form value.

    Every ``select_*`` call returns the new state together with the 24-hour
    value to store, or None when the selection is still incomplete.
    """

    hour: str = ""
    minute: str = ""
    meridiem: Meridiem = Meridiem.AM

    @classmethod
    def from_value(cls, value: Optional[str]) -> "TimePickerState":
        time12 = time24_to_12(value or "")
        return cls(hour=time12.hour, minute=time12.minute, meridiem=time12.meridiem)

    @property
    def value(self) -> str:
        return time12_to_24(self.hour, self.minute, self.meridiem)

    def select_hour(self, hour: str) -> Selection:
        state = replace(self, hour=hour)
        if hour and not self.minute:
            state = replace(state, minute="00")
        if not hour:
            return state, None
        return state, state.value

    def select_minute(self, minute: str) -> Selection:
        state = replace(self, minute=minute)
        if minute and not self.hour:
            state = replace(state, hour="12")
        if not minute:
            return state, None
        return state, state.value

    def select_meridiem(self, meridiem: Meridiem | str) -> Selection:
        state = replace(self, meridiem=Meridiem(meridiem))
        if state.hour and state.minute:
            return state, state.value
        return state, None
