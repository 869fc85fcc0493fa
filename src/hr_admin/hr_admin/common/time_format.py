from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import EMPTY_TIME_LABEL, NA_TIME_LABEL
from ..core.enums import Meridiem
from .logging import get_logger

logger = get_logger("common.time_format")


@dataclass(frozen=True)
class Time12:
    """A time of day split the way the 12-hour picker shows it."""

    hour: str
    minute: str
    meridiem: Meridiem = Meridiem.AM

    @property
    def is_empty(self) -> bool:
        return not self.hour


EMPTY_TIME12 = Time12(hour="", minute="", meridiem=Meridiem.AM)


def _split_24(value: str) -> Optional[tuple[int, str]]:
    """Split ``HH:MM`` into (hour, zero-padded minute); None when unusable.

    Malformed values are treated as empty so the edit form never crashes.
    """
    if not value:
        return None
    hours, _, minutes = value.strip().partition(":")
    try:
        hour24 = int(hours)
        if minutes:
            int(minutes)
    except ValueError:
        logger.debug("Ignoring malformed time value %r", value)
        return None
    if not 0 <= hour24 <= 23:
        logger.debug("Ignoring out of range time value %r", value)
        return None
    return hour24, (minutes or "00").zfill(2)


def _to_hour12(hour24: int) -> tuple[int, Meridiem]:
    hour12 = 12 if hour24 == 0 else hour24 - 12 if hour24 > 12 else hour24
    meridiem = Meridiem.PM if hour24 >= 12 else Meridiem.AM
    return hour12, meridiem


def time24_to_12(value: str) -> Time12:
    """Convert ``"HH:MM"`` (24-hour) into its 12-hour parts."""
    parts = _split_24(value)
    if parts is None:
        return EMPTY_TIME12

    hour24, minute = parts
    hour12, meridiem = _to_hour12(hour24)
    return Time12(hour=f"{hour12:02d}", minute=minute, meridiem=meridiem)


def time12_to_24(hour12: str, minute: str, meridiem: Meridiem | str) -> str:
    """Convert 12-hour picker parts back to ``"HH:MM"``; empty if incomplete."""
    if not hour12 or not minute:
        return ""
    try:
        hour24 = int(hour12)
    except ValueError:
        logger.debug("Ignoring malformed hour %r", hour12)
        return ""

    try:
        meridiem = Meridiem(meridiem.upper() if isinstance(meridiem, str) else meridiem)
    except ValueError:
        logger.debug("Ignoring malformed meridiem %r", meridiem)
        return ""

    if meridiem == Meridiem.PM and hour24 != 12:
        hour24 += 12
    elif meridiem == Meridiem.AM and hour24 == 12:
        hour24 = 0
    return f"{hour24:02d}:{minute.zfill(2)}"


def format_time_for_display(value: Optional[str], na_fallback: bool = False) -> str:
    """Render a stored 24-hour time as ``"HH:MM AM"`` for tables and dialogs."""
    time12 = time24_to_12(value or "")
    if time12.is_empty:
        return NA_TIME_LABEL if na_fallback else EMPTY_TIME_LABEL
    return f"{time12.hour}:{time12.minute} {time12.meridiem.value}"
