"""Day override codec.

Converts a policy's day overrides between the individual form edited one
control per day and the grouped form stored by the API, where days with an
identical configuration share one entry (e.g. "Mon-Thu" and "Friday").

All functions are pure: inputs are never mutated, new values are returned.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..common.logging import get_logger
from ..core.constants import DEFAULT_OFF_DAYS, WEEK_ORDER, WeekDay
from ..core.enums import DayKey, DayType
from .model import (
    DayOverride,
    DayOverrides,
    GroupedOverrides,
    IndividualOverrides,
    OverrideGroup,
    parse_day_overrides,
)

logger = get_logger("working_hours.codec")


def default_overrides() -> IndividualOverrides:
    """Mon-Fri full working days, Sat-Sun off, nothing overridden."""
    return IndividualOverrides(
        days={
            day: DayOverride(enabled=day not in DEFAULT_OFF_DAYS, day_type=DayType.FULL)
            for day in DayKey.ordered()
        }
    )


def expand_to_individual(value: Optional[DayOverrides]) -> IndividualOverrides:
    """Individual form for editing; raw ``dayOverrides`` JSON is parsed first."""
    value = parse_day_overrides(value)
    if value is None:
        return default_overrides()

    if isinstance(value, IndividualOverrides):
        return value

    days: dict[DayKey, DayOverride] = {}
    for group in value.groups:
        for day in group.days:
            # Overlapping groups are tolerated: the later group wins.
            days[day] = group.config

    missing = [d.value for d in DayKey.ordered() if d not in days]
    if missing:
        logger.debug("Grouped overrides do not cover %s", ", ".join(missing))
    return IndividualOverrides(days=days)


def compress_to_grouped(
    overrides: IndividualOverrides,
    week_order: Sequence[WeekDay] = WEEK_ORDER,
) -> GroupedOverrides:
    """Group days by identical configuration, in order of first appearance.

    This is not run-length encoding: Monday and Wednesday land in the same
    group even when Tuesday differs.
    """
    buckets: dict[tuple, list[DayKey]] = {}
    configs: dict[tuple, DayOverride] = {}

    for week_day in week_order:
        config = overrides.get(week_day.key)
        if config is None:
            continue

        key = config.config_key()
        if key not in buckets:
            buckets[key] = []
            configs[key] = config
        buckets[key].append(week_day.key)

    return GroupedOverrides(
        groups=tuple(OverrideGroup(days=tuple(days), config=configs[key]) for key, days in buckets.items())
    )


def _label(day: DayKey, week_order: Sequence[WeekDay]) -> str:
    for week_day in week_order:
        if week_day.key == day:
            return week_day.label
    return day.value


def _index(day: DayKey, week_order: Sequence[WeekDay]) -> int:
    for i, week_day in enumerate(week_order):
        if week_day.key == day:
            return i
    return -1


def format_group_label(days: Sequence[DayKey], week_order: Sequence[WeekDay] = WEEK_ORDER) -> str:
    """Short label for a group of days: "Friday", "Mon-Thu" or "Mon, Wed, Fri".

    A contiguous run is labelled by its sorted ends; anything else keeps the
    caller's day order.
    """
    if not days:
        return ""
    if len(days) == 1:
        return _label(days[0], week_order)

    indices = sorted(_index(d, week_order) for d in days)
    contiguous = indices[0] >= 0 and all(b == a + 1 for a, b in zip(indices, indices[1:]))
    if contiguous:
        first = week_order[indices[0]].label
        last = week_order[indices[-1]].label
        return f"{first[:3]}-{last[:3]}"

    return ", ".join(_label(d, week_order)[:3] for d in days)


def applies_to_label(days: Sequence[DayKey], week_order: Sequence[WeekDay] = WEEK_ORDER) -> str:
    """Full day names, e.g. "Monday, Tuesday"."""
    return ", ".join(_label(d, week_order) for d in days)


def with_day(overrides: IndividualOverrides, day: DayKey, **changes) -> IndividualOverrides:
    """Return a copy with one day's override updated."""
    return with_days(overrides, (day,), **changes)


def with_days(overrides: IndividualOverrides, days: Iterable[DayKey], **changes) -> IndividualOverrides:
    """Return a copy with the same changes applied to several days.

    Days missing from ``overrides`` start from a default DayOverride.
    """
    updated = dict(overrides.days)
    for day in days:
        updated[day] = replace(updated.get(day) or DayOverride(), **changes)
    return IndividualOverrides(days=updated)


def _group_config(overrides: IndividualOverrides, days: Sequence[DayKey]) -> DayOverride:
    for day in days:
        config = overrides.get(day)
        if config is not None:
            return config
    return DayOverride()


def set_enabled(overrides: IndividualOverrides, days: Sequence[DayKey], checked: bool) -> IndividualOverrides:
    return with_days(overrides, days, enabled=bool(checked))


def set_override_hours(overrides: IndividualOverrides, days: Sequence[DayKey], checked: bool) -> IndividualOverrides:
    """Toggle "Override Working Hours" for a group.

    Turning it on keeps the group's current times, turning it off clears them.
    """
    current = _group_config(overrides, days)
    return with_days(
        overrides,
        days,
        override_hours=bool(checked),
        start_time=current.start_time if checked else "",
        end_time=current.end_time if checked else "",
    )


def set_override_break(overrides: IndividualOverrides, days: Sequence[DayKey], checked: bool) -> IndividualOverrides:
    """Toggle "Override Break Times" for a group (same clearing rule as hours)."""
    current = _group_config(overrides, days)
    return with_days(
        overrides,
        days,
        override_break=bool(checked),
        start_break_time=current.start_break_time if checked else "",
        end_break_time=current.end_break_time if checked else "",
    )


def set_day_type(overrides: IndividualOverrides, days: Sequence[DayKey], day_type: DayType | str) -> IndividualOverrides:
    return with_days(overrides, days, day_type=DayType(day_type))


_TIME_FIELDS = frozenset({"start_time", "end_time", "start_break_time", "end_break_time"})


def set_time(overrides: IndividualOverrides, days: Sequence[DayKey], field_name: str, value: str) -> IndividualOverrides:
    """Store a time picker value for every day of a group."""
    if field_name not in _TIME_FIELDS:
        raise ValueError(f"Not a time field: {field_name!r}")
    return with_days(overrides, days, **{field_name: value or ""})
